from snake_ai.dijkstra import dijkstra_path


def _detours(u, v):
    """
    给相邻的两个格子 u、v 生成两组绕行候选

    水平的一对向上、向下各平移一行，竖直的一对向左、向右各平移一列；
    u -> a -> b -> v 仍然是连续的路径
    """
    if u[0] == v[0]:
        return [((u[0] - 1, u[1]), (v[0] - 1, v[1])),
                ((u[0] + 1, u[1]), (v[0] + 1, v[1]))]
    return [((u[0], u[1] - 1), (v[0], v[1] - 1)),
            ((u[0], u[1] + 1), (v[0], v[1] + 1))]


def longest_path(start, goal, blocked, grid):
    """
    在最短路的基础上不断把直线段向旁边“拉伸”，得到一条更长的简单路径

    参数:
        start (tuple): 起点（蛇头）
        goal (tuple): 终点（蛇尾）
        blocked (set): 不能经过的格子
        grid (Grid): 网格

    返回:
        list: 从 start 到 goal 的路径，长度不小于最短路；最短路长度 <= 1 时原样返回

    只是有界的近似做法，不会穷举搜索最长路。
    """
    shortest, _ = dijkstra_path(start, goal, blocked, grid)
    if len(shortest) <= 1:
        return shortest

    path = list(shortest)
    occupied = set(blocked)
    occupied.update(path)

    def is_free(pos):
        return grid.in_grid(pos) and pos not in occupied

    inserted = True
    while inserted:
        inserted = False
        i = 0
        while i < len(path) - 1:
            u, v = path[i], path[i + 1]
            for a, b in _detours(u, v):
                if is_free(a) and is_free(b):
                    # u -> a -> b -> v
                    path[i + 1:i + 1] = [a, b]
                    occupied.add(a)
                    occupied.add(b)
                    inserted = True
                    # 本轮跳过刚插入的两格，下一轮再继续拉伸
                    i += 2
                    break
            i += 1
    return path
