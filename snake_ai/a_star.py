from heapq import heappush, heappop

from snake_ai.dijkstra import reconstruct_path


def manhattan(a, b):
    """曼哈顿距离，四连通、每步代价为 1 时不会高估剩余步数"""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def a_star_path(start, goal, blocked, grid):
    """
    A* 寻路算法，启发函数为曼哈顿距离
    :param start: 起点坐标 (row, col)
    :param goal: 终点坐标 (row, col)
    :param blocked: 不能进入的格子集合
    :param grid: 网格
    :return: (路径, 展开顺序)，路径包含起点和终点，无路径时路径为 []

    f 值相同时先展开启发值更小的格子，再按行优先顺序，保证结果可复现
    """
    if start == goal:
        return [start], [start]

    # 优先队列：(总代价f, 启发值h, 当前位置)
    h_start = manhattan(start, goal)
    open_heap = [(h_start, h_start, start)]

    # 已走代价g 和父节点
    g_score = {start: 0}
    came_from = {}
    closed = set()
    visited = []

    while open_heap:
        _, _, current_pos = heappop(open_heap)
        if current_pos in closed:
            continue
        closed.add(current_pos)
        visited.append(current_pos)

        # 到达终点，回溯生成路径
        if current_pos == goal:
            return reconstruct_path(came_from, start, goal), visited

        new_g = g_score[current_pos] + 1  # 每走一步代价+1
        for next_pos in grid.neighbors(current_pos):
            if next_pos in blocked or next_pos in closed:
                continue
            # 未访问过，或者找到了更短的走法
            if new_g < g_score.get(next_pos, float('inf')):
                g_score[next_pos] = new_g
                came_from[next_pos] = current_pos
                h_val = manhattan(next_pos, goal)
                heappush(open_heap, (new_g + h_val, h_val, next_pos))

    # 无有效路径
    return [], visited
