import heapq


def reconstruct_path(parent, start, goal):
    """从终点沿父节点回溯到起点，返回 start -> goal 的完整路径"""
    path = [goal]
    current = goal
    while current != start:
        current = parent[current]
        path.append(current)
    path.reverse()
    return path


def dijkstra_path(start, goal, blocked, grid):
    """
    迪杰斯特拉算法：求 start 到 goal 的最少步数路径，每一步权重都是 1

    参数:
        start (tuple): 起点坐标 (row, col)，起点本身总是可以展开
        goal (tuple): 终点坐标 (row, col)
        blocked (set): 本次查询不能进入的格子
        grid (Grid): 网格

    返回:
        (list, list): (路径, 展开顺序)
            路径包含起点和终点，找不到路径时为空列表；
            展开顺序只用于调试显示，决策逻辑不会使用

    同样距离的格子按行优先顺序出队，结果可以复现。
    """
    if start == goal:
        return [start], [start]

    # 距离字典：只记录已经发现的格子
    dist = {start: 0}
    # 父节点字典：回溯路径用
    parent = {}
    settled = set()
    visited = []

    # 优先队列：(距离, 坐标)，距离相同时元组比较自然按行、列排序
    priority_queue = [(0, start)]

    while priority_queue:
        current_dist, current_pos = heapq.heappop(priority_queue)

        # 已经确定过最短距离的格子是堆里的旧记录，跳过
        if current_pos in settled:
            continue
        settled.add(current_pos)
        visited.append(current_pos)

        if current_pos == goal:
            return reconstruct_path(parent, start, goal), visited

        new_dist = current_dist + 1
        for next_pos in grid.neighbors(current_pos):
            if next_pos in blocked or next_pos in settled:
                continue
            if new_dist < dist.get(next_pos, float('inf')):
                dist[next_pos] = new_dist
                parent[next_pos] = current_pos
                heapq.heappush(priority_queue, (new_dist, next_pos))

    return [], visited
