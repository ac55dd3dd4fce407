import random

# 3x3 棋盘只剩 (2,2) 一个空格，蛇尾 (0,0) 和食物不相邻
FULL_BOARD_SNAKE = [(0, 0), (1, 0), (2, 0), (2, 1), (1, 1), (0, 1), (0, 2), (1, 2)]

# 3x3 棋盘只剩 (2,2) 一个空格，但四周都是身体，蛇头 (0,0) 够不着
UNREACHABLE_LAST_CELL_SNAKE = [(0, 1), (0, 2), (1, 2), (1, 1), (2, 1), (2, 0), (1, 0), (0, 0)]


def assert_valid_path(path, start, goal, blocked):
    assert path[0] == start
    assert path[-1] == goal
    for a, b in zip(path, path[1:]):
        assert abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1, f"{a} -> {b} 不相邻"
    for cell in path[1:]:
        assert cell not in blocked


def random_blocked(grid, rng, density, keep=()):
    return {cell for cell in grid.cells() if cell not in keep and rng.random() < density}


def random_queries(grid, seed, count, density=0.3):
    """生成 (start, goal, blocked) 随机查询，起点终点本身不在 blocked 里"""
    rng = random.Random(seed)
    cells = list(grid.cells())
    for _ in range(count):
        start, goal = rng.sample(cells, 2)
        yield start, goal, random_blocked(grid, rng, density, keep=(start, goal))
