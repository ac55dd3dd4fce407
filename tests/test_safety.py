from snake_ai.a_star import a_star_path
from snake_ai.grid import Grid
from snake_ai.safety import can_eat_and_reach_tail
from tests.helpers import FULL_BOARD_SNAKE


def test_sealed_corridor_is_unsafe():
    grid = Grid(1, 4)
    snake = [(0, 1), (0, 2)]
    assert not can_eat_and_reach_tail([(0, 2), (0, 3)], snake, grid)


def test_open_board_is_safe():
    grid = Grid(3, 3)
    snake = [(0, 0), (0, 1)]
    assert can_eat_and_reach_tail([(0, 1), (0, 2)], snake, grid)


def test_last_free_cell_seals_tail_off():
    grid = Grid(3, 3)
    assert not can_eat_and_reach_tail([(1, 2), (2, 2)], FULL_BOARD_SNAKE, grid)


def test_growth_along_whole_path_is_simulated():
    grid = Grid(3, 3)
    snake = [(2, 0), (1, 0), (0, 0)]
    # 直接去 (0,2)：吃完还能沿右边和下边绕回蛇尾
    assert can_eat_and_reach_tail([(0, 0), (0, 1), (0, 2)], snake, grid)
    # 绕一圈再进 (0,2)：新长出来的身体把自己封死
    assert not can_eat_and_reach_tail([(0, 0), (0, 1), (1, 1), (1, 2), (0, 2)], snake, grid)


def test_empty_path_is_unsafe():
    assert not can_eat_and_reach_tail([], [(0, 0)], Grid(2, 2))


def test_real_snake_is_not_mutated():
    grid = Grid(3, 3)
    snake = [(0, 0), (0, 1)]
    before = list(snake)
    can_eat_and_reach_tail([(0, 1), (0, 2)], snake, grid)
    assert snake == before


def test_custom_search_strategy():
    grid = Grid(3, 3)
    assert can_eat_and_reach_tail([(0, 1), (0, 2)], [(0, 0), (0, 1)], grid, search=a_star_path)
