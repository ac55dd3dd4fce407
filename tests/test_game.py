import pytest

from snake_ai.game import SnakeGame
from snake_ai.grid import Grid, is_adjacent
from tests.helpers import UNREACHABLE_LAST_CELL_SNAKE


def make_game(rows=4, columns=4, snake=None, food=None, seed=0):
    game = SnakeGame(Grid(rows, columns), snake or [(0, 0), (0, 1), (0, 2)], seed=seed)
    if food is not None:
        game.food = food
    return game


@pytest.mark.parametrize("snake", [
    [],
    [(0, 0), (0, 1), (0, 0)],
    [(0, 0), (0, 2)],
    [(0, 3), (0, 4)],
])
def test_invalid_initial_snake_is_rejected(snake):
    with pytest.raises(ValueError):
        SnakeGame(Grid(4, 4), snake)


def test_food_is_never_placed_on_snake():
    for seed in range(20):
        game = make_game(seed=seed)
        assert game.food not in game.snake
        assert game.grid.in_grid(game.food)


def test_plain_move_keeps_length():
    game = make_game(food=(3, 3))
    assert game.apply_move((1, 2)) is False
    assert game.snake == [(0, 1), (0, 2), (1, 2)]
    assert game.ticks == 1


def test_eating_grows_and_places_new_food():
    game = make_game(food=(1, 2))
    assert game.apply_move((1, 2)) is True
    assert game.snake == [(0, 0), (0, 1), (0, 2), (1, 2)]
    assert game.food not in game.snake


def test_moving_into_vacating_tail_is_allowed():
    game = make_game(snake=[(0, 0), (0, 1), (1, 1), (1, 0)], food=(3, 3))
    game.apply_move((0, 0))
    assert not game.is_game_over
    assert game.snake == [(0, 1), (1, 1), (1, 0), (0, 0)]


def test_moving_into_body_ends_game():
    game = make_game(snake=[(2, 0), (2, 1), (1, 1), (0, 1), (0, 0), (1, 0)], food=(3, 3))
    game.apply_move((1, 1))
    assert game.is_game_over


@pytest.mark.parametrize("move", [None, (2, 2), (0, 4)])
def test_illegal_moves_end_game(move):
    game = make_game(food=(3, 3))
    game.apply_move(move)
    assert game.is_game_over
    assert game.snake == [(0, 0), (0, 1), (0, 2)]


def test_filling_the_board_wins():
    game = make_game(rows=1, columns=4)
    assert game.food == (0, 3)
    assert game.apply_move((0, 3)) is True
    assert game.is_won
    assert game.food is None
    assert game.is_finished


def test_ai_step_clears_debug_after_eating():
    game = make_game(food=(0, 3))
    result = game.step_ai("A*")
    assert result.decision == "food"
    assert game.snake[-1] == (0, 3)
    assert game.visited == [] and game.path_to_food == []


def test_ai_step_records_diagnostics():
    game = make_game(food=(3, 3))
    result = game.step_ai("Dijkstra")
    assert game.decision == "food"
    assert game.path_to_food == result.path_to_food
    snapshot = game.snapshot()
    assert snapshot["snake"] == game.snake
    assert snapshot["tick"] == 1


def test_trapped_snake_ends_game():
    game = make_game(rows=3, columns=3, snake=[(2, 0), (1, 0), (1, 1), (0, 1), (0, 0)], food=(2, 2))
    result = game.step_ai("A*")
    assert result.next_move is None
    assert game.is_game_over


def test_unreachable_last_free_cell_ends_game():
    game = make_game(rows=3, columns=3, snake=UNREACHABLE_LAST_CELL_SNAKE, food=(2, 2))
    result = game.step_ai("Dijkstra")
    assert result.decision == "final_meal"
    assert game.is_game_over
    assert not game.is_won
    assert game.snake == UNREACHABLE_LAST_CELL_SNAKE


@pytest.mark.parametrize("algorithm", ["A*", "Dijkstra"])
def test_ai_keeps_snake_valid_over_a_long_game(algorithm):
    game = make_game(rows=5, columns=5, seed=42)
    for _ in range(400):
        if game.is_finished:
            break
        head = game.snake[-1]
        result = game.step_ai(algorithm)
        if game.is_game_over:
            # 只有无路可走时才会结束，决策引擎不会主动撞墙或撞自己
            assert result.next_move is None
            break
        assert is_adjacent(head, game.snake[-1])
        assert len(set(game.snake)) == len(game.snake)
        assert all(game.grid.in_grid(cell) for cell in game.snake)
        assert game.food is None or game.food not in game.snake
    assert len(game.snake) > 3


def test_reset_restores_initial_state():
    game = make_game(food=(1, 2))
    game.apply_move((1, 2))
    game.reset()
    assert game.snake == [(0, 0), (0, 1), (0, 2)]
    assert not game.is_finished
    assert game.ticks == 0
