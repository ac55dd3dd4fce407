import logging
import random

from snake_ai.ai import SnakeAI
from snake_ai.config import DEFAULT_ALGORITHM, INITIAL_SNAKE
from snake_ai.grid import is_adjacent

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    无界面的游戏状态：蛇身、食物、是否结束、是否获胜

    蛇身从尾到头存放，只有这里会修改蛇和食物；决策引擎只读取快照。
    """

    def __init__(self, grid, initial_snake=None, seed=None):
        self.grid = grid
        self.initial_snake = list(INITIAL_SNAKE if initial_snake is None else initial_snake)
        self._check_snake(self.initial_snake)
        self.rng = random.Random(seed)
        self.ai = SnakeAI(grid)
        self.reset()

    def _check_snake(self, snake):
        if not snake:
            raise ValueError("初始蛇身不能为空")
        if len(set(snake)) != len(snake):
            raise ValueError(f"初始蛇身有重复的格子: {snake}")
        for cell in snake:
            if not self.grid.in_grid(cell):
                raise ValueError(f"初始蛇身超出网格: {cell}")
        for a, b in zip(snake, snake[1:]):
            if not is_adjacent(a, b):
                raise ValueError(f"初始蛇身不连续: {a} -> {b}")

    def reset(self):
        self.snake = list(self.initial_snake)
        self.is_game_over = False
        self.is_won = False
        self.ticks = 0
        self.food = self.random_food()
        self.clear_debug()

    def clear_debug(self):
        # 调试着色用的数据
        self.visited = []
        self.path_to_food = []
        self.path_to_tail = []
        self.decision = None

    def random_food(self):
        """在空格子里随机放食物，没有空格子时判定获胜并返回 None"""
        occupied = set(self.snake)
        free = [cell for cell in self.grid.cells() if cell not in occupied]
        if not free:
            self.is_won = True
            logger.info("棋盘已被蛇占满，获胜！长度: %d", len(self.snake))
            return None
        return self.rng.choice(free)

    def game_over(self, reason):
        self.is_game_over = True
        logger.info("游戏结束（%s），长度: %d，步数: %d", reason, len(self.snake), self.ticks)

    def apply_move(self, next_cell):
        """
        把蛇头移动到 next_cell

        返回:
            bool: 这一步是否吃到了食物
        """
        if next_cell is None:
            self.game_over("无路可走")
            return False

        head = self.snake[-1]
        if not self.grid.in_grid(next_cell) or not is_adjacent(head, next_cell):
            self.game_over(f"非法移动 {head} -> {next_cell}")
            return False

        grows = next_cell == self.food
        old_tail = self.snake[0]
        # 撞到自己，除非撞的是这一步会让出来的蛇尾
        if next_cell in self.snake and not (next_cell == old_tail and not grows):
            self.game_over(f"撞到蛇身 {next_cell}")
            return False

        self.snake.append(next_cell)
        self.ticks += 1
        if grows:
            self.food = self.random_food()
            self.clear_debug()
        else:
            self.snake.pop(0)
        return grows

    def step_ai(self, algorithm=DEFAULT_ALGORITHM):
        """用决策引擎走一步，返回本次的 AIResult"""
        result = self.ai.calculate_move(list(self.snake), self.food, algorithm)
        self.visited = result.visited
        self.path_to_food = result.path_to_food
        self.path_to_tail = result.path_to_tail
        self.decision = result.decision
        self.apply_move(result.next_move)
        return result

    @property
    def is_finished(self):
        return self.is_game_over or self.is_won

    def snapshot(self):
        return {
            "snake": list(self.snake),
            "food": self.food,
            "visited": list(self.visited),
            "path_to_food": list(self.path_to_food),
            "path_to_tail": list(self.path_to_tail),
            "decision": self.decision,
            "tick": self.ticks,
        }
