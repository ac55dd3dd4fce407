"""
自动循迹决策：每一步根据当前快照重新计算蛇的下一步

优先级依次为：
    1. 棋盘只剩食物一个空格时直接去吃（最后一口）
    2. 能吃到食物并且吃完还能回到蛇尾，就沿最短路去吃
    3. 否则沿着拉长的路径追自己的尾巴，拖延时间
    4. 再不行就随便找一个空的相邻格子
    5. 四周都被堵死，返回 None，由调用方判定游戏结束
"""
import logging
from collections import namedtuple

from snake_ai.a_star import a_star_path
from snake_ai.config import DEFAULT_ALGORITHM
from snake_ai.dijkstra import dijkstra_path
from snake_ai.longest import longest_path
from snake_ai.safety import can_eat_and_reach_tail

logger = logging.getLogger(__name__)

# 可选的寻路算法
SEARCH_ALGORITHMS = {
    "A*": a_star_path,
    "Dijkstra": dijkstra_path,
}
ALGORITHM_ALIASES = {
    "AStar": "A*",
    "astar": "A*",
    "dijkstra": "Dijkstra",
}
ALGORITHMS = list(SEARCH_ALGORITHMS)

AIResult = namedtuple(
    "AIResult",
    ["next_move", "visited", "path_to_food", "path_to_tail", "active_path", "decision"],
)


def resolve_algorithm(algorithm):
    """算法名称转成寻路函数，未知名称回退到默认算法"""
    name = ALGORITHM_ALIASES.get(algorithm, algorithm)
    if name not in SEARCH_ALGORITHMS:
        logger.warning("未知的寻路算法 %r，回退到 %s", algorithm, DEFAULT_ALGORITHM)
        name = DEFAULT_ALGORITHM
    return SEARCH_ALGORITHMS[name]


def step(path):
    """路径上的下一步（path[0] 是蛇头）"""
    if len(path) < 2:
        return None
    return path[1]


class SnakeAI:
    """除了网格尺寸以外不保存任何状态，每次调用都是独立的计算"""

    def __init__(self, grid):
        self.grid = grid

    def calculate_move(self, snake, food, algorithm=DEFAULT_ALGORITHM):
        """
        计算下一步

        参数:
            snake (list): 蛇身，从尾到头
            food (tuple): 食物坐标，棋盘已满时为 None
            algorithm (str): "A*" 或 "Dijkstra"

        返回:
            AIResult: next_move 为 None 表示无路可走；
                visited / path_to_food / path_to_tail 只用于调试显示
        """
        search = resolve_algorithm(algorithm)
        head = snake[-1]
        tail = snake[0]
        snake_set = set(snake)

        # 1) 去食物的最短路，蛇尾这一步会让出来，不算障碍
        path_food, visited = [], []
        if food is not None:
            path_food, visited = search(head, food, snake_set - {tail}, self.grid)

        # 只剩食物一个空格：没有别的选择，不做安全检查；食物够不着时就是无路可走
        if food is not None and len(snake) == self.grid.cell_count - 1:
            return self._commit(path_food, visited, path_food, [], "final_meal")

        # 2) 吃完还能回到蛇尾才去吃
        if path_food:
            if can_eat_and_reach_tail(path_food, snake, self.grid):
                return self._commit(path_food, visited, path_food, [], "food")

        # 3) 追尾巴：蛇头和蛇尾都不算障碍
        blocked_for_longest = snake_set - {head, tail}
        path_longest = longest_path(head, tail, blocked_for_longest, self.grid)
        if len(path_longest) > 1:
            return self._commit(path_longest, visited, [], path_longest, "stall")

        # 4) 兜底：任意一个空的相邻格子
        for move in sorted(self.grid.neighbors(head)):
            if move not in snake_set:
                return self._commit([head, move], visited, [], [], "fallback")

        # 5) 无路可走
        logger.debug("蛇头 %s 四周都被堵死", head)
        return AIResult(None, visited, [], [], [], "trapped")

    @staticmethod
    def _commit(active_path, visited, path_to_food, path_to_tail, decision):
        next_move = step(active_path)
        logger.debug("决策=%s 下一步=%s 路径长度=%d", decision, next_move, len(active_path))
        return AIResult(next_move, visited, path_to_food, path_to_tail, active_path, decision)
