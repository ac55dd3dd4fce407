from snake_ai.ai import SnakeAI, AIResult, SEARCH_ALGORITHMS
from snake_ai.grid import Grid

__all__ = ["SnakeAI", "AIResult", "SEARCH_ALGORITHMS", "Grid"]
