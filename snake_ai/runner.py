import logging
import time

import numpy as np

from snake_ai.config import COLUMNS, DEFAULT_ALGORITHM, ROWS
from snake_ai.game import SnakeGame
from snake_ai.grid import Grid

logger = logging.getLogger(__name__)


def _summary(game, algorithm, decision_ms, outcome, game_id=None):
    return {
        "game_id": game_id,
        "algorithm": algorithm,
        "outcome": outcome,
        "length": len(game.snake),
        "ticks": game.ticks,
        "avg_ms": round(float(np.mean(decision_ms)), 3) if decision_ms else 0.0,
    }


def _outcome(game):
    if game.is_won:
        return "won"
    if game.is_game_over:
        return "trapped"
    return "stopped"


def timed_step(game, algorithm):
    """走一步并返回决策耗时（毫秒）"""
    start = time.perf_counter()
    game.step_ai(algorithm)
    return (time.perf_counter() - start) * 1000


def stop_process(process, stop_event, timeout=2):
    """
    通知游戏子进程退出并等待它结束

    超时后还没退出就强制 terminate，保证返回时旧进程已经不在了，
    调用方可以放心地清掉 stop_event 再开新局。
    """
    stop_event.set()
    if not process.is_alive():
        return
    process.join(timeout=timeout)
    if process.is_alive():
        logger.warning("游戏进程 %s 在 %s 秒内没有退出，强制结束", process.pid, timeout)
        process.terminate()
        process.join()


# ===== 子进程函数 =====
def game_process_main(snake_queue, stats_queue, record_queue, stop_event, start_event, speed,
                      algorithm=DEFAULT_ALGORITHM, rows=None, columns=None, seed=None,
                      initial_snake=None, max_ticks=None, game_id=None):
    """
    游戏子进程：按 speed（每秒步数）驱动蛇移动，把画面和统计数据通过队列发给主进程

    参数:
        snake_queue: 每一步的画面快照
        stats_queue: 每一步的决策耗时 {"type": "cost", "tick", "ms"}
        record_queue: 一局结束时的对局记录
        stop_event: 置位后退出
        start_event: 置位时蛇才移动，清除即暂停
        speed: 共享整数，每秒移动的步数
        max_ticks: 最多走多少步，None 表示不限
        game_id: 对局编号，写进对局记录，主进程用它丢掉旧对局的记录
    """
    grid = Grid(rows or ROWS, columns or COLUMNS)
    game = SnakeGame(grid, initial_snake, seed=seed)
    decision_ms = []

    # 初始状态先发给主进程，让界面显示静止的蛇
    snake_queue.put(dict(game.snapshot(), type="state"))
    logger.info("游戏开始：%dx%d 网格，算法 %s", grid.rows, grid.columns, algorithm)

    while not stop_event.is_set():
        # 等待开始（或暂停后继续）信号
        if not start_event.is_set():
            time.sleep(0.05)
            continue

        ms = timed_step(game, algorithm)
        decision_ms.append(ms)
        stats_queue.put({"type": "cost", "tick": game.ticks, "ms": ms})
        snake_queue.put(dict(game.snapshot(), type="state"))

        if game.is_finished:
            break
        if max_ticks is not None and len(decision_ms) >= max_ticks:
            break
        time.sleep(1 / max(speed.value, 1))

    record = _summary(game, algorithm, decision_ms, _outcome(game), game_id)
    record_queue.put(record)
    logger.info("对局结束：%s", record)
    return record


def play_headless(grid, algorithm=DEFAULT_ALGORITHM, seed=None, initial_snake=None, max_ticks=None):
    """不带界面、不等待，直接下完一局，返回对局记录"""
    game = SnakeGame(grid, initial_snake, seed=seed)
    decision_ms = []
    while not game.is_finished:
        if max_ticks is not None and len(decision_ms) >= max_ticks:
            break
        decision_ms.append(timed_step(game, algorithm))
    record = _summary(game, algorithm, decision_ms, _outcome(game))
    logger.info("对局结束：%s", record)
    return record
