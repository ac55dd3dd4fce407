import argparse
import logging
import sys
import uuid
from multiprocessing import Process, Queue, Event, Value

from snake_ai import config
from snake_ai.ai import ALGORITHM_ALIASES, ALGORITHMS
from snake_ai.grid import Grid
from snake_ai.runner import game_process_main, play_headless

logger = logging.getLogger(__name__)


def positive_int(text):
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"必须是正整数: {text}")
    return value


def build_parser():
    parser = argparse.ArgumentParser(description="自动循迹贪吃蛇（A* / Dijkstra + 安全检查 + 追尾拖延）")
    parser.add_argument("--rows", type=positive_int, default=config.ROWS, help="网格行数")
    parser.add_argument("--columns", type=positive_int, default=config.COLUMNS, help="网格列数")
    parser.add_argument("--speed", type=positive_int, default=config.DEFAULT_SPEED, help="每秒移动的步数")
    parser.add_argument("--algorithm", default=config.DEFAULT_ALGORITHM,
                        choices=ALGORITHMS + list(ALGORITHM_ALIASES), help="寻路算法")
    parser.add_argument("--seed", type=int, default=None, help="食物位置的随机种子")
    parser.add_argument("--headless", action="store_true", help="不显示界面，直接下完一局")
    parser.add_argument("--max-ticks", type=positive_int, default=None, help="最多走多少步（仅无界面模式）")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="日志级别")
    return parser


def run_window(args):
    # PyQt5 只在显示界面时导入
    from PyQt5 import QtWidgets
    from snake_ai.ui_interface import SnakeGameWindow

    snake_queue = Queue()
    stats_queue = Queue()
    record_queue = Queue()
    stop_event = Event()
    start_event = Event()  # 初始未触发，蛇保持静止
    speed = Value('i', min(args.speed, config.MAX_SPEED))
    game_id = uuid.uuid4().hex

    p_game = Process(
        target=game_process_main,
        args=(snake_queue, stats_queue, record_queue, stop_event, start_event, speed,
              args.algorithm, args.rows, args.columns, args.seed),
        kwargs={"game_id": game_id},
    )
    p_game.start()

    app = QtWidgets.QApplication(sys.argv)
    window = SnakeGameWindow(snake_queue, stats_queue, record_queue, stop_event, start_event, speed,
                             p_game, game_id=game_id, rows=args.rows, columns=args.columns,
                             algorithm=args.algorithm, seed=args.seed)
    window.show()
    return app.exec_()


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    # 别名统一成正式名字，子进程、窗口和战绩表里都用同一个
    args.algorithm = ALGORITHM_ALIASES.get(args.algorithm, args.algorithm)

    if args.headless:
        record = play_headless(Grid(args.rows, args.columns), args.algorithm,
                               seed=args.seed, max_ticks=args.max_ticks)
        print(f"{record['algorithm']}: {record['outcome']}, 长度 {record['length']}, "
              f"步数 {record['ticks']}, 平均决策耗时 {record['avg_ms']}ms")
        return 0 if record["outcome"] != "trapped" else 1

    return run_window(args)


# ===== 启动程序 =====
if __name__ == "__main__":
    import multiprocessing
    multiprocessing.freeze_support()
    sys.exit(main())
