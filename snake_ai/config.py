"""
全局配置：棋盘尺寸、速度范围、初始蛇身、默认算法和界面配色
main.py 会用命令行参数覆盖其中一部分
"""

# ===== 棋盘参数 =====
ROWS = 20
COLUMNS = 30
BLOCK = 20  # 每个格子的像素大小

# ===== 速度参数（每秒移动的步数） =====
DEFAULT_SPEED = 10
MIN_SPEED, MAX_SPEED = 1, 200

# ===== 游戏参数 =====
# 蛇身从尾到头，最后一个元素是蛇头
INITIAL_SNAKE = [(0, 0), (0, 1), (0, 2)]
DEFAULT_ALGORITHM = "A*"

# 界面刷新间隔（毫秒）
CANVAS_REFRESH_MS = 30
STATS_REFRESH_MS = 200
# 决策耗时图每次最多显示的点数
PLOT_VIEW_WIDTH = 100

# ===== 颜色主题配置 =====
THEME_COLORS = {
    'primary': '#2E86AB',      # 深蓝
    'secondary': '#A23B72',    # 紫红
    'success': '#06A77D',      # 绿色
    'warning': '#F77F00',      # 橙色
    'danger': '#D62828',       # 红色
    'light': '#F3F3F3',        # 浅灰
    'dark': '#2C3E50',         # 深灰
    'border': '#E0E0E0',       # 边界灰
}

# 调试着色：搜索展开的格子、去食物的路径、去蛇尾的路径
DEBUG_COLORS = {
    'visited': '#FCE8B2',
    'path_to_food': '#9AD0EC',
    'path_to_tail': '#E2B6CF',
}
