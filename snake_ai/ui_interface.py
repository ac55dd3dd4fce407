"""
自动循迹贪吃蛇 - UI界面
包含棋盘画布、决策耗时统计图和主窗口，游戏逻辑在子进程里运行
"""

import logging
import uuid
from multiprocessing import Process

import numpy as np
from PyQt5 import QtWidgets, QtCore, QtGui
from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure
import matplotlib

from snake_ai import config
from snake_ai.ai import ALGORITHMS
from snake_ai.runner import game_process_main, stop_process

matplotlib.rcParams['font.sans-serif'] = ['SimHei', 'DejaVu Sans', 'Arial']
matplotlib.rcParams['axes.unicode_minus'] = False

logger = logging.getLogger(__name__)

THEME_COLORS = config.THEME_COLORS

DECISION_LABELS = {
    "final_meal": "最后一口",
    "food": "吃食物",
    "stall": "追尾拖延",
    "fallback": "随便走一步",
    "trapped": "无路可走",
}

OUTCOME_LABELS = {
    "won": "获胜",
    "trapped": "被困",
    "stopped": "中止",
}


def button_style(color, hover, pressed):
    return f"""
        QPushButton {{
            background-color: {color};
            color: white;
            border: none;
            border-radius: 6px;
            padding: 8px;
            font-weight: bold;
        }}
        QPushButton:hover {{
            background-color: {hover};
        }}
        QPushButton:pressed {{
            background-color: {pressed};
        }}
        QPushButton:disabled {{
            background-color: #ccc;
        }}
    """


# ===== 决策耗时 matplotlib 绘图 =====
class DecisionCostCanvas(FigureCanvas):
    """每一步决策耗时的折线图，附带平均值和当前步长间隔"""

    def __init__(self, parent=None):
        self.fig = Figure(figsize=(5.2, 3.2), tight_layout=False)
        self.ax = self.fig.add_subplot(111)
        super().__init__(self.fig)
        self.setParent(parent)

        self.costs = []
        self.tick_interval_ms = 1000 / config.DEFAULT_SPEED
        self.average_cost = 0.0
        self.max_cost = 0.0

        self.fig.patch.set_facecolor('#FFFFFF')
        self.fig.subplots_adjust(left=0.12, bottom=0.14, right=0.95, top=0.90)
        self.setMinimumHeight(250)
        self._init_axes()

    def _init_axes(self):
        self.ax.set_xlabel("步数", fontsize=9, fontweight='bold', color=THEME_COLORS['dark'])
        self.ax.set_ylabel("决策耗时 (毫秒)", fontsize=9, fontweight='bold', color=THEME_COLORS['dark'])
        self.ax.set_title("每一步的决策耗时", fontsize=10, fontweight='bold',
                          color=THEME_COLORS['primary'], pad=10)
        self.ax.grid(True, alpha=0.3, linestyle='--', linewidth=0.5)
        self.ax.set_facecolor('#F9F9F9')

    def reset(self):
        self.costs.clear()
        self.average_cost = 0.0
        self.max_cost = 0.0

    def update_plot(self):
        self.ax.clear()

        if self.costs:
            y = np.array(self.costs)
            self.average_cost = float(np.mean(y))
            self.max_cost = float(np.max(y))

            # 只显示最近的一段
            view = y[-config.PLOT_VIEW_WIDTH:]
            x = np.arange(len(y) - len(view) + 1, len(y) + 1)
            window = min(5, len(view))
            view_smooth = np.convolve(view, np.ones(window) / window, mode='same')

            self.ax.plot(x, view, color=THEME_COLORS['border'], linewidth=1)
            self.ax.plot(x, view_smooth, color=THEME_COLORS['primary'], linewidth=2,
                         label='平滑耗时', alpha=0.8)
            self.ax.axhline(y=self.average_cost, color=THEME_COLORS['success'], linestyle='--',
                            linewidth=1.5, label=f'平均: {self.average_cost:.3f}ms')
            # 决策必须比一步的时间间隔快很多，否则画面会卡顿
            if self.tick_interval_ms <= self.max_cost * 3:
                self.ax.axhline(y=self.tick_interval_ms, color=THEME_COLORS['danger'],
                                linestyle=':', linewidth=1.5,
                                label=f'步长间隔: {self.tick_interval_ms:.0f}ms')
            self.ax.set_xlim(x[0] - 0.5, x[-1] + 0.5)
            self.ax.set_ylim(0, max(float(np.max(view)), self.average_cost) * 1.3 or 1)
            self.ax.legend(fontsize=8, loc='upper right', framealpha=0.95)
        else:
            self.ax.text(0.5, 0.5, '等待游戏开始...', transform=self.ax.transAxes,
                         fontsize=12, ha='center', va='center', color='#AAAAAA',
                         fontweight='bold', style='italic')
            self.ax.set_xlim(0, 10)
            self.ax.set_ylim(0, 1)

        self._init_axes()
        self.draw()


# ===== 游戏画布 =====
class GameCanvas(QtWidgets.QWidget):
    """贪吃蛇棋盘，调试模式下给搜索展开的格子和两条路径着色"""

    def __init__(self, game_queue, rows, columns, block_size=config.BLOCK, parent=None):
        super().__init__(parent)
        self.setFixedSize(columns * block_size, rows * block_size)
        self.game_queue = game_queue
        self.rows = rows
        self.columns = columns
        self.block_size = block_size
        self.color_mode = True

        self.state = {
            "snake": list(config.INITIAL_SNAKE),
            "food": None,
            "visited": [],
            "path_to_food": [],
            "path_to_tail": [],
            "decision": None,
            "tick": 0,
        }

        self.timer = QtCore.QTimer()
        self.timer.timeout.connect(self.update_state)
        self.timer.start(config.CANVAS_REFRESH_MS)

    def update_state(self):
        while not self.game_queue.empty():
            data = self.game_queue.get()
            if data.get("type") == "state":
                self.state = data
        self.update()

    def cell_rect(self, cell, margin=1):
        row, col = cell
        return QtCore.QRect(col * self.block_size + margin, row * self.block_size + margin,
                            self.block_size - 2 * margin, self.block_size - 2 * margin)

    def paintEvent(self, event):
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.Antialiasing)
        painter.fillRect(self.rect(), QtGui.QColor(255, 255, 255))

        # 网格线
        pen = QtGui.QPen(QtGui.QColor(230, 230, 230), 1)
        pen.setStyle(QtCore.Qt.DotLine)
        painter.setPen(pen)
        for i in range(1, self.columns):
            painter.drawLine(i * self.block_size, 0, i * self.block_size, self.height())
        for i in range(1, self.rows):
            painter.drawLine(0, i * self.block_size, self.width(), i * self.block_size)

        if self.color_mode:
            for key in ("visited", "path_to_food", "path_to_tail"):
                color = QtGui.QColor(config.DEBUG_COLORS[key])
                for cell in self.state[key]:
                    painter.fillRect(self.cell_rect(cell, margin=0), color)

        snake = self.state["snake"]
        painter.setPen(QtGui.QPen(QtGui.QColor(THEME_COLORS['dark']), 1))
        for cell in snake[:-1]:
            painter.fillRect(self.cell_rect(cell), QtGui.QColor(THEME_COLORS['success']))
        if snake:
            head_rect = self.cell_rect(snake[-1])
            painter.fillRect(head_rect, QtGui.QColor(THEME_COLORS['primary']))
            painter.setPen(QtGui.QPen(QtGui.QColor(10, 30, 80), 2))
            painter.drawRect(head_rect)

        food = self.state["food"]
        if food is not None:
            food_rect = self.cell_rect(food, margin=2)
            painter.fillRect(food_rect, QtGui.QColor(THEME_COLORS['danger']))
            painter.setPen(QtGui.QPen(QtGui.QColor(255, 150, 150), 1))
            painter.drawEllipse(food_rect.adjusted(2, 2, -2, -2))


# ===== 主窗口 =====
class SnakeGameWindow(QtWidgets.QMainWindow):
    """贪吃蛇 AI 主窗口"""

    def __init__(self, snake_queue, stats_queue, record_queue, stop_event, start_event, speed,
                 game_process, game_id=None, rows=config.ROWS, columns=config.COLUMNS,
                 algorithm=config.DEFAULT_ALGORITHM, seed=None):
        super().__init__()
        self.setWindowTitle("🐍 自动循迹贪吃蛇 - AI Edition")

        self.snake_queue = snake_queue
        self.stats_queue = stats_queue
        self.record_queue = record_queue
        self.stop_event = stop_event
        self.start_event = start_event
        self.speed = speed
        self.game_process = game_process
        self.game_id = game_id
        self.rows = rows
        self.columns = columns
        self.seed = seed

        self.algorithms = ALGORITHMS
        self.current_algorithm = algorithm
        self.game_records = []

        self._create_ui()

        self.update_timer = QtCore.QTimer()
        self.update_timer.timeout.connect(self.update_data)
        self.update_timer.start(config.STATS_REFRESH_MS)

    def _create_ui(self):
        central_widget = QtWidgets.QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QtWidgets.QHBoxLayout(central_widget)
        main_layout.setContentsMargins(15, 15, 15, 15)
        main_layout.setSpacing(20)

        # ========== 左侧：棋盘 ==========
        left_layout = QtWidgets.QVBoxLayout()
        self.game_canvas = GameCanvas(self.snake_queue, self.rows, self.columns)
        left_layout.addWidget(self.game_canvas)
        left_layout.addWidget(self._create_stats_group())
        left_layout.addStretch()
        main_layout.addLayout(left_layout, 1)

        # ========== 右侧：控制和统计 ==========
        right_layout = QtWidgets.QVBoxLayout()
        right_layout.setSpacing(12)
        right_layout.addWidget(self._create_algo_group())

        self.cost_canvas = DecisionCostCanvas()
        self.cost_canvas.tick_interval_ms = 1000 / max(self.speed.value, 1)
        right_layout.addWidget(self.cost_canvas)

        self.record_table = self._create_record_table()
        right_layout.addWidget(self.record_table)

        right_layout.addWidget(self._create_speed_group())
        right_layout.addLayout(self._create_button_layout())
        right_layout.addStretch()
        main_layout.addLayout(right_layout, 1)

    def _create_algo_group(self):
        group = QtWidgets.QGroupBox("🔀 寻路算法")
        layout = QtWidgets.QHBoxLayout()

        self.algo_combo = QtWidgets.QComboBox()
        self.algo_combo.addItems(self.algorithms)
        self.algo_combo.setCurrentText(self.current_algorithm)
        self.algo_combo.currentTextChanged.connect(self.on_algorithm_changed)
        layout.addWidget(QtWidgets.QLabel("算法："), 0)
        layout.addWidget(self.algo_combo, 1)

        # 调试着色开关
        self.color_check = QtWidgets.QCheckBox("显示搜索过程")
        self.color_check.setChecked(True)
        self.color_check.toggled.connect(self.on_color_mode_changed)
        layout.addWidget(self.color_check, 0)

        group.setLayout(layout)
        return group

    def _create_stats_group(self):
        group = QtWidgets.QGroupBox("📈 实时状态")
        layout = QtWidgets.QVBoxLayout()

        self.length_label = QtWidgets.QLabel("长度：0 | 步数：0")
        self.decision_label = QtWidgets.QLabel("当前决策：-")
        self.cost_label = QtWidgets.QLabel("平均决策耗时：0.000 毫秒 | 最大：0.000 毫秒")
        for label in (self.length_label, self.decision_label, self.cost_label):
            label.setAlignment(QtCore.Qt.AlignCenter)
            layout.addWidget(label)

        group.setLayout(layout)
        return group

    def _create_record_table(self):
        table = QtWidgets.QTableWidget()
        table.setColumnCount(5)
        table.setHorizontalHeaderLabels(["算法", "结果", "长度", "步数", "平均耗时(ms)"])
        table.verticalHeader().setVisible(False)
        table.setMinimumHeight(160)
        table.setAlternatingRowColors(True)
        table.setEditTriggers(QtWidgets.QTableWidget.NoEditTriggers)
        table.horizontalHeader().setSectionResizeMode(QtWidgets.QHeaderView.Stretch)
        return table

    def _create_speed_group(self):
        group = QtWidgets.QGroupBox("⚡ 每秒步数")
        layout = QtWidgets.QHBoxLayout()

        self.speed_input = QtWidgets.QSpinBox()
        self.speed_input.setRange(config.MIN_SPEED, config.MAX_SPEED)
        self.speed_input.setValue(self.speed.value)
        layout.addWidget(self.speed_input, 1)

        self.speed_confirm_btn = QtWidgets.QPushButton("确认")
        self.speed_confirm_btn.setStyleSheet(
            button_style(THEME_COLORS['primary'], '#1E5A7A', '#154360'))
        self.speed_confirm_btn.clicked.connect(self.confirm_speed)
        layout.addWidget(self.speed_confirm_btn, 0)

        group.setLayout(layout)
        return group

    def _create_button_layout(self):
        layout = QtWidgets.QHBoxLayout()

        self.start_btn = QtWidgets.QPushButton("▶  开始")
        self.start_btn.setStyleSheet(button_style(THEME_COLORS['success'], '#058568', '#046551'))
        self.start_btn.clicked.connect(self.toggle_pause)
        layout.addWidget(self.start_btn)

        self.restart_btn = QtWidgets.QPushButton("🔄 重新开始")
        self.restart_btn.setStyleSheet(button_style(THEME_COLORS['warning'], '#D97000', '#B85C00'))
        self.restart_btn.clicked.connect(self.restart_game)
        layout.addWidget(self.restart_btn)

        self.exit_btn = QtWidgets.QPushButton("✕  退出")
        self.exit_btn.setStyleSheet(button_style(THEME_COLORS['danger'], '#B81C1C', '#900000'))
        self.exit_btn.clicked.connect(self.close)
        layout.addWidget(self.exit_btn)

        return layout

    def on_algorithm_changed(self, algorithm_name):
        self.current_algorithm = algorithm_name
        self.restart_game()

    def on_color_mode_changed(self, checked):
        self.game_canvas.color_mode = checked
        self.game_canvas.update()

    def toggle_pause(self):
        """开始 / 暂停 / 继续"""
        if self.start_event.is_set():
            self.start_event.clear()
            self.start_btn.setText("▶  继续")
        else:
            self.start_event.set()
            self.start_btn.setText("⏸  暂停")
            self.algo_combo.setEnabled(False)

    def confirm_speed(self):
        new_speed = self.speed_input.value()
        self.speed.value = new_speed
        self.cost_canvas.tick_interval_ms = 1000 / new_speed
        logger.info("速度已设为每秒 %d 步", new_speed)

    def update_data(self):
        while not self.stats_queue.empty():
            data = self.stats_queue.get()
            if data.get("type") == "cost":
                self.cost_canvas.costs.append(data["ms"])
        self.cost_canvas.update_plot()

        state = self.game_canvas.state
        self.length_label.setText(f"长度：{len(state['snake'])} | 步数：{state['tick']}")
        self.decision_label.setText(f"当前决策：{DECISION_LABELS.get(state['decision'], '-')}")
        self.cost_label.setText(f"平均决策耗时：{self.cost_canvas.average_cost:.3f} 毫秒 | "
                                f"最大：{self.cost_canvas.max_cost:.3f} 毫秒")

        while not self.record_queue.empty():
            record = self.record_queue.get()
            # 重新开始之前那一局的记录
            if record.get("game_id") != self.game_id:
                continue
            self.game_records.append(record)
            self.update_record_table()
            self.on_game_finished(record)

    def update_record_table(self):
        self.record_table.setRowCount(0)
        for idx, record in enumerate(self.game_records):
            self.record_table.insertRow(idx)
            values = [record["algorithm"], OUTCOME_LABELS.get(record["outcome"], record["outcome"]),
                      str(record["length"]), str(record["ticks"]), f"{record['avg_ms']:.3f}"]
            for col, value in enumerate(values):
                self.record_table.setItem(idx, col, QtWidgets.QTableWidgetItem(value))

    def on_game_finished(self, record):
        self.start_event.clear()
        self.start_btn.setEnabled(False)
        self.algo_combo.setEnabled(True)
        if record["outcome"] == "won":
            QtWidgets.QMessageBox.information(self, "获胜", f"蛇占满了整个棋盘！共走了 {record['ticks']} 步")

    def _drain_queues(self):
        for q in (self.snake_queue, self.stats_queue, self.record_queue):
            while not q.empty():
                q.get()

    def stop_game_process(self):
        stop_process(self.game_process, self.stop_event)

    def restart_game(self):
        self.stop_game_process()
        self._drain_queues()
        self.cost_canvas.reset()

        self.start_event.clear()
        self.start_btn.setText("▶  开始")
        self.start_btn.setEnabled(True)
        self.algo_combo.setEnabled(True)

        self.stop_event.clear()
        self.game_id = uuid.uuid4().hex
        self.game_process = Process(
            target=game_process_main,
            args=(self.snake_queue, self.stats_queue, self.record_queue, self.stop_event,
                  self.start_event, self.speed, self.current_algorithm, self.rows, self.columns,
                  self.seed),
            kwargs={"game_id": self.game_id},
        )
        self.game_process.start()

    def closeEvent(self, event):
        self.stop_game_process()
        event.accept()
