# PyQt5 GUI layer for the TSP Search Visualizer.
#
# - Tab 1: "Visualizer"
#     - Sample size / interval inputs with possibilities and time estimate
#     - New Points, Random, Lexicographic and Stop buttons
#     - Live drawing of the current attempt and the best tour (matplotlib canvas)
#     - Distance, best distance and step counter
#
# - Tab 2: "Search Evaluation"
#     - Button to benchmark both searches on the current points
#     - Best-distance trace and comparison graphs
#
# The GUI does NOT implement any search itself.
# It talks to a TSPVisualizerApp controller instance (from main.py) and
# only calls tick() from a single QTimer.


import os
import sys
import tempfile

from PyQt5.QtCore import Qt, QTimer
from PyQt5.QtGui import QPixmap
from PyQt5.QtWidgets import (
    QApplication,
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QFormLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QMessageBox,
    QTabWidget,
)
from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg
from matplotlib.figure import Figure

from tsp_visualizer.models.search_state import SearchMode
from tsp_visualizer.utils.benchmark import benchmark_searches
from tsp_visualizer.utils.tour_renderer import TourRenderer


# =====================================================================
# MainWindow: two-tab dashboard
# =====================================================================

class MainWindow(QMainWindow):
    # Main PyQt5 window.
    # Receives a TSPVisualizerApp instance from main.py, which owns the points and the active search.
    # GUI is responsible only for the inputs, the timer, and drawing whatever each step returns.

    BENCHMARK_STEPS = 2000

    def __init__(self, app_controller):
        super().__init__()
        self.setStyleSheet("""
        QMainWindow {
            background-color: #f5f5f7;
        }

        QPushButton {
            background-color: #3f51b5;
            color: white;
            border-radius: 4px;
            padding: 6px;
        }

        QPushButton:hover {
            background-color: #5c6bc0;
        }

        QPushButton:disabled {
            background-color: #b0bec5;
        }
        """)
        self.app = app_controller  # TSPVisualizerApp instance
        settings = self.app.settings

        self.setWindowTitle("TSP Search Visualizer - PyQt5 GUI")
        self.setMinimumSize(settings.width + 360, settings.height + 120)

        self.renderer = TourRenderer(settings.width, settings.height)

        # The only ticking source. Stopped before any search is replaced.
        self.timer = QTimer(self)
        self.timer.timeout.connect(self.on_tick)

        # Widgets that we need to access from multiple methods
        self.figure: Figure | None = None
        self.canvas: FigureCanvasQTAgg | None = None
        self.sample_spin: QSpinBox | None = None
        self.interval_spin: QSpinBox | None = None
        self.possibilities_label: QLabel | None = None
        self.estimate_label: QLabel | None = None
        self.stats_label: QLabel | None = None
        self.trace_label: QLabel | None = None
        self.comparison_label: QLabel | None = None

        self._setup_ui()
        self.app.on_step(self.show_step)

        self.new_points()
        self.solve_random()

    # ------------------------------------------------------------------
    def _setup_ui(self):
        tabs = QTabWidget()
        tabs.addTab(self._create_visualizer_tab(), "Visualizer")
        tabs.addTab(self._create_evaluation_tab(), "Search Evaluation")
        self.setCentralWidget(tabs)

    # ------------------------------------------------------------------
    def _create_visualizer_tab(self) -> QWidget:
        # Left: drawing canvas. Right: inputs, buttons and live stats.
        tab = QWidget()
        layout = QHBoxLayout()
        tab.setLayout(layout)

        settings = self.app.settings

        self.figure = Figure(figsize=(settings.width / 100, settings.height / 100))
        self.figure.subplots_adjust(left=0, right=1, top=1, bottom=0)
        self.figure.add_subplot(111)
        self.canvas = FigureCanvasQTAgg(self.figure)
        layout.addWidget(self.canvas, stretch=3)

        side = QWidget()
        side_layout = QVBoxLayout()
        side.setLayout(side_layout)
        layout.addWidget(side, stretch=1)

        # --- Inputs ------------------------------------------------------
        form = QFormLayout()

        self.sample_spin = QSpinBox()
        self.sample_spin.setRange(settings.min_sample_size, settings.max_sample_size)
        self.sample_spin.setValue(settings.sample_size)
        self.sample_spin.valueChanged.connect(self.on_sample_size_change)
        form.addRow("Sample size:", self.sample_spin)

        self.interval_spin = QSpinBox()
        self.interval_spin.setRange(1, 5000)
        self.interval_spin.setSuffix(" ms")
        self.interval_spin.setValue(settings.interval_ms)
        self.interval_spin.valueChanged.connect(self.on_interval_change)
        form.addRow("Interval:", self.interval_spin)

        self.possibilities_label = QLabel()
        self.estimate_label = QLabel()
        form.addRow("Possibilities:", self.possibilities_label)
        form.addRow("Time to try all:", self.estimate_label)

        side_layout.addLayout(form)

        # --- Buttons -----------------------------------------------------
        buttons = [
            ("New Points", self.new_points),
            ("Solve Random", self.solve_random),
            ("Solve Lexicographic", self.solve_lexicographic),
            ("Stop", self.stop),
        ]
        for text, handler in buttons:
            button = QPushButton(text)
            button.clicked.connect(handler)
            side_layout.addWidget(button)

        # --- Live stats --------------------------------------------------
        self.stats_label = QLabel()
        self.stats_label.setAlignment(Qt.AlignTop | Qt.AlignLeft)
        side_layout.addWidget(self.stats_label)
        side_layout.addStretch()

        self._refresh_estimates()
        return tab

    # ------------------------------------------------------------------
    def _create_evaluation_tab(self) -> QWidget:
        tab = QWidget()
        layout = QVBoxLayout()
        tab.setLayout(layout)

        info = QLabel(
            f"Runs both searches for up to {self.BENCHMARK_STEPS} steps on the current points\n"
            "and compares how fast the best distance drops."
        )
        layout.addWidget(info)

        run_button = QPushButton("Generate Evaluation Graphs")
        run_button.clicked.connect(self.generate_evaluation_graphs)
        layout.addWidget(run_button)

        graphs = QHBoxLayout()
        self.trace_label = QLabel("No graph generated yet.")
        self.comparison_label = QLabel()
        graphs.addWidget(self.trace_label)
        graphs.addWidget(self.comparison_label)
        layout.addLayout(graphs)
        layout.addStretch()

        return tab

    # ------------------------------------------------------------------
    # Input handlers
    # ------------------------------------------------------------------
    def on_sample_size_change(self, value: int):
        self.app.set_sample_size(value)
        self._refresh_estimates()

    def on_interval_change(self, value: int):
        self.app.set_interval_ms(value)
        self._refresh_estimates()
        if self.timer.isActive():
            self.timer.setInterval(value)

    def _refresh_estimates(self):
        self.possibilities_label.setText(f"{self.app.possibilities:,}")
        self.estimate_label.setText(self.app.time_estimate)

    # ------------------------------------------------------------------
    # Button handlers
    # ------------------------------------------------------------------
    def new_points(self):
        self.stop()
        self.app.new_points()
        self._draw(None, None)
        self._show_stats(0.0, float("inf"), 0)

    def solve_random(self):
        self._start(SearchMode.RANDOM)

    def solve_lexicographic(self):
        self._start(SearchMode.LEXICOGRAPHIC)

    def stop(self):
        self.timer.stop()
        self.app.stop()

    def _start(self, mode: SearchMode):
        # Timer first, so no tick can reach the old search while it is replaced.
        self.stop()
        try:
            self.app.start(mode)
        except ValueError as e:
            QMessageBox.critical(self, "Error", str(e))
            return
        self._show_stats(0.0, float("inf"), 0)
        self.timer.start(self.app.interval_ms)

    # ------------------------------------------------------------------
    # Timer / step handling
    # ------------------------------------------------------------------
    def on_tick(self):
        result = self.app.tick()
        if result is None or not self.app.is_running:
            # Search exhausted (or stopped elsewhere)
            self.timer.stop()

    def show_step(self, order, best_order, distance, best_distance, step_count):
        # Listener registered with the controller, called once per step.
        self._draw(order, best_order)
        self._show_stats(distance, best_distance, step_count)

    def _draw(self, order, best_order):
        ax = self.figure.axes[0]
        self.renderer.render(ax, self.app.get_points(), order, best_order)
        self.canvas.draw_idle()

    def _show_stats(self, distance: float, best_distance: float, step_count: int):
        best_text = "-" if best_distance == float("inf") else f"{best_distance:.2f}"
        lines = [
            f"Distance: {distance:.2f}",
            f"Best distance: {best_text}",
            f"Steps: {step_count} / {self.app.point_possibilities:,}",
        ]
        if self.app.mode is not None:
            lines.insert(0, f"Search: {self.app.mode.value}")
        self.stats_label.setText("\n".join(lines))

    # ------------------------------------------------------------------
    def generate_evaluation_graphs(self):
        # Runs the benchmark on a copy of the current points; the live search is not touched.
        output_dir = os.path.join(tempfile.gettempdir(), "tsp_visualizer")
        try:
            paths = benchmark_searches(
                self.app.get_points(),
                self.BENCHMARK_STEPS,
                output_dir,
                seed=self.app.settings.seed,
            )
        except Exception as e:
            QMessageBox.critical(self, "Benchmark error", str(e))
            return

        trace_path = paths.get("trace")
        comparison_path = paths.get("comparison")

        if trace_path and os.path.exists(trace_path):
            self.trace_label.setPixmap(
                QPixmap(trace_path).scaledToWidth(600, Qt.SmoothTransformation)
            )
        else:
            print("WARNING: Could not load graph from", trace_path)

        if comparison_path and os.path.exists(comparison_path):
            self.comparison_label.setPixmap(
                QPixmap(comparison_path).scaledToWidth(450, Qt.SmoothTransformation)
            )


# =====================================================================
# Application bootstrap
# =====================================================================

def start_gui(app_controller):
    # Create the QApplication and launch the MainWindow.
    #
    # Parameters
    # ----------
    # app_controller : TSPVisualizerApp
    #     Controller instance from main.py, responsible for the point set
    #     and for stepping the active search.
    qt_app = QApplication(sys.argv)
    window = MainWindow(app_controller)
    window.show()
    sys.exit(qt_app.exec_())
