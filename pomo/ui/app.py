import sys
from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QFont, QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QApplication,
    QDialog,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)
from pomo.common.logger import log
from pomo.core.events import EventBus, ModeChanged, Paused, SessionCompleted, SettingsChanged, Started, StatsUpdated, Tick
from pomo.core.session import Mode, PomodoroSession
from pomo.ui.clock import QtClock
from pomo.ui.dialogs import SettingsDialog
from pomo.ui.theme import THEMES, MODE_LABELS, build_stylesheet, build_clock_stylesheet
from pomo.util import format_clock, format_work_time


# ---------------------------------------------------------------------------
# Main window
# ---------------------------------------------------------------------------

# Main window of the timer. It renders whatever the session publishes and turns clicks and shortcuts into
# session commands; no timer logic lives here.
class MainWindow(QMainWindow):

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Pomodoro Timer")

        # -- Core --
        self.bus = EventBus()
        self.clock = QtClock(self)
        self.session = PomodoroSession.load(self.clock, self.bus)
        self.bus.subscribe(self._on_event)

        # -- Build UI skeleton --
        central = QWidget()
        self.setCentralWidget(central)
        lay = QVBoxLayout(central)
        lay.setSpacing(12)

        self._clock_frame = QFrame()
        self._clock_frame.setObjectName("clock")
        clock_lay = QVBoxLayout(self._clock_frame)
        self._mode_label = QLabel()
        self._mode_label.setAlignment(Qt.AlignCenter)
        self._mode_label.setFont(QFont("Segoe UI", 14, QFont.Bold))
        self._display = QLabel()
        self._display.setAlignment(Qt.AlignCenter)
        self._display.setFont(QFont("Segoe UI", 48, QFont.Bold))
        clock_lay.addWidget(self._mode_label)
        clock_lay.addWidget(self._display)
        lay.addWidget(self._clock_frame)

        btn_row = QHBoxLayout()
        self._start_btn = self._make_button("Start", self.session.start, btn_row)
        self._pause_btn = self._make_button("Pause", self.session.pause, btn_row)
        self._skip_btn = self._make_button("Skip", self.session.skip, btn_row)
        self._reset_btn = self._make_button("Reset", self._on_reset, btn_row)
        lay.addLayout(btn_row)

        stats_grid = QGridLayout()
        self._today_lbl = self._add_stat(stats_grid, 0, "Sessions today")
        self._lifetime_lbl = self._add_stat(stats_grid, 1, "Total sessions")
        self._work_time_lbl = self._add_stat(stats_grid, 2, "Work time today")
        lay.addLayout(stats_grid)

        footer = QHBoxLayout()
        # Quick toggles, saved the moment they are flipped
        self._toggles = {
            "auto_start": self._make_toggle("Auto Start", "auto_start", footer),
            "sound_enabled": self._make_toggle("Sound", "sound_enabled", footer),
            "dark_mode": self._make_toggle("Dark Mode", "dark_mode", footer),
        }
        footer.addStretch()
        self._make_button("Settings", self._on_settings, footer)
        lay.addLayout(footer)

        # Banner notifications, replaced rather than stacked
        self._banner = QLabel()
        self._banner.setObjectName("banner")
        self._banner.setAlignment(Qt.AlignCenter)
        self._banner.setVisible(False)
        lay.addWidget(self._banner)
        self._banner_timer = QTimer(self)
        self._banner_timer.setSingleShot(True)
        self._banner_timer.timeout.connect(lambda: self._banner.setVisible(False))

        # -- Keyboard shortcuts --
        QShortcut(QKeySequence("Space"), self, activated=self.session.toggle)
        QShortcut(QKeySequence("Ctrl+R"), self, activated=self._on_reset)
        QShortcut(QKeySequence("Ctrl+S"), self, activated=self.session.skip)

        self._apply_style()
        self._render_all()

    def _make_button(self, text, slot, row):
        btn = QPushButton(text)
        # Buttons must not eat the space bar
        btn.setFocusPolicy(Qt.NoFocus)
        btn.clicked.connect(lambda _=False: slot())
        row.addWidget(btn)
        return btn

    def _make_toggle(self, text, option, row):
        btn = QPushButton(text)
        btn.setCheckable(True)
        btn.setFocusPolicy(Qt.NoFocus)
        btn.setChecked(getattr(self.session.config, option))
        btn.toggled.connect(lambda checked, o=option: self.session.update_options(**{o: checked}))
        row.addWidget(btn)
        return btn

    def _sync_toggles(self, cfg):
        for option, btn in self._toggles.items():
            btn.blockSignals(True)
            btn.setChecked(getattr(cfg, option))
            btn.blockSignals(False)

    @staticmethod
    def _add_stat(grid, col, caption):
        value = QLabel()
        value.setAlignment(Qt.AlignCenter)
        value.setFont(QFont("Segoe UI", 16, QFont.Bold))
        cap = QLabel(caption)
        cap.setObjectName("mutedLabel")
        cap.setAlignment(Qt.AlignCenter)
        grid.addWidget(value, 0, col)
        grid.addWidget(cap, 1, col)
        return value

    # ------------------------------------------------------------------ #
    #  Style / rendering                                                   #
    # ------------------------------------------------------------------ #

    def _theme(self):
        return THEMES["Dark" if self.session.config.dark_mode else "Light"]

    def _apply_style(self):
        self.setStyleSheet(build_stylesheet(self._theme()))
        self._clock_frame.setStyleSheet(build_clock_stylesheet(self._theme(), self.session.mode.value))

    def _render_all(self):
        snap = self.session.snapshot()
        self._display.setText(format_clock(snap.time_left))
        self._mode_label.setText(MODE_LABELS[snap.mode.value])
        self._render_stats(snap.daily_sessions, snap.lifetime_sessions, snap.total_work_seconds)
        self._render_running(snap.running)

    def _render_stats(self, daily, lifetime, work_seconds):
        self._today_lbl.setText(str(daily))
        self._lifetime_lbl.setText(str(lifetime))
        self._work_time_lbl.setText(format_work_time(work_seconds))

    def _render_running(self, running):
        self._start_btn.setEnabled(not running)
        self._pause_btn.setEnabled(running)

    def _notify(self, message, duration_ms=3000):
        self._banner.setText(message)
        self._banner.setVisible(True)
        self._banner_timer.start(duration_ms)

    # ------------------------------------------------------------------ #
    #  Session events                                                      #
    # ------------------------------------------------------------------ #

    def _on_event(self, event):
        if isinstance(event, Tick):
            self._display.setText(format_clock(event.time_left))
        elif isinstance(event, ModeChanged):
            self._mode_label.setText(MODE_LABELS[event.mode.value])
            self._apply_style()
        elif isinstance(event, Started):
            self._render_running(True)
            self._notify("Work started!" if event.mode is Mode.WORK else "Break started!")
        elif isinstance(event, Paused):
            self._render_running(False)
            self._notify("Paused")
        elif isinstance(event, SessionCompleted):
            self._on_session_completed(event)
        elif isinstance(event, StatsUpdated):
            self._render_stats(event.daily_sessions, event.lifetime_sessions, event.total_work_seconds)
        elif isinstance(event, SettingsChanged):
            self._sync_toggles(event.config)
            self._apply_style()

    def _on_session_completed(self, event):
        if event.finished is Mode.WORK:
            if self.session.config.sound_enabled:
                QApplication.beep()
            if event.next_mode is Mode.LONG_BREAK:
                self._notify("Work session complete! Time for a long break.", 5000)
            else:
                self._notify("Work session complete! Time for a short break.", 5000)
        else:
            self._notify("Break over! Back to work.", 3000)

    # ------------------------------------------------------------------ #
    #  Commands                                                            #
    # ------------------------------------------------------------------ #

    def _on_reset(self):
        self.session.reset()
        self._notify("Timer reset")

    def _on_reset_stats(self):
        if QMessageBox.question(
                self, "Confirm", "Reset all statistics to zero?"
        ) == QMessageBox.Yes:
            self.session.reset_statistics()
            self._notify("Statistics reset!")

    def _on_settings(self):
        dlg = SettingsDialog(self, self.session.config, on_reset_stats=self._on_reset_stats)
        if dlg.exec() == QDialog.Accepted:
            self.session.apply_config(dlg.chosen_config)
            self._notify("Settings saved!")

    # ------------------------------------------------------------------ #
    #  Window close                                                        #
    # ------------------------------------------------------------------ #

    def closeEvent(self, event):
        self.session.pause()
        log.info("Main window closed")
        event.accept()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main():
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())
