"""Settings dialog for the Pomodoro timer: durations, presets and toggles."""

from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QFrame,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QMessageBox,
    QPushButton,
    QSpinBox,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)
from pomo.core.config import PRESETS, InvalidConfigError, SessionConfig, validate_config

MAX_MINUTES = 600


# Minutes a stored duration is shown as in its spin box.
def minutes_shown(seconds):
    return min(MAX_MINUTES, max(1, seconds // 60))

# Seconds to store for a duration field. A field still showing what it was opened with keeps its exact stored
# value, so durations like 90s survive an Apply that only changed a toggle.
def seconds_from_field(minutes, original_seconds):
    if minutes == minutes_shown(original_seconds):
        return original_seconds
    return minutes * 60

# Tabbed settings dialog with a left sidebar. After exec() returns Accepted, `chosen_config` holds a config
# that already passed validation.
class SettingsDialog(QDialog):

    def __init__(self, parent, cfg: SessionConfig, on_reset_stats):
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)

        self.chosen_config = cfg
        self._original = cfg

        outer = QVBoxLayout(self)
        body = QHBoxLayout()

        self._tab_list = QListWidget()
        self._tab_list.setFixedWidth(140)
        self._tab_list.setFont(QFont("Segoe UI", 11))
        self._tab_list.addItem("Timer")
        self._tab_list.addItem("Behavior")
        self._tab_list.setCurrentRow(0)
        self._tab_list.currentRowChanged.connect(self._on_tab_changed)
        body.addWidget(self._tab_list)

        self._stack = QStackedWidget()
        self._stack.addWidget(self._build_timer_page(cfg))
        self._stack.addWidget(self._build_behavior_page(cfg, on_reset_stats))
        body.addWidget(self._stack, 1)
        outer.addLayout(body, 1)

        btn_row = QHBoxLayout()
        btn_row.addStretch()
        cancel_btn = QPushButton("Cancel")
        cancel_btn.clicked.connect(self.reject)
        apply_btn = QPushButton("Apply")
        apply_btn.setDefault(True)
        apply_btn.clicked.connect(self._apply)
        btn_row.addWidget(cancel_btn)
        btn_row.addWidget(apply_btn)
        outer.addLayout(btn_row)

    def _on_tab_changed(self, index):
        self._stack.setCurrentIndex(index)

    # Label + widget row, the way every setting on both pages is laid out.
    @staticmethod
    def _add_row(lay, text, widget, tooltip):
        row = QHBoxLayout()
        lbl = QLabel(text)
        lbl.setFont(QFont("Segoe UI", 11, QFont.Bold))
        lbl.setToolTip(tooltip)
        widget.setMinimumWidth(160)
        widget.setToolTip(tooltip)
        row.addWidget(lbl)
        row.addWidget(widget)
        lay.addLayout(row)

    @staticmethod
    def _minutes_box(seconds):
        box = QSpinBox()
        box.setRange(1, MAX_MINUTES)
        box.setSuffix(" min")
        box.setValue(minutes_shown(seconds))
        return box

    @staticmethod
    def _on_off_box(value):
        box = QComboBox()
        box.addItems(["On", "Off"])
        box.setCurrentText("On" if value else "Off")
        return box

    # ------------------------------------------------------------------ #
    #  Timer page                                                          #
    # ------------------------------------------------------------------ #

    def _build_timer_page(self, cfg):
        page = QWidget()
        lay = QVBoxLayout(page)
        lay.setSpacing(12)

        # Presets only fill the fields, nothing changes until Apply
        preset_row = QHBoxLayout()
        for name, minutes in PRESETS.items():
            btn = QPushButton(f"{name} ({minutes[0]}/{minutes[1]}/{minutes[2]})")
            btn.clicked.connect(lambda _=False, m=minutes: self._load_preset(m))
            preset_row.addWidget(btn)
        lay.addLayout(preset_row)

        sep = QFrame()
        sep.setFrameShape(QFrame.HLine)
        sep.setFrameShadow(QFrame.Sunken)
        lay.addWidget(sep)

        self._work = self._minutes_box(cfg.work_seconds)
        self._add_row(lay, "Work:", self._work, "Length of one focused work session.")
        self._break = self._minutes_box(cfg.break_seconds)
        self._add_row(lay, "Short Break:", self._break, "Break taken after most work sessions.")
        self._long = self._minutes_box(cfg.long_break_seconds)
        self._add_row(lay, "Long Break:", self._long, "Break taken after every few work sessions.")

        self._sessions_before_long = QSpinBox()
        self._sessions_before_long.setRange(1, 12)
        self._sessions_before_long.setValue(cfg.sessions_before_long)
        self._add_row(lay, "Long Break Every:", self._sessions_before_long,
                      "Number of work sessions (counted per day) between long breaks.")

        lay.addStretch()
        return page

    def _load_preset(self, minutes):
        work, short, long_ = minutes
        self._work.setValue(work)
        self._break.setValue(short)
        self._long.setValue(long_)

    # ------------------------------------------------------------------ #
    #  Behavior page                                                       #
    # ------------------------------------------------------------------ #

    def _build_behavior_page(self, cfg, on_reset_stats):
        page = QWidget()
        lay = QVBoxLayout(page)
        lay.setSpacing(12)

        self._auto_start = self._on_off_box(cfg.auto_start)
        self._add_row(lay, "Auto Start:", self._auto_start,
                      "Start the next interval automatically one second after the current one ends.")
        self._sound = self._on_off_box(cfg.sound_enabled)
        self._add_row(lay, "Sound:", self._sound, "Play a sound when a work session ends.")
        self._dark = self._on_off_box(cfg.dark_mode)
        self._add_row(lay, "Dark Mode:", self._dark, "Use the dark color theme.")

        sep = QFrame()
        sep.setFrameShape(QFrame.HLine)
        sep.setFrameShadow(QFrame.Sunken)
        lay.addWidget(sep)

        btn_row = QHBoxLayout()
        reset_btn = QPushButton("Reset Statistics")
        reset_btn.clicked.connect(on_reset_stats)
        btn_row.addWidget(reset_btn)
        btn_row.addStretch()
        lay.addLayout(btn_row)

        lay.addStretch()
        return page

    # ------------------------------------------------------------------ #
    #  Apply                                                               #
    # ------------------------------------------------------------------ #

    def _apply(self):
        cfg = SessionConfig(
            work_seconds=seconds_from_field(self._work.value(), self._original.work_seconds),
            break_seconds=seconds_from_field(self._break.value(), self._original.break_seconds),
            long_break_seconds=seconds_from_field(self._long.value(), self._original.long_break_seconds),
            sessions_before_long=self._sessions_before_long.value(),
            auto_start=self._auto_start.currentText() == "On",
            sound_enabled=self._sound.currentText() == "On",
            dark_mode=self._dark.currentText() == "On",
        )
        try:
            validate_config(cfg)
        except InvalidConfigError as e:
            QMessageBox.warning(self, "Invalid Settings", str(e))
            return
        self.chosen_config = cfg
        self.accept()
