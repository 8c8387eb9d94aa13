from dataclasses import dataclass, replace
from enum import Enum
from pomo.common.logger import log
from pomo.core import config, stats
from pomo.core.clock import Clock
from pomo.core.config import SessionConfig, validate_config
from pomo.core.events import (
    EventBus,
    ModeChanged,
    Paused,
    SessionCompleted,
    SettingsChanged,
    Started,
    StatsUpdated,
    Tick,
)
from pomo.core.stats import StatisticsRecord

# Seconds between a completion and the automatic start of the next interval, when auto-start is on.
AUTO_START_DELAY = 1.0


class Mode(Enum):
    WORK = "work"
    SHORT_BREAK = "break"
    LONG_BREAK = "long"


# Configured length of `mode`, in seconds.
def duration_for(mode: Mode, cfg: SessionConfig) -> int:
    if mode is Mode.SHORT_BREAK:
        return cfg.break_seconds
    if mode is Mode.LONG_BREAK:
        return cfg.long_break_seconds
    return cfg.work_seconds


@dataclass(frozen=True)
class SessionSnapshot:
    mode: Mode
    time_left: int
    total: int
    running: bool
    daily_sessions: int
    lifetime_sessions: int
    total_work_seconds: int


# The work/break state machine. It owns no timer of its own: `clock` delivers ticks and deferred calls, and
# every observable change goes out through `bus`.
class PomodoroSession:

    def __init__(self, clock: Clock, cfg: SessionConfig | None = None, record: StatisticsRecord | None = None,
                 bus: EventBus | None = None):
        self.clock = clock
        self.bus = bus or EventBus()
        self.config = cfg or SessionConfig()
        self.stats = record or StatisticsRecord(last_date=clock.today())

        self.mode = Mode.WORK
        self.time_left = self.config.work_seconds
        self.running = False

        log.debug(f"Initialized session with {self.config} and {self.stats}")

    # Builds a session from whatever is on disk, reconciling stats with today's date.
    @classmethod
    def load(cls, clock: Clock, bus: EventBus | None = None):
        cfg = config.load_settings()
        record = stats.load_stats(clock.today())
        return cls(clock, cfg, record, bus)

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            mode=self.mode,
            time_left=self.time_left,
            total=duration_for(self.mode, self.config),
            running=self.running,
            daily_sessions=self.stats.daily_sessions,
            lifetime_sessions=self.stats.lifetime_sessions,
            total_work_seconds=self.stats.total_work_seconds,
        )

    #region === Commands ===

    def start(self):
        if self.running:
            return
        self.running = True
        self.clock.start_ticking(self.tick)
        log.debug(f"Started {self.mode.value} with {self.time_left}s left")
        self.bus.emit(Started(self.mode))

    def pause(self):
        if not self.running:
            return
        self.running = False
        self.clock.stop_ticking()
        log.debug(f"Paused {self.mode.value} with {self.time_left}s left")
        self.bus.emit(Paused(self.mode, self.time_left))

    def toggle(self):
        if self.running:
            self.pause()
        else:
            self.start()

    def tick(self):
        if not self.running:
            return
        self.time_left -= 1
        if self.time_left <= 0:
            self._complete_session()
        else:
            self.bus.emit(Tick(self.time_left))

    # Ends the current interval right now, exactly as if the countdown had reached zero.
    def skip(self):
        self.pause()
        log.debug(f"Skipping {self.mode.value} with {self.time_left}s left")
        self._complete_session()

    # Back to the full duration of the current mode. Mode and counters stay as they are.
    def reset(self):
        self.pause()
        self.time_left = duration_for(self.mode, self.config)
        log.debug(f"Reset {self.mode.value} to {self.time_left}s")
        self.bus.emit(Tick(self.time_left))

    # Replaces the whole config. Raises InvalidConfigError, leaving everything untouched, if `new_config` is bad.
    def apply_config(self, new_config: SessionConfig):
        validate_config(new_config)
        self.config = new_config
        if not self.running:
            self.time_left = duration_for(self.mode, self.config)
        log.info(f"Applied settings {new_config}")
        try:
            config.save_settings(new_config)
        except OSError:
            log.warning("Failed to save settings, keeping them for this run only.",exc_info=True)
        self.bus.emit(SettingsChanged(new_config))
        self.bus.emit(Tick(self.time_left))

    # Shorthand for flipping single options, e.g. update_options(dark_mode=True).
    def update_options(self, **changes):
        self.apply_config(replace(self.config, **changes))

    # Zeroes every counter. Asking the user whether they really mean it is up to the caller.
    def reset_statistics(self):
        self.stats.clear(self.clock.today())
        log.info("Statistics reset by user")
        self._save_stats()
        self._emit_stats()

    #endregion === Commands ===

    #region === Completion ===

    def _complete_session(self):
        self.pause()
        today = self.clock.today()
        finished = self.mode

        if finished is Mode.WORK:
            self.stats.record_work_session(self.config.work_seconds, today)
            if self.stats.daily_sessions % self.config.sessions_before_long == 0:
                next_mode = Mode.LONG_BREAK
            else:
                next_mode = Mode.SHORT_BREAK
        else:
            # Keeps last_date honest when a break is the first thing finished after midnight
            self.stats.roll_over(today)
            next_mode = Mode.WORK

        self.mode = next_mode
        self.time_left = duration_for(next_mode, self.config)
        log.info(f"Completed {finished.value}, moving to {next_mode.value} ({self.time_left}s). "
                 f"Sessions today: {self.stats.daily_sessions}, lifetime: {self.stats.lifetime_sessions}")

        self._save_stats()

        self.bus.emit(ModeChanged(next_mode))
        self.bus.emit(Tick(self.time_left))
        self.bus.emit(SessionCompleted(finished, next_mode))
        self._emit_stats()

        # Not canceled by a pause in the meantime, see DESIGN.md
        if self.config.auto_start:
            self.clock.call_later(AUTO_START_DELAY, self.start)

    def _save_stats(self):
        try:
            stats.save_stats(self.stats)
        except OSError:
            log.warning("Failed to save statistics, keeping them in memory.",exc_info=True)

    def _emit_stats(self):
        self.bus.emit(StatsUpdated(
            self.stats.daily_sessions,
            self.stats.lifetime_sessions,
            self.stats.total_work_seconds,
        ))

    #endregion === Completion ===
