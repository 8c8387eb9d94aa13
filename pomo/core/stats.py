import json
from dataclasses import dataclass
from datetime import date
from pomo.common.logger import log
from pomo.common.setup import PATHS


STATS_PATH = PATHS.data / "pomodoro_stats.json"


# Session counters. daily_sessions and total_work_seconds cover `last_date` only, lifetime_sessions runs until
# the user resets it.
@dataclass
class StatisticsRecord:
    daily_sessions: int = 0
    lifetime_sessions: int = 0
    total_work_seconds: int = 0
    last_date: date | None = None

    # Zeroes the per-day counters if `today` is a different day than the one on record. Returns True when a
    # rollover happened.
    def roll_over(self, today: date) -> bool:
        if self.last_date == today:
            return False
        log.info(f"Day changed ({self.last_date} -> {today}), clearing {self.daily_sessions} daily sessions "
                 f"and {self.total_work_seconds}s of work time.")
        self.daily_sessions = 0
        self.total_work_seconds = 0
        self.last_date = today
        return True

    def record_work_session(self, work_seconds: int, today: date):
        self.roll_over(today)
        self.daily_sessions += 1
        self.lifetime_sessions += 1
        self.total_work_seconds += work_seconds

    def clear(self, today: date):
        self.daily_sessions = 0
        self.lifetime_sessions = 0
        self.total_work_seconds = 0
        self.last_date = today


def _count(value):
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0

def stats_to_dict(record: StatisticsRecord) -> dict:
    return {
        "sessionCount": record.daily_sessions,
        "totalSessions": record.lifetime_sessions,
        "totalWorkTime": record.total_work_seconds,
        "lastDate": record.last_date.isoformat() if record.last_date else None,
    }

# Builds a record from a stored dict. Bad counters become 0, a bad date becomes None (which always rolls over).
def stats_from_dict(raw) -> tuple[StatisticsRecord, set]:
    if not isinstance(raw, dict):
        raw = {}
    defaulted = set()
    counts = {}
    for key in ("sessionCount", "totalSessions", "totalWorkTime"):
        if _count(raw.get(key)):
            counts[key] = raw[key]
        else:
            defaulted.add(key)
            counts[key] = 0

    last_date = None
    try:
        last_date = date.fromisoformat(raw["lastDate"])
    except (KeyError, TypeError, ValueError):
        defaulted.add("lastDate")

    record = StatisticsRecord(
        daily_sessions=counts["sessionCount"],
        lifetime_sessions=counts["totalSessions"],
        total_work_seconds=counts["totalWorkTime"],
        last_date=last_date,
    )
    # The lifetime count can never trail the daily count
    if record.lifetime_sessions < record.daily_sessions:
        defaulted.add("totalSessions")
        record.lifetime_sessions = record.daily_sessions
    return record, defaulted


# Loads stats from STATS_PATH and reconciles them against `today`. If the stored day is stale the daily
# counters are cleared and the result is written back straight away, so the rollover only happens once.
def load_stats(today: date) -> StatisticsRecord:
    if not STATS_PATH.exists():
        log.info(f"No stats file at '{STATS_PATH}', starting with empty statistics.")
        return StatisticsRecord(last_date=today)
    try:
        with open(STATS_PATH, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (json.JSONDecodeError, OSError, UnicodeDecodeError):
        log.warning(f"Could not read stats from '{STATS_PATH}', starting with empty statistics.",exc_info=True)
        return StatisticsRecord(last_date=today)

    record, defaulted = stats_from_dict(raw)
    if defaulted:
        log.warning(f"Loaded stats from '{STATS_PATH}', but with missing or invalid values that were defaulted: {', '.join(sorted(defaulted))}")
    else:
        log.info(f"Successfully loaded stats from '{STATS_PATH}'.")

    if record.roll_over(today):
        try:
            save_stats(record)
        except OSError:
            log.warning(f"Failed to persist daily rollover to '{STATS_PATH}'.",exc_info=True)
    return record

# Write the given record to STATS_PATH. OSError is left to the caller.
def save_stats(record: StatisticsRecord):
    STATS_PATH.parent.mkdir(parents=True, exist_ok=True)
    with open(STATS_PATH, "w", encoding="utf-8") as f:
        json.dump(stats_to_dict(record), f, indent=2)
    log.debug(f"Saved stats to '{STATS_PATH}': {stats_to_dict(record)}")
