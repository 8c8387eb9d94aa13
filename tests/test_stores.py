"""Tests for the settings and statistics stores.

Covers: pomo.core.config, pomo.core.stats
"""

import json
import os
import shutil
import tempfile
import unittest
from datetime import date, timedelta
from pathlib import Path

# Keep log files out of the real user folder
os.environ.setdefault("POMO_DATA_DIR", tempfile.mkdtemp(prefix="pomo_test_"))


# ──────────────────────────────────────────────────────────────────────────
# config.py tests
# ──────────────────────────────────────────────────────────────────────────

class TestSettingsStore(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        from pomo.core import config
        self._orig_settings_path = config.SETTINGS_PATH
        config.SETTINGS_PATH = Path(self.tmpdir) / "pomodoro_settings.json"

    def tearDown(self):
        from pomo.core import config
        config.SETTINGS_PATH = self._orig_settings_path
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def _write(self, payload):
        from pomo.core import config
        with open(config.SETTINGS_PATH, "w", encoding="utf-8") as f:
            if isinstance(payload, str):
                f.write(payload)
            else:
                json.dump(payload, f)

    def test_missing_file_gives_defaults(self):
        from pomo.core.config import load_settings, SessionConfig
        cfg = load_settings()
        self.assertEqual(cfg, SessionConfig())
        self.assertEqual(cfg.work_seconds, 1500)
        self.assertEqual(cfg.break_seconds, 300)
        self.assertEqual(cfg.long_break_seconds, 900)
        self.assertEqual(cfg.sessions_before_long, 4)
        self.assertFalse(cfg.auto_start)
        self.assertTrue(cfg.sound_enabled)
        self.assertFalse(cfg.dark_mode)

    def test_save_writes_stored_key_names(self):
        from pomo.core import config
        config.save_settings(config.SessionConfig(work_seconds=3000, dark_mode=True))
        with open(config.SETTINGS_PATH, encoding="utf-8") as f:
            raw = json.load(f)
        self.assertEqual(raw, {
            "work": 3000, "break": 300, "long": 900, "sessionsBeforeLong": 4,
            "autoStart": False, "sound": True, "dark": True,
        })

    def test_save_and_load_roundtrip(self):
        from pomo.core import config
        cfg = config.SessionConfig(600, 120, 1200, 3, True, False, True)
        config.save_settings(cfg)
        self.assertEqual(config.load_settings(), cfg)

    def test_partial_record_defaults_field_by_field(self):
        from pomo.core.config import load_settings
        self._write({"work": 3000, "dark": True})
        cfg = load_settings()
        self.assertEqual(cfg.work_seconds, 3000)
        self.assertTrue(cfg.dark_mode)
        self.assertEqual(cfg.break_seconds, 300)
        self.assertEqual(cfg.sessions_before_long, 4)
        self.assertTrue(cfg.sound_enabled)

    def test_invalid_fields_are_defaulted(self):
        from pomo.core.config import load_settings
        self._write({"work": 0, "break": -5, "long": "900", "sessionsBeforeLong": True,
                     "autoStart": "yes", "sound": False, "dark": 1})
        cfg = load_settings()
        self.assertEqual(cfg.work_seconds, 1500)
        self.assertEqual(cfg.break_seconds, 300)
        self.assertEqual(cfg.long_break_seconds, 900)
        self.assertEqual(cfg.sessions_before_long, 4)
        self.assertFalse(cfg.auto_start)
        # An explicit false must survive
        self.assertFalse(cfg.sound_enabled)
        self.assertFalse(cfg.dark_mode)

    def test_corrupted_file_gives_defaults(self):
        from pomo.core.config import load_settings, SessionConfig
        self._write("{not json!!")
        self.assertEqual(load_settings(), SessionConfig())

    def test_non_object_record_gives_defaults(self):
        from pomo.core.config import load_settings, SessionConfig
        self._write([1, 2, 3])
        self.assertEqual(load_settings(), SessionConfig())

    def test_validate_rejects_bad_values(self):
        from pomo.core.config import validate_config, SessionConfig, InvalidConfigError
        for bad in (
            SessionConfig(work_seconds=0),
            SessionConfig(break_seconds=-1),
            SessionConfig(long_break_seconds=0),
            SessionConfig(sessions_before_long=0),
            SessionConfig(work_seconds=True),
            SessionConfig(work_seconds=12.5),
        ):
            with self.subTest(cfg=bad):
                with self.assertRaises(InvalidConfigError):
                    validate_config(bad)

    def test_invalid_config_error_is_value_error(self):
        from pomo.core.config import InvalidConfigError
        self.assertTrue(issubclass(InvalidConfigError, ValueError))

    def test_presets_are_positive_minutes(self):
        from pomo.core.config import PRESETS
        self.assertEqual(PRESETS["Classic"], (25, 5, 15))
        for name, minutes in PRESETS.items():
            self.assertEqual(len(minutes), 3, name)
            self.assertTrue(all(m > 0 for m in minutes), name)


# ──────────────────────────────────────────────────────────────────────────
# stats.py tests
# ──────────────────────────────────────────────────────────────────────────

class TestStatisticsStore(unittest.TestCase):

    TODAY = date(2026, 10, 19)

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        from pomo.core import stats
        self._orig_stats_path = stats.STATS_PATH
        stats.STATS_PATH = Path(self.tmpdir) / "pomodoro_stats.json"

    def tearDown(self):
        from pomo.core import stats
        stats.STATS_PATH = self._orig_stats_path
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def _write(self, payload):
        from pomo.core import stats
        with open(stats.STATS_PATH, "w", encoding="utf-8") as f:
            if isinstance(payload, str):
                f.write(payload)
            else:
                json.dump(payload, f)

    def _read(self):
        from pomo.core import stats
        with open(stats.STATS_PATH, encoding="utf-8") as f:
            return json.load(f)

    def test_missing_file_gives_empty_record_for_today(self):
        from pomo.core import stats
        record = stats.load_stats(self.TODAY)
        self.assertEqual(record.daily_sessions, 0)
        self.assertEqual(record.lifetime_sessions, 0)
        self.assertEqual(record.total_work_seconds, 0)
        self.assertEqual(record.last_date, self.TODAY)
        # Nothing to persist until a session completes
        self.assertFalse(os.path.exists(stats.STATS_PATH))

    def test_same_day_record_loads_unchanged(self):
        from pomo.core.stats import load_stats
        self._write({"sessionCount": 3, "totalSessions": 10, "totalWorkTime": 4500,
                     "lastDate": self.TODAY.isoformat()})
        record = load_stats(self.TODAY)
        self.assertEqual(record.daily_sessions, 3)
        self.assertEqual(record.lifetime_sessions, 10)
        self.assertEqual(record.total_work_seconds, 4500)

    def test_yesterday_record_rolls_over(self):
        from pomo.core.stats import load_stats
        yesterday = self.TODAY - timedelta(days=1)
        self._write({"sessionCount": 3, "totalSessions": 10, "totalWorkTime": 4500,
                     "lastDate": yesterday.isoformat()})
        record = load_stats(self.TODAY)
        self.assertEqual(record.daily_sessions, 0)
        self.assertEqual(record.total_work_seconds, 0)
        self.assertEqual(record.lifetime_sessions, 10)
        self.assertEqual(record.last_date, self.TODAY)

    def test_rollover_is_persisted_immediately(self):
        from pomo.core.stats import load_stats
        self._write({"sessionCount": 3, "totalSessions": 10, "totalWorkTime": 4500,
                     "lastDate": "2020-01-01"})
        load_stats(self.TODAY)
        self.assertEqual(self._read(), {"sessionCount": 0, "totalSessions": 10, "totalWorkTime": 0,
                                        "lastDate": self.TODAY.isoformat()})
        # A second load the same day finds nothing left to roll over
        record = load_stats(self.TODAY)
        self.assertEqual(record.lifetime_sessions, 10)

    def test_unparseable_date_counts_as_another_day(self):
        from pomo.core.stats import load_stats
        self._write({"sessionCount": 2, "totalSessions": 5, "totalWorkTime": 3000,
                     "lastDate": "Mon Oct 19 2026"})
        record = load_stats(self.TODAY)
        self.assertEqual(record.daily_sessions, 0)
        self.assertEqual(record.lifetime_sessions, 5)

    def test_invalid_counters_default_to_zero(self):
        from pomo.core.stats import load_stats
        self._write({"sessionCount": -1, "totalSessions": "ten", "totalWorkTime": 600,
                     "lastDate": self.TODAY.isoformat()})
        record = load_stats(self.TODAY)
        self.assertEqual(record.daily_sessions, 0)
        self.assertEqual(record.lifetime_sessions, 0)
        self.assertEqual(record.total_work_seconds, 600)

    def test_lifetime_never_below_daily(self):
        from pomo.core.stats import load_stats
        self._write({"sessionCount": 4, "totalSessions": 1, "totalWorkTime": 6000,
                     "lastDate": self.TODAY.isoformat()})
        record = load_stats(self.TODAY)
        self.assertEqual(record.lifetime_sessions, 4)

    def test_corrupted_file_gives_empty_record(self):
        from pomo.core.stats import load_stats
        self._write("][")
        record = load_stats(self.TODAY)
        self.assertEqual(record.lifetime_sessions, 0)
        self.assertEqual(record.last_date, self.TODAY)

    def test_clear_then_reload_is_all_zero(self):
        from pomo.core.stats import load_stats, save_stats
        self._write({"sessionCount": 3, "totalSessions": 10, "totalWorkTime": 4500,
                     "lastDate": self.TODAY.isoformat()})
        record = load_stats(self.TODAY)
        record.clear(self.TODAY)
        save_stats(record)
        reloaded = load_stats(self.TODAY)
        self.assertEqual((reloaded.daily_sessions, reloaded.lifetime_sessions, reloaded.total_work_seconds),
                         (0, 0, 0))

    def test_record_work_session_rolls_over_first(self):
        from pomo.core.stats import StatisticsRecord
        record = StatisticsRecord(3, 10, 4500, self.TODAY - timedelta(days=1))
        record.record_work_session(1500, self.TODAY)
        self.assertEqual(record.daily_sessions, 1)
        self.assertEqual(record.lifetime_sessions, 11)
        self.assertEqual(record.total_work_seconds, 1500)
        self.assertEqual(record.last_date, self.TODAY)


if __name__ == "__main__":
    unittest.main()
