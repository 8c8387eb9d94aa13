import json
from dataclasses import dataclass, asdict
from pomo.common.logger import log
from pomo.common.setup import PATHS


#region === Helpers and Paths ===

SETTINGS_PATH = PATHS.data / "pomodoro_settings.json"

# Named duration presets, in minutes: (work, short break, long break)
PRESETS = {
    "Classic": (25, 5, 15),
    "Short": (15, 3, 10),
    "Long": (50, 10, 30),
}


class InvalidConfigError(ValueError):
    pass


# User-configurable durations and toggles. Durations are in seconds.
@dataclass(frozen=True)
class SessionConfig:
    work_seconds: int = 25 * 60
    break_seconds: int = 5 * 60
    long_break_seconds: int = 15 * 60
    sessions_before_long: int = 4
    auto_start: bool = False
    sound_enabled: bool = True
    dark_mode: bool = False


def _is_int(value):
    # bool is a subclass of int, but `true` is not a duration
    return isinstance(value, int) and not isinstance(value, bool)

def _positive_int(value):
    return _is_int(value) and value > 0

def _is_bool(value):
    return isinstance(value, bool)

# On-disk key -> (dataclass field, validity check). Key names are the stored JSON schema and must not change.
_FIELDS = {
    "work": ("work_seconds", _positive_int),
    "break": ("break_seconds", _positive_int),
    "long": ("long_break_seconds", _positive_int),
    "sessionsBeforeLong": ("sessions_before_long", _positive_int),
    "autoStart": ("auto_start", _is_bool),
    "sound": ("sound_enabled", _is_bool),
    "dark": ("dark_mode", _is_bool),
}

# Raises InvalidConfigError listing every bad field, or returns the config untouched.
def validate_config(cfg: SessionConfig) -> SessionConfig:
    problems = []
    for attr in ("work_seconds", "break_seconds", "long_break_seconds"):
        if not _positive_int(getattr(cfg, attr)):
            problems.append(f"{attr} must be a whole number of seconds greater than 0")
    if not _positive_int(cfg.sessions_before_long):
        problems.append("sessions_before_long must be at least 1")
    for attr in ("auto_start", "sound_enabled", "dark_mode"):
        if not _is_bool(getattr(cfg, attr)):
            problems.append(f"{attr} must be true or false")
    if problems:
        raise InvalidConfigError("; ".join(problems))
    return cfg

def config_to_dict(cfg: SessionConfig) -> dict:
    values = asdict(cfg)
    return {key: values[attr] for key, (attr, _) in _FIELDS.items()}

# Builds a config from a stored dict, replacing each missing or invalid field with its default. Returns the
# config along with the set of keys that were defaulted.
def config_from_dict(raw) -> tuple[SessionConfig, set]:
    defaults = asdict(SessionConfig())
    if not isinstance(raw, dict):
        return SessionConfig(), set(_FIELDS)
    values = {}
    defaulted = set()
    for key, (attr, is_valid) in _FIELDS.items():
        if key in raw and is_valid(raw[key]):
            values[attr] = raw[key]
        else:
            defaulted.add(key)
            values[attr] = defaults[attr]
    return SessionConfig(**values), defaulted

#endregion === Helpers and Paths ===

#region === Saving and Loading Settings ===

# Loads settings from SETTINGS_PATH, falling back to defaults field by field. Never raises.
def load_settings() -> SessionConfig:
    if not SETTINGS_PATH.exists():
        log.info(f"No settings file at '{SETTINGS_PATH}', using default settings.")
        return SessionConfig()
    try:
        with open(SETTINGS_PATH, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (json.JSONDecodeError, OSError, UnicodeDecodeError):
        log.warning(f"Could not read settings from '{SETTINGS_PATH}', falling back to default settings.",exc_info=True)
        return SessionConfig()

    cfg, defaulted = config_from_dict(raw)
    if defaulted:
        log.warning(f"Loaded settings from '{SETTINGS_PATH}', but with missing or invalid values that were defaulted: {', '.join(sorted(defaulted))}")
    else:
        log.info(f"Successfully loaded settings from '{SETTINGS_PATH}'.")
    return cfg

# Write the given settings to SETTINGS_PATH. OSError is left to the caller.
def save_settings(cfg: SessionConfig):
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    with open(SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(config_to_dict(cfg), f, indent=2)
    log.info(f"Successfully saved settings to '{SETTINGS_PATH}'")

#endregion === Saving and Loading Settings ===
