import logging
from pathlib import Path
from logging.handlers import RotatingFileHandler
from pomo.common.setup import PATHS
from datetime import datetime

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(filename)s:%(lineno)d] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Attaches the handler built by `factory` unless a handler with the same name is already on the logger, so
# calling get_logger() twice never doubles up output.
def _attach_once(logger: logging.Logger, handler_name: str, factory, level, fmt):
    if any(h.get_name() == handler_name for h in logger.handlers):
        return None
    handler = factory()
    handler.setLevel(level)
    handler.setFormatter(fmt)
    handler.set_name(handler_name)
    logger.addHandler(handler)
    return handler

# Keeps only the newest `keep` per-run debug logs.
def _prune_runs(debug_dir: Path, name: str, keep: int):
    runs = sorted(debug_dir.glob(f"{name}_*.log"),key=lambda p: p.stat().st_mtime,reverse=True)
    for run in runs[keep:]:
        try: run.unlink()
        except OSError: pass

def get_logger(
        name = "pomodoro",
        level = logging.INFO,
        log_dir: Path | None = None,
        max_bytes = 5 * 1024 * 1024,
        backup_count = 5,
        persistent = True,
        console = False,
        historical_debugs: int = 10
) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.propagate = False
    logger.setLevel(level)

    log_dir = log_dir or PATHS.logs
    log_dir.mkdir(parents=True,exist_ok=True)
    fmt = logging.Formatter(LOG_FORMAT,LOG_DATE_FORMAT)

    # Rotating log that survives across runs
    if persistent:
        _attach_once(logger, f"{name}:persistent", lambda: RotatingFileHandler(
            filename=log_dir / f"{name}.log",
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        ), level, fmt)

    # latest.log is overwritten on every run
    _attach_once(logger, f"{name}:latest", lambda: logging.FileHandler(
        filename=log_dir / "latest.log",
        mode="w",
        encoding="utf-8",
    ), level, fmt)

    # One full DEBUG log per run under logs/debug
    if historical_debugs > 0:
        debug_dir = log_dir / "debug"
        debug_dir.mkdir(parents=True,exist_ok=True)
        added = _attach_once(logger, f"{name}:historical_debug", lambda: logging.FileHandler(
            filename=debug_dir / f"{name}_{datetime.now():%Y-%m-%d_%H-%M-%S}.log",
            encoding="utf-8",
        ), logging.DEBUG, fmt)
        if added is not None:
            _prune_runs(debug_dir, name, historical_debugs)

    if console:
        _attach_once(logger, f"{name}:console", logging.StreamHandler, level, fmt)

    return logger

log = get_logger(level=logging.DEBUG,console=False,historical_debugs=10)
log.info("=== STARTED POMODORO TIMER ===")
