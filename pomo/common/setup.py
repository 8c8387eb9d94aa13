import os
import sys
from pathlib import Path
from dataclasses import dataclass

# Lil helper to create a directory (and parents) if it is missing, handing the path back for chaining.
def ensure_directory(path: Path):
    path.mkdir(parents=True,exist_ok=True)
    return path

# Ensures that, while running in a frozen (exe) build, the path of the running exe is EXACTLY paths.root / exe_name.
def assert_running_from_install_root(expected_path: Path):
    # Running from source, so we just ignore rn
    if not getattr(sys, "frozen", False):
        return

    actual_exe = Path(sys.executable).resolve()
    expected_exe = expected_path.resolve()

    if actual_exe != expected_exe:
        raise RuntimeError(
            "Application is being run from an unexpected location.\n"
            f"Expected: {expected_exe}\n"
            f"Actual:   {actual_exe}"
        )

# Picks the per-user data folder. POMO_DATA_DIR wins over everything, which is also how the tests keep
# their logs out of the real user folder.
def _resolve_data_dir() -> Path:
    override = os.getenv("POMO_DATA_DIR")
    if override:
        return Path(override)
    appdata = os.getenv("APPDATA")
    if appdata:
        return Path(appdata) / "PomodoroTimer"
    xdg = os.getenv("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / "pomodoro-timer"
    return Path.home() / ".local" / "share" / "pomodoro-timer"

# Dataclass for accessing paths across program.
@dataclass(frozen=False)
class ProjectPaths:

    root: Path
    data: Path
    logs: Path

    @staticmethod
    def build():
        # Folder for the install itself when frozen, otherwise the source checkout
        if getattr(sys, "frozen", False):
            root = Path(sys.executable).resolve().parent
        else:
            root = Path(__file__).resolve().parents[2]

        # Folder for settings, stats and logs
        data = ensure_directory(_resolve_data_dir())
        logs = ensure_directory(data / "logs")

        return ProjectPaths(
            root = root,
            data = data,
            logs = logs,
        )
PATHS = ProjectPaths.build()
