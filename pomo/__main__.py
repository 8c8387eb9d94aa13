import sys
from pomo.common.logger import log
from pomo.common.setup import assert_running_from_install_root, PATHS

# Entry point for `python -m pomo` and the `pomodoro` console script
def run() -> None:
    try:
        assert_running_from_install_root(PATHS.root / "pomodoro.exe")
        # Imported late so a broken Qt install still ends up in the log
        from pomo.ui.app import main
        main()
    except SystemExit:
        raise
    except Exception:
        # Full stack trace, always
        log.exception("Uncaught exception in entrypoint, exiting")
        sys.exit(1)

if __name__ == "__main__":
    run()
