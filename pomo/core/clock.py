from datetime import date
from pomo.util import today


# What the session needs from the outside world in terms of time. The Qt implementation lives in
# pomo.ui.clock; tests drive a hand-cranked one.
class Clock:

    # Call `callback` once a second until stop_ticking(). Starting again replaces the previous schedule.
    def start_ticking(self, callback) -> None:
        raise NotImplementedError

    def stop_ticking(self) -> None:
        raise NotImplementedError

    # One-shot deferred call, not cancelable.
    def call_later(self, delay_sec: float, callback) -> None:
        raise NotImplementedError

    def today(self) -> date:
        return today()
