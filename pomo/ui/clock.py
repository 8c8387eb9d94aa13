from PySide6.QtCore import QObject, QTimer
from pomo.common.logger import log
from pomo.core.clock import Clock


# Clock backed by the Qt event loop. Ticks and deferred calls are delivered on the GUI thread in the same queue
# as user input, so the session never sees two things at once.
class QtClock(Clock):

    TICK_MS = 1000

    def __init__(self, parent: QObject | None = None):
        self._timer = QTimer(parent)
        self._timer.setInterval(self.TICK_MS)
        self._callback = None
        self._timer.timeout.connect(self._on_timeout)

    @property
    def ticking(self):
        return self._timer.isActive()

    def start_ticking(self, callback):
        self._callback = callback
        # QTimer.start() on an active timer restarts it, there is only ever one schedule
        self._timer.start()
        log.debug("Tick timer started")

    def stop_ticking(self):
        self._timer.stop()
        self._callback = None
        log.debug("Tick timer stopped")

    def call_later(self, delay_sec, callback):
        QTimer.singleShot(int(delay_sec * 1000), callback)

    def _on_timeout(self):
        if self._callback is not None:
            self._callback()
