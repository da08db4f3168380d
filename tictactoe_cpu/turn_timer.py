import logging
from dataclasses import dataclass

from PySide6.QtCore import QObject, QTimer, Signal, Slot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimerToken:
    """
    handle for one scheduled action; goes stale once superseded or cancelled
    """
    serial: int
    delay_ms: int


class TurnTimer(QObject):
    """
    single-slot cancellable timer on the qt event loop.
    scheduling replaces whatever was pending, so at most one action waits.
    """
    fired = Signal(object)        # token of the action that just ran
    cancelled = Signal(object)    # token that was dropped

    def __init__(self, parent=None):
        super().__init__(parent)
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._on_timeout)
        self._serial = 0
        self._token = None
        self._callback = None

    @property
    def pending(self):
        return self._token is not None

    def is_active(self, token):
        return token is not None and token == self._token

    def schedule(self, delay_ms, callback):
        """
        run callback after delay_ms unless superseded first
        """
        self.cancel()
        self._serial += 1
        self._token = TimerToken(self._serial, delay_ms)
        self._callback = callback
        self._timer.start(delay_ms)
        logger.debug("scheduled action #%d in %d ms", self._serial, delay_ms)
        return self._token

    def cancel(self):
        # drop the pending action, if any
        if self._token is None:
            return
        token = self._token
        self._timer.stop()
        self._token = None; self._callback = None
        logger.debug("cancelled action #%d", token.serial)
        self.cancelled.emit(token)

    @Slot()
    def _on_timeout(self):
        token, callback = self._token, self._callback
        if token is None:
            return  # stopped between timeout and delivery
        self._token = None; self._callback = None
        callback()
        self.fired.emit(token)
