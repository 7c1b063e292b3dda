import logging
import threading
from typing import Callable

from finance_dashboard.core.dashboard import new_session
from finance_dashboard.models.dashboard import DashboardState

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Holds the single in-memory dashboard session.
    Nothing is written to disk; a process restart starts a fresh session.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._state = new_session()

    @property
    def state(self) -> DashboardState:
        return self._state

    def apply(self, update: Callable[[DashboardState], DashboardState]) -> DashboardState:
        """
        Run one update function against the current state and keep its
        result. If the update raises, the stored state stays as it was.
        """
        with self._lock:
            self._state = update(self._state)
            return self._state

    def reset(self) -> DashboardState:
        with self._lock:
            self._state = new_session()
        logger.info("Dashboard session reset")
        return self._state


store = SessionStore()


def get_store() -> SessionStore:
    return store
