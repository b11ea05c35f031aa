"""In-process store of view state controllers, one per browser session.

Least recently used sessions are dropped once `max_size` is reached, so
clients that never send the cookie back cannot grow it without bound.
"""
from collections import OrderedDict
import logging

from domain.view_state import ViewStateController


logger = logging.getLogger(__name__)


MAX_SESSIONS = 1000


class Sessions:
    def __init__(self, *, max_size: int = MAX_SESSIONS) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1.")
        self.max_size = max_size
        self._controllers: OrderedDict[str, ViewStateController] = OrderedDict()

    def __len__(self) -> int:
        return len(self._controllers)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._controllers

    def get(self, session_id: str | None) -> ViewStateController | None:
        if session_id is None or session_id not in self._controllers:
            return None
        self._controllers.move_to_end(session_id)
        return self._controllers[session_id]

    def add(self, session_id: str, controller: ViewStateController) -> None:
        self._controllers[session_id] = controller
        self._controllers.move_to_end(session_id)
        while len(self._controllers) > self.max_size:
            dropped, _ = self._controllers.popitem(last=False)
            logger.debug("Dropped session %s", dropped)
