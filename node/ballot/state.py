# in-memory election state + event log
import logging
import threading
from typing import Callable, Dict, List

from .models import Event

logger = logging.getLogger(__name__)

Listener = Callable[[Event], None]


class ElectionState:
    """
    Everything the registry, the ledger and the tally share.

    candidates[id] = {"name": str, "vote_count": int}, ids 1..candidates_count
    voters[identity] = {"voted": True, "chosen_candidate_id": int}

    Only identities that have voted are stored; a missing identity is a voter
    that has not voted yet. All reads and writes go through `lock`, so every
    mutation is applied as a whole and in a single total order.
    """

    def __init__(self, admin: str):
        self._admin = admin
        self.lock = threading.RLock()
        self.candidates: Dict[int, Dict] = {}
        self.candidates_count = 0
        self.voters: Dict[str, Dict] = {}
        self.events: List[Event] = []
        self._listeners: List[Listener] = []

    @property
    def admin(self) -> str:
        return self._admin

    def add_listener(self, listener: Listener) -> None:
        with self.lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        with self.lock:
            self._listeners.remove(listener)

    def emit(self, event_type, **fields) -> Event:
        """
        Append an event and hand it to the listeners. Must be called with
        `lock` held, after the mutation it describes has been applied.
        """
        event = event_type(seq=len(self.events) + 1, **fields)
        self.events.append(event)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                # the mutation is already applied; a broken observer must not
                # turn it into a reported failure
                logger.exception("listener %r failed on event %d", listener, event.seq)
        return event

    def events_after(self, seq: int) -> List[Event]:
        with self.lock:
            return list(self.events[max(seq, 0):])

    def last_seq(self) -> int:
        with self.lock:
            return len(self.events)
