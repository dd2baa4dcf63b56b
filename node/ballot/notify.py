# event log endpoints + best-effort push to observers
import asyncio
import logging
from typing import List, Optional

import httpx
from fastapi import APIRouter, Depends, Query

from .config import NODE_ID
from .deps import get_election
from .models import Event, EventLog
from .state import ElectionState

logger = logging.getLogger(__name__)

router = APIRouter()


class Notifier:
    """
    Forwards election events to observer URLs in emission order.

    Registered as a listener on the election state: the listener only
    enqueues, a single background task (see `run`) does the HTTP work so the
    lock is never held across network calls. Delivery is best effort: an
    observer that misses events can catch up with GET /events?after=<seq>.
    """

    def __init__(self, observers: List[str], timeout: float = 1.5, queue_size: int = 1000):
        self.observers = list(observers)
        self.timeout = timeout
        self.queue_size = queue_size
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._queue: Optional[asyncio.Queue] = None
        self._task: Optional[asyncio.Task] = None

    def __call__(self, event: Event) -> None:
        loop, queue = self._loop, self._queue
        if not self.observers or loop is None:
            return
        # listeners run on whatever thread applied the mutation
        loop.call_soon_threadsafe(self._enqueue, queue, event)

    def _enqueue(self, queue: asyncio.Queue, event: Event) -> None:
        try:
            queue.put_nowait(event)
        except asyncio.QueueFull:
            logger.warning("event %d dropped for observers, catch up via /events", event.seq)

    def start(self) -> None:
        if not self.observers:
            return
        self._queue = asyncio.Queue(maxsize=self.queue_size)
        self._loop = asyncio.get_running_loop()
        self._task = asyncio.create_task(self.run())

    async def stop(self) -> None:
        self._loop = None
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None

    async def run(self) -> None:
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            while True:
                event = await self._queue.get()
                await self.deliver(client, event)

    async def deliver(self, client: httpx.AsyncClient, event: Event) -> List[str]:
        """
        POST one event to every observer. Returns the observers that
        accepted it.
        """
        payload = {"node": NODE_ID, **event.model_dump()}
        tasks = [
            client.post(f"{observer}/events", json=payload)
            for observer in self.observers
        ]
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        delivered = []
        for observer, resp in zip(self.observers, responses):
            if isinstance(resp, Exception):
                logger.warning("event %d not delivered to %s: %s", event.seq, observer, resp)
            elif resp.is_error:
                logger.warning(
                    "event %d rejected by %s: HTTP %d", event.seq, observer, resp.status_code
                )
            else:
                delivered.append(observer)
        return delivered


@router.get("/events")
def list_events(
    after: int = Query(0, ge=0),
    election: ElectionState = Depends(get_election),
) -> EventLog:
    with election.lock:
        return EventLog(events=election.events_after(after), last_seq=election.last_seq())
