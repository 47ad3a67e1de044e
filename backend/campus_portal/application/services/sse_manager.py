"""SSE Manager — in-process event broadcaster for toast notifications."""

import asyncio
import json
import logging
from collections.abc import AsyncGenerator
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_QUEUE_SIZE = 100


def format_sse(event_type: str, data: dict[str, Any]) -> str:
    """Render one Server-Sent Events frame."""
    return f"event: {event_type}\ndata: {json.dumps(data, ensure_ascii=False)}\n\n"


class SSEManager:
    """Manages SSE client connections and broadcasts events to all of them.

    Each connected client gets its own bounded asyncio.Queue. Publishing
    pushes the frame to every queue; a client whose queue is full is
    considered stalled and disconnected.
    """

    def __init__(self, max_queue_size: int = DEFAULT_QUEUE_SIZE) -> None:
        self._max_queue_size = max_queue_size
        self._queues: list[asyncio.Queue[str | None]] = []

    async def subscribe(self) -> AsyncGenerator[str, None]:
        """Subscribe to SSE events. Yields formatted SSE strings.

        The generator automatically unsubscribes when the client disconnects.
        """
        queue: asyncio.Queue[str | None] = asyncio.Queue(maxsize=self._max_queue_size)
        self._queues.append(queue)
        try:
            while True:
                event = await queue.get()
                if event is None:
                    break
                yield event
        finally:
            if queue in self._queues:
                self._queues.remove(queue)

    def publish(self, event_type: str, data: dict[str, Any]) -> int:
        """Push an event to all connected clients without awaiting.

        Returns the number of clients the event was delivered to.
        """
        sse_message = format_sse(event_type, data)
        delivered = 0
        stalled: list[asyncio.Queue[str | None]] = []

        for queue in self._queues:
            try:
                queue.put_nowait(sse_message)
                delivered += 1
            except asyncio.QueueFull:
                stalled.append(queue)
                logger.warning("SSE client queue full — disconnecting")

        for queue in stalled:
            self._queues.remove(queue)
            # Make room for the sentinel so the subscriber loop terminates
            while not queue.empty():
                queue.get_nowait()
            queue.put_nowait(None)

        return delivered

    async def shutdown(self) -> None:
        """Disconnect all connected clients."""
        for queue in self._queues:
            while queue.full():
                queue.get_nowait()
            queue.put_nowait(None)
        self._queues.clear()

    @property
    def client_count(self) -> int:
        return len(self._queues)
