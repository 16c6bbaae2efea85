"""
In-memory Product Change Broadcaster

Pushes product change events from the product use cases to the seller's
open SSE connections within the same process.
"""

from typing import Dict, List

from anyio import WouldBlock, create_memory_object_stream
from anyio.streams.memory import MemoryObjectReceiveStream, MemoryObjectSendStream

from src.platform.logging.loguru_io import Logger


class InMemoryProductBroadcasterImpl:
    """
    In-memory pub/sub keyed by seller id

    - Each subscriber gets its own memory object stream (buffer: 10 events)
    - A full buffer drops the event for that subscriber only (slow consumer)
    - Empty subscriber lists are removed on unsubscribe
    """

    def __init__(self, max_buffer_size: int = 10) -> None:
        self._max_buffer_size = max_buffer_size
        self._subscribers: Dict[
            int, List[tuple[MemoryObjectSendStream[dict], MemoryObjectReceiveStream[dict]]]
        ] = {}

    async def subscribe(self, *, seller_id: int) -> MemoryObjectReceiveStream[dict]:
        send_stream, receive_stream = create_memory_object_stream[dict](
            max_buffer_size=self._max_buffer_size
        )
        self._subscribers.setdefault(seller_id, []).append((send_stream, receive_stream))

        Logger.base.debug(
            f'📡 [BROADCASTER] Subscribed to seller {seller_id} '
            f'(total subscribers: {len(self._subscribers[seller_id])})'
        )
        return receive_stream

    async def broadcast(self, *, seller_id: int, event_data: dict) -> None:
        subscribers = self._subscribers.get(seller_id)
        if not subscribers:
            Logger.base.debug(f'📡 [BROADCASTER] No subscribers for seller {seller_id}')
            return

        delivered = 0
        dropped = 0
        for send_stream, _ in subscribers:
            try:
                send_stream.send_nowait(event_data)
                delivered += 1
            except WouldBlock:
                dropped += 1
                Logger.base.warning(
                    f'⚠️ [BROADCASTER] Stream full for seller {seller_id}, '
                    f'dropping event (type={event_data.get("event_type")})'
                )

        Logger.base.info(
            f'📡 [BROADCASTER] Broadcast to seller {seller_id}: '
            f'delivered={delivered}, dropped={dropped}'
        )

    async def unsubscribe(self, *, seller_id: int, stream: MemoryObjectReceiveStream[dict]) -> None:
        subscribers = self._subscribers.get(seller_id)
        if subscribers is None:
            return

        for i, (send_stream, receive_stream) in enumerate(subscribers):
            if receive_stream is stream:
                await send_stream.aclose()
                await receive_stream.aclose()
                subscribers.pop(i)
                Logger.base.debug(
                    f'📡 [BROADCASTER] Unsubscribed from seller {seller_id} '
                    f'(remaining: {len(subscribers)})'
                )
                break

        if not subscribers:
            del self._subscribers[seller_id]

    def subscriber_count(self, seller_id: int) -> int:
        return len(self._subscribers.get(seller_id, []))
