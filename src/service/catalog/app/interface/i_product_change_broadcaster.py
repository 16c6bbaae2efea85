"""
Product Change Broadcaster Interface

Optional push channel next to the request/response API: a seller's open
dashboard can listen for changes to that seller's products. Nothing in the
use cases depends on anyone listening.
"""

from typing import Protocol

from anyio.streams.memory import MemoryObjectReceiveStream


class IProductChangeBroadcaster(Protocol):
    async def subscribe(self, *, seller_id: int) -> MemoryObjectReceiveStream[dict]:
        ...

    async def broadcast(self, *, seller_id: int, event_data: dict) -> None:
        """Deliver to current subscribers; drop for subscribers whose buffer is full."""
        ...

    async def unsubscribe(self, *, seller_id: int, stream: MemoryObjectReceiveStream[dict]) -> None:
        ...
