from typing import Optional

from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.dto.product_change_event import ProductChangeEvent
from src.service.catalog.app.interface.i_product_change_broadcaster import (
    IProductChangeBroadcaster,
)


async def publish_product_change(
    broadcaster: Optional[IProductChangeBroadcaster], event: ProductChangeEvent
) -> None:
    """Push a change to the seller's listeners; a push failure never fails the write."""
    if broadcaster is None:
        return
    try:
        await broadcaster.broadcast(seller_id=event.seller_id, event_data=event.to_dict())
    except Exception as e:
        Logger.base.warning(
            f'⚠️ [PRODUCT_PUSH] Could not push {event.action} for product {event.product_id}: {e}'
        )
