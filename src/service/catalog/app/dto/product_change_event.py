from enum import StrEnum
from typing import Any, Optional

import attrs


class ProductChangeAction(StrEnum):
    CREATED = 'created'
    UPDATED = 'updated'
    DELETED = 'deleted'
    IMAGE_UPDATED = 'image_updated'


@attrs.define(frozen=True)
class ProductChangeEvent:
    action: ProductChangeAction
    seller_id: int
    product_id: int
    name: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            'event_type': self.action.value,
            'seller_id': self.seller_id,
            'product_id': self.product_id,
            'name': self.name,
        }
