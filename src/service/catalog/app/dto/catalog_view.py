"""Catalog view DTO."""

from typing import List

import attrs

from src.service.catalog.domain.entity.product_entity import ProductEntity
from src.service.catalog.domain.entity.seller_entity import SellerEntity


@attrs.define(frozen=True)
class CatalogView:
    """
    A seller together with that seller's products, assembled per request.

    Never stored or cached; every lookup reads the current rows.
    """

    seller: SellerEntity
    products: List[ProductEntity]

    @property
    def product_count(self) -> int:
        return len(self.products)
