from collections import Counter
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List

import attrs

from src.service.catalog.domain.entity.product_entity import ProductEntity
from src.service.catalog.domain.entity.seller_entity import SellerEntity


@attrs.frozen
class SellerOverview:
    seller: SellerEntity
    product_count: int


@attrs.frozen
class AdminStats:
    total_sellers: int
    total_products: int
    sellers_with_products: int
    sellers_with_whatsapp: int
    sellers_with_products_percent: int
    sellers_with_whatsapp_percent: int
    average_products_per_seller: int


@attrs.frozen
class AdminOverview:
    sellers: List[SellerOverview]
    stats: AdminStats


def _round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def _percent(part: int, whole: int) -> int:
    if not whole:
        return 0
    return _round_half_up(Decimal(part) * 100 / Decimal(whole))


def aggregate_admin_overview(
    sellers: Iterable[SellerEntity], products: Iterable[ProductEntity]
) -> AdminOverview:
    """
    Group product counts by owning seller and compute the admin dashboard totals.

    Sellers keep the order they were given in. Products whose owner is not in
    `sellers` are not counted.
    """
    counts = Counter(product.seller_id for product in products)
    overview = [
        SellerOverview(seller=seller, product_count=counts.get(seller.id, 0)) for seller in sellers
    ]

    total_sellers = len(overview)
    total_products = sum(item.product_count for item in overview)
    with_products = sum(1 for item in overview if item.product_count > 0)
    with_whatsapp = sum(1 for item in overview if item.seller.has_whatsapp)

    return AdminOverview(
        sellers=overview,
        stats=AdminStats(
            total_sellers=total_sellers,
            total_products=total_products,
            sellers_with_products=with_products,
            sellers_with_whatsapp=with_whatsapp,
            sellers_with_products_percent=_percent(with_products, total_sellers),
            sellers_with_whatsapp_percent=_percent(with_whatsapp, total_sellers),
            average_products_per_seller=(
                _round_half_up(Decimal(total_products) / Decimal(total_sellers))
                if total_sellers
                else 0
            ),
        ),
    )
