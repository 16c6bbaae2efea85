from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from src.service.catalog.domain.entity.product_entity import ProductEntity, parse_price


def compute_total_value(products: Iterable[ProductEntity]) -> Decimal:
    """Sum of product prices; prices that do not parse count as zero."""
    total = Decimal('0')
    for product in products:
        total += parse_price(product.price or '0') or Decimal('0')
    return total.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)


def format_price(value: Decimal) -> str:
    return f'{value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)}'


def count_with_image(products: Iterable[ProductEntity]) -> int:
    return sum(1 for product in products if product.image_data)
