from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Optional

import attrs

from src.platform.exception.exceptions import ForbiddenError, ValidationError


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValidationError('Preencha nome e preço do produto', field=attribute.name)


def parse_price(price: str) -> Optional[Decimal]:
    """Parse a price typed as text ("25", "25.90", "25,90"); None when it is not a number."""
    try:
        value = Decimal(price.strip().replace(',', '.'))
    except (InvalidOperation, AttributeError):
        return None
    if not value.is_finite():
        return None
    return value


def _validate_price(instance: object, attribute: attrs.Attribute, value: str) -> None:
    _validate_non_empty_string(instance, attribute, value)
    parsed = parse_price(value)
    if parsed is None or parsed < 0:
        raise ValidationError('Preço inválido', field=attribute.name)


@attrs.define
class ProductEntity:
    seller_id: int
    name: str = attrs.field(validator=_validate_non_empty_string)
    price: str = attrs.field(validator=_validate_price)
    description: str = ''
    service_notes: Optional[str] = None
    image_data: Optional[str] = attrs.field(default=None, repr=False)  # data URL, can be large
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        seller_id: int,
        name: str,
        price: str,
        description: str = '',
        service_notes: Optional[str] = None,
        image_data: Optional[str] = None,
    ) -> 'ProductEntity':
        return cls(
            seller_id=seller_id,
            name=name.strip(),
            price=price.strip(),
            description=description.strip(),
            service_notes=service_notes.strip() if service_notes else None,
            image_data=image_data,
        )

    def ensure_owned_by(self, seller_id: int) -> None:
        if self.seller_id != seller_id:
            raise ForbiddenError('Apenas o dono pode alterar este produto')

    @property
    def price_value(self) -> Decimal:
        return parse_price(self.price) or Decimal('0')
