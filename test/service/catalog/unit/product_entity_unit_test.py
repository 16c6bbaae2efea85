from decimal import Decimal

import attrs
import pytest

from src.platform.exception.exceptions import ForbiddenError, ValidationError
from src.service.catalog.domain.dashboard_domain import compute_total_value, format_price
from src.service.catalog.domain.entity.product_entity import ProductEntity, parse_price


@pytest.mark.unit
class TestParsePrice:
    @pytest.mark.parametrize(
        'raw,expected',
        [('25', Decimal('25')), ('25.90', Decimal('25.90')), (' 25,90 ', Decimal('25.90'))],
    )
    def test_parses_decimal_text(self, raw: str, expected: Decimal):
        assert parse_price(raw) == expected

    @pytest.mark.parametrize('raw', ['', 'abc', 'NaN', 'Infinity', '1.2.3'])
    def test_returns_none_for_non_numbers(self, raw: str):
        assert parse_price(raw) is None


@pytest.mark.unit
class TestProductEntity:
    def test_create_strips_fields(self):
        product = ProductEntity.create(
            seller_id=1, name='  Bolo ', price=' 10 ', description=' Doce ', service_notes='  '
        )

        assert product.name == 'Bolo'
        assert product.price == '10'
        assert product.description == 'Doce'
        assert product.service_notes is None

    def test_name_is_required(self):
        with pytest.raises(ValidationError) as exc_info:
            ProductEntity.create(seller_id=1, name=' ', price='10')

        assert exc_info.value.message == 'Preencha nome e preço do produto'

    @pytest.mark.parametrize('price', ['abc', '-1'])
    def test_price_must_be_non_negative_number(self, price: str):
        with pytest.raises(ValidationError) as exc_info:
            ProductEntity.create(seller_id=1, name='Bolo', price=price)

        assert exc_info.value.field == 'price'

    def test_evolve_revalidates(self):
        product = ProductEntity.create(seller_id=1, name='Bolo', price='10')

        with pytest.raises(ValidationError):
            attrs.evolve(product, price='grátis')

    def test_ensure_owned_by(self):
        product = ProductEntity.create(seller_id=1, name='Bolo', price='10')

        product.ensure_owned_by(1)
        with pytest.raises(ForbiddenError):
            product.ensure_owned_by(2)


@pytest.mark.unit
class TestDashboardTotal:
    def test_sums_prices_with_two_decimals(self):
        products = [
            ProductEntity(seller_id=1, name='A', price='10.50'),
            ProductEntity(seller_id=1, name='B', price='4,25'),
        ]

        total = compute_total_value(products)

        assert total == Decimal('14.75')
        assert format_price(total) == '14.75'

    def test_unparseable_stored_price_counts_as_zero(self):
        with attrs.validators.disabled():
            broken = ProductEntity(seller_id=1, name='A', price='sob consulta')
        products = [broken, ProductEntity(seller_id=1, name='B', price='3')]

        assert compute_total_value(products) == Decimal('3.00')

    def test_empty_dashboard(self):
        assert format_price(compute_total_value([])) == '0.00'
