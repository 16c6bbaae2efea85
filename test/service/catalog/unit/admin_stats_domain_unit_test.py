import pytest

from src.service.catalog.domain.admin_stats_domain import aggregate_admin_overview
from src.service.catalog.domain.entity.product_entity import ProductEntity
from src.service.catalog.domain.entity.seller_entity import SellerEntity


def _seller(seller_id: int, phone: str | None = None) -> SellerEntity:
    return SellerEntity(
        id=seller_id, username=f'seller_{seller_id}', email=f's{seller_id}@x.com', phone=phone
    )


def _product(seller_id: int, product_id: int) -> ProductEntity:
    return ProductEntity(seller_id=seller_id, name=f'P{product_id}', price='10', id=product_id)


@pytest.mark.unit
class TestAggregateAdminOverview:
    def test_counts_and_percentages(self):
        # Arrange
        sellers = [_seller(3, phone='11999998888'), _seller(2), _seller(1)]
        products = [_product(3, 1), _product(3, 2), _product(1, 3)]

        # Act
        overview = aggregate_admin_overview(sellers, products)

        # Assert
        assert [(item.seller.id, item.product_count) for item in overview.sellers] == [
            (3, 2),
            (2, 0),
            (1, 1),
        ]
        stats = overview.stats
        assert stats.total_sellers == 3
        assert stats.total_products == 3
        assert stats.sellers_with_products == 2
        assert stats.sellers_with_whatsapp == 1
        assert stats.sellers_with_products_percent == 67
        assert stats.sellers_with_whatsapp_percent == 33
        assert stats.average_products_per_seller == 1

    def test_average_rounds_half_up(self):
        sellers = [_seller(1), _seller(2)]
        products = [_product(1, i) for i in range(5)]

        stats = aggregate_admin_overview(sellers, products).stats

        assert stats.average_products_per_seller == 3
        assert stats.sellers_with_products_percent == 50

    def test_no_sellers_gives_zeroes(self):
        stats = aggregate_admin_overview([], []).stats

        assert stats.total_sellers == 0
        assert stats.sellers_with_products_percent == 0
        assert stats.sellers_with_whatsapp_percent == 0
        assert stats.average_products_per_seller == 0

    def test_products_of_unknown_sellers_are_ignored(self):
        overview = aggregate_admin_overview([_seller(1)], [_product(99, 1)])

        assert overview.stats.total_products == 0
        assert overview.sellers[0].product_count == 0
