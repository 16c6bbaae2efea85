from typing import Any, Callable

from fastapi.testclient import TestClient
import pytest

from test.route_constant import ADMIN_OVERVIEW
from test.shared.utils import create_product
from test.util_constant import PUBLIC_BASE_URL, TEST_SELLER_USERNAME


@pytest.mark.integration
class TestAdminOverview:
    def test_requires_session(self, client: TestClient):
        assert client.get(ADMIN_OVERVIEW).status_code == 401

    def test_regular_seller_is_forbidden(self, client: TestClient, seller: dict[str, Any]):
        response = client.get(ADMIN_OVERVIEW)

        assert response.status_code == 403
        assert response.json()['detail'] == 'Acesso restrito a administradores'

    def test_admin_sees_all_sellers_and_stats(
        self,
        client: TestClient,
        seller: dict[str, Any],
        admin: Callable[[], dict[str, Any]],
    ):
        # Arrange
        create_product(client, name='Bolo')
        create_product(client, name='Torta')
        admin()

        # Act
        response = client.get(ADMIN_OVERVIEW)

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body['stats'] == {
            'total_sellers': 2,
            'total_products': 2,
            'sellers_with_products': 1,
            'sellers_with_whatsapp': 1,
            'sellers_with_products_percent': 50,
            'sellers_with_whatsapp_percent': 50,
            'average_products_per_seller': 1,
        }
        by_username = {item['username']: item for item in body['sellers']}
        assert by_username[TEST_SELLER_USERNAME]['product_count'] == 2
        assert by_username[TEST_SELLER_USERNAME]['catalog_url'] == (
            f'{PUBLIC_BASE_URL}/{TEST_SELLER_USERNAME}'
        )
