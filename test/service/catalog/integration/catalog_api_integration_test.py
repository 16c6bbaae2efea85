from typing import Any, Callable
from urllib.parse import unquote

from fastapi.testclient import TestClient
import pytest

from test.route_constant import CATALOG_GET, CATALOG_PRODUCT_GET
from test.shared.utils import create_product
from test.util_constant import PUBLIC_BASE_URL, TEST_SELLER_USERNAME


def _message_of(link: str) -> str:
    return unquote(link.split('?text=', 1)[1])


@pytest.mark.integration
class TestPublicCatalog:
    def test_catalog_with_whatsapp_links(self, client: TestClient, seller: dict[str, Any]):
        # Arrange
        create_product(client, name='Bolo de cenoura', price='25.90', description='Caseiro')
        client.cookies.clear()

        # Act
        response = client.get(CATALOG_GET.format(identifier='Loja_Da_Ana'))

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body['seller'] == {
            'username': TEST_SELLER_USERNAME,
            'display_name': 'Loja da Ana',
            'has_whatsapp': True,
        }
        assert body['catalog_url'] == f'{PUBLIC_BASE_URL}/{TEST_SELLER_USERNAME}'
        assert body['product_count'] == 1
        assert body['share']['title'] == 'Catálogo de Loja da Ana'

        product = body['products'][0]
        assert product['whatsapp_link'].startswith('https://wa.me/5511999998888?text=')
        message = _message_of(product['whatsapp_link'])
        assert '📦 *Produto:* Bolo de cenoura' in message
        assert '💰 *Preço:* R$ 25.90' in message
        assert message.endswith(f'🔗 Catálogo: {PUBLIC_BASE_URL}/{TEST_SELLER_USERNAME}')
        assert product['share_text'] == 'Bolo de cenoura - R$ 25.90\nCaseiro'

    def test_seller_without_phone_gets_contact_picker_links(
        self, client: TestClient, another_seller: Callable[[], dict[str, Any]]
    ):
        other = another_seller()
        create_product(client, name='Brigadeiro', price='3')

        body = client.get(CATALOG_GET.format(identifier=other['username'])).json()

        assert body['seller']['has_whatsapp'] is False
        # No display name: the username stands in
        assert body['seller']['display_name'] == other['username']
        assert body['products'][0]['whatsapp_link'].startswith('https://wa.me/?text=')

    def test_empty_catalog(self, client: TestClient, seller: dict[str, Any]):
        response = client.get(CATALOG_GET.format(identifier=TEST_SELLER_USERNAME))

        assert response.status_code == 200
        assert response.json()['products'] == []
        assert response.json()['product_count'] == 0

    def test_unknown_seller(self, client: TestClient):
        response = client.get(CATALOG_GET.format(identifier='ninguem'))

        assert response.status_code == 404
        assert response.json() == {
            'detail': 'O usuário @ninguem não existe ou não possui um catálogo público.'
        }


@pytest.mark.integration
class TestCatalogProductDetail:
    def test_product_detail_inquiry_link(self, client: TestClient, seller: dict[str, Any]):
        product = create_product(client, name='Bolo')
        client.cookies.clear()

        response = client.get(
            CATALOG_PRODUCT_GET.format(identifier=TEST_SELLER_USERNAME, product_id=product['id'])
        )

        assert response.status_code == 200
        link = response.json()['product']['whatsapp_link']
        assert link.startswith('https://wa.me/5511999998888?text=')
        assert _message_of(link) == 'Olá Loja da Ana, tenho interesse no produto "Bolo".'

    def test_product_through_another_catalog_is_not_found(
        self,
        client: TestClient,
        seller: dict[str, Any],
        another_seller: Callable[[], dict[str, Any]],
    ):
        product = create_product(client)
        other = another_seller()

        response = client.get(
            CATALOG_PRODUCT_GET.format(identifier=other['username'], product_id=product['id'])
        )

        assert response.status_code == 404
