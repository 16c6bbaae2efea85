from typing import Any

from fastapi.testclient import TestClient
import pytest

from test.route_constant import (
    SELLER_AVAILABILITY,
    SELLER_BASE,
    SELLER_LOGIN,
    SELLER_LOGOUT,
)
from test.shared.utils import login_seller, register_seller
from test.util_constant import (
    DEFAULT_PASSWORD,
    PUBLIC_BASE_URL,
    TEST_SELLER_EMAIL,
    TEST_SELLER_USERNAME,
)


@pytest.mark.integration
class TestRegisterSeller:
    def test_register_normalizes_and_signs_in(self, client: TestClient):
        # Act
        seller = register_seller(
            client,
            username='Loja Da Ana',
            email=TEST_SELLER_EMAIL,
            phone='(11) 99999-8888',
            display_name='Loja da Ana',
        )

        # Assert
        assert seller['username'] == 'lojadaana'
        assert seller['phone'] == '11999998888'
        assert seller['catalog_url'] == f'{PUBLIC_BASE_URL}/lojadaana'

        me = client.get(SELLER_BASE)
        assert me.status_code == 200
        assert me.json()['id'] == seller['id']

    def test_short_username_is_rejected_locally(self, client: TestClient):
        response = client.post(
            SELLER_BASE,
            json={'username': 'ab', 'email': TEST_SELLER_EMAIL, 'password': DEFAULT_PASSWORD},
        )

        assert response.status_code == 400
        assert response.json() == {
            'detail': 'Username deve ter pelo menos 3 caracteres',
            'field': 'username',
        }

    def test_taken_username(self, client: TestClient, seller: dict[str, Any]):
        client.cookies.clear()

        response = client.post(
            SELLER_BASE,
            json={
                'username': TEST_SELLER_USERNAME.upper(),
                'email': 'outra@catalogo.com.br',
                'password': DEFAULT_PASSWORD,
            },
        )

        assert response.status_code == 409
        assert response.json()['field'] == 'username'

    def test_email_in_use(self, client: TestClient, seller: dict[str, Any]):
        client.cookies.clear()

        response = client.post(
            SELLER_BASE,
            json={'username': 'outra_loja', 'email': TEST_SELLER_EMAIL, 'password': DEFAULT_PASSWORD},
        )

        assert response.status_code == 409
        assert response.json() == {'detail': 'Este email já está em uso', 'field': 'email'}

    def test_invalid_email(self, client: TestClient):
        response = client.post(
            SELLER_BASE,
            json={'username': 'loja_nova', 'email': 'sem-arroba', 'password': DEFAULT_PASSWORD},
        )

        assert response.status_code == 400
        assert response.json()['detail'] == 'Email inválido'


@pytest.mark.integration
class TestSellerSession:
    def test_login_and_logout(self, client: TestClient, seller: dict[str, Any]):
        # Arrange
        client.cookies.clear()
        assert client.get(SELLER_BASE).status_code == 401

        # Act
        login_seller(client, TEST_SELLER_EMAIL)

        # Assert
        assert client.get(SELLER_BASE).json()['username'] == TEST_SELLER_USERNAME

        assert client.post(SELLER_LOGOUT).status_code == 204
        client.cookies.clear()
        assert client.get(SELLER_BASE).status_code == 401

    def test_wrong_password_and_unknown_email_look_the_same(
        self, client: TestClient, seller: dict[str, Any]
    ):
        client.cookies.clear()

        wrong_password = client.post(
            SELLER_LOGIN, json={'email': TEST_SELLER_EMAIL, 'password': 'errada'}
        )
        unknown_email = client.post(
            SELLER_LOGIN, json={'email': 'ninguem@catalogo.com.br', 'password': 'errada'}
        )

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json() == {
            'detail': 'Email ou senha incorretos'
        }

    def test_repeated_failures_lock_the_email(self, client: TestClient, seller: dict[str, Any]):
        client.cookies.clear()
        # LOGIN_MAX_ATTEMPTS=3 in the test environment
        for _ in range(3):
            client.post(SELLER_LOGIN, json={'email': TEST_SELLER_EMAIL, 'password': 'errada'})

        response = client.post(
            SELLER_LOGIN, json={'email': TEST_SELLER_EMAIL, 'password': DEFAULT_PASSWORD}
        )

        assert response.status_code == 429


@pytest.mark.integration
class TestIdentifierAvailability:
    def test_free_identifier(self, client: TestClient):
        response = client.get(SELLER_AVAILABILITY.format(identifier='Nova Loja'))

        assert response.status_code == 200
        assert response.json() == {'identifier': 'novaloja', 'available': True, 'reason': None}

    def test_taken_identifier(self, client: TestClient, seller: dict[str, Any]):
        response = client.get(SELLER_AVAILABILITY.format(identifier=TEST_SELLER_USERNAME))

        assert response.json()['available'] is False
