from typing import Any

from fastapi.testclient import TestClient
import httpx

from test.route_constant import PRODUCT_BASE, SELLER_BASE, SELLER_LOGIN
from test.util_constant import DEFAULT_PASSWORD


def register_seller(
    client: TestClient,
    *,
    username: str,
    email: str,
    password: str = DEFAULT_PASSWORD,
    phone: str | None = None,
    display_name: str | None = None,
) -> dict[str, Any]:
    """Register through the API; the client keeps the new seller's session cookie."""
    payload: dict[str, Any] = {'username': username, 'email': email, 'password': password}
    if phone is not None:
        payload['phone'] = phone
    if display_name is not None:
        payload['display_name'] = display_name
    response = client.post(SELLER_BASE, json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def login_seller(client: TestClient, email: str, password: str = DEFAULT_PASSWORD) -> None:
    client.cookies.clear()
    response = client.post(SELLER_LOGIN, json={'email': email, 'password': password})
    assert response.status_code == 200, response.text


def create_product(client: httpx.Client, **overrides: Any) -> dict[str, Any]:
    payload = {
        'name': 'Bolo de cenoura',
        'price': '25.90',
        'description': 'Com cobertura de chocolate',
    } | overrides
    response = client.post(PRODUCT_BASE, json=payload)
    assert response.status_code == 201, response.text
    return response.json()
