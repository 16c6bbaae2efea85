"""
Product change stream over a real server

TestClient buffers the whole response, so the stream is read from a spawned
uvicorn process that shares the test database.
"""

import threading
import time
from typing import Any

from fastapi.testclient import TestClient
import httpx
import pytest

from test.route_constant import PRODUCT_SSE
from test.shared.http_server import read_sse_events
from test.shared.utils import create_product


def _session_cookies(client: TestClient) -> dict[str, str]:
    return {cookie.name: cookie.value for cookie in client.cookies.jar}


def _wait_for(events: list[dict[str, Any]], count: int, timeout: float = 5.0) -> None:
    deadline = time.monotonic() + timeout
    while len(events) < count and time.monotonic() < deadline:
        time.sleep(0.05)


@pytest.mark.integration
class TestProductChangeStream:
    def test_requires_session(self, http_server: str):
        response = httpx.get(f'{http_server}{PRODUCT_SSE}', timeout=5.0)

        assert response.status_code == 401

    def test_streams_own_product_changes(
        self, client: TestClient, seller: dict[str, Any], http_server: str
    ):
        # Given: the seller is subscribed
        cookies = _session_cookies(client)
        events: list[dict[str, Any]] = []
        thread = threading.Thread(
            target=read_sse_events,
            args=(f'{http_server}{PRODUCT_SSE}', cookies, events, 2),
            daemon=True,
        )
        thread.start()
        _wait_for(events, 1)
        assert events and events[0]['event'] == 'connected'
        assert events[0]['data'] == {'seller_id': seller['id']}

        # When: a product is created on the same server
        with httpx.Client(base_url=http_server, cookies=cookies, timeout=5.0) as server_client:
            product = create_product(server_client, name='Brigadeiro', price='3.50')
        thread.join(timeout=5)

        # Then
        assert len(events) == 2
        assert events[1]['event'] == 'product_change'
        assert events[1]['data'] == {
            'event_type': 'created',
            'seller_id': seller['id'],
            'product_id': product['id'],
            'name': 'Brigadeiro',
        }
