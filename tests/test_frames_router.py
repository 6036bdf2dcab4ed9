from __future__ import annotations

from decimal import Decimal

from fastapi.testclient import TestClient

from app.api.deps import get_resolve_coin_stats_use_case
from app.domain.entities.coin_stats import CoinStats
from app.domain.entities.resolution import ResolutionError, ResolutionErrorKind
from app.main import app


PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class FakeResolveCoinStatsUseCase:
    def __init__(self, result):
        self._result = result
        self.commands = []

    def execute(self, command):
        self.commands.append(command)
        return self._result


def _stats() -> CoinStats:
    return CoinStats(
        price=Decimal("1"),
        volume_24h=Decimal("100.5"),
        liquidity=Decimal("1005"),
        holder_count=1234,
        market_cap=Decimal("2000000"),
    )


def _client(result) -> tuple[TestClient, FakeResolveCoinStatsUseCase]:
    fake = FakeResolveCoinStatsUseCase(result)
    app.dependency_overrides[get_resolve_coin_stats_use_case] = lambda: fake
    return TestClient(app), fake


def test_initial_frame_points_to_stats_action():
    client, _ = _client(_stats())
    response = client.get("/")

    assert response.status_code == 200
    assert 'content="vNext"' in response.text
    assert 'content="http://testserver/welcome-image"' in response.text
    assert 'content="Enter coin symbol"' in response.text
    assert 'content="http://testserver/stats"' in response.text

    app.dependency_overrides.clear()


def test_stats_action_returns_stats_frame():
    client, fake = _client(_stats())
    response = client.post("/stats", json={"untrustedData": {"inputText": " zorb "}})

    assert response.status_code == 200
    assert 'content="http://testserver/image/ZORB"' in response.text
    assert 'content="Back"' in response.text
    assert fake.commands[0].symbol == "zorb"

    app.dependency_overrides.clear()


def test_stats_action_without_symbol_returns_error_frame():
    client, fake = _client(_stats())
    response = client.post("/stats", json={"untrustedData": {}})

    assert response.status_code == 400
    assert "error-image?message=No%20symbol%20provided" in response.text
    assert 'content="Try Again"' in response.text
    assert fake.commands == []

    app.dependency_overrides.clear()


def test_stats_action_maps_symbol_not_found_to_404():
    client, _ = _client(ResolutionError(kind=ResolutionErrorKind.SYMBOL_NOT_FOUND, symbol="NOPE"))
    response = client.post("/stats", json={"untrustedData": {"inputText": "nope"}})

    assert response.status_code == 404
    assert "Coin%20%22NOPE%22%20not%20found" in response.text

    app.dependency_overrides.clear()


def test_upstream_error_does_not_leak_details():
    client, _ = _client(
        ResolutionError(
            kind=ResolutionErrorKind.UPSTREAM,
            symbol="ZORB",
            detail="GraphQL request failed: secret-host:5432 refused",
        )
    )
    response = client.get("/image/ZORB")

    assert response.status_code == 502
    assert "secret-host" not in response.text
    assert response.text == "Data source unavailable, please try again later"

    app.dependency_overrides.clear()


def test_stats_image_renders_png():
    client, _ = _client(_stats())
    response = client.get("/image/zorb")

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content.startswith(PNG_SIGNATURE)

    app.dependency_overrides.clear()


def test_welcome_and_error_images_render_png():
    client, _ = _client(_stats())

    welcome = client.get("/welcome-image")
    error = client.get("/error-image", params={"message": "Coin not found"})

    assert welcome.content.startswith(PNG_SIGNATURE)
    assert error.content.startswith(PNG_SIGNATURE)

    app.dependency_overrides.clear()


def test_json_stats_endpoint_returns_decimal_strings():
    client, fake = _client(_stats())
    response = client.get("/v1/coins/zorb/stats")

    assert response.status_code == 200
    payload = response.json()
    assert payload["symbol"] == "ZORB"
    assert payload["price"] == "1"
    assert payload["volume_24h"] == "100.5"
    assert payload["volume_is_estimate"] is True
    assert payload["holder_count"] == 1234
    assert fake.commands[0].symbol == "ZORB"

    app.dependency_overrides.clear()


def test_json_stats_endpoint_maps_pool_not_found():
    client, _ = _client(ResolutionError(kind=ResolutionErrorKind.POOL_NOT_FOUND, symbol="ZORB"))
    response = client.get("/v1/coins/zorb/stats")

    assert response.status_code == 404
    assert response.json()["detail"] == 'No liquidity pool found for "ZORB"'

    app.dependency_overrides.clear()


def test_json_stats_endpoint_maps_chain_read_error():
    client, _ = _client(ResolutionError(kind=ResolutionErrorKind.CHAIN_READ, symbol="ZORB"))
    response = client.get("/v1/coins/zorb/stats")

    assert response.status_code == 502

    app.dependency_overrides.clear()


def test_stats_image_with_blank_symbol_returns_400():
    client, fake = _client(_stats())
    response = client.get("/image/%20")

    assert response.status_code == 400
    assert response.text == "No symbol provided"
    assert fake.commands == []

    app.dependency_overrides.clear()
