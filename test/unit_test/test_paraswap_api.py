"""
Unit tests for the ParaSwap REST client

Requests are served by an httpx.MockTransport, no network access required.
"""

import json
import sys
from pathlib import Path

import httpx
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from paraswap_adapter.errors import AggregatorError, ErrorCode
from paraswap_adapter.protocols.paraswap import ParaSwapAPI
from paraswap_adapter.types import SwapSide

USDT = "0xdAC17F958D2ee523a2206206994597C13D831ec7"
WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
USER = "0x1234567890123456789012345678901234567890"
ROUTER = "0x6A000F20005980200259B80c5102003040001068"

PRICE_ROUTE = {
    "blockNumber": 19000000,
    "network": 1,
    "srcToken": USDT,
    "srcDecimals": 6,
    "srcAmount": "1000000",
    "destToken": WETH,
    "destDecimals": 18,
    "destAmount": "300000000000000",
    "side": "SELL",
    "contractAddress": ROUTER,
    "bestRoute": [],
}


def _make_api(handler, chain_id=1):
    return ParaSwapAPI(
        chain_id=chain_id,
        base_url="https://api.paraswap.test",
        api_version="6.2",
        partner="test-partner",
        transport=httpx.MockTransport(handler),
    )


class TestGetRate:
    """Tests for ParaSwapAPI.get_rate"""

    @pytest.mark.asyncio
    async def test_get_rate_request(self):
        """Query carries tokens, amount, side, network and version"""
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={"priceRoute": PRICE_ROUTE})

        async with _make_api(handler, chain_id=56) as api:
            route = await api.get_rate(USDT, WETH, 1_000_000, SwapSide.SELL)

        request = requests[0]
        assert request.method == "GET"
        assert request.url.path == "/prices"
        assert request.url.params["srcToken"] == USDT
        assert request.url.params["destToken"] == WETH
        assert request.url.params["amount"] == "1000000"
        assert request.url.params["side"] == "SELL"
        assert request.url.params["network"] == "56"
        assert request.url.params["version"] == "6.2"

        assert route.src_amount_int == 1_000_000
        assert route.dest_amount_int == 300_000_000_000_000
        assert route.side == SwapSide.SELL
        assert route.raw == PRICE_ROUTE

    @pytest.mark.asyncio
    async def test_get_rate_buy_side(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={"priceRoute": dict(PRICE_ROUTE, side="BUY")})

        async with _make_api(handler) as api:
            route = await api.get_rate(USDT, WETH, 10**15, SwapSide.BUY)

        assert requests[0].url.params["side"] == "BUY"
        assert requests[0].url.params["amount"] == "1000000000000000"
        assert route.side == SwapSide.BUY

    @pytest.mark.asyncio
    async def test_get_rate_http_error(self):
        """Error status becomes AggregatorError carrying the API message"""
        def handler(request):
            return httpx.Response(400, json={"error": "No routes found with enough liquidity"})

        async with _make_api(handler) as api:
            with pytest.raises(AggregatorError) as exc_info:
                await api.get_rate(USDT, WETH, 1)

        error = exc_info.value
        assert error.code == ErrorCode.AGGREGATOR_HTTP_ERROR
        assert error.status_code == 400
        assert error.endpoint == "/prices"
        assert "No routes found" in str(error)
        assert error.recoverable is False

    @pytest.mark.asyncio
    async def test_get_rate_server_error_text_body(self):
        def handler(request):
            return httpx.Response(502, text="Bad Gateway")

        async with _make_api(handler) as api:
            with pytest.raises(AggregatorError) as exc_info:
                await api.get_rate(USDT, WETH, 1)

        assert exc_info.value.status_code == 502
        assert exc_info.value.recoverable is True
        assert "Bad Gateway" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_get_rate_missing_price_route(self):
        def handler(request):
            return httpx.Response(200, json={"unexpected": True})

        async with _make_api(handler) as api:
            with pytest.raises(AggregatorError) as exc_info:
                await api.get_rate(USDT, WETH, 1)

        assert exc_info.value.code == ErrorCode.AGGREGATOR_INVALID_RESPONSE

    @pytest.mark.asyncio
    async def test_get_rate_non_json_body(self):
        def handler(request):
            return httpx.Response(200, text="<html>maintenance</html>")

        async with _make_api(handler) as api:
            with pytest.raises(AggregatorError) as exc_info:
                await api.get_rate(USDT, WETH, 1)

        assert exc_info.value.code == ErrorCode.AGGREGATOR_INVALID_RESPONSE


class TestBuildTx:
    """Tests for ParaSwapAPI.build_tx"""

    @pytest.fixture
    def route(self):
        from paraswap_adapter.types import PriceRoute
        return PriceRoute.from_api(PRICE_ROUTE)

    @pytest.mark.asyncio
    async def test_build_tx_request(self, route):
        """Body carries the route, user, receiver and partner"""
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={
                "from": USER,
                "to": ROUTER,
                "value": "0",
                "data": "0xe3ead59e",
                "chainId": 1,
            })

        receiver = "0x9999999999999999999999999999999999999999"
        async with _make_api(handler) as api:
            tx = await api.build_tx(route, user_address=USER, receiver=receiver, ignore_checks=True)

        request = requests[0]
        assert request.method == "POST"
        assert request.url.path == "/transactions/1"
        assert request.url.params["ignoreChecks"] == "true"

        body = json.loads(request.content)
        assert body["srcToken"] == USDT
        assert body["destToken"] == WETH
        assert body["srcAmount"] == "1000000"
        assert body["destAmount"] == "300000000000000"
        assert body["srcDecimals"] == 6
        assert body["destDecimals"] == 18
        assert body["priceRoute"] == PRICE_ROUTE
        assert body["userAddress"] == USER
        assert body["receiver"] == receiver
        assert body["partner"] == "test-partner"

        assert tx.to == ROUTER
        assert tx.value == 0
        assert tx.data == "0xe3ead59e"
        assert tx.from_ == USER

    @pytest.mark.asyncio
    async def test_build_tx_without_ignore_checks(self, route):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={"to": ROUTER, "data": "0x01", "value": "5"})

        async with _make_api(handler) as api:
            tx = await api.build_tx(route, user_address=USER)

        assert "ignoreChecks" not in requests[0].url.params
        assert "receiver" not in json.loads(requests[0].content)
        assert tx.value == 5

    @pytest.mark.asyncio
    async def test_build_tx_missing_fields(self, route):
        def handler(request):
            return httpx.Response(200, json={"to": ROUTER})

        async with _make_api(handler) as api:
            with pytest.raises(AggregatorError) as exc_info:
                await api.build_tx(route, user_address=USER)

        assert exc_info.value.code == ErrorCode.AGGREGATOR_INVALID_RESPONSE
        assert exc_info.value.endpoint == "/transactions/1"


def test_api_repr():
    api = ParaSwapAPI(chain_id=137, base_url="https://api.paraswap.test/")
    assert repr(api) == "ParaSwapAPI(chain_id=137, base_url=https://api.paraswap.test)"
    assert api.chain_id == 137


def test_api_requires_base_url(monkeypatch):
    """An empty base URL in config is reported as missing configuration"""
    from paraswap_adapter.config import config
    from paraswap_adapter.errors import ConfigurationError

    monkeypatch.setattr(config.paraswap, "base_url", "")

    with pytest.raises(ConfigurationError) as exc_info:
        ParaSwapAPI(chain_id=1)

    assert exc_info.value.code == ErrorCode.CONFIG_MISSING
    assert "PARASWAP_BASE_URL" in str(exc_info.value)
