"""
ParaSwap API Client

Async REST client for the ParaSwap (Velora) aggregator.
Network is selected by chain ID.
"""

import logging
from typing import Optional, Dict, Any

import httpx

from ...types import PriceRoute, SwapSide, TransactionIntent
from ...errors import AggregatorError, ConfigurationError
from ...config import config as global_config

logger = logging.getLogger(__name__)


class ParaSwapAPI:
    """
    ParaSwap REST API client

    Provides:
    - Price routes (GET /prices)
    - Swap transaction building (POST /transactions/{network})

    Requests are not retried; any failure is raised to the caller.

    Usage:
        async with ParaSwapAPI(chain_id=1) as api:
            route = await api.get_rate("0x...", "0x...", 10**18, SwapSide.SELL)
            tx = await api.build_tx(route, user_address="0xYourAddress")
    """

    def __init__(
        self,
        chain_id: int = 1,
        base_url: Optional[str] = None,
        api_version: Optional[str] = None,
        partner: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize ParaSwap API client

        Args:
            chain_id: Network chain ID
            base_url: API base URL
            api_version: Contract version requested in price routes
            partner: Partner name sent with buildTx
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used in tests)
        """
        self._chain_id = chain_id
        base_url = base_url or global_config.paraswap.base_url
        if not base_url:
            raise ConfigurationError.missing("PARASWAP_BASE_URL")
        self._base_url = base_url.rstrip("/")
        self._api_version = api_version or global_config.paraswap.api_version
        self._partner = partner or global_config.paraswap.partner
        self._timeout = timeout or global_config.paraswap.timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def chain_id(self) -> int:
        """Chain ID this client is configured for"""
        return self._chain_id

    @property
    def partner(self) -> str:
        return self._partner

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client"""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Make HTTP request

        Raises:
            AggregatorError: On non-2xx status or non-JSON body
        """
        client = self._get_client()

        logger.debug(f"ParaSwap {method} {endpoint} params={params}")
        response = await client.request(method, endpoint, params=params, json=json_data)

        if response.is_error:
            try:
                error = response.json().get("error", response.text)
            except ValueError:
                error = response.text
            logger.error(f"ParaSwap API error on {endpoint}: HTTP {response.status_code} {error}")
            raise AggregatorError.http_error(endpoint, response.status_code, error)

        try:
            return response.json()
        except ValueError as e:
            raise AggregatorError.invalid_response(endpoint, f"body is not JSON ({e})") from e

    async def get_rate(
        self,
        src_token: str,
        dest_token: str,
        amount: int,
        side: SwapSide = SwapSide.SELL,
        src_decimals: Optional[int] = None,
        dest_decimals: Optional[int] = None,
    ) -> PriceRoute:
        """
        Get the best price route for a swap

        Args:
            src_token: Source token address
            dest_token: Destination token address
            amount: Source amount for SELL, destination amount for BUY (smallest unit)
            side: Trade side
            src_decimals: Source token decimals (optional for listed tokens)
            dest_decimals: Destination token decimals (optional for listed tokens)

        Returns:
            PriceRoute
        """
        params: Dict[str, Any] = {
            "srcToken": src_token,
            "destToken": dest_token,
            "amount": str(amount),
            "side": side.value,
            "network": self._chain_id,
            "version": self._api_version,
        }
        if src_decimals is not None:
            params["srcDecimals"] = src_decimals
        if dest_decimals is not None:
            params["destDecimals"] = dest_decimals

        data = await self._make_request("GET", "/prices", params=params)

        price_route = data.get("priceRoute")
        if not isinstance(price_route, dict):
            raise AggregatorError.invalid_response("/prices", "missing 'priceRoute'")

        try:
            route = PriceRoute.from_api(price_route)
        except (KeyError, ValueError) as e:
            raise AggregatorError.invalid_response("/prices", f"malformed priceRoute ({e})") from e

        logger.debug(
            f"ParaSwap rate {route.side.value}: {route.src_amount} {src_token} -> "
            f"{route.dest_amount} {dest_token}"
        )
        return route

    async def build_tx(
        self,
        price_route: PriceRoute,
        user_address: str,
        receiver: Optional[str] = None,
        partner: Optional[str] = None,
        ignore_checks: bool = False,
    ) -> TransactionIntent:
        """
        Build the swap transaction for a price route

        Args:
            price_route: Route returned by get_rate
            user_address: Address that sends the transaction
            receiver: Address receiving the destination tokens
            partner: Partner name (defaults to the configured one)
            ignore_checks: Skip the aggregator's balance/allowance checks

        Returns:
            TransactionIntent ready to be quoted or sent
        """
        endpoint = f"/transactions/{self._chain_id}"
        body: Dict[str, Any] = {
            "srcToken": price_route.src_token,
            "destToken": price_route.dest_token,
            "srcAmount": price_route.src_amount,
            "destAmount": price_route.dest_amount,
            "priceRoute": price_route.raw,
            "userAddress": user_address,
            "partner": partner or self._partner,
        }
        if "srcDecimals" in price_route.raw:
            body["srcDecimals"] = price_route.raw["srcDecimals"]
        if "destDecimals" in price_route.raw:
            body["destDecimals"] = price_route.raw["destDecimals"]
        if receiver:
            body["receiver"] = receiver

        params = {"ignoreChecks": "true"} if ignore_checks else None
        data = await self._make_request("POST", endpoint, params=params, json_data=body)

        if not data.get("to") or not data.get("data"):
            raise AggregatorError.invalid_response(endpoint, "missing 'to' or 'data'")

        return TransactionIntent(
            to=data["to"],
            value=int(data.get("value") or 0),
            data=data["data"],
            from_=data.get("from"),
        )

    async def close(self):
        """Close HTTP client"""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "ParaSwapAPI":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def __repr__(self) -> str:
        return f"ParaSwapAPI(chain_id={self._chain_id}, base_url={self._base_url})"
