"""
Async web3 provider helpers
"""

import logging
from typing import Any, Optional

from web3 import AsyncWeb3, AsyncHTTPProvider
from web3.middleware import ExtraDataToPOAMiddleware

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


def create_async_web3(provider: Any) -> Optional[AsyncWeb3]:
    """
    Create an AsyncWeb3 instance from a provider setting

    Args:
        provider: None, an RPC URL, or an existing AsyncWeb3 instance

    Returns:
        AsyncWeb3 instance, or None when no provider was given
    """
    if provider is None or provider == "":
        return None

    if isinstance(provider, AsyncWeb3):
        return provider

    if isinstance(provider, str):
        web3 = AsyncWeb3(AsyncHTTPProvider(provider))
        # PoA chains (BSC, Polygon) return oversized extraData in block headers
        web3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)
        logger.debug(f"Created AsyncWeb3 for {provider}")
        return web3

    raise ConfigurationError.invalid(
        "provider",
        f"Expected an RPC URL or AsyncWeb3 instance, got {type(provider).__name__}",
    )


async def get_chain_id(web3: AsyncWeb3) -> int:
    """Chain ID of the network the provider is connected to"""
    return int(await web3.eth.chain_id)
