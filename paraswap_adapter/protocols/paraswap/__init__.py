"""
ParaSwap Swap Protocol Adapter

Provides swap functionality via the ParaSwap (Velora) aggregator on EVM chains.

Usage:
    from paraswap_adapter.protocols.paraswap import ParaSwapAdapter
    from paraswap_adapter.infra import EvmAccount

    account = EvmAccount.from_env(provider="https://rpc...")
    adapter = ParaSwapAdapter(account)

    # Get quote
    quote = await adapter.quote({"token_in": USDT, "token_out": WETH, "token_in_amount": 10**6})

    # Execute swap
    result = await adapter.execute({"token_in": USDT, "token_out": WETH, "token_in_amount": 10**6})
"""

from .adapter import ParaSwapAdapter
from .api import ParaSwapAPI

__all__ = [
    "ParaSwapAdapter",
    "ParaSwapAPI",
]
