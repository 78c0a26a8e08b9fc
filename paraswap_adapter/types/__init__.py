"""
Type definitions for the ParaSwap swap adapter
"""

from .swap import (
    SwapSide,
    SwapRequest,
    PriceRoute,
    TransactionIntent,
    SwapConfigOverride,
    SwapProtocolConfig,
    SwapQuote,
    SwapOutcome,
)
from .account import (
    AccountKind,
    FeeQuote,
    TxReceipt,
    Account,
    SimpleAccount,
    BundledAccount,
)

__all__ = [
    # Swap types
    "SwapSide",
    "SwapRequest",
    "PriceRoute",
    "TransactionIntent",
    "SwapConfigOverride",
    "SwapProtocolConfig",
    "SwapQuote",
    "SwapOutcome",
    # Account types
    "AccountKind",
    "FeeQuote",
    "TxReceipt",
    "Account",
    "SimpleAccount",
    "BundledAccount",
]
