"""
ParaSwap Adapter - token swaps for EVM wallet accounts

Delegates price discovery and transaction building to the ParaSwap
aggregator, and signing, broadcast and fee estimation to the wallet
account:
- Simple accounts: approve and swap sent as two transactions
- Bundled smart accounts: approve and swap sent as one operation
- Read-only accounts: quotes only
"""

from .types import (
    SwapSide,
    SwapRequest,
    PriceRoute,
    TransactionIntent,
    SwapConfigOverride,
    SwapProtocolConfig,
    SwapQuote,
    SwapOutcome,
    AccountKind,
    FeeQuote,
    TxReceipt,
)
from .errors import (
    ErrorCode,
    SwapAdapterError,
    InvalidArgument,
    NotConnected,
    OperationNotSupported,
    Unsupported,
    FeeExceeded,
    AggregatorError,
    SignerError,
    ConfigurationError,
)
from .protocols import SwapProtocol, ParaSwapAdapter, ParaSwapAPI
from .infra import ReadOnlyEvmAccount, EvmAccount

__all__ = [
    # Types
    "SwapSide",
    "SwapRequest",
    "PriceRoute",
    "TransactionIntent",
    "SwapConfigOverride",
    "SwapProtocolConfig",
    "SwapQuote",
    "SwapOutcome",
    "AccountKind",
    "FeeQuote",
    "TxReceipt",
    # Errors
    "ErrorCode",
    "SwapAdapterError",
    "InvalidArgument",
    "NotConnected",
    "OperationNotSupported",
    "Unsupported",
    "FeeExceeded",
    "AggregatorError",
    "SignerError",
    "ConfigurationError",
    # Protocols
    "SwapProtocol",
    "ParaSwapAdapter",
    "ParaSwapAPI",
    # Accounts
    "ReadOnlyEvmAccount",
    "EvmAccount",
]

__version__ = "1.0.0"
