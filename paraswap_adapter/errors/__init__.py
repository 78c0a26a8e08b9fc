"""
Error definitions for the ParaSwap swap adapter
"""

from .exceptions import (
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

__all__ = [
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
]
