"""
Exception definitions for the ParaSwap swap adapter
"""

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """
    Unified error codes for swap operations

    1xxx - Argument errors
    2xxx - Connection errors
    3xxx - Operation errors
    4xxx - Fee errors
    5xxx - Aggregator errors
    6xxx - Signer errors
    9xxx - Configuration errors
    """
    # Argument errors
    TOKENS_EQUAL = "1001"
    AMOUNT_MISSING = "1002"
    AMOUNT_CONFLICT = "1003"
    AMOUNT_INVALID = "1004"

    # Connection errors
    PROVIDER_NOT_CONNECTED = "2001"

    # Operation errors
    OPERATION_NOT_SUPPORTED = "3001"

    # Fee errors
    FEE_EXCEEDED = "4001"

    # Aggregator errors
    AGGREGATOR_HTTP_ERROR = "5001"
    AGGREGATOR_INVALID_RESPONSE = "5002"

    # Signer errors
    SIGNER_NOT_CONFIGURED = "6001"
    SIGNER_FAILED = "6002"
    TX_REVERTED = "6003"

    # Configuration errors
    CONFIG_INVALID = "9001"
    CONFIG_MISSING = "9002"


class SwapAdapterError(Exception):
    """
    Base exception for all swap adapter errors

    Attributes:
        message: Human-readable error message
        code: Error code for programmatic handling
        recoverable: Whether the error might succeed on retry
        original_error: The underlying exception if any
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        recoverable: bool = False,
        original_error: Optional[Exception] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.recoverable = recoverable
        self.original_error = original_error
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"

    @property
    def should_retry(self) -> bool:
        """Indicate if the operation should be retried"""
        return self.recoverable


class InvalidArgument(SwapAdapterError):
    """
    Invalid swap request

    Raised when:
    - tokenIn and tokenOut are the same token
    - Neither or both of the amounts are given
    - An amount is negative or not an integer
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.AMOUNT_INVALID,
        argument: Optional[str] = None,
    ):
        super().__init__(
            message,
            code,
            recoverable=False,
            details={"argument": argument} if argument else None,
        )
        self.argument = argument

    @classmethod
    def tokens_equal(cls, token: str) -> "InvalidArgument":
        return cls(
            f"'token_in' and 'token_out' cannot be equal ({token}).",
            ErrorCode.TOKENS_EQUAL,
            argument="token_out",
        )

    @classmethod
    def amount_missing(cls) -> "InvalidArgument":
        return cls(
            "A valid 'token_in_amount' or 'token_out_amount' must be passed.",
            ErrorCode.AMOUNT_MISSING,
        )

    @classmethod
    def amount_conflict(cls) -> "InvalidArgument":
        return cls(
            "Cannot use both 'token_in_amount' and 'token_out_amount' arguments.",
            ErrorCode.AMOUNT_CONFLICT,
        )

    @classmethod
    def amount_invalid(cls, argument: str, value) -> "InvalidArgument":
        return cls(
            f"'{argument}' must be a non-negative integer, got {value!r}.",
            ErrorCode.AMOUNT_INVALID,
            argument=argument,
        )


class NotConnected(SwapAdapterError):
    """
    No blockchain provider bound to the wallet account

    Raised when quote or execute is called on an account that was
    created without network connectivity.
    """

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(
            message,
            ErrorCode.PROVIDER_NOT_CONNECTED,
            recoverable=False,
            details={"operation": operation} if operation else None,
        )
        self.operation = operation

    @classmethod
    def for_operation(cls, operation: str) -> "NotConnected":
        return cls(
            f"The wallet must be connected to a provider to {operation}.",
            operation=operation,
        )


class OperationNotSupported(SwapAdapterError):
    """
    Operation not supported by the bound account

    Raised when:
    - A swap is executed with a read-only account
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        account_kind: Optional[str] = None,
    ):
        super().__init__(
            message,
            ErrorCode.OPERATION_NOT_SUPPORTED,
            recoverable=False,
            details={"operation": operation, "account_kind": account_kind},
        )
        self.operation = operation
        self.account_kind = account_kind

    @classmethod
    def read_only(cls, operation: str, account_kind: str) -> "OperationNotSupported":
        return cls(
            f"{operation.capitalize()} operation cannot be performed with a read-only account.",
            operation=operation,
            account_kind=account_kind,
        )


# Short alias matching the error taxonomy name
Unsupported = OperationNotSupported


class FeeExceeded(SwapAdapterError):
    """
    Quoted fee is above the configured ceiling

    Raised before any transaction is broadcast.
    """

    def __init__(self, message: str, fee: int, max_fee: int):
        super().__init__(
            message,
            ErrorCode.FEE_EXCEEDED,
            recoverable=True,
            details={"fee": fee, "max_fee": max_fee},
        )
        self.fee = fee
        self.max_fee = max_fee

    @classmethod
    def swap(cls, fee: int, max_fee: int) -> "FeeExceeded":
        return cls(
            f"Exceeded maximum fee cost for swap operation: fee {fee} > max {max_fee}.",
            fee=fee,
            max_fee=max_fee,
        )


class AggregatorError(SwapAdapterError):
    """
    Aggregator API errors

    Raised when:
    - The aggregator answers with a non-2xx status
    - The aggregator response is missing required fields
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.AGGREGATOR_HTTP_ERROR,
        status_code: Optional[int] = None,
        endpoint: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        # 429 and 5xx may succeed later; everything else is a bad request
        recoverable = status_code is not None and (status_code == 429 or status_code >= 500)
        super().__init__(
            message,
            code,
            recoverable=recoverable,
            original_error=original_error,
            details={"status_code": status_code, "endpoint": endpoint},
        )
        self.status_code = status_code
        self.endpoint = endpoint

    @classmethod
    def http_error(cls, endpoint: str, status_code: int, error: str) -> "AggregatorError":
        return cls(
            f"Aggregator request to {endpoint} failed with HTTP {status_code}: {error}",
            ErrorCode.AGGREGATOR_HTTP_ERROR,
            status_code=status_code,
            endpoint=endpoint,
        )

    @classmethod
    def invalid_response(cls, endpoint: str, reason: str) -> "AggregatorError":
        return cls(
            f"Invalid aggregator response from {endpoint}: {reason}",
            ErrorCode.AGGREGATOR_INVALID_RESPONSE,
            endpoint=endpoint,
        )


class SignerError(SwapAdapterError):
    """
    Signing-related errors

    Raised when:
    - No private key configured
    - Signing operation fails
    - A sent transaction reverts on chain
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.SIGNER_FAILED,
        recoverable: bool = False,
    ):
        super().__init__(message, code, recoverable=recoverable)

    @classmethod
    def not_configured(cls, env_var: str = "EVM_PRIVATE_KEY") -> "SignerError":
        return cls(
            f"No signer configured. Provide a private key or set {env_var}.",
            ErrorCode.SIGNER_NOT_CONFIGURED,
        )

    @classmethod
    def failed(cls, reason: str) -> "SignerError":
        return cls(f"Signing failed: {reason}", ErrorCode.SIGNER_FAILED)

    @classmethod
    def reverted(cls, tx_hash: str) -> "SignerError":
        error = cls(f"Transaction {tx_hash} reverted", ErrorCode.TX_REVERTED)
        error.details["tx_hash"] = tx_hash
        return error


class ConfigurationError(SwapAdapterError):
    """
    Configuration-related errors

    Raised when:
    - Required configuration is missing
    - Configuration values are invalid
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_INVALID,
    ):
        super().__init__(message, code, recoverable=False)

    @classmethod
    def missing(cls, param: str) -> "ConfigurationError":
        return cls(f"Missing required configuration: {param}", ErrorCode.CONFIG_MISSING)

    @classmethod
    def invalid(cls, param: str, reason: str) -> "ConfigurationError":
        return cls(f"Invalid configuration '{param}': {reason}", ErrorCode.CONFIG_INVALID)
