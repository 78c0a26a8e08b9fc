"""
Swap type definitions: requests, routes, transaction intents and results
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union


class SwapSide(Enum):
    """Trade side understood by the aggregator"""
    SELL = "SELL"  # exact input amount
    BUY = "BUY"    # exact output amount


@dataclass
class SwapRequest:
    """
    A one-sided swap request

    Exactly one of token_in_amount / token_out_amount must be set.
    Amounts are in the smallest on-chain unit of the token.

    Attributes:
        token_in: Address of the token to sell
        token_out: Address of the token to buy
        token_in_amount: Exact amount of token_in to sell
        token_out_amount: Exact amount of token_out to buy
        to: Recipient of token_out (defaults to the account address)
    """
    token_in: str
    token_out: str
    token_in_amount: Optional[int] = None
    token_out_amount: Optional[int] = None
    to: Optional[str] = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "SwapRequest":
        """Build a request from a plain dict of swap options"""
        return cls(
            token_in=options["token_in"],
            token_out=options["token_out"],
            token_in_amount=options.get("token_in_amount"),
            token_out_amount=options.get("token_out_amount"),
            to=options.get("to"),
        )

    @classmethod
    def coerce(cls, request: Union["SwapRequest", Mapping[str, Any]]) -> "SwapRequest":
        if isinstance(request, cls):
            return request
        return cls.from_mapping(request)


@dataclass
class PriceRoute:
    """
    Aggregator price route

    src_amount / dest_amount are kept as the decimal strings the
    aggregator returned; raw is the full payload needed by buildTx.
    """
    src_token: str
    dest_token: str
    src_amount: str
    dest_amount: str
    side: SwapSide
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def src_amount_int(self) -> int:
        return int(self.src_amount)

    @property
    def dest_amount_int(self) -> int:
        return int(self.dest_amount)

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "PriceRoute":
        """Parse the priceRoute object returned by the prices endpoint"""
        return cls(
            src_token=data["srcToken"],
            dest_token=data["destToken"],
            src_amount=str(data["srcAmount"]),
            dest_amount=str(data["destAmount"]),
            side=SwapSide(data.get("side", SwapSide.SELL.value)),
            raw=dict(data),
        )


@dataclass
class TransactionIntent:
    """
    An unsigned transaction to be quoted or sent by a wallet account

    Attributes:
        to: Destination contract address
        value: Native currency value in wei
        data: Hex-encoded calldata
        from_: Optional sender address
    """
    to: str
    value: int = 0
    data: str = "0x"
    from_: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a web3 transaction dict"""
        tx: Dict[str, Any] = {
            "to": self.to,
            "value": self.value,
            "data": self.data,
        }
        if self.from_:
            tx["from"] = self.from_
        return tx


@dataclass
class SwapConfigOverride:
    """Per-call override of the adapter-level swap configuration"""
    swap_max_fee: Optional[int] = None
    paymaster_token: Optional[str] = None


@dataclass
class SwapProtocolConfig:
    """
    Adapter-level swap defaults

    Attributes:
        swap_max_fee: Maximum total fee allowed for a swap (None = no ceiling)
        paymaster_token: Fee payment token for bundled accounts
    """
    swap_max_fee: Optional[int] = None
    paymaster_token: Optional[str] = None

    def resolve(self, override: Optional[SwapConfigOverride] = None) -> "SwapProtocolConfig":
        """
        Return the effective configuration for one call.

        When an override is given it replaces the defaults as a whole,
        so an override without swap_max_fee disables the ceiling.
        """
        if override is None:
            return SwapProtocolConfig(self.swap_max_fee, self.paymaster_token)
        return SwapProtocolConfig(override.swap_max_fee, override.paymaster_token)


@dataclass
class SwapQuote:
    """Quoted cost of a swap"""
    fee: int
    token_in_amount: int
    token_out_amount: int


@dataclass
class SwapOutcome:
    """
    Result of an executed swap

    approval_hash is only set for simple accounts. Bundled accounts
    submit the approval in the same operation as the swap, identified
    by hash.
    """
    hash: str
    fee: int
    token_in_amount: int
    token_out_amount: int
    approval_hash: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "hash": self.hash,
            "fee": self.fee,
            "token_in_amount": self.token_in_amount,
            "token_out_amount": self.token_out_amount,
        }
        if self.approval_hash is not None:
            result["approval_hash"] = self.approval_hash
        return result

    def __str__(self) -> str:
        hash_display = f"{self.hash[:16]}..." if len(self.hash) > 16 else self.hash
        return f"SwapOutcome({hash_display}, fee={self.fee})"
