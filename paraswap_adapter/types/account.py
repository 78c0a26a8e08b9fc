"""
Wallet account capability interfaces

The adapter dispatches on AccountKind rather than on class hierarchy:
simple accounts quote and send one transaction at a time, bundled
(smart) accounts quote and send a list of transactions as one operation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol, Sequence

from .swap import TransactionIntent


class AccountKind(Enum):
    """Wallet account variant"""
    READ_ONLY = "read_only"
    READ_ONLY_BUNDLED = "read_only_bundled"
    SIMPLE = "simple"
    BUNDLED = "bundled"

    @property
    def is_bundled(self) -> bool:
        return self in (AccountKind.BUNDLED, AccountKind.READ_ONLY_BUNDLED)

    @property
    def can_sign(self) -> bool:
        return self in (AccountKind.SIMPLE, AccountKind.BUNDLED)


@dataclass
class FeeQuote:
    """Fee estimate returned by quote_send_transaction"""
    fee: int


@dataclass
class TxReceipt:
    """Broadcast result returned by send_transaction"""
    hash: str
    fee: Optional[int] = None


class Account(Protocol):
    """Common surface of every account variant"""
    kind: AccountKind
    # AsyncWeb3 instance, RPC URL, or None when not connected
    provider: Any

    async def get_address(self) -> str:
        ...


class SimpleAccount(Account, Protocol):
    """Plain EOA account: one transaction per quote/send"""

    async def quote_send_transaction(self, tx: TransactionIntent) -> FeeQuote:
        ...

    async def send_transaction(self, tx: TransactionIntent) -> TxReceipt:
        ...


class BundledAccount(Account, Protocol):
    """Smart account: a list of calls quoted and sent as one operation"""

    async def quote_send_transaction(
        self,
        txs: Sequence[TransactionIntent],
        paymaster_token: Optional[str] = None,
    ) -> FeeQuote:
        ...

    async def send_transaction(
        self,
        txs: Sequence[TransactionIntent],
        paymaster_token: Optional[str] = None,
    ) -> TxReceipt:
        ...

