"""
EVM wallet accounts backed by web3.py

ReadOnlyEvmAccount quotes transaction fees for a known address.
EvmAccount adds local private key signing and broadcast.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import AsyncWeb3, Web3
from web3.exceptions import ContractLogicError

from ..config import config as global_config
from ..errors import NotConnected, SignerError
from ..types import AccountKind, FeeQuote, TransactionIntent, TxReceipt
from .provider import create_async_web3

logger = logging.getLogger(__name__)


class ReadOnlyEvmAccount:
    """
    Read-only EVM account

    Can resolve its address and quote transaction fees, but cannot sign.

    Usage:
        account = ReadOnlyEvmAccount("0x...", provider="https://rpc...")
        quote = await account.quote_send_transaction(tx)
    """

    kind = AccountKind.READ_ONLY

    def __init__(self, address: str, provider: Any = None):
        """
        Args:
            address: Account address
            provider: RPC URL, AsyncWeb3 instance, or None
        """
        self._address = Web3.to_checksum_address(address)
        self.provider: Optional[AsyncWeb3] = create_async_web3(provider)

    @property
    def address(self) -> str:
        return self._address

    async def get_address(self) -> str:
        return self._address

    def _require_provider(self, operation: str) -> AsyncWeb3:
        if self.provider is None:
            raise NotConnected.for_operation(operation)
        return self.provider

    async def _estimate_gas(self, web3: AsyncWeb3, tx_dict: Dict[str, Any]) -> int:
        """Estimate gas with the configured buffer"""
        try:
            estimated = await web3.eth.estimate_gas(tx_dict)
        except ContractLogicError as e:
            # Calls that depend on a prior unmined transaction revert here
            logger.warning(
                f"Gas estimation reverted for call to {tx_dict.get('to')}: {e}. "
                f"Using fallback gas limit {global_config.evm.fallback_gas_limit}"
            )
            return global_config.evm.fallback_gas_limit
        return int(estimated * global_config.evm.gas_limit_multiplier)

    async def _fee_fields(self, web3: AsyncWeb3) -> Dict[str, int]:
        """Gas price fields: EIP-1559 when the chain reports a base fee, legacy otherwise"""
        latest_block = await web3.eth.get_block("latest")
        base_fee = latest_block.get("baseFeePerGas")

        if base_fee is None:
            return {"gasPrice": int(await web3.eth.gas_price)}

        max_priority_fee = Web3.to_wei(global_config.evm.priority_fee_gwei, "gwei")
        max_fee = int(base_fee * global_config.evm.base_fee_multiplier) + max_priority_fee
        return {
            "maxFeePerGas": max_fee,
            "maxPriorityFeePerGas": max_priority_fee,
        }

    @staticmethod
    def _price_per_gas(fee_fields: Dict[str, int]) -> int:
        return fee_fields.get("maxFeePerGas", fee_fields.get("gasPrice", 0))

    async def quote_send_transaction(self, tx: TransactionIntent) -> FeeQuote:
        """
        Estimate the maximum fee of sending a transaction

        Args:
            tx: Transaction to quote

        Returns:
            FeeQuote with fee in wei
        """
        web3 = self._require_provider("quote transactions")

        tx_dict = tx.to_dict()
        tx_dict["from"] = self._address

        gas = await self._estimate_gas(web3, tx_dict)
        fee = gas * self._price_per_gas(await self._fee_fields(web3))

        logger.debug(f"Quoted tx to {tx.to}: gas={gas} fee={fee}")
        return FeeQuote(fee=fee)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(address={self._address})"


class EvmAccount(ReadOnlyEvmAccount):
    """
    EVM account signing with a local private key

    send_transaction waits for the receipt by default, so a following
    transaction that depends on this one (swap after approve) is
    estimated against the updated chain state.

    Usage:
        account = EvmAccount.from_env(provider="https://rpc...")
        receipt = await account.send_transaction(tx)
    """

    kind = AccountKind.SIMPLE

    def __init__(
        self,
        local_account: LocalAccount,
        provider: Any = None,
        wait_for_receipt: bool = True,
    ):
        super().__init__(local_account.address, provider)
        self._account = local_account
        self._wait_for_receipt = wait_for_receipt

    async def send_transaction(self, tx: TransactionIntent) -> TxReceipt:
        """
        Sign and broadcast a transaction

        Args:
            tx: Transaction to send

        Returns:
            TxReceipt with the transaction hash and fee in wei

        Raises:
            SignerError: If the mined transaction reverted
        """
        web3 = self._require_provider("send transactions")

        tx_dict = tx.to_dict()
        tx_dict["from"] = self._address

        gas = await self._estimate_gas(web3, tx_dict)
        fee_fields = await self._fee_fields(web3)

        tx_dict.update(fee_fields)
        tx_dict["gas"] = gas
        tx_dict["nonce"] = await web3.eth.get_transaction_count(self._address, "pending")
        tx_dict["chainId"] = int(await web3.eth.chain_id)

        signed = self._account.sign_transaction(tx_dict)
        tx_hash = await web3.eth.send_raw_transaction(signed.raw_transaction)
        tx_hash_hex = Web3.to_hex(tx_hash)

        logger.info(f"Sent transaction {tx_hash_hex} to {tx.to} (nonce={tx_dict['nonce']})")

        fee = gas * self._price_per_gas(fee_fields)
        if self._wait_for_receipt:
            receipt = await web3.eth.wait_for_transaction_receipt(
                tx_hash, timeout=global_config.evm.receipt_timeout
            )
            if receipt["status"] != 1:
                logger.error(f"Transaction {tx_hash_hex} reverted")
                raise SignerError.reverted(tx_hash_hex)
            fee = receipt["gasUsed"] * receipt.get("effectiveGasPrice", self._price_per_gas(fee_fields))

        return TxReceipt(hash=tx_hash_hex, fee=fee)

    @classmethod
    def from_private_key(cls, private_key: str, provider: Any = None, **kwargs) -> "EvmAccount":
        """
        Create account from private key

        Args:
            private_key: Hex-encoded private key (with or without 0x prefix)
            provider: RPC URL, AsyncWeb3 instance, or None

        Returns:
            EvmAccount instance
        """
        if not private_key.startswith("0x"):
            private_key = "0x" + private_key

        try:
            local_account = Account.from_key(private_key)
        except (ValueError, TypeError) as e:
            raise SignerError.failed(f"invalid private key ({e})") from e

        return cls(local_account, provider, **kwargs)

    @classmethod
    def from_env(
        cls,
        env_var: str = "EVM_PRIVATE_KEY",
        provider: Any = None,
        **kwargs,
    ) -> "EvmAccount":
        """
        Create account from environment variable

        The provider defaults to EVM_RPC_URL when not given.

        Raises:
            SignerError: If the environment variable is not set
        """
        private_key = os.getenv(env_var, "")
        if not private_key:
            raise SignerError.not_configured(env_var)

        if provider is None:
            provider = global_config.evm.rpc_url or None

        return cls.from_private_key(private_key, provider, **kwargs)
