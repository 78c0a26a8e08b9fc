"""
ParaSwap Swap Adapter

Swaps ERC-20 tokens for a wallet account through the ParaSwap aggregator.
Every swap is two transactions: an ERC-20 approve for the aggregator's
router, then the swap itself.
"""

import logging
from typing import Callable, Optional, Tuple

from ...types import (
    AccountKind,
    SwapConfigOverride,
    SwapOutcome,
    SwapProtocolConfig,
    SwapQuote,
    SwapRequest,
    SwapSide,
    TransactionIntent,
)
from ...infra.erc20 import build_approve_intent
from ...infra.lazy import AsyncLazy
from ...infra.provider import create_async_web3, get_chain_id
from ...errors import FeeExceeded, InvalidArgument, NotConnected, OperationNotSupported
from ..base import SwapOptions, SwapProtocol

from .api import ParaSwapAPI

logger = logging.getLogger(__name__)


class ParaSwapAdapter(SwapProtocol):
    """
    ParaSwap Swap Adapter for EVM wallet accounts

    Supports simple accounts (approve and swap sent as two transactions)
    and bundled smart accounts (approve and swap sent as one operation).
    Read-only accounts can quote but not execute.

    For simple accounts the approval is broadcast before the swap. If the
    swap broadcast then fails, the allowance stays set on chain; the
    error is raised unchanged and nothing is rolled back.

    Usage:
        account = EvmAccount.from_env(provider="https://rpc...")
        adapter = ParaSwapAdapter(account, SwapProtocolConfig(swap_max_fee=10**16))

        # Get quote
        quote = await adapter.quote(SwapRequest(token_in=USDT, token_out=WETH, token_in_amount=10**6))

        # Execute swap
        result = await adapter.execute(SwapRequest(token_in=USDT, token_out=WETH, token_in_amount=10**6))
    """

    name = "paraswap"

    def __init__(
        self,
        account,
        config: Optional[SwapProtocolConfig] = None,
        api: Optional[ParaSwapAPI] = None,
        api_factory: Optional[Callable[[int], ParaSwapAPI]] = None,
    ):
        """
        Initialize ParaSwap adapter

        Args:
            account: Wallet account (read-only, simple or bundled)
            config: Swap defaults (uses the global swap config if None)
            api: Optional pre-built aggregator client
            api_factory: Builds the aggregator client from a chain ID
        """
        super().__init__(account, config)

        self._provider = create_async_web3(getattr(account, "provider", None))
        self._api_factory = api_factory or (lambda chain_id: ParaSwapAPI(chain_id=chain_id))
        self._api: AsyncLazy[ParaSwapAPI] = AsyncLazy(self._create_api, name="ParaSwap API client")
        if api is not None:
            self._api.set(api)

    @property
    def kind(self) -> AccountKind:
        return self._account.kind

    @property
    def is_connected(self) -> bool:
        return self._provider is not None

    async def _create_api(self) -> ParaSwapAPI:
        chain_id = await get_chain_id(self._provider)
        logger.info(f"Initialized ParaSwap API client for chain {chain_id}")
        return self._api_factory(chain_id)

    @staticmethod
    def _validate(request: SwapRequest) -> Tuple[SwapSide, int]:
        """Check the request and pick the side and amount driving the quote"""
        if request.token_in.lower() == request.token_out.lower():
            raise InvalidArgument.tokens_equal(request.token_in)

        if request.token_in_amount is None and request.token_out_amount is None:
            raise InvalidArgument.amount_missing()

        if request.token_in_amount is not None and request.token_out_amount is not None:
            raise InvalidArgument.amount_conflict()

        if request.token_in_amount is not None:
            side, amount, argument = SwapSide.SELL, request.token_in_amount, "token_in_amount"
        else:
            side, amount, argument = SwapSide.BUY, request.token_out_amount, "token_out_amount"

        if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
            raise InvalidArgument.amount_invalid(argument, amount)

        return side, amount

    async def _get_swap_transactions(
        self,
        request: SwapRequest,
    ) -> Tuple[TransactionIntent, TransactionIntent, int, int]:
        """
        Build the approval and swap transactions for a request

        Returns:
            (approve_tx, swap_tx, token_in_amount, token_out_amount)
        """
        side, amount = self._validate(request)

        api = await self._api.get()

        price_route = await api.get_rate(
            src_token=request.token_in,
            dest_token=request.token_out,
            amount=amount,
            side=side,
        )

        address = await self._account.get_address()

        swap_tx = await api.build_tx(
            price_route,
            user_address=address,
            receiver=request.to or address,
            ignore_checks=True,
        )

        token_in_amount = price_route.src_amount_int
        token_out_amount = price_route.dest_amount_int

        approve_tx = build_approve_intent(request.token_in, swap_tx.to, token_in_amount)

        logger.info(
            f"ParaSwap route {side.value}: {token_in_amount} {request.token_in} -> "
            f"{token_out_amount} {request.token_out} via {swap_tx.to}"
        )

        return approve_tx, swap_tx, token_in_amount, token_out_amount

    async def quote(
        self,
        options: SwapOptions,
        config: Optional[SwapConfigOverride] = None,
    ) -> SwapQuote:
        """
        Quote the costs of a swap

        Args:
            options: Swap request
            config: For bundled accounts, overrides the paymaster token

        Returns:
            SwapQuote with the total fee and the route amounts
        """
        if not self.is_connected:
            raise NotConnected.for_operation("quote swap")

        request = SwapRequest.coerce(options)
        approve_tx, swap_tx, token_in_amount, token_out_amount = await self._get_swap_transactions(request)

        if self.kind.is_bundled:
            paymaster_token = config.paymaster_token if config is not None else None
            fee_quote = await self._account.quote_send_transaction(
                [approve_tx, swap_tx], paymaster_token=paymaster_token
            )
            fee = fee_quote.fee
        else:
            approval_quote = await self._account.quote_send_transaction(approve_tx)
            swap_quote = await self._account.quote_send_transaction(swap_tx)
            fee = approval_quote.fee + swap_quote.fee

        return SwapQuote(fee=fee, token_in_amount=token_in_amount, token_out_amount=token_out_amount)

    @staticmethod
    def _check_fee(fee: int, settings: SwapProtocolConfig) -> None:
        if settings.swap_max_fee is not None and fee > settings.swap_max_fee:
            logger.warning(f"Swap fee {fee} exceeds maximum {settings.swap_max_fee}, not sending")
            raise FeeExceeded.swap(fee, settings.swap_max_fee)

    async def execute(
        self,
        options: SwapOptions,
        config: Optional[SwapConfigOverride] = None,
    ) -> SwapOutcome:
        """
        Execute a swap

        Args:
            options: Swap request
            config: Overrides swap_max_fee and paymaster_token for this call

        Returns:
            SwapOutcome
        """
        if not self.kind.can_sign:
            raise OperationNotSupported.read_only("swap", self.kind.value)

        if not self.is_connected:
            raise NotConnected.for_operation("swap")

        request = SwapRequest.coerce(options)
        approve_tx, swap_tx, token_in_amount, token_out_amount = await self._get_swap_transactions(request)

        settings = self._config.resolve(config)

        if self.kind.is_bundled:
            calls = [approve_tx, swap_tx]

            fee_quote = await self._account.quote_send_transaction(
                calls, paymaster_token=settings.paymaster_token
            )
            self._check_fee(fee_quote.fee, settings)

            receipt = await self._account.send_transaction(
                calls, paymaster_token=settings.paymaster_token
            )
            logger.info(f"Swap operation sent: {receipt.hash} (fee={fee_quote.fee})")

            return SwapOutcome(
                hash=receipt.hash,
                fee=fee_quote.fee,
                token_in_amount=token_in_amount,
                token_out_amount=token_out_amount,
            )

        approval_quote = await self._account.quote_send_transaction(approve_tx)
        swap_quote = await self._account.quote_send_transaction(swap_tx)
        fee = approval_quote.fee + swap_quote.fee

        self._check_fee(fee, settings)

        approval = await self._account.send_transaction(approve_tx)
        logger.info(f"Approval sent: {approval.hash}")

        try:
            swap = await self._account.send_transaction(swap_tx)
        except Exception:
            logger.warning(
                f"Swap failed after approval {approval.hash}; allowance of {token_in_amount} "
                f"{request.token_in} for {swap_tx.to} remains set"
            )
            raise

        logger.info(f"Swap sent: {swap.hash} (fee={fee})")

        return SwapOutcome(
            hash=swap.hash,
            approval_hash=approval.hash,
            fee=fee,
            token_in_amount=token_in_amount,
            token_out_amount=token_out_amount,
        )

    async def close(self):
        """Close the aggregator client if it was created"""
        if self._api.is_ready:
            api = await self._api.get()
            await api.close()

    async def __aenter__(self) -> "ParaSwapAdapter":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
