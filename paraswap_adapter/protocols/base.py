"""
Base swap protocol interface

A swap protocol is bound to one wallet account and exposes quote and
execute operations on it. Concrete protocols handle aggregator-specific
details internally.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Union

from ..config import config as global_config
from ..types import (
    Account,
    SwapConfigOverride,
    SwapOutcome,
    SwapProtocolConfig,
    SwapQuote,
    SwapRequest,
)

SwapOptions = Union[SwapRequest, Mapping[str, Any]]


class SwapProtocol(ABC):
    """
    Abstract base class for swap protocols

    Holds the wallet account and the adapter-level configuration
    (fee ceiling and paymaster token defaults).
    """

    # Protocol identifier
    name: str = "base"

    def __init__(self, account: Account, config: Optional[SwapProtocolConfig] = None):
        """
        Args:
            account: Wallet account the protocol acts for
            config: Swap defaults (uses the global swap config if None)
        """
        self._account = account
        if config is None:
            config = SwapProtocolConfig(
                swap_max_fee=global_config.swap.swap_max_fee,
                paymaster_token=global_config.swap.paymaster_token,
            )
        self._config = config

    @property
    def account(self) -> Account:
        return self._account

    @property
    def config(self) -> SwapProtocolConfig:
        return self._config

    @abstractmethod
    async def quote(
        self,
        options: SwapOptions,
        config: Optional[SwapConfigOverride] = None,
    ) -> SwapQuote:
        """
        Quote the costs of a swap without sending anything

        Args:
            options: Swap request
            config: Per-call override (paymaster token for bundled accounts)

        Returns:
            SwapQuote
        """
        ...

    @abstractmethod
    async def execute(
        self,
        options: SwapOptions,
        config: Optional[SwapConfigOverride] = None,
    ) -> SwapOutcome:
        """
        Execute a swap

        Args:
            options: Swap request
            config: Per-call override of swap_max_fee and paymaster_token

        Returns:
            SwapOutcome
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(account={self._account!r})"
