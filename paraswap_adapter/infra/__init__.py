"""
Infrastructure layer for the ParaSwap swap adapter

Provides:
- create_async_web3 / get_chain_id: async provider helpers
- encode_approve / build_approve_intent: ERC-20 approval calldata
- AsyncLazy: single-flight lazily initialized values
- ReadOnlyEvmAccount / EvmAccount: web3-backed wallet accounts
"""

from .provider import create_async_web3, get_chain_id
from .erc20 import APPROVE_SELECTOR, encode_approve, build_approve_intent
from .lazy import AsyncLazy
from .evm_account import ReadOnlyEvmAccount, EvmAccount

__all__ = [
    "create_async_web3",
    "get_chain_id",
    "APPROVE_SELECTOR",
    "encode_approve",
    "build_approve_intent",
    "AsyncLazy",
    "ReadOnlyEvmAccount",
    "EvmAccount",
]
