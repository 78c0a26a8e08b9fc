"""
ERC-20 calldata helpers
"""

from eth_abi import encode
from web3 import Web3

from ..types import TransactionIntent

# keccak("approve(address,uint256)")[:4] == 0x095ea7b3
APPROVE_SELECTOR = Web3.keccak(text="approve(address,uint256)")[:4]


def encode_approve(spender: str, amount: int) -> str:
    """
    Encode an ERC-20 approve(spender, amount) call

    Args:
        spender: Address allowed to spend the tokens
        amount: Allowance in the token's smallest unit

    Returns:
        Hex-encoded calldata with 0x prefix
    """
    args = encode(["address", "uint256"], [Web3.to_checksum_address(spender), amount])
    return "0x" + (APPROVE_SELECTOR + args).hex()


def build_approve_intent(token: str, spender: str, amount: int) -> TransactionIntent:
    """Approval transaction granting spender an allowance on token"""
    return TransactionIntent(
        to=token,
        value=0,
        data=encode_approve(spender, amount),
    )
