"""
Test Types Module

Tests for paraswap_adapter.types package.
"""

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

TOKEN_ADDRESS_1 = "0x1111111111111111111111111111111111111111"
TOKEN_ADDRESS_2 = "0x2222222222222222222222222222222222222222"


def test_swap_request_from_mapping():
    """Test SwapRequest creation from a plain dict"""
    from paraswap_adapter.types import SwapRequest

    print("Testing SwapRequest.from_mapping...")

    request = SwapRequest.from_mapping({
        "token_in": TOKEN_ADDRESS_1,
        "token_out": TOKEN_ADDRESS_2,
        "token_out_amount": 1000,
    })

    assert request.token_in == TOKEN_ADDRESS_1
    assert request.token_out == TOKEN_ADDRESS_2
    assert request.token_in_amount is None
    assert request.token_out_amount == 1000
    assert request.to is None

    # coerce passes instances through unchanged
    assert SwapRequest.coerce(request) is request

    print("  SwapRequest.from_mapping: PASSED")


def test_price_route_from_api():
    """Test PriceRoute parsing keeps exact integer amounts"""
    from paraswap_adapter.types import PriceRoute, SwapSide

    print("Testing PriceRoute.from_api...")

    payload = {
        "srcToken": TOKEN_ADDRESS_1,
        "destToken": TOKEN_ADDRESS_2,
        "srcAmount": "123456789012345678901234567890",
        "destAmount": "1000",
        "side": "BUY",
        "bestRoute": [],
    }
    route = PriceRoute.from_api(payload)

    assert route.side == SwapSide.BUY
    # No float rounding on large amounts
    assert route.src_amount_int == 123456789012345678901234567890
    assert route.dest_amount_int == 1000
    assert route.raw == payload

    print("  PriceRoute.from_api: PASSED")


def test_transaction_intent_to_dict():
    """Test TransactionIntent conversion to a web3 tx dict"""
    from paraswap_adapter.types import TransactionIntent

    print("Testing TransactionIntent.to_dict...")

    tx = TransactionIntent(to=TOKEN_ADDRESS_1, data="0x1234")
    assert tx.to_dict() == {"to": TOKEN_ADDRESS_1, "value": 0, "data": "0x1234"}

    tx_from = TransactionIntent(to=TOKEN_ADDRESS_1, value=5, data="0x", from_=TOKEN_ADDRESS_2)
    assert tx_from.to_dict()["from"] == TOKEN_ADDRESS_2
    assert tx_from.to_dict()["value"] == 5

    print("  TransactionIntent.to_dict: PASSED")


def test_swap_protocol_config_resolve():
    """Test layered resolution of swap configuration"""
    from paraswap_adapter.types import SwapProtocolConfig, SwapConfigOverride

    print("Testing SwapProtocolConfig.resolve...")

    defaults = SwapProtocolConfig(swap_max_fee=100, paymaster_token=TOKEN_ADDRESS_1)

    # No override: defaults apply
    resolved = defaults.resolve(None)
    assert resolved.swap_max_fee == 100
    assert resolved.paymaster_token == TOKEN_ADDRESS_1

    # Override replaces the defaults as a whole
    resolved = defaults.resolve(SwapConfigOverride(paymaster_token=TOKEN_ADDRESS_2))
    assert resolved.swap_max_fee is None
    assert resolved.paymaster_token == TOKEN_ADDRESS_2

    resolved = defaults.resolve(SwapConfigOverride(swap_max_fee=5))
    assert resolved.swap_max_fee == 5
    assert resolved.paymaster_token is None

    print("  SwapProtocolConfig.resolve: PASSED")


def test_swap_outcome():
    """Test SwapOutcome dict shape"""
    from paraswap_adapter.types import SwapOutcome

    print("Testing SwapOutcome...")

    bundled = SwapOutcome(hash="0xC", fee=1_000_000, token_in_amount=1_000_000, token_out_amount=1000)
    assert "approval_hash" not in bundled.to_dict()

    simple = SwapOutcome(
        hash="0xB",
        approval_hash="0xA",
        fee=1_000_000,
        token_in_amount=1_000_000,
        token_out_amount=1000,
    )
    assert simple.to_dict() == {
        "hash": "0xB",
        "approval_hash": "0xA",
        "fee": 1_000_000,
        "token_in_amount": 1_000_000,
        "token_out_amount": 1000,
    }

    print("  SwapOutcome: PASSED")


def test_account_kind():
    """Test AccountKind capabilities"""
    from paraswap_adapter.types import AccountKind

    print("Testing AccountKind...")

    assert AccountKind.SIMPLE.can_sign and not AccountKind.SIMPLE.is_bundled
    assert AccountKind.BUNDLED.can_sign and AccountKind.BUNDLED.is_bundled
    assert not AccountKind.READ_ONLY.can_sign and not AccountKind.READ_ONLY.is_bundled
    assert not AccountKind.READ_ONLY_BUNDLED.can_sign and AccountKind.READ_ONLY_BUNDLED.is_bundled

    print("  AccountKind: PASSED")
