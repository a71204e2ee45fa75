"""Tests for asset events, event payloads and callbacks."""

from dataclasses import FrozenInstanceError
from unittest.mock import Mock

import pytest

from opensea_sdk.enums import AssetEventType, EventType
from opensea_sdk.errors import InvalidCallbackResultError
from opensea_sdk.models.assets import WyvernNFTAsset
from opensea_sdk.models.events import AssetEvent, EventData, web3_callback_result


class TestAssetEvent:

    def test_asset_event_is_immutable(self):
        event = AssetEvent(
            event_type=AssetEventType.ASSET_TRANSFER,
            event_timestamp=None,
            auction_type=None,
            total_price="0",
        )

        with pytest.raises(FrozenInstanceError):
            event.total_price = "1"


class TestEventData:

    def test_all_fields_optional(self):
        data = EventData()

        assert data.account_address is None
        assert data.order is None
        assert data.event is None

    def test_transfer_payload(self):
        asset = WyvernNFTAsset(id="1", address="0xabc")
        data = EventData(
            event=EventType.TRANSFER_ONE,
            account_address="0x111",
            to_address="0x222",
            asset=asset,
            transaction_hash="0x" + "ab" * 32,
        )

        assert data.asset == asset
        assert data.event.value == "TransferOne"


class TestWeb3CallbackResult:
    """Test suite for unwrapping Web3Callback arguments."""

    def test_result(self):
        assert web3_callback_result(None, "0xtxhash") == "0xtxhash"

    def test_error_is_raised(self):
        err = ValueError("user rejected transaction")

        with pytest.raises(ValueError, match="user rejected"):
            web3_callback_result(err, None)

    def test_both_set(self):
        with pytest.raises(InvalidCallbackResultError, match="both"):
            web3_callback_result(ValueError("boom"), "0xtxhash")

    def test_none_result(self):
        """Test that a callback with no result value succeeds."""
        assert web3_callback_result(None, None) is None

    def test_as_callback(self):
        """Test wiring the unwrapper into a Web3Callback."""
        on_result = Mock()

        def callback(err, result):
            on_result(web3_callback_result(err, result))

        callback(None, 42)

        on_result.assert_called_once_with(42)
