"""Tests for normalizing OpenSea API payloads."""

import logging
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from opensea_sdk.constants import NULL_ADDRESS
from opensea_sdk.enums import (
    AssetContractType,
    AssetEventType,
    OrderSide,
    SaleKind,
    WyvernSchemaName,
)
from opensea_sdk.errors import InvalidFeeError, SchemaValidationError
from opensea_sdk.models.fees import compute_fees
from opensea_sdk.models.orders import ExchangeMetadataForAsset, Order
from opensea_sdk.parsing import (
    account_from_json,
    asset_bundle_from_json,
    asset_event_from_json,
    asset_from_json,
    collection_from_json,
    order_from_json,
)

MAKER = "0x1fc53ac4d509839ec35003512905606a9e1d8b41"
FEE_RECIPIENT = "0x5b3256965e7c3cf26e11fcaf296dfc8807c01073"
TARGET = "0xbaf2127b49fc93cbca6269fade0f7f31df4c88a7"


class TestAccountFromJson:

    def test_account(self, sample_account_json):
        account = account_from_json(sample_account_json)

        assert account.address == MAKER
        assert account.config == "verified"
        assert account.user.username == "collector"
        assert account.to_dict() == sample_account_json

    def test_account_without_user(self):
        account = account_from_json({"address": MAKER})

        assert account.user is None
        assert account.profile_img_url == ""

    def test_missing_address(self):
        with pytest.raises(SchemaValidationError, match="address"):
            account_from_json({"config": ""})


class TestOrderFromJson:
    """Test suite for order_from_json."""

    def test_order(self, sample_api_order_json):
        """Test normalizing an orderbook order."""
        order = order_from_json(sample_api_order_json, now=1650000100)

        assert isinstance(order, Order)
        assert order.hash == "0x" + "ab" * 32
        assert order.maker == MAKER
        assert order.maker_account.user.username == "collector"
        assert order.fee_recipient == FEE_RECIPIENT
        assert order.side == OrderSide.SELL
        assert order.sale_kind == SaleKind.FIXED_PRICE
        assert order.base_price == 10 ** 18
        assert order.maker_relayer_fee == 250
        assert order.current_bounty == Decimal("10000000000000000.0")
        assert order.signature.v == 27
        assert order.cancelled_or_finalized is False
        assert order.waiting_for_best_counter_order is False
        assert isinstance(order.metadata, ExchangeMetadataForAsset)
        assert order.metadata.schema == WyvernSchemaName.ERC721

    def test_created_time(self, sample_api_order_json):
        order = order_from_json(sample_api_order_json, now=1650000100)

        expected = datetime(2022, 4, 15, 5, 20, tzinfo=timezone.utc)
        assert order.created_time == int(expected.timestamp())

    def test_current_price_recomputed(self, sample_api_order_json):
        """Test that the buyer fee is added to the API's current price."""
        sample_api_order_json["taker_relayer_fee"] = "250"

        order = order_from_json(sample_api_order_json, now=1650000100)

        assert order.current_price == Decimal(1025000000000000000)

    def test_null_fee_recipient(self, sample_api_order_json):
        sample_api_order_json["fee_recipient"] = {"address": NULL_ADDRESS}
        sample_api_order_json["taker_relayer_fee"] = "250"

        order = order_from_json(sample_api_order_json, now=1650000100)

        assert order.waiting_for_best_counter_order is True
        assert order.current_price == Decimal(10 ** 18)

    def test_finalized_order_is_terminal(self, sample_api_order_json):
        sample_api_order_json["finalized"] = True

        order = order_from_json(sample_api_order_json, now=1650000100)

        assert order.cancelled_or_finalized is True
        assert order.is_fillable(1650000100) is False

    def test_defaults(self, sample_api_order_json):
        del sample_api_order_json["quantity"]
        del sample_api_order_json["maker_referrer_fee"]

        order = order_from_json(sample_api_order_json, now=1650000100)

        assert order.quantity == 1
        assert order.maker_referrer_fee == 0

    def test_missing_field(self, sample_api_order_json):
        del sample_api_order_json["base_price"]

        with pytest.raises(SchemaValidationError, match="base_price"):
            order_from_json(sample_api_order_json)

    def test_invalid_amount(self, sample_api_order_json):
        sample_api_order_json["salt"] = "-5"

        with pytest.raises(SchemaValidationError, match="salt"):
            order_from_json(sample_api_order_json)


class TestAssetFromJson:
    """Test suite for asset_from_json."""

    def test_asset(self, sample_asset_json):
        asset = asset_from_json(sample_asset_json)

        assert asset.token_id == "1234"
        assert asset.token_address == TARGET
        assert asset.schema_name == WyvernSchemaName.ERC721
        assert asset.name == "Punk #1234"
        assert asset.owner.address == MAKER
        assert asset.opensea_link.endswith("/1234")
        assert asset.num_sales == 3
        assert asset.background_color == "#638596"
        assert asset.orders is None

    def test_prefers_preview_image(self, sample_asset_json):
        asset = asset_from_json(sample_asset_json)

        assert asset.image_url == "https://example.com/1234-preview.png"
        assert asset.image_url_original == "https://example.com/1234-original.png"
        assert asset.image_url_thumbnail == "https://example.com/1234-thumb.png"

    def test_keeps_animated_image(self, sample_asset_json):
        """Test that GIF and SVG images are not replaced by their static preview."""
        sample_asset_json["image_url"] = "https://example.com/1234.GIF"

        asset = asset_from_json(sample_asset_json)

        assert asset.image_url == "https://example.com/1234.GIF"

    def test_asset_contract(self, sample_asset_json):
        contract = asset_from_json(sample_asset_json).asset_contract

        assert contract.type == AssetContractType.NON_FUNGIBLE
        assert contract.token_symbol == "TPUNK"
        assert contract.seller_fee_basis_points == 750
        assert contract.dev_seller_fee_basis_points == 500

    def test_collection(self, sample_asset_json):
        collection = asset_from_json(sample_asset_json).collection

        assert collection.slug == "test-punks"
        assert collection.created_date == datetime(2021, 6, 1, 12, 30, 0, 123456, tzinfo=timezone.utc)
        assert collection.opensea_seller_fee_basis_points == 250
        assert collection.dev_seller_fee_basis_points == 500
        assert collection.fees.seller_fees == {MAKER: 500}
        assert collection.trait_stats["level"] == {"min": 1, "max": 9}
        assert collection.external_link == "https://example.com"
        assert collection.wiki_link is None
        assert collection.payment_tokens[0].symbol == "WETH"
        assert collection.payment_tokens[0].eth_price == "1.0"

    def test_last_sale(self, sample_asset_json):
        sale = asset_from_json(sample_asset_json).last_sale

        assert sale.event_type == AssetEventType.AUCTION_SUCCESSFUL
        assert sale.auction_type is None
        assert sale.total_price == "800000000000000000"
        assert sale.payment_token.symbol == "ETH"
        assert sale.transaction.block_number == "14300000"
        assert sale.transaction.to_account.address == FEE_RECIPIENT

    def test_orders_split_by_side(self, sample_asset_json, sample_api_order_json):
        """Test that a combined order list is split into sell and buy orders."""
        buy_order = dict(sample_api_order_json, side=0, order_hash="0x" + "cd" * 32)
        sample_asset_json["orders"] = [sample_api_order_json, buy_order]

        asset = asset_from_json(sample_asset_json)

        assert len(asset.orders) == 2
        assert [o.hash for o in asset.sell_orders] == ["0x" + "ab" * 32]
        assert [o.hash for o in asset.buy_orders] == ["0x" + "cd" * 32]

    def test_missing_collection(self, sample_asset_json):
        del sample_asset_json["collection"]

        with pytest.raises(SchemaValidationError, match="collection"):
            asset_from_json(sample_asset_json)

    def test_compute_fees_for_asset(self, sample_asset_json):
        """Test that fees are computed from the asset's collection."""
        asset = asset_from_json(sample_asset_json)

        fees = compute_fees(asset, OrderSide.SELL, extra_bounty_basis_points=100)

        assert fees.total_seller_fee_basis_points == 750
        assert fees.seller_bounty_basis_points == 100
        with pytest.raises(InvalidFeeError):
            compute_fees(asset, OrderSide.SELL, extra_bounty_basis_points=200)


class TestAssetEventFromJson:

    def test_unknown_auction_type(self, caplog):
        with caplog.at_level(logging.WARNING, logger="opensea_sdk.parsing"):
            event = asset_event_from_json({
                "event_type": "created",
                "event_timestamp": "2022-03-01T10:00:00Z",
                "auction_type": "vickrey",
                "total_price": "1",
            })

        assert event.event_type == AssetEventType.AUCTION_CREATED
        assert event.auction_type is None
        assert event.event_timestamp.tzinfo is not None
        assert "vickrey" in caplog.text

    def test_unknown_event_type(self):
        with pytest.raises(SchemaValidationError, match="event_type"):
            asset_event_from_json({"event_type": "minted", "total_price": "0"})


class TestCollectionFromJson:

    def test_minimal_collection(self):
        collection = collection_from_json({"slug": "bare"})

        assert collection.name == ""
        assert collection.created_date is None
        assert collection.fees.opensea_fees == {}
        assert collection.opensea_seller_fee_basis_points == 0

    def test_missing_slug(self):
        with pytest.raises(SchemaValidationError, match="slug"):
            collection_from_json({"name": "No slug"})


class TestAssetBundleFromJson:

    def test_bundle(self, sample_asset_json, sample_account_json):
        bundle = asset_bundle_from_json({
            "maker": sample_account_json,
            "assets": [sample_asset_json],
            "name": "Pack",
            "slug": "pack",
            "permalink": "https://opensea.io/bundles/pack",
        })

        assert bundle.maker.address == MAKER
        assert bundle.assets[0].token_id == "1234"
        assert bundle.asset_contract is None
        assert bundle.sell_orders is None
