"""Pytest configuration and shared fixtures."""

import pytest

from opensea_sdk.enums import FeeMethod, HowToCall, OrderSide, SaleKind, WyvernSchemaName
from opensea_sdk.models.assets import WyvernNFTAsset
from opensea_sdk.models.orders import ExchangeMetadataForAsset, UnhashedOrder

EXCHANGE = "0x7f268357a8c2552623316e2562d90e642bb538e5"
MAKER = "0x1fc53ac4d509839ec35003512905606a9e1d8b41"
FEE_RECIPIENT = "0x5b3256965e7c3cf26e11fcaf296dfc8807c01073"
TARGET = "0xbaf2127b49fc93cbca6269fade0f7f31df4c88a7"
WETH = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"
NULL_ADDRESS = "0x0000000000000000000000000000000000000000"


@pytest.fixture
def sample_metadata_json():
    """Asset metadata as it appears inside an order JSON."""
    return {
        "asset": {"id": "1234", "address": TARGET},
        "schema": "ERC721",
    }


@pytest.fixture
def sample_order_json(sample_metadata_json):
    """Camel-cased order JSON as posted to the orderbook."""
    return {
        "exchange": EXCHANGE,
        "maker": MAKER,
        "taker": NULL_ADDRESS,
        "makerRelayerFee": "0",
        "takerRelayerFee": "250",
        "makerProtocolFee": "0",
        "takerProtocolFee": "0",
        "feeRecipient": FEE_RECIPIENT,
        "feeMethod": 1,
        "side": 0,
        "saleKind": 0,
        "target": TARGET,
        "howToCall": 0,
        "calldata": "0x23b872dd",
        "replacementPattern": "0x00000000ffffffff",
        "staticTarget": NULL_ADDRESS,
        "staticExtradata": "0x",
        "paymentToken": WETH,
        "basePrice": "1000000000000000000",
        "extra": "0",
        "listingTime": "1650000000",
        "expirationTime": "1650086400",
        "salt": "83006245783548033686093530747847303952463217644495033304999143031082661844460",
        "makerReferrerFee": "0",
        "quantity": "1",
        "metadata": sample_metadata_json,
    }


@pytest.fixture
def sample_unhashed_order():
    """A fixed-price sell order built client-side."""
    return UnhashedOrder(
        exchange=EXCHANGE,
        maker=MAKER,
        taker=NULL_ADDRESS,
        maker_relayer_fee=250,
        taker_relayer_fee=0,
        maker_protocol_fee=0,
        taker_protocol_fee=0,
        fee_recipient=FEE_RECIPIENT,
        target=TARGET,
        calldata="0x23b872dd",
        replacement_pattern="0x000000000000000000000000ffffffff",
        static_target=NULL_ADDRESS,
        static_extradata="0x",
        payment_token=WETH,
        base_price=123456789012345678901234567890,
        extra=0,
        listing_time=1650000000,
        expiration_time=0,
        salt=2 ** 255 + 12345,
        fee_method=FeeMethod.SPLIT_FEE,
        side=OrderSide.SELL,
        sale_kind=SaleKind.FIXED_PRICE,
        how_to_call=HowToCall.CALL,
        quantity=1,
        maker_referrer_fee=0,
        waiting_for_best_counter_order=False,
        metadata=ExchangeMetadataForAsset(
            asset=WyvernNFTAsset(id="1234", address=TARGET),
            schema=WyvernSchemaName.ERC721,
        ),
    )


@pytest.fixture
def sample_account_json():
    return {
        "address": MAKER,
        "config": "verified",
        "profile_img_url": "https://storage.googleapis.com/opensea-static/opensea-profile/1.png",
        "user": {"username": "collector"},
    }


@pytest.fixture
def sample_collection_json():
    """Collection payload from the assets API."""
    return {
        "name": "Test Punks",
        "slug": "test-punks",
        "editors": [MAKER],
        "hidden": False,
        "featured": True,
        "created_date": "2021-06-01T12:30:00.123456",
        "description": "A test collection",
        "image_url": "https://example.com/collection.png",
        "large_image_url": "https://example.com/collection-large.png",
        "featured_image_url": "https://example.com/featured.png",
        "stats": {"floor_price": 0.5, "num_owners": 42, "total_volume": 120.5},
        "display_data": {"card_display_style": "contain"},
        "payment_tokens": [
            {
                "symbol": "WETH",
                "address": WETH,
                "image_url": "https://example.com/weth.svg",
                "name": "Wrapped Ether",
                "decimals": 18,
                "eth_price": 1.0,
                "usd_price": 3012.55,
            }
        ],
        "payout_address": MAKER,
        "traits": {"background": {"blue": 10, "red": 3}, "level": {"min": 1, "max": 9}},
        "external_url": "https://example.com",
        "wiki_url": None,
        "opensea_buyer_fee_basis_points": "0",
        "opensea_seller_fee_basis_points": "250",
        "dev_buyer_fee_basis_points": "0",
        "dev_seller_fee_basis_points": "500",
        "fees": {
            "opensea_fees": {"0x0000a26b00c1f0df003000390027140000faa719": 250},
            "seller_fees": {MAKER: 500},
        },
    }


@pytest.fixture
def sample_asset_contract_json():
    return {
        "address": TARGET,
        "asset_contract_type": "non-fungible",
        "name": "Test Punks",
        "schema_name": "ERC721",
        "symbol": "TPUNK",
        "description": "A test contract",
        "image_url": "https://example.com/contract.png",
        "external_link": "https://example.com",
        "buyer_fee_basis_points": 0,
        "seller_fee_basis_points": 750,
        "opensea_buyer_fee_basis_points": 0,
        "opensea_seller_fee_basis_points": 250,
        "dev_buyer_fee_basis_points": 0,
        "dev_seller_fee_basis_points": 500,
    }


@pytest.fixture
def sample_api_order_json(sample_account_json, sample_metadata_json):
    """Snake-cased order as returned by the orderbook API."""
    return {
        "order_hash": "0x" + "ab" * 32,
        "created_date": "2022-04-15T05:20:00",
        "exchange": EXCHANGE,
        "maker": sample_account_json,
        "taker": {"address": NULL_ADDRESS, "config": "", "profile_img_url": "", "user": None},
        "fee_recipient": {"address": FEE_RECIPIENT, "config": "", "profile_img_url": "", "user": None},
        "current_price": "1000000000000000000.000000000000000000",
        "current_bounty": "10000000000000000.0",
        "maker_relayer_fee": "250",
        "taker_relayer_fee": "0",
        "maker_protocol_fee": "0",
        "taker_protocol_fee": "0",
        "maker_referrer_fee": "0",
        "fee_method": 1,
        "side": 1,
        "sale_kind": 0,
        "target": TARGET,
        "how_to_call": 0,
        "calldata": "0x23b872dd",
        "replacement_pattern": "0x000000000000000000000000ffffffff",
        "static_target": NULL_ADDRESS,
        "static_extradata": "0x",
        "payment_token": WETH,
        "base_price": "1000000000000000000",
        "extra": "0",
        "listing_time": 1650000000,
        "expiration_time": 0,
        "salt": "4242",
        "v": 27,
        "r": "0x" + "11" * 32,
        "s": "0x" + "22" * 32,
        "cancelled": False,
        "finalized": False,
        "marked_invalid": False,
        "metadata": sample_metadata_json,
        "quantity": "1",
    }


@pytest.fixture
def sample_asset_json(sample_asset_contract_json, sample_collection_json, sample_account_json):
    """Asset payload from the assets API, without orders."""
    return {
        "token_id": "1234",
        "name": "Punk #1234",
        "description": "A punk",
        "background_color": "638596",
        "image_url": "https://example.com/1234.png",
        "image_preview_url": "https://example.com/1234-preview.png",
        "image_thumbnail_url": "https://example.com/1234-thumb.png",
        "image_original_url": "https://example.com/1234-original.png",
        "external_link": "https://example.com/1234",
        "permalink": f"https://opensea.io/assets/{TARGET}/1234",
        "asset_contract": sample_asset_contract_json,
        "collection": sample_collection_json,
        "owner": sample_account_json,
        "traits": [{"trait_type": "background", "value": "blue"}],
        "num_sales": 3,
        "is_presale": False,
        "last_sale": {
            "event_type": "successful",
            "event_timestamp": "2022-03-01T10:00:00",
            "auction_type": None,
            "total_price": "800000000000000000",
            "payment_token": {
                "symbol": "ETH",
                "address": NULL_ADDRESS,
                "name": "Ether",
                "decimals": 18,
                "eth_price": "1.000000000000000",
                "usd_price": "3012.550000000000000000",
            },
            "transaction": {
                "from_account": sample_account_json,
                "to_account": {"address": FEE_RECIPIENT, "config": "", "profile_img_url": "", "user": None},
                "created_date": "2022-03-01T10:00:05.000000",
                "modified_date": "2022-03-01T10:00:05.000000",
                "transaction_hash": "0x" + "cd" * 32,
                "transaction_index": "12",
                "block_number": "14300000",
                "block_hash": "0x" + "ef" * 32,
                "timestamp": "2022-03-01T10:00:00",
            },
        },
    }
