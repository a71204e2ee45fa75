"""Normalize raw OpenSea API payloads into SDK models.

The REST API speaks snake_case and embeds accounts, collections and tokens
inside orders and assets. Each ``*_from_json`` function maps one such
payload onto its model; malformed payloads raise SchemaValidationError.
"""

import logging
from typing import Any, Dict, List, Optional

from .constants import NULL_ADDRESS
from .enums import (
    AssetContractType,
    AssetEventType,
    AuctionType,
    OrderSide,
    TokenStandardVersion,
    WyvernSchemaName,
)
from .errors import SchemaValidationError
from .models.accounts import OpenSeaAccount, OpenSeaUser
from .models.assets import (
    OpenSeaAsset,
    OpenSeaAssetBundle,
    OpenSeaAssetContract,
    OpenSeaCollection,
    OpenSeaFungibleToken,
)
from .models.events import AssetEvent, Transaction
from .models.fees import Fees
from .models.orders import Order, exchange_metadata_from_dict
from .pricing import estimate_current_price
from .utils.conversions import (
    parse_enum,
    parse_timestamp,
    to_decimal,
    to_optional_uint,
    to_uint,
)

logger = logging.getLogger(__name__)

_ANIMATED_EXTENSIONS = (".gif", ".svg")


def _require(data: Any, record: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise SchemaValidationError(f"{record} must be an object, got {type(data).__name__}")
    return data


def _bps(value: Any, field: str) -> int:
    # The API sends basis points as either numbers or numeric strings
    return to_uint(value if value is not None else 0, field)


def user_from_json(user: Dict[str, Any]) -> OpenSeaUser:
    return OpenSeaUser(username=_require(user, "user").get('username'))


def account_from_json(account: Dict[str, Any]) -> OpenSeaAccount:
    account = _require(account, "account")
    if not account.get('address'):
        raise SchemaValidationError("account: missing address")
    return OpenSeaAccount(
        address=account['address'],
        config=account.get('config') or "",
        profile_img_url=account.get('profile_img_url') or "",
        user=user_from_json(account['user']) if account.get('user') else None,
    )


def token_from_json(token: Dict[str, Any]) -> OpenSeaFungibleToken:
    token = _require(token, "payment token")
    try:
        return OpenSeaFungibleToken(
            name=token.get('name') or "",
            symbol=token['symbol'],
            decimals=int(token['decimals']),
            address=token['address'],
            image_url=token.get('image_url'),
            eth_price=_optional_str(token.get('eth_price')),
            usd_price=_optional_str(token.get('usd_price')),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise SchemaValidationError(f"payment token: invalid or missing field {e}") from e


def _optional_str(value: Any) -> Optional[str]:
    return str(value) if value is not None else None


def asset_contract_from_json(asset_contract: Dict[str, Any]) -> OpenSeaAssetContract:
    """Normalize an ``asset_contract`` payload."""
    data = _require(asset_contract, "asset contract")
    try:
        return OpenSeaAssetContract(
            name=data.get('name') or "",
            description=data.get('description') or "",
            type=parse_enum(
                AssetContractType, data.get('asset_contract_type') or AssetContractType.UNKNOWN,
                "asset_contract_type"
            ),
            schema_name=parse_enum(WyvernSchemaName, data['schema_name'], "schema_name"),
            address=data['address'],
            token_symbol=data.get('symbol') or "",
            buyer_fee_basis_points=_bps(data.get('buyer_fee_basis_points'), "buyer_fee_basis_points"),
            seller_fee_basis_points=_bps(data.get('seller_fee_basis_points'), "seller_fee_basis_points"),
            opensea_buyer_fee_basis_points=_bps(
                data.get('opensea_buyer_fee_basis_points'), "opensea_buyer_fee_basis_points"
            ),
            opensea_seller_fee_basis_points=_bps(
                data.get('opensea_seller_fee_basis_points'), "opensea_seller_fee_basis_points"
            ),
            dev_buyer_fee_basis_points=_bps(data.get('dev_buyer_fee_basis_points'), "dev_buyer_fee_basis_points"),
            dev_seller_fee_basis_points=_bps(data.get('dev_seller_fee_basis_points'), "dev_seller_fee_basis_points"),
            image_url=data.get('image_url') or "",
            stats=data.get('stats'),
            traits=data.get('traits'),
            external_link=data.get('external_link'),
            wiki_link=data.get('wiki_link'),
        )
    except KeyError as e:
        raise SchemaValidationError(f"asset contract: missing field {e}") from e


def collection_from_json(collection: Dict[str, Any]) -> OpenSeaCollection:
    """Normalize a ``collection`` payload."""
    data = _require(collection, "collection")
    fees = data.get('fees') or {}
    try:
        return OpenSeaCollection(
            created_date=parse_timestamp(data.get('created_date')),
            name=data.get('name') or "",
            description=data.get('description') or "",
            slug=data['slug'],
            editors=list(data.get('editors') or []),
            hidden=bool(data.get('hidden', False)),
            featured=bool(data.get('featured', False)),
            featured_image_url=data.get('featured_image_url') or "",
            display_data=data.get('display_data') or {},
            payment_tokens=[token_from_json(t) for t in data.get('payment_tokens') or []],
            opensea_buyer_fee_basis_points=_bps(
                data.get('opensea_buyer_fee_basis_points'), "opensea_buyer_fee_basis_points"
            ),
            opensea_seller_fee_basis_points=_bps(
                data.get('opensea_seller_fee_basis_points'), "opensea_seller_fee_basis_points"
            ),
            dev_buyer_fee_basis_points=_bps(data.get('dev_buyer_fee_basis_points'), "dev_buyer_fee_basis_points"),
            dev_seller_fee_basis_points=_bps(data.get('dev_seller_fee_basis_points'), "dev_seller_fee_basis_points"),
            payout_address=data.get('payout_address'),
            image_url=data.get('image_url') or "",
            large_image_url=data.get('large_image_url') or "",
            stats=data.get('stats') or {},
            trait_stats=data.get('traits') or {},
            external_link=data.get('external_url'),
            wiki_link=data.get('wiki_url'),
            fees=Fees(
                opensea_fees={k: _bps(v, f"opensea_fees.{k}") for k, v in (fees.get('opensea_fees') or {}).items()},
                seller_fees={k: _bps(v, f"seller_fees.{k}") for k, v in (fees.get('seller_fees') or {}).items()},
            ),
        )
    except KeyError as e:
        raise SchemaValidationError(f"collection: missing field {e}") from e


def transaction_from_json(transaction: Dict[str, Any]) -> Transaction:
    data = _require(transaction, "transaction")
    try:
        return Transaction(
            from_account=account_from_json(data['from_account']),
            to_account=account_from_json(data['to_account']),
            created_date=parse_timestamp(data.get('created_date')),
            modified_date=parse_timestamp(data.get('modified_date')),
            transaction_hash=data['transaction_hash'],
            transaction_index=str(data.get('transaction_index', "")),
            block_number=str(data.get('block_number', "")),
            block_hash=data.get('block_hash') or "",
            timestamp=parse_timestamp(data.get('timestamp')),
        )
    except KeyError as e:
        raise SchemaValidationError(f"transaction: missing field {e}") from e


def asset_event_from_json(asset_event: Dict[str, Any]) -> AssetEvent:
    """Normalize an asset event (e.g. an asset's ``last_sale``)."""
    data = _require(asset_event, "asset event")

    auction_type = None
    if data.get('auction_type'):
        try:
            auction_type = AuctionType(data['auction_type'])
        except ValueError:
            logger.warning(f"Unknown auction type '{data['auction_type']}', leaving it unset")

    return AssetEvent(
        event_type=parse_enum(AssetEventType, data.get('event_type'), "event_type"),
        event_timestamp=parse_timestamp(data.get('event_timestamp')),
        auction_type=auction_type,
        total_price=str(data.get('total_price') or "0"),
        transaction=transaction_from_json(data['transaction']) if data.get('transaction') else None,
        payment_token=token_from_json(data['payment_token']) if data.get('payment_token') else None,
    )


def asset_from_json(asset: Dict[str, Any]) -> OpenSeaAsset:
    """Normalize an asset payload, including its contract, collection and orders.

    When the payload only carries a combined ``orders`` list, it is split
    into sell and buy orders by side.
    """
    data = _require(asset, "asset")
    if not data.get('asset_contract'):
        raise SchemaValidationError("asset: missing asset_contract")
    if not data.get('collection'):
        raise SchemaValidationError("asset: missing collection")

    asset_contract = asset_contract_from_json(data['asset_contract'])
    image_url = data.get('image_url') or ""
    is_animated = image_url.lower().endswith(_ANIMATED_EXTENSIONS)
    background_color = data.get('background_color')

    orders = _orders_from_json(data.get('orders'))
    sell_orders = _orders_from_json(data.get('sell_orders'))
    buy_orders = _orders_from_json(data.get('buy_orders'))
    if orders is not None and sell_orders is None:
        sell_orders = [o for o in orders if o.side == OrderSide.SELL]
    if orders is not None and buy_orders is None:
        buy_orders = [o for o in orders if o.side == OrderSide.BUY]

    token_id = data.get('token_id')
    return OpenSeaAsset(
        token_id=str(token_id) if token_id is not None else None,
        token_address=asset_contract.address,
        schema_name=asset_contract.schema_name,
        version=_token_standard_version(data.get('version')),
        name=data.get('name') or "",
        decimals=data.get('decimals'),
        description=data.get('description') or "",
        owner=account_from_json(data['owner']) if data.get('owner') else None,
        asset_contract=asset_contract,
        collection=collection_from_json(data['collection']),
        orders=orders,
        sell_orders=sell_orders,
        buy_orders=buy_orders,
        is_presale=bool(data.get('is_presale', False)),
        image_url=image_url if is_animated else (data.get('image_preview_url') or image_url),
        image_preview_url=data.get('image_preview_url') or "",
        image_url_original=data.get('image_original_url') or "",
        image_url_thumbnail=data.get('image_thumbnail_url') or "",
        external_link=data.get('external_link') or "",
        opensea_link=data.get('permalink') or "",
        traits=list(data.get('traits') or []),
        num_sales=int(data.get('num_sales') or 0),
        last_sale=asset_event_from_json(data['last_sale']) if data.get('last_sale') else None,
        background_color=f"#{background_color}" if background_color else None,
    )


def _token_standard_version(value: Any) -> Optional[TokenStandardVersion]:
    if value is None:
        return None
    return parse_enum(TokenStandardVersion, value, "version")


def _orders_from_json(orders: Optional[List[Dict[str, Any]]]) -> Optional[List[Order]]:
    if orders is None:
        return None
    return [order_from_json(o) for o in orders]


def asset_bundle_from_json(asset_bundle: Dict[str, Any]) -> OpenSeaAssetBundle:
    data = _require(asset_bundle, "asset bundle")
    try:
        return OpenSeaAssetBundle(
            maker=account_from_json(data['maker']),
            assets=[asset_from_json(a) for a in data.get('assets') or []],
            asset_contract=asset_contract_from_json(data['asset_contract']) if data.get('asset_contract') else None,
            name=data.get('name') or "",
            slug=data['slug'],
            description=data.get('description'),
            external_link=data.get('external_link'),
            permalink=data.get('permalink') or "",
            sell_orders=_orders_from_json(data.get('sell_orders')),
        )
    except KeyError as e:
        raise SchemaValidationError(f"asset bundle: missing field {e}") from e


def order_from_json(order: Dict[str, Any], now: Optional[int] = None) -> Order:
    """Normalize an order as returned by the orderbook.

    Maker, taker and fee recipient arrive as account objects; their
    addresses fill the order's address fields and the objects are kept as
    ``*_account``. The current price is recomputed client-side because the
    server-side value omits the buyer fee and ages with latency.

    Args:
        order: Raw order payload.
        now: Unix time used for the price estimate (default: current time).

    Returns:
        Order: The normalized order.

    Raises:
        SchemaValidationError: If a required field is missing or malformed.
    """
    data = _require(order, "order")
    try:
        maker_account = account_from_json(data['maker'])
        taker_account = account_from_json(data['taker'])
        fee_recipient_account = account_from_json(data['fee_recipient'])
        created_date = parse_timestamp(data.get('created_date'))

        parsed = Order(
            hash=data.get('order_hash') or data.get('hash'),
            cancelled_or_finalized=bool(data.get('cancelled') or data.get('finalized')),
            marked_invalid=bool(data.get('marked_invalid')),
            metadata=exchange_metadata_from_dict(data['metadata']),
            quantity=to_uint(data.get('quantity') or 1, "quantity"),
            exchange=data['exchange'],
            maker_account=maker_account,
            taker_account=taker_account,
            maker=maker_account.address,
            taker=taker_account.address,
            maker_relayer_fee=to_uint(data['maker_relayer_fee'], "maker_relayer_fee"),
            taker_relayer_fee=to_uint(data['taker_relayer_fee'], "taker_relayer_fee"),
            maker_protocol_fee=to_uint(data['maker_protocol_fee'], "maker_protocol_fee"),
            taker_protocol_fee=to_uint(data['taker_protocol_fee'], "taker_protocol_fee"),
            maker_referrer_fee=to_uint(data.get('maker_referrer_fee') or 0, "maker_referrer_fee"),
            waiting_for_best_counter_order=fee_recipient_account.address.lower() == NULL_ADDRESS,
            fee_method=data['fee_method'],
            fee_recipient_account=fee_recipient_account,
            fee_recipient=fee_recipient_account.address,
            side=data['side'],
            sale_kind=data['sale_kind'],
            target=data['target'],
            how_to_call=data['how_to_call'],
            calldata=data['calldata'],
            replacement_pattern=data['replacement_pattern'],
            static_target=data['static_target'],
            static_extradata=data['static_extradata'],
            payment_token=data['payment_token'],
            base_price=to_uint(data['base_price'], "base_price"),
            extra=to_uint(data['extra'], "extra"),
            current_bounty=to_decimal(data.get('current_bounty') or 0, "current_bounty"),
            current_price=to_decimal(data.get('current_price') or 0, "current_price"),
            created_time=int(created_date.timestamp()) if created_date else None,
            listing_time=to_uint(data['listing_time'], "listing_time"),
            expiration_time=to_uint(data['expiration_time'], "expiration_time"),
            salt=to_uint(data['salt'], "salt"),
            english_auction_reserve_price=to_optional_uint(
                data.get('english_auction_reserve_price'), "english_auction_reserve_price"
            ),
            v=int(data['v']) if data.get('v') is not None else None,
            r=data.get('r'),
            s=data.get('s'),
            payment_token_contract=(
                token_from_json(data['payment_token_contract']) if data.get('payment_token_contract') else None
            ),
            asset=asset_from_json(data['asset']) if data.get('asset') else None,
            asset_bundle=asset_bundle_from_json(data['asset_bundle']) if data.get('asset_bundle') else None,
            nonce=data.get('nonce'),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise SchemaValidationError(f"order: invalid or missing field {e}") from e

    parsed.current_price = estimate_current_price(parsed, now=now)
    return parsed

