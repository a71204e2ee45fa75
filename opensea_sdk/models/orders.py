"""Order records through their lifecycle, and their wire representations.

An ``UnhashedOrder`` is built client-side from user intent. Once its
canonical hash is known it becomes an ``UnsignedOrder``, and once a wallet
produces ``(v, r, s)`` it becomes a signed ``Order``. Orders travel to and
from the orderbook as ``OrderJSON``, where every amount is a decimal string.
"""

import logging
from dataclasses import dataclass, fields
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, List, NamedTuple, Optional, Union

from ..constants import NULL_ADDRESS, NULL_BLOCK_HASH
from ..enums import FeeMethod, HowToCall, OrderSide, SaleKind, WyvernSchemaName
from ..errors import OrderSerializationError, SchemaValidationError
from ..pricing import can_settle_order
from ..utils.conversions import (
    parse_enum,
    to_decimal_string,
    to_optional_uint,
    to_uint,
)
from .accounts import OpenSeaAccount
from .assets import (
    OpenSeaFungibleToken,
    WyvernAsset,
    WyvernBundle,
    wyvern_asset_from_dict,
)

if TYPE_CHECKING:
    from .assets import OpenSeaAsset, OpenSeaAssetBundle

logger = logging.getLogger(__name__)


@dataclass
class ExchangeMetadataForAsset:
    """Order metadata for a single asset traded under one schema."""
    asset: WyvernAsset
    schema: WyvernSchemaName
    referrer_address: Optional[str] = None

    def __post_init__(self):
        self.schema = parse_enum(WyvernSchemaName, self.schema, "metadata.schema")

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"asset": self.asset.to_dict(), "schema": self.schema.value}
        if self.referrer_address is not None:
            data["referrerAddress"] = self.referrer_address
        return data


@dataclass
class ExchangeMetadataForBundle:
    """Order metadata for a bundle of assets."""
    bundle: WyvernBundle
    referrer_address: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"bundle": self.bundle.to_dict()}
        if self.referrer_address is not None:
            data["referrerAddress"] = self.referrer_address
        return data


ExchangeMetadata = Union[ExchangeMetadataForAsset, ExchangeMetadataForBundle]


def exchange_metadata_from_dict(data: Dict[str, Any]) -> ExchangeMetadata:
    """Parse order metadata, which must describe exactly one asset or one bundle.

    Raises:
        SchemaValidationError: If both or neither of ``asset`` and ``bundle`` are present.
    """
    if not isinstance(data, dict):
        raise SchemaValidationError(f"Order metadata must be an object, got {data!r}")

    has_asset = data.get("asset") is not None
    has_bundle = data.get("bundle") is not None
    if has_asset == has_bundle:
        raise SchemaValidationError(
            "Order metadata must contain exactly one of 'asset' or 'bundle'"
        )

    referrer = data.get("referrerAddress")
    if has_asset:
        if data.get("schema") is None:
            raise SchemaValidationError("Asset metadata requires a schema")
        return ExchangeMetadataForAsset(
            asset=wyvern_asset_from_dict(data["asset"]),
            schema=data["schema"],
            referrer_address=referrer,
        )
    return ExchangeMetadataForBundle(
        bundle=WyvernBundle.from_dict(data["bundle"]),
        referrer_address=referrer,
    )


_AMOUNT_FIELDS = (
    "maker_relayer_fee",
    "taker_relayer_fee",
    "maker_protocol_fee",
    "taker_protocol_fee",
    "base_price",
    "extra",
    "listing_time",
    "expiration_time",
    "salt",
    "quantity",
    "maker_referrer_fee",
)


@dataclass
class UnhashedOrder:
    """An order as constructed client-side, before hashing.

    Amounts and timestamps are Python ints so wei-denominated values of any
    size are exact. ``extra`` is the Dutch auction decay amount and ``salt``
    only exists to make otherwise-identical orders hash differently.
    """
    exchange: str
    maker: str
    taker: str
    maker_relayer_fee: int
    taker_relayer_fee: int
    maker_protocol_fee: int
    taker_protocol_fee: int
    fee_recipient: str
    target: str
    calldata: str
    replacement_pattern: str
    static_target: str
    static_extradata: str
    payment_token: str
    base_price: int
    extra: int
    listing_time: int
    expiration_time: int
    salt: int
    fee_method: FeeMethod
    side: OrderSide
    sale_kind: SaleKind
    how_to_call: HowToCall
    quantity: int
    maker_referrer_fee: int
    waiting_for_best_counter_order: bool
    metadata: ExchangeMetadata
    english_auction_reserve_price: Optional[int] = None

    def __post_init__(self):
        for name in _AMOUNT_FIELDS:
            setattr(self, name, to_uint(getattr(self, name), name))
        self.english_auction_reserve_price = to_optional_uint(
            self.english_auction_reserve_price, "english_auction_reserve_price"
        )
        self.fee_method = parse_enum(FeeMethod, self.fee_method, "fee_method")
        self.side = parse_enum(OrderSide, self.side, "side")
        self.sale_kind = parse_enum(SaleKind, self.sale_kind, "sale_kind")
        self.how_to_call = parse_enum(HowToCall, self.how_to_call, "how_to_call")
        if not isinstance(self.metadata, (ExchangeMetadataForAsset, ExchangeMetadataForBundle)):
            raise SchemaValidationError(
                f"metadata must be asset or bundle metadata, got {type(self.metadata).__name__}"
            )

    def with_hash(self, order_hash: str) -> 'UnsignedOrder':
        """Attach the order's computed hash."""
        return UnsignedOrder(**_field_values(self, UnhashedOrder), hash=order_hash)


@dataclass
class UnsignedOrder(UnhashedOrder):
    """An order whose canonical hash has been computed."""
    hash: Optional[str] = None

    def with_signature(self, signature: 'ECSignature') -> 'Order':
        """Attach the maker's signature, producing a submittable order."""
        return Order(
            **_field_values(self, UnsignedOrder),
            v=signature.v,
            r=signature.r,
            s=signature.s,
        )


@dataclass
class ECSignature:
    v: int
    r: str
    s: str


@dataclass
class Order(UnsignedOrder):
    """A signed order, plus fields the API computes or resolves at read time.

    Orders don't need a signature if they were pre-approved on the exchange
    with an ``approveOrder_`` transaction.
    """
    v: Optional[int] = None
    r: Optional[str] = None
    s: Optional[str] = None
    created_time: Optional[int] = None
    current_price: Optional[Decimal] = None
    current_bounty: Optional[Decimal] = None
    maker_account: Optional[OpenSeaAccount] = None
    taker_account: Optional[OpenSeaAccount] = None
    payment_token_contract: Optional[OpenSeaFungibleToken] = None
    fee_recipient_account: Optional[OpenSeaAccount] = None
    cancelled_or_finalized: Optional[bool] = None
    marked_invalid: Optional[bool] = None
    asset: Optional['OpenSeaAsset'] = None
    asset_bundle: Optional['OpenSeaAssetBundle'] = None
    nonce: Optional[int] = None

    @property
    def signature(self) -> Optional[ECSignature]:
        if self.v is None or self.r is None or self.s is None:
            return None
        return ECSignature(v=self.v, r=self.r, s=self.s)

    @property
    def is_terminal(self) -> bool:
        """Cancelled, finalized or invalid orders can never be matched."""
        return bool(self.cancelled_or_finalized) or bool(self.marked_invalid)

    def is_fillable(self, now: int) -> bool:
        """Whether the order may still be matched at unix time ``now``."""
        if self.is_terminal:
            return False
        return can_settle_order(self.listing_time, self.expiration_time, now)


def _field_values(instance, cls) -> Dict[str, Any]:
    return {f.name: getattr(instance, f.name) for f in fields(cls)}


# (attribute, wire key) for the fields every OrderJSON carries
_ORDER_JSON_REQUIRED_KEYS = (
    ("exchange", "exchange"),
    ("maker", "maker"),
    ("taker", "taker"),
    ("maker_relayer_fee", "makerRelayerFee"),
    ("taker_relayer_fee", "takerRelayerFee"),
    ("maker_protocol_fee", "makerProtocolFee"),
    ("taker_protocol_fee", "takerProtocolFee"),
    ("fee_recipient", "feeRecipient"),
    ("fee_method", "feeMethod"),
    ("side", "side"),
    ("sale_kind", "saleKind"),
    ("target", "target"),
    ("how_to_call", "howToCall"),
    ("calldata", "calldata"),
    ("replacement_pattern", "replacementPattern"),
    ("static_target", "staticTarget"),
    ("static_extradata", "staticExtradata"),
    ("payment_token", "paymentToken"),
    ("base_price", "basePrice"),
    ("extra", "extra"),
    ("listing_time", "listingTime"),
    ("expiration_time", "expirationTime"),
    ("salt", "salt"),
    ("maker_referrer_fee", "makerReferrerFee"),
    ("quantity", "quantity"),
)

_ORDER_JSON_OPTIONAL_KEYS = (
    ("english_auction_reserve_price", "englishAuctionReservePrice"),
    ("created_time", "createdTime"),
    ("hash", "hash"),
    ("v", "v"),
    ("r", "r"),
    ("s", "s"),
    ("nonce", "nonce"),
)

# Keys the raw Wyvern order schema does not know about
_NON_WYVERN_KEYS = (
    "makerReferrerFee",
    "quantity",
    "englishAuctionReservePrice",
    "createdTime",
    "metadata",
    "hash",
    "v",
    "r",
    "s",
)


@dataclass
class OrderJSON:
    """Wire form of an order, as posted to and returned by the orderbook.

    Numeric order fields are decimal strings so no precision is lost on
    amounts above 2**53. The four selectors (fee method, side, sale kind,
    how to call) are plain integers.
    """
    exchange: str
    maker: str
    taker: str
    maker_relayer_fee: str
    taker_relayer_fee: str
    maker_protocol_fee: str
    taker_protocol_fee: str
    fee_recipient: str
    fee_method: int
    side: int
    sale_kind: int
    target: str
    how_to_call: int
    calldata: str
    replacement_pattern: str
    static_target: str
    static_extradata: str
    payment_token: str
    base_price: str
    extra: str
    listing_time: Union[int, str]
    expiration_time: Union[int, str]
    salt: str
    maker_referrer_fee: str
    quantity: str
    metadata: ExchangeMetadata
    english_auction_reserve_price: Optional[str] = None
    created_time: Optional[Union[int, str]] = None
    hash: Optional[str] = None
    v: Optional[int] = None
    r: Optional[str] = None
    s: Optional[str] = None
    nonce: Optional[int] = None

    @classmethod
    def from_order(cls, order: UnhashedOrder) -> 'OrderJSON':
        """Serialize an order of any lifecycle stage.

        Addresses are lower-cased. Hash, signature, creation time and nonce
        are carried when the order has them.
        """
        created_time = getattr(order, "created_time", None)
        reserve = order.english_auction_reserve_price
        return cls(
            exchange=order.exchange.lower(),
            maker=order.maker.lower(),
            taker=order.taker.lower(),
            maker_relayer_fee=to_decimal_string(order.maker_relayer_fee),
            taker_relayer_fee=to_decimal_string(order.taker_relayer_fee),
            maker_protocol_fee=to_decimal_string(order.maker_protocol_fee),
            taker_protocol_fee=to_decimal_string(order.taker_protocol_fee),
            fee_recipient=order.fee_recipient.lower(),
            fee_method=int(order.fee_method),
            side=int(order.side),
            sale_kind=int(order.sale_kind),
            target=order.target.lower(),
            how_to_call=int(order.how_to_call),
            calldata=order.calldata,
            replacement_pattern=order.replacement_pattern,
            static_target=order.static_target.lower(),
            static_extradata=order.static_extradata,
            payment_token=order.payment_token.lower(),
            base_price=to_decimal_string(order.base_price),
            extra=to_decimal_string(order.extra),
            listing_time=to_decimal_string(order.listing_time),
            expiration_time=to_decimal_string(order.expiration_time),
            salt=to_decimal_string(order.salt),
            maker_referrer_fee=to_decimal_string(order.maker_referrer_fee),
            quantity=to_decimal_string(order.quantity),
            metadata=order.metadata,
            english_auction_reserve_price=to_decimal_string(reserve) if reserve is not None else None,
            created_time=to_decimal_string(created_time) if created_time is not None else None,
            hash=getattr(order, "hash", None),
            v=getattr(order, "v", None),
            r=getattr(order, "r", None),
            s=getattr(order, "s", None),
            nonce=getattr(order, "nonce", None),
        )

    def _unhashed_kwargs(self) -> Dict[str, Any]:
        try:
            return {
                "exchange": self.exchange,
                "maker": self.maker,
                "taker": self.taker,
                "maker_relayer_fee": to_uint(self.maker_relayer_fee, "makerRelayerFee"),
                "taker_relayer_fee": to_uint(self.taker_relayer_fee, "takerRelayerFee"),
                "maker_protocol_fee": to_uint(self.maker_protocol_fee, "makerProtocolFee"),
                "taker_protocol_fee": to_uint(self.taker_protocol_fee, "takerProtocolFee"),
                "fee_recipient": self.fee_recipient,
                "target": self.target,
                "calldata": self.calldata,
                "replacement_pattern": self.replacement_pattern,
                "static_target": self.static_target,
                "static_extradata": self.static_extradata,
                "payment_token": self.payment_token,
                "base_price": to_uint(self.base_price, "basePrice"),
                "extra": to_uint(self.extra, "extra"),
                "listing_time": to_uint(self.listing_time, "listingTime"),
                "expiration_time": to_uint(self.expiration_time, "expirationTime"),
                "salt": to_uint(self.salt, "salt"),
                "fee_method": parse_enum(FeeMethod, self.fee_method, "feeMethod"),
                "side": parse_enum(OrderSide, self.side, "side"),
                "sale_kind": parse_enum(SaleKind, self.sale_kind, "saleKind"),
                "how_to_call": parse_enum(HowToCall, self.how_to_call, "howToCall"),
                "quantity": to_uint(self.quantity, "quantity"),
                "maker_referrer_fee": to_uint(self.maker_referrer_fee, "makerReferrerFee"),
                # English auctions awaiting a best offer are posted with no fee recipient
                "waiting_for_best_counter_order": self.fee_recipient.lower() == NULL_ADDRESS,
                "metadata": self.metadata,
                "english_auction_reserve_price": to_optional_uint(
                    self.english_auction_reserve_price, "englishAuctionReservePrice"
                ),
            }
        except SchemaValidationError as e:
            raise OrderSerializationError(f"Invalid order JSON: {e}") from e

    def to_unhashed_order(self) -> UnhashedOrder:
        """Deserialize into an UnhashedOrder, discarding hash and signature."""
        return UnhashedOrder(**self._unhashed_kwargs())

    def to_order(self) -> Order:
        """Deserialize into an Order, keeping hash, signature and nonce."""
        kwargs = self._unhashed_kwargs()
        try:
            created_time = to_optional_uint(self.created_time, "createdTime")
        except SchemaValidationError as e:
            raise OrderSerializationError(f"Invalid order JSON: {e}") from e
        return Order(
            **kwargs,
            hash=self.hash,
            v=self.v,
            r=self.r,
            s=self.s,
            created_time=created_time,
            nonce=self.nonce,
        )

    def to_dict(self) -> Dict[str, Any]:
        """The camelCase JSON body the orderbook expects."""
        data: Dict[str, Any] = {
            key: getattr(self, attr) for attr, key in _ORDER_JSON_REQUIRED_KEYS
        }
        data["metadata"] = self.metadata.to_dict()
        for attr, key in _ORDER_JSON_OPTIONAL_KEYS:
            value = getattr(self, attr)
            if value is not None:
                data[key] = value
        return data

    def to_raw_wyvern_dict(self) -> Dict[str, Any]:
        """The subset of fields defined by the Wyvern order schema itself."""
        return {k: v for k, v in self.to_dict().items() if k not in _NON_WYVERN_KEYS}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OrderJSON':
        """Parse a camelCase order JSON object.

        Raises:
            OrderSerializationError: If required keys are missing or the
                metadata is malformed.
        """
        if not isinstance(data, dict):
            raise OrderSerializationError(f"Order JSON must be an object, got {type(data).__name__}")

        missing = [key for _, key in _ORDER_JSON_REQUIRED_KEYS if key not in data]
        if "metadata" not in data:
            missing.append("metadata")
        if missing:
            raise OrderSerializationError(f"Order JSON is missing keys: {', '.join(missing)}")

        try:
            metadata = exchange_metadata_from_dict(data["metadata"])
        except SchemaValidationError as e:
            raise OrderSerializationError(f"Invalid order metadata: {e}") from e

        kwargs = {attr: data[key] for attr, key in _ORDER_JSON_REQUIRED_KEYS}
        kwargs.update({attr: data.get(key) for attr, key in _ORDER_JSON_OPTIONAL_KEYS})
        return cls(metadata=metadata, **kwargs)


@dataclass
class OrderbookResponse:
    """A page of orders returned by an orderbook query."""
    orders: List[OrderJSON]
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"orders": [o.to_dict() for o in self.orders], "count": self.count}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OrderbookResponse':
        try:
            raw_orders = data["orders"]
            count = int(data["count"])
        except (KeyError, TypeError, ValueError) as e:
            raise OrderSerializationError(f"Malformed orderbook response: {e}") from e
        orders = [OrderJSON.from_dict(o) for o in raw_orders]
        logger.debug(f"Parsed orderbook response: {len(orders)} orders (count: {count})")
        return cls(orders=orders, count=count)


class WyvernAtomicMatchParameters(NamedTuple):
    """Positional arguments of the exchange's ``atomicMatch_`` entry point.

    The slot order is part of the contract ABI and must not change.
    """
    addrs: List[str]
    uints: List[int]
    fee_methods_sides_kinds_how_to_calls: List[int]
    calldata_buy: str
    calldata_sell: str
    replacement_pattern_buy: str
    replacement_pattern_sell: str
    static_extradata_buy: str
    static_extradata_sell: str
    vs: List[int]
    rss_metadata: List[str]

    @classmethod
    def from_orders(
        cls,
        buy: Order,
        sell: Order,
        metadata: str = NULL_BLOCK_HASH
    ) -> 'WyvernAtomicMatchParameters':
        """Lay out a buy/sell pair as atomic match arguments.

        Args:
            buy: The buy-side order.
            sell: The sell-side order.
            metadata: 32-byte match metadata (e.g. a referrer tag).

        Returns:
            WyvernAtomicMatchParameters: 14 addresses, 18 uints, 8 selectors,
            six calldata/pattern/extradata fields, 2 vs and 5 rss/metadata.

        Raises:
            SchemaValidationError: If the orders are not on opposite sides.
        """
        if buy.side != OrderSide.BUY or sell.side != OrderSide.SELL:
            raise SchemaValidationError("atomic match requires a buy order and a sell order")

        def addrs(o: Order) -> List[str]:
            return [o.exchange, o.maker, o.taker, o.fee_recipient, o.target, o.static_target, o.payment_token]

        def uints(o: Order) -> List[int]:
            return [
                o.maker_relayer_fee, o.taker_relayer_fee, o.maker_protocol_fee, o.taker_protocol_fee,
                o.base_price, o.extra, o.listing_time, o.expiration_time, o.salt,
            ]

        def selectors(o: Order) -> List[int]:
            return [int(o.fee_method), int(o.side), int(o.sale_kind), int(o.how_to_call)]

        return cls(
            addrs(buy) + addrs(sell),
            uints(buy) + uints(sell),
            selectors(buy) + selectors(sell),
            buy.calldata,
            sell.calldata,
            buy.replacement_pattern,
            sell.replacement_pattern,
            buy.static_extradata,
            sell.static_extradata,
            [buy.v or 0, sell.v or 0],
            [
                buy.r or NULL_BLOCK_HASH,
                buy.s or NULL_BLOCK_HASH,
                sell.r or NULL_BLOCK_HASH,
                sell.s or NULL_BLOCK_HASH,
                metadata,
            ],
        )

