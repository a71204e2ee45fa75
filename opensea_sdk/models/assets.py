"""Asset references used by the exchange and the enriched OpenSea asset views."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional, Tuple, TypedDict, Union

from ..enums import AssetContractType, TokenStandardVersion, WyvernSchemaName
from ..errors import InvalidBundleError, SchemaValidationError
from ..utils.conversions import parse_enum, to_decimal_string, to_uint
from .accounts import OpenSeaAccount
from .fees import Fees, OpenSeaFees

if TYPE_CHECKING:
    from .events import AssetEvent
    from .orders import Order


@dataclass
class WyvernNFTAsset:
    """Reference to a single non-fungible token."""
    id: str
    address: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "address": self.address}


@dataclass
class WyvernFTAsset:
    """Reference to an amount of a fungible (or semi-fungible) token."""
    address: str
    quantity: str
    id: Optional[str] = None

    def __post_init__(self):
        # Validates and normalizes, e.g. "1e3" -> "1000"
        self.quantity = to_decimal_string(to_uint(self.quantity, "quantity"))

    def to_dict(self) -> Dict[str, Any]:
        data = {"address": self.address, "quantity": self.quantity}
        if self.id is not None:
            data["id"] = self.id
        return data


WyvernAsset = Union[WyvernNFTAsset, WyvernFTAsset]


def wyvern_asset_from_dict(data: Dict[str, Any]) -> WyvernAsset:
    """Parse either asset variant, discriminating on ``quantity``.

    Raises:
        SchemaValidationError: If the payload matches neither variant.
    """
    if not isinstance(data, dict) or "address" not in data:
        raise SchemaValidationError(f"Wyvern asset requires an address: {data!r}")
    if "quantity" in data:
        token_id = data.get("id")
        return WyvernFTAsset(
            address=data["address"],
            quantity=data["quantity"],
            id=str(token_id) if token_id is not None else None,
        )
    if data.get("id") is None:
        raise SchemaValidationError(f"Non-fungible Wyvern asset requires an id: {data!r}")
    return WyvernNFTAsset(id=str(data["id"]), address=data["address"])


@dataclass
class WyvernBundle:
    """A group of assets traded as one order.

    ``assets[i]`` is transferred using ``schemas[i]``, so both sequences must
    have the same length and their order is significant.
    """
    assets: List[WyvernAsset]
    schemas: List[WyvernSchemaName]
    name: Optional[str] = None
    description: Optional[str] = None
    external_link: Optional[str] = None

    def __post_init__(self):
        if len(self.assets) != len(self.schemas):
            raise InvalidBundleError(
                f"Bundle has {len(self.assets)} assets but {len(self.schemas)} schemas"
            )
        self.schemas = [parse_enum(WyvernSchemaName, s, "schemas") for s in self.schemas]

    def pairs(self) -> Iterator[Tuple[WyvernAsset, WyvernSchemaName]]:
        """Yield each asset with the schema it is transferred under."""
        return iter(zip(self.assets, self.schemas))

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "assets": [a.to_dict() for a in self.assets],
            "schemas": [s.value for s in self.schemas],
        }
        if self.name is not None:
            data["name"] = self.name
        if self.description is not None:
            data["description"] = self.description
        if self.external_link is not None:
            data["external_link"] = self.external_link
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WyvernBundle':
        try:
            assets = [wyvern_asset_from_dict(a) for a in data["assets"]]
            schemas = data["schemas"]
        except (KeyError, TypeError) as e:
            raise InvalidBundleError(f"Malformed bundle: {data!r}") from e
        return cls(
            assets=assets,
            schemas=list(schemas),
            name=data.get("name"),
            description=data.get("description"),
            external_link=data.get("external_link"),
        )


@dataclass
class Asset:
    """Simple, unannotated asset reference."""
    token_id: Optional[str]
    token_address: str
    schema_name: Optional[WyvernSchemaName] = None
    version: Optional[TokenStandardVersion] = None
    name: Optional[str] = None
    decimals: Optional[int] = None


def wyvern_asset_for(asset: Asset, quantity: int = 1) -> WyvernAsset:
    """Build the exchange-level reference for an asset under its schema.

    ERC20 amounts carry no token id, ERC1155 amounts carry both an id and a
    quantity, and every other schema refers to a single token.
    """
    schema = asset.schema_name or WyvernSchemaName.ERC721
    if schema == WyvernSchemaName.ERC20:
        return WyvernFTAsset(address=asset.token_address.lower(), quantity=str(quantity))
    if asset.token_id is None:
        raise SchemaValidationError(f"{schema.value} asset at {asset.token_address} requires a token id")
    if schema == WyvernSchemaName.ERC1155:
        return WyvernFTAsset(
            id=str(asset.token_id),
            address=asset.token_address.lower(),
            quantity=str(quantity),
        )
    return WyvernNFTAsset(id=str(asset.token_id), address=asset.token_address.lower())


@dataclass
class OpenSeaFungibleToken:
    """Fungible token annotated with OpenSea metadata."""
    name: str
    symbol: str
    decimals: int
    address: str
    image_url: Optional[str] = None
    eth_price: Optional[str] = None
    usd_price: Optional[str] = None


@dataclass
class OpenSeaAssetContract(OpenSeaFees):
    """Annotated asset contract with OpenSea metadata."""
    name: str
    address: str
    type: AssetContractType
    schema_name: WyvernSchemaName
    seller_fee_basis_points: int
    buyer_fee_basis_points: int
    description: str
    token_symbol: str
    image_url: str
    stats: Optional[Dict[str, Any]] = None
    traits: Optional[List[Dict[str, Any]]] = None
    external_link: Optional[str] = None
    wiki_link: Optional[str] = None


class NumericalTraitStats(TypedDict):
    min: float
    max: float


StringTraitStats = Dict[str, int]
OpenSeaTraitStats = Dict[str, Union[NumericalTraitStats, StringTraitStats]]


class OpenSeaCollectionStats(TypedDict, total=False):
    """Annotated collection stats, keyed exactly as the API returns them."""
    one_minute_volume: float
    one_minute_change: float
    one_minute_sales: float
    one_minute_sales_change: float
    one_minute_average_price: float
    one_minute_difference: float
    five_minute_volume: float
    five_minute_change: float
    five_minute_sales: float
    five_minute_sales_change: float
    five_minute_average_price: float
    five_minute_difference: float
    fifteen_minute_volume: float
    fifteen_minute_change: float
    fifteen_minute_sales: float
    fifteen_minute_sales_change: float
    fifteen_minute_average_price: float
    fifteen_minute_difference: float
    thirty_minute_volume: float
    thirty_minute_change: float
    thirty_minute_sales: float
    thirty_minute_sales_change: float
    thirty_minute_average_price: float
    thirty_minute_difference: float
    one_hour_volume: float
    one_hour_change: float
    one_hour_sales: float
    one_hour_sales_change: float
    one_hour_average_price: float
    one_hour_difference: float
    six_hour_volume: float
    six_hour_change: float
    six_hour_sales: float
    six_hour_sales_change: float
    six_hour_average_price: float
    six_hour_difference: float
    one_day_volume: float
    one_day_change: float
    one_day_sales: float
    one_day_sales_change: float
    one_day_average_price: float
    one_day_difference: float
    seven_day_volume: float
    seven_day_change: float
    seven_day_sales: float
    seven_day_average_price: float
    seven_day_difference: float
    thirty_day_volume: float
    thirty_day_change: float
    thirty_day_sales: float
    thirty_day_average_price: float
    thirty_day_difference: float
    total_volume: float
    total_sales: float
    total_supply: float
    count: float
    num_owners: int
    average_price: float
    num_reports: int
    market_cap: float
    floor_price: float


@dataclass
class OpenSeaCollection(OpenSeaFees):
    """Annotated collection with OpenSea metadata."""
    name: str
    slug: str
    editors: List[str]
    hidden: bool
    featured: bool
    created_date: Optional[datetime]
    description: str
    image_url: str
    large_image_url: str
    featured_image_url: str
    stats: OpenSeaCollectionStats
    display_data: Dict[str, Any]
    payment_tokens: List[OpenSeaFungibleToken]
    trait_stats: OpenSeaTraitStats
    fees: Fees
    payout_address: Optional[str] = None
    external_link: Optional[str] = None
    wiki_link: Optional[str] = None


@dataclass(kw_only=True)
class OpenSeaAsset(Asset):
    """Asset annotated with OpenSea metadata."""
    asset_contract: OpenSeaAssetContract
    collection: OpenSeaCollection
    description: str = ""
    owner: Optional[OpenSeaAccount] = None
    orders: Optional[List['Order']] = None
    buy_orders: Optional[List['Order']] = None
    sell_orders: Optional[List['Order']] = None
    is_presale: bool = False
    image_url: str = ""
    image_preview_url: str = ""
    image_url_original: str = ""
    image_url_thumbnail: str = ""
    opensea_link: str = ""
    external_link: str = ""
    traits: List[Dict[str, Any]] = field(default_factory=list)
    num_sales: int = 0
    last_sale: Optional['AssetEvent'] = None
    background_color: Optional[str] = None


@dataclass
class OpenSeaAssetBundle:
    """Assets grouped together into one OpenSea order.

    Bundle URLs are generated from the name.
    """
    maker: OpenSeaAccount
    assets: List[OpenSeaAsset]
    name: str
    slug: str
    permalink: str
    sell_orders: Optional[List['Order']] = None
    asset_contract: Optional[OpenSeaAssetContract] = None
    description: Optional[str] = None
    external_link: Optional[str] = None
