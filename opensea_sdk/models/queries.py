"""Query shapes for the orderbook REST API.

Query field names are the snake_case parameter names the API expects, so
``to_params`` only has to drop unset fields and coerce values.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Union

from ..enums import OrderSide, SaleKind
from ..errors import SchemaValidationError
from ..utils.conversions import to_query_value

TokenId = Union[int, str]


def _to_params(query) -> Dict[str, Any]:
    params = {}
    for key, value in asdict(query).items():
        if value is None:
            continue
        params[key] = to_query_value(value)
    return params


@dataclass
class OrderQuery:
    """Filters for retrieving orders.

    See https://docs.opensea.io/reference#retrieving-orders for the full list
    of parameters.
    """
    owner: Optional[str] = None
    maker: Optional[str] = None
    taker: Optional[str] = None
    sale_kind: Optional[SaleKind] = None
    side: Optional[OrderSide] = None
    asset_contract_address: Optional[str] = None
    payment_token_address: Optional[str] = None
    is_english: Optional[bool] = None
    is_expired: Optional[bool] = None
    bundled: Optional[bool] = None
    include_invalid: Optional[bool] = None
    token_id: Optional[TokenId] = None
    token_ids: Optional[List[TokenId]] = None
    listed_after: Optional[TokenId] = None
    listed_before: Optional[TokenId] = None
    limit: Optional[int] = None
    offset: Optional[int] = None

    def to_params(self) -> Dict[str, Any]:
        return _to_params(self)


@dataclass
class OpenSeaAssetQuery:
    """Filters for retrieving assets.

    Pages either by ``limit``/``offset`` or by ``cursor``, not both.
    """
    owner: Optional[str] = None
    asset_contract_address: Optional[str] = None
    token_ids: Optional[List[TokenId]] = None
    order_by: Optional[str] = None
    order_direction: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    cursor: Optional[str] = None

    def __post_init__(self):
        if self.cursor is not None and self.offset is not None:
            raise SchemaValidationError("Asset queries page by cursor or by offset, not both")

    def to_params(self) -> Dict[str, Any]:
        return _to_params(self)


@dataclass
class OpenSeaAssetBundleQuery:
    """Filters for retrieving bundles."""
    name: Optional[str] = None
    description: Optional[str] = None
    external_link: Optional[str] = None
    maker: Optional[str] = None
    asset_contract_address: Optional[str] = None
    token_ids: Optional[List[TokenId]] = None
    on_sale: Optional[bool] = None
    owner: Optional[str] = None
    offset: Optional[int] = None
    limit: Optional[int] = None

    def to_params(self) -> Dict[str, Any]:
        return _to_params(self)


@dataclass
class OpenSeaFungibleTokenQuery:
    """Filters for retrieving fungible (payment) tokens."""
    name: Optional[str] = None
    symbol: Optional[str] = None
    decimals: Optional[int] = None
    address: Optional[str] = None
    image_url: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None

    def to_params(self) -> Dict[str, Any]:
        return _to_params(self)
