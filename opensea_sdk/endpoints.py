"""Wire-level requests and responses of the OpenSea orderbook API.

``OpenSeaRequestBuilder`` only prepares requests; sending them, retrying and
backing off are left to the caller's HTTP session, e.g.::

    builder = OpenSeaRequestBuilder(OpenSeaAPIConfig.from_env())
    response = requests.Session().send(builder.orders(OrderQuery(maker=address)))
    orders = [order_from_json(o) for o in response.json()["orders"]]

Live orderbook responses are snake_case with nested account objects, so
their orders go through ``parsing.order_from_json``.
``parse_orderbook_response`` reads the camelCase ``OrderJSON`` form, as
posted by ``post_order`` or stored by clients.
"""

import logging
from typing import Any, Dict, List, Optional, Union

import requests

from .config import OpenSeaAPIConfig
from .constants import API_PATH, ORDERBOOK_PATH
from .errors import OrderSerializationError
from .models.orders import OrderbookResponse, OrderJSON
from .models.queries import (
    OpenSeaAssetBundleQuery,
    OpenSeaAssetQuery,
    OpenSeaFungibleTokenQuery,
    OrderQuery,
)

logger = logging.getLogger(__name__)


class OpenSeaRequestBuilder:
    """Builds prepared HTTP requests for the orderbook and asset endpoints."""

    def __init__(self, config: Optional[OpenSeaAPIConfig] = None):
        """Initialize the request builder.

        Args:
            config: API configuration (default: mainnet, no API key).
        """
        self.config = config or OpenSeaAPIConfig()
        self.base_url = self.config.resolved_api_base_url

    def _headers(self, has_body: bool = False) -> Dict[str, str]:
        headers = {'Accept': 'application/json'}
        if has_body:
            headers['Content-Type'] = 'application/json'
        if self.config.api_key:
            headers['X-API-KEY'] = self.config.api_key
        return headers

    def _prepare(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Dict[str, Any]] = None
    ) -> requests.PreparedRequest:
        request = requests.Request(
            method=method,
            url=f"{self.base_url}{path}",
            params=params or {},
            json=json_data,
            headers=self._headers(has_body=json_data is not None),
        )
        prepared = request.prepare()
        logger.debug(f"Prepared {method} {prepared.url}")
        return prepared

    def orders(self, query: Optional[OrderQuery] = None) -> requests.PreparedRequest:
        """GET a page of orders matching ``query``."""
        params = query.to_params() if query else {}
        return self._prepare('GET', f"{ORDERBOOK_PATH}/orders", params=params)

    def post_order(self, order: OrderJSON) -> requests.PreparedRequest:
        """POST a signed order to the orderbook."""
        if order.hash is None:
            raise OrderSerializationError("Orders must be hashed before they are posted")
        return self._prepare('POST', f"{ORDERBOOK_PATH}/orders/post/", json_data=order.to_dict())

    def assets(self, query: Optional[OpenSeaAssetQuery] = None) -> requests.PreparedRequest:
        params = query.to_params() if query else {}
        return self._prepare('GET', f"{API_PATH}/assets/", params=params)

    def asset(self, token_address: str, token_id: Union[int, str, None]) -> requests.PreparedRequest:
        """GET a single asset. Fungible tokens are addressed with token id 0."""
        return self._prepare('GET', f"{API_PATH}/asset/{token_address}/{token_id or 0}/")

    def bundles(self, query: Optional[OpenSeaAssetBundleQuery] = None) -> requests.PreparedRequest:
        params = query.to_params() if query else {}
        return self._prepare('GET', f"{API_PATH}/bundles/", params=params)

    def payment_tokens(self, query: Optional[OpenSeaFungibleTokenQuery] = None) -> requests.PreparedRequest:
        params = query.to_params() if query else {}
        return self._prepare('GET', f"{API_PATH}/tokens/", params=params)


def parse_orderbook_response(payload: Union[Dict[str, Any], List[Dict[str, Any]]]) -> OrderbookResponse:
    """Parse an orderbook query response.

    Accepts the ``{"orders": [...], "count": n}`` envelope as well as a bare
    list of orders, whose count is its length.

    Raises:
        OrderSerializationError: If the payload or any order in it is malformed.
    """
    if isinstance(payload, list):
        return OrderbookResponse(
            orders=[OrderJSON.from_dict(o) for o in payload],
            count=len(payload),
        )
    if not isinstance(payload, dict):
        raise OrderSerializationError(f"Unexpected orderbook response type: {type(payload).__name__}")
    return OrderbookResponse.from_dict(payload)
