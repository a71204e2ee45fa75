"""Historical asset events, SDK event payloads and callback conventions."""

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Callable, List, Optional, TypeVar, Union

from ..enums import AssetEventType, AuctionType, EventType
from ..errors import InvalidCallbackResultError
from .accounts import OpenSeaAccount
from .assets import OpenSeaFungibleToken, WyvernAsset

if TYPE_CHECKING:
    from .orders import Order, UnsignedOrder

T = TypeVar("T")


@dataclass
class Transaction:
    """An on-chain transaction linked to an asset event."""
    from_account: OpenSeaAccount
    to_account: OpenSeaAccount
    created_date: Optional[datetime]
    modified_date: Optional[datetime]
    transaction_hash: str
    transaction_index: str
    block_number: str
    block_hash: str
    timestamp: Optional[datetime]


@dataclass(frozen=True)
class AssetEvent:
    """Details about an event that occurred on an asset.

    ``total_price`` is kept as the decimal string the API returns.
    """
    event_type: AssetEventType
    event_timestamp: Optional[datetime]
    auction_type: Optional[AuctionType]
    total_price: str
    transaction: Optional[Transaction] = None
    payment_token: Optional[OpenSeaFungibleToken] = None


@dataclass
class EventData:
    """Payload sent with each EventType.

    Every field is optional and the same shape is used for all event types;
    consumers should switch on the EventType the payload was emitted with,
    not on which fields happen to be set.
    """
    account_address: Optional[str] = None
    to_address: Optional[str] = None
    proxy_address: Optional[str] = None
    amount: Optional[int] = None
    contract_address: Optional[str] = None
    assets: Optional[List[WyvernAsset]] = None
    asset: Optional[WyvernAsset] = None
    transaction_hash: Optional[str] = None
    event: Optional[EventType] = None
    error: Optional[BaseException] = None
    order: Optional[Union['Order', 'UnsignedOrder']] = None
    buy: Optional['Order'] = None
    sell: Optional['Order'] = None
    match_metadata: Optional[str] = None


# Result handler for transaction-sending code: receives an error or a result, never both
Web3Callback = Callable[[Optional[Exception], Optional[T]], None]
# Success flag for approval-style prompts
TxnCallback = Callable[[bool], None]


def web3_callback_result(err: Optional[Exception], result: Optional[T]) -> Optional[T]:
    """Unwrap the arguments a Web3Callback receives.

    Args:
        err: The error passed to the callback, if any.
        result: The result passed to the callback, if any.

    Returns:
        The result when the call succeeded. This is None for a
        ``Web3Callback[None]``.

    Raises:
        The received error, unchanged, if one was passed.
        InvalidCallbackResultError: If both err and result are set.
    """
    if err is not None and result is not None:
        raise InvalidCallbackResultError("Callback received both an error and a result")
    if err is not None:
        raise err
    return result
