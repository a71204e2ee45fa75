"""Fee structures and the buyer/seller fee computation."""

import logging
from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Any, Dict, Optional

from ..constants import (
    DEFAULT_BUYER_FEE_BASIS_POINTS,
    DEFAULT_MAX_BOUNTY,
    DEFAULT_SELLER_FEE_BASIS_POINTS,
    INVERSE_BASIS_POINT,
    MAX_BASIS_POINTS,
    OPENSEA_SELLER_BOUNTY_BASIS_POINTS,
)
from ..enums import OrderSide
from ..errors import InvalidFeeError

if TYPE_CHECKING:
    from .assets import OpenSeaAsset

logger = logging.getLogger(__name__)

_FEE_FIELDS = (
    "opensea_seller_fee_basis_points",
    "opensea_buyer_fee_basis_points",
    "dev_seller_fee_basis_points",
    "dev_buyer_fee_basis_points",
)


def check_basis_points(value: Any, name: str) -> int:
    """Validate a basis-point value and return it as an int.

    Raises:
        InvalidFeeError: If the value is not an integer in [0, 10000].
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFeeError(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= MAX_BASIS_POINTS:
        raise InvalidFeeError(f"{name} must be between 0 and {MAX_BASIS_POINTS}, got {value}")
    return value


@dataclass
class Fees:
    """Per-recipient fee maps, keyed by payout address."""
    opensea_fees: Dict[str, int] = field(default_factory=dict)
    seller_fees: Dict[str, int] = field(default_factory=dict)

    def __post_init__(self):
        for address, bps in {**self.opensea_fees, **self.seller_fees}.items():
            check_basis_points(bps, f"fee for {address}")


@dataclass
class OpenSeaFees:
    """The basis-point values of each type of fee."""
    opensea_seller_fee_basis_points: int
    opensea_buyer_fee_basis_points: int
    dev_seller_fee_basis_points: int
    dev_buyer_fee_basis_points: int

    def __post_init__(self):
        for name in _FEE_FIELDS:
            check_basis_points(getattr(self, name), name)

    def fee_basis_points(self) -> Dict[str, int]:
        """The four fee fields as a plain mapping."""
        return {name: getattr(self, name) for name in _FEE_FIELDS}


@dataclass
class ComputedFees(OpenSeaFees):
    """Fully computed fees, including totals and any seller bounty.

    The totals must equal the sum of the OpenSea and dev fees on the same
    side; instances violating that are rejected.
    """
    total_buyer_fee_basis_points: int
    total_seller_fee_basis_points: int
    seller_bounty_basis_points: int = 0

    def __post_init__(self):
        super().__post_init__()
        check_basis_points(self.total_buyer_fee_basis_points, "total_buyer_fee_basis_points")
        check_basis_points(self.total_seller_fee_basis_points, "total_seller_fee_basis_points")
        check_basis_points(self.seller_bounty_basis_points, "seller_bounty_basis_points")

        buyer_sum = self.opensea_buyer_fee_basis_points + self.dev_buyer_fee_basis_points
        if self.total_buyer_fee_basis_points != buyer_sum:
            raise InvalidFeeError(
                f"total_buyer_fee_basis_points ({self.total_buyer_fee_basis_points}) "
                f"must equal opensea + dev buyer fees ({buyer_sum})"
            )
        seller_sum = self.opensea_seller_fee_basis_points + self.dev_seller_fee_basis_points
        if self.total_seller_fee_basis_points != seller_sum:
            raise InvalidFeeError(
                f"total_seller_fee_basis_points ({self.total_seller_fee_basis_points}) "
                f"must equal opensea + dev seller fees ({seller_sum})"
            )

    @classmethod
    def from_fees(cls, fees: OpenSeaFees, seller_bounty_basis_points: int = 0) -> 'ComputedFees':
        """Merge a set of OpenSea fees into computed totals."""
        base = {f.name: getattr(fees, f.name) for f in fields(OpenSeaFees)}
        return cls(
            **base,
            total_buyer_fee_basis_points=fees.opensea_buyer_fee_basis_points + fees.dev_buyer_fee_basis_points,
            total_seller_fee_basis_points=fees.opensea_seller_fee_basis_points + fees.dev_seller_fee_basis_points,
            seller_bounty_basis_points=seller_bounty_basis_points,
        )


def compute_fees(
    asset: Optional['OpenSeaAsset'] = None,
    side: OrderSide = OrderSide.SELL,
    extra_bounty_basis_points: int = 0
) -> ComputedFees:
    """Compute the fees that apply to an order for an asset.

    Without an asset the OpenSea defaults apply (no buyer fee, 2.5% seller
    fee, no dev fees). With an asset, its collection's fees are used and the
    maximum seller bounty is capped at the collection's OpenSea seller fee.

    Args:
        asset: The asset being traded, if known.
        side: The side of the order being created.
        extra_bounty_basis_points: Bounty the seller offers to referrers.
            Ignored for buy orders.

    Returns:
        ComputedFees: The per-party fees and totals.

    Raises:
        InvalidFeeError: If the bounty plus OpenSea's referrer share exceeds
            the maximum bounty for the asset.
    """
    fees = OpenSeaFees(
        opensea_seller_fee_basis_points=DEFAULT_SELLER_FEE_BASIS_POINTS,
        opensea_buyer_fee_basis_points=DEFAULT_BUYER_FEE_BASIS_POINTS,
        dev_seller_fee_basis_points=0,
        dev_buyer_fee_basis_points=0,
    )
    max_total_bounty_bps = DEFAULT_MAX_BOUNTY

    if asset is not None:
        collection = asset.collection
        fees = OpenSeaFees(
            opensea_seller_fee_basis_points=collection.opensea_seller_fee_basis_points,
            opensea_buyer_fee_basis_points=collection.opensea_buyer_fee_basis_points,
            dev_seller_fee_basis_points=collection.dev_seller_fee_basis_points,
            dev_buyer_fee_basis_points=collection.dev_buyer_fee_basis_points,
        )
        max_total_bounty_bps = collection.opensea_seller_fee_basis_points

    seller_bounty_bps = extra_bounty_basis_points if side == OrderSide.SELL else 0
    check_basis_points(seller_bounty_bps, "extra_bounty_basis_points")

    bounty_too_large = seller_bounty_bps + OPENSEA_SELLER_BOUNTY_BASIS_POINTS > max_total_bounty_bps
    if seller_bounty_bps > 0 and bounty_too_large:
        message = f"Total bounty exceeds the maximum for this asset type ({max_total_bounty_bps / 100}%)."
        if max_total_bounty_bps >= OPENSEA_SELLER_BOUNTY_BASIS_POINTS:
            message += (
                f" Remember that OpenSea will add {OPENSEA_SELLER_BOUNTY_BASIS_POINTS / 100}% "
                f"for referrers with OpenSea accounts!"
            )
        raise InvalidFeeError(message)

    computed = ComputedFees.from_fees(fees, seller_bounty_basis_points=seller_bounty_bps)
    logger.debug(
        f"Computed fees: buyer={computed.total_buyer_fee_basis_points}bp, "
        f"seller={computed.total_seller_fee_basis_points}bp, bounty={seller_bounty_bps}bp"
    )
    return computed


def fee_amount(price: int, basis_points: int) -> int:
    """Amount of ``price`` owed at ``basis_points``, rounded down."""
    check_basis_points(basis_points, "basis_points")
    return int(price) * basis_points // INVERSE_BASIS_POINT
