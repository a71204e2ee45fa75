"""Sale-kind rules of the Wyvern exchange, evaluated off-chain.

These mirror what the exchange contract checks when an order is matched, so
callers can compute an order's current price or tell whether it can still
settle without a chain round-trip.
"""

import logging
import time
from decimal import ROUND_CEILING, Decimal, localcontext
from typing import TYPE_CHECKING, Optional

from .constants import INVERSE_BASIS_POINT, PRICE_BACKTRACK_SECONDS
from .enums import OrderSide, SaleKind
from .errors import SchemaValidationError

if TYPE_CHECKING:
    from .models.orders import UnhashedOrder

logger = logging.getLogger(__name__)

# Enough digits for any uint256 amount plus a fractional part
_PRICE_PRECISION = 100


def validate_sale_kind_parameters(sale_kind: SaleKind, expiration_time: int) -> bool:
    """Dutch auctions need an expiration time to decay towards."""
    return sale_kind == SaleKind.FIXED_PRICE or expiration_time > 0


def can_settle_order(listing_time: int, expiration_time: int, now: int) -> bool:
    """Whether an order is inside its settlement window at ``now``.

    An expiration time of 0 means the order never expires.
    """
    return listing_time < now and (expiration_time == 0 or now < expiration_time)


def calculate_final_price(
    side: OrderSide,
    sale_kind: SaleKind,
    base_price: int,
    extra: int,
    listing_time: int,
    expiration_time: int,
    now: int
) -> int:
    """Price the exchange would settle an order at, in integer base units.

    Fixed-price orders settle at ``base_price``. Dutch auctions move linearly
    by ``extra`` over the listing window: sell orders decay from
    ``base_price`` to ``base_price - extra``, buy orders rise to
    ``base_price + extra``. Elapsed time is clamped to the window.

    Raises:
        SchemaValidationError: If a Dutch auction has no valid window.
    """
    if sale_kind == SaleKind.FIXED_PRICE:
        return base_price

    if not validate_sale_kind_parameters(sale_kind, expiration_time) or expiration_time <= listing_time:
        raise SchemaValidationError(
            f"Dutch auction needs expiration_time > listing_time "
            f"(listing={listing_time}, expiration={expiration_time})"
        )

    duration = expiration_time - listing_time
    elapsed = min(max(now - listing_time, 0), duration)
    diff = extra * elapsed // duration
    if side == OrderSide.SELL:
        return max(base_price - diff, 0)
    return base_price + diff


def estimate_current_price(
    order: 'UnhashedOrder',
    seconds_to_backtrack: int = PRICE_BACKTRACK_SECONDS,
    should_round_up: bool = True,
    now: Optional[int] = None
) -> Decimal:
    """Estimate what a taker would pay for an order right now.

    The clock is pushed back by ``seconds_to_backtrack`` to allow for
    latency between estimating and matching. For sell orders the buyer's
    relayer fee is added on top, except for auctions still waiting for their
    best counter order.

    Args:
        order: The order to price.
        seconds_to_backtrack: Seconds subtracted from ``now`` (default: 30).
        should_round_up: Round up to a whole base unit (default: True).
        now: Unix time to price at (default: the current time).

    Returns:
        Decimal: The estimated price in base units.
    """
    if now is None:
        now = int(time.time())
    at = now - seconds_to_backtrack

    with localcontext() as ctx:
        ctx.prec = _PRICE_PRECISION
        exact_price = Decimal(order.base_price)

        if order.sale_kind == SaleKind.DUTCH_AUCTION:
            duration = order.expiration_time - order.listing_time
            if duration > 0:
                diff = Decimal(order.extra) * Decimal(at - order.listing_time) / Decimal(duration)
                if order.side == OrderSide.SELL:
                    exact_price = exact_price - diff
                else:
                    exact_price = exact_price + diff
            else:
                logger.warning(
                    f"Dutch auction order {getattr(order, 'hash', None)} has no listing window; "
                    f"using its base price"
                )

        if order.side == OrderSide.SELL and not order.waiting_for_best_counter_order:
            exact_price = exact_price * (Decimal(order.taker_relayer_fee) / INVERSE_BASIS_POINT + 1)

        if should_round_up:
            exact_price = exact_price.to_integral_value(rounding=ROUND_CEILING)
        return +exact_price
