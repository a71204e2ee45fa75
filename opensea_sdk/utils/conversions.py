"""Conversions between wire values and SDK-native types."""

from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional, Type, TypeVar

from ..constants import MAX_UINT256
from ..errors import SchemaValidationError

E = TypeVar("E", bound=Enum)

_MAX_UINT256_EXPONENT = len(str(MAX_UINT256)) - 1


def to_uint(value: Any, field: str = "value") -> int:
    """Parse a wire number into a non-negative arbitrary-precision int.

    Decimal strings are the canonical form. Strings with a fractional part or
    exponent are accepted only when they denote an integral value
    (``"1000.000"``, ``"1e18"``). Floats are rejected outright since they may
    already have lost precision.

    Args:
        value: An int or decimal string.
        field: Field name used in error messages.

    Returns:
        The parsed integer.

    Raises:
        SchemaValidationError: If the value is not an integer in the uint256 range.
    """
    if isinstance(value, bool) or value is None or isinstance(value, float):
        raise SchemaValidationError(f"{field}: expected an integer or decimal string, got {value!r}")

    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        try:
            parsed = int(text, 10)
        except ValueError:
            try:
                as_decimal = Decimal(text)
            except InvalidOperation as e:
                raise SchemaValidationError(f"{field}: {value!r} is not a decimal number") from e
            if not as_decimal.is_finite():
                raise SchemaValidationError(f"{field}: {value!r} is not an integral amount")
            # uint256 has at most 78 digits
            if as_decimal.adjusted() > _MAX_UINT256_EXPONENT:
                raise SchemaValidationError(f"{field}: value exceeds the uint256 range")
            if as_decimal != as_decimal.to_integral_value():
                raise SchemaValidationError(f"{field}: {value!r} is not an integral amount")
            parsed = int(as_decimal)
    else:
        raise SchemaValidationError(f"{field}: unsupported type {type(value).__name__}")

    if parsed < 0:
        raise SchemaValidationError(f"{field}: {value!r} must not be negative")
    if parsed > MAX_UINT256:
        raise SchemaValidationError(f"{field}: value exceeds the uint256 range")
    return parsed


def to_optional_uint(value: Any, field: str = "value") -> Optional[int]:
    if value is None:
        return None
    return to_uint(value, field)


def to_decimal_string(value: int) -> str:
    """Serialize an integer amount as a plain decimal string."""
    return str(int(value))


def to_decimal(value: Any, field: str = "value") -> Decimal:
    """Parse a wire price (possibly fractional) into a Decimal."""
    if isinstance(value, bool) or value is None or isinstance(value, float):
        raise SchemaValidationError(f"{field}: expected a decimal string, got {value!r}")
    try:
        return Decimal(str(value).strip())
    except InvalidOperation as e:
        raise SchemaValidationError(f"{field}: {value!r} is not a decimal number") from e


def parse_enum(enum_cls: Type[E], value: Any, field: str = "value") -> E:
    """Look up a member of a closed enumeration by its wire value.

    Raises:
        SchemaValidationError: If the value is not part of the enumeration.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, bool):
        raise SchemaValidationError(f"{field}: expected a {enum_cls.__name__} value, got {value!r}")
    # Integer selectors sometimes arrive as strings
    if issubclass(enum_cls, int) and isinstance(value, str) and value.strip().isdigit():
        value = int(value)
    try:
        return enum_cls(value)
    except ValueError as e:
        raise SchemaValidationError(
            f"{field}: {value!r} is not a valid {enum_cls.__name__}"
        ) from e


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an API timestamp, treating zone-less values as UTC.

    Accepts ISO 8601 strings (with or without a trailing ``Z``), unix seconds
    and datetimes.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    elif isinstance(value, str):
        try:
            dt = datetime.fromisoformat(value.replace('Z', '+00:00'))
        except ValueError as e:
            raise SchemaValidationError(f"Invalid timestamp: {value!r}") from e
    else:
        raise SchemaValidationError(f"Invalid timestamp: {value!r}")

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def to_query_value(value: Any) -> Any:
    """Coerce a query field into the form the REST API expects."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (list, tuple)):
        return [str(to_query_value(v)) for v in value]
    return value
