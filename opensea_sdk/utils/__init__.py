"""Helper utilities for the SDK."""

from .conversions import (
    parse_enum,
    parse_timestamp,
    to_decimal,
    to_decimal_string,
    to_optional_uint,
    to_query_value,
    to_uint,
)

__all__ = [
    "parse_enum",
    "parse_timestamp",
    "to_decimal",
    "to_decimal_string",
    "to_optional_uint",
    "to_query_value",
    "to_uint",
]
