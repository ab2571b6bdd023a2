"""
Conversion of raw contract results into JSON-safe values.
"""
from collections.abc import Mapping
from datetime import datetime, timezone
from decimal import Decimal


def to_response_safe(value):
    """
    Render a contract result for a JSON response.

    Integers become decimal strings (uint256 values overflow JSON numbers),
    bytes become 0x-prefixed hex, sequences and mappings are converted
    element-wise. Strings such as addresses pass through unchanged.
    """
    # bool is an int subclass
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, Decimal)):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    if isinstance(value, Mapping):
        return {key: to_response_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_response_safe(item) for item in value]
    return value


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-01-15T10:30:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
