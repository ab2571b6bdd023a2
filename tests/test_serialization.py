import re
from decimal import Decimal

from land_api.core.serialization import to_response_safe, utc_timestamp


def test_integers_become_decimal_strings():
    assert to_response_safe(123456789012345678901234567890) == "123456789012345678901234567890"
    assert to_response_safe(0) == "0"
    assert to_response_safe(Decimal("1.50")) == "1.50"


def test_booleans_and_strings_pass_through():
    assert to_response_safe(True) is True
    assert to_response_safe(False) is False
    address = "0x742d35Cc6634C0532925a3b8D2DE0f87b7b82fd0"
    assert to_response_safe(address) == address


def test_bytes_become_hex():
    assert to_response_safe(b"\x00\xff\x10") == "0x00ff10"


def test_nested_results_are_mapped_element_wise():
    raw = {
        "plotAccount": "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC",
        "parcelIds": (101, 2**256 - 1),
        "meta": {"approved": True, "amounts": [1, [2, 3]]},
    }

    assert to_response_safe(raw) == {
        "plotAccount": "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC",
        "parcelIds": ["101", str(2**256 - 1)],
        "meta": {"approved": True, "amounts": ["1", ["2", "3"]]},
    }


def test_utc_timestamp_matches_javascript_iso_format():
    assert re.match(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$", utc_timestamp())
