"""
Tests for identifier validation and generation.
"""
import pytest
from expense_tracker.core.identifiers import clean_and_validate_id, new_object_id

VALID_ID = "64b7f0c2a1e4d3b2c1a09f8e"


@pytest.mark.parametrize("raw", [
    None,
    "",
    0,
    True,
    ["64b7f0c2a1e4d3b2c1a09f8e"],
    {"id": "64b7f0c2a1e4d3b2c1a09f8e"},
    "abc",
    ":userId",
    "64b7f0c2a1e4d3b2c1a09f8",     # 23 characters
    "64b7f0c2a1e4d3b2c1a09f8e0",   # 25 characters
    "64b7f0c2a1e4d3b2c1a09f8g",    # not hex
    "::64b7f0c2a1e4d3b2c1a09f8e",  # only one colon is stripped
    ": 64b7f0c2a1e4d3b2c1a09f8e",
    12345,
    4.5,
])
def test_invalid_identifiers_are_absent(raw):
    """Anything outside the 24-hex format resolves to None."""
    assert clean_and_validate_id(raw) is None


@pytest.mark.parametrize("raw, expected", [
    (VALID_ID, VALID_ID),
    (f"  {VALID_ID}  ", VALID_ID),
    (f":{VALID_ID}", VALID_ID),
    (f" :{VALID_ID}", VALID_ID),
    (f"{VALID_ID}\n", VALID_ID),
    (VALID_ID.upper(), VALID_ID.upper()),
    ("000000000000000000000000", "000000000000000000000000"),
])
def test_valid_identifiers_are_normalized(raw, expected):
    """Trimmed and colon-stripped, otherwise unchanged."""
    assert clean_and_validate_id(raw) == expected


def test_numeric_identifier_is_coerced_to_string():
    assert clean_and_validate_id(123456789012345678901234) == "123456789012345678901234"


def test_new_object_id_format():
    object_id = new_object_id()
    assert len(object_id) == 24
    assert clean_and_validate_id(object_id) == object_id
    assert object_id == object_id.lower()


def test_new_object_ids_are_unique():
    ids = {new_object_id() for _ in range(1000)}
    assert len(ids) == 1000
