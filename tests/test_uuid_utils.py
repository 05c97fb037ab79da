"""Tests for UUID syntax checks and alias expansion."""

import pytest

from gattfix.bt_ref.uuid_utils import (
    ascii_to_decimal,
    expand_alias,
    is_valid_uuid,
    looks_like_uuid,
    normalize_uuid,
    short_form,
)

BASIC_UUID = "1a2b3c4d-5e6f-7a8b-9c0d-1e2f3a4b5c6d"
ALL_CAPS_UUID = "1A2B3C4D-5E6F-7A8B-9C0D-1E2F3A4B5C6D"


@pytest.mark.parametrize("candidate", [
    BASIC_UUID,
    ALL_CAPS_UUID,
    "00000000-0000-1000-8000-00805f9b34fb",
    "00000000-0000-0000-0000-000000000000",
    "ffffffff-0000-1000-8000-00805f9b34fb",
])
def test_valid_uuids(candidate):
    assert is_valid_uuid(candidate)


@pytest.mark.parametrize("candidate", [
    "1234567891000-1000-8000-00805f9b34fb",
    "0000000g-0000-1000-8000-00805f9b34fb",
    "11",
    "deadbeef",
    "00002a19000010008000-00805f9b34fb",
    "00002a19-0000-1000-8000-00805f9b34fb\n",
    " 00002a19-0000-1000-8000-00805f9b34fb",
    "",
    "07711111-6104-0970-7011-1107105110aaa",
])
def test_invalid_uuids(candidate):
    assert not is_valid_uuid(candidate)


def test_non_strings_are_not_uuids():
    assert not is_valid_uuid(0x2a19)
    assert not is_valid_uuid(None)


def test_validation_is_case_insensitive():
    assert is_valid_uuid(ALL_CAPS_UUID) == is_valid_uuid(ALL_CAPS_UUID.lower())
    assert normalize_uuid(ALL_CAPS_UUID) == BASIC_UUID


@pytest.mark.parametrize("position", [i for i, c in enumerate(BASIC_UUID) if c != "-"])
def test_single_non_hex_substitution_is_rejected(position):
    candidate = BASIC_UUID[:position] + "g" + BASIC_UUID[position + 1:]
    assert not is_valid_uuid(candidate)


def test_expand_16_bit_alias():
    assert expand_alias(0x2a19) == "00002a19-0000-1000-8000-00805f9b34fb"
    assert expand_alias(0x0) == "00000000-0000-1000-8000-00805f9b34fb"


def test_expand_32_bit_alias():
    assert expand_alias(0xDEADBEEF) == "deadbeef-0000-1000-8000-00805f9b34fb"


def test_expand_does_not_range_check():
    # Wider values keep only their low 32 bits
    assert expand_alias(0xADEADBEEF) == "deadbeef-0000-1000-8000-00805f9b34fb"


def test_short_form():
    assert short_form("00002A19-0000-1000-8000-00805f9b34fb") == 0x2a19
    assert short_form(BASIC_UUID) is None
    assert short_form("11") is None


def test_looks_like_uuid():
    assert looks_like_uuid("11")
    assert looks_like_uuid("deadbeef")
    assert looks_like_uuid("0000000g-0000-1000-8000-00805f9b34fb")
    assert not looks_like_uuid("battery_level")
    assert not looks_like_uuid("gap.device_name")


def test_ascii_to_decimal():
    assert ascii_to_decimal("Hi!") == [72, 105, 33]
    assert ascii_to_decimal("") == []
