"""Tests for the test-case catalogs."""

import pytest

from gattfix.core.constants import MAX_ATTRIBUTE_VALUE_LENGTH
from gattfix.core.errors import DataFileError, UnknownCategoryError
from gattfix.bt_ref.identifiers import Alias, Name, Uuid
from gattfix.catalog.catalog import TestCaseCatalog, catalog
from gattfix.catalog.records import Category, Expectation

EXPECTED_SIZES = {
    Category.CHARACTERISTIC_READ_VALUE: 11,
    Category.CHARACTERISTIC_WRITE_VALUE: 12,
    Category.GET_CHARACTERISTIC: 17,
    Category.GET_CHARACTERISTICS: 18,
    Category.DESCRIPTOR_READ_VALUE: 6,
    Category.DESCRIPTOR_WRITE_VALUE: 6,
    Category.BLUETOOTH_UUID: 14,
}


def test_every_category_present(test_catalog):
    assert set(test_catalog.categories()) == set(Category)
    for category, size in EXPECTED_SIZES.items():
        assert len(test_catalog.catalog(category)) == size


def test_first_read_case_is_stable(test_catalog):
    first = test_catalog.catalog("characteristicReadValue")[0]
    assert first.target == Name("body_sensor_location")
    assert first.must_disconnect is True
    assert first.label == "Test 1"


def test_global_catalog_matches_fixture(test_catalog):
    assert catalog(Category.CHARACTERISTIC_READ_VALUE) == test_catalog.catalog("characteristicReadValue")


def test_catalog_is_restartable(test_catalog):
    first = [r.ordinal for r in test_catalog.catalog(Category.GET_CHARACTERISTIC)]
    second = [r.ordinal for r in test_catalog.catalog(Category.GET_CHARACTERISTIC)]
    assert first == second == list(range(1, 18))


def test_oversized_writes_expect_rejection(test_catalog):
    for category in (Category.CHARACTERISTIC_WRITE_VALUE, Category.DESCRIPTOR_WRITE_VALUE):
        oversized = [r for r in test_catalog.catalog(category)
                     if len(r.value_to_write) > MAX_ATTRIBUTE_VALUE_LENGTH]
        assert [len(r.value_to_write) for r in oversized] == [513]
        assert oversized[0].expect is Expectation.INVALID_LENGTH
        assert oversized[0].expects_rejection


def test_unspecified_disconnect_stays_unspecified(test_catalog):
    case = test_catalog.case("characteristicWriteValue", 11)
    assert case.must_disconnect is None
    assert case.target == Alias(0x2345)
    assert case.value_to_write == bytes([11])


def test_identifier_variants_are_classified(test_catalog):
    cases = test_catalog.catalog(Category.GET_CHARACTERISTIC)
    assert cases[2].target == Uuid("1234567891000-1000-8000-00805f9b34fb")
    assert cases[3].target == Uuid("11")
    assert cases[7].target == Alias(0)
    assert cases[8].target == Alias(0x2a19)


def test_options_parsed(test_catalog):
    case = test_catalog.case(Category.GET_CHARACTERISTICS, 2)
    assert case.service == Name("heart_rate")
    assert case.options.filters == ((Name("heart_rate"),),)
    assert case.options.optional_services == (Name("cycling_power"),)
    assert case.to_dict()["options"] == {
        "filters": [{"services": ["heart_rate"]}],
        "optionalServices": ["cycling_power"],
    }


def test_get_characteristics_without_target(test_catalog):
    case = test_catalog.case(Category.GET_CHARACTERISTICS, 1)
    assert case.target is None
    assert case.service == Name("battery_service")


def test_out_of_range_alias_cases(test_catalog):
    invalid = [r.target for r in test_catalog.catalog(Category.BLUETOOTH_UUID)
               if isinstance(r.target, Alias) and r.expect is Expectation.INVALID_FORMAT]
    digits = sorted(len(f"{a.value:x}") for a in invalid)
    assert digits == [9, 9, 13, 14]


def test_labels(test_catalog):
    assert test_catalog.labels("descriptorReadValue") == [f"Test {i}" for i in range(1, 7)]


def test_case_out_of_range(test_catalog):
    with pytest.raises(IndexError):
        test_catalog.case("descriptorReadValue", 7)


def test_unknown_category(test_catalog):
    with pytest.raises(UnknownCategoryError):
        test_catalog.catalog("characteristicNotifyValue")


def test_records_are_immutable(test_catalog):
    case = test_catalog.case(Category.DESCRIPTOR_READ_VALUE, 1)
    with pytest.raises(AttributeError):
        case.must_disconnect = False


def test_shipped_data_is_consistent(test_catalog, registry, blocklist):
    assert test_catalog.check_consistency(registry, blocklist) == []


def test_consistency_flags_bad_expectation(write_yaml, registry, blocklist):
    path = write_yaml(
        "characteristicReadValue:\n"
        "  - {characteristic: serial_number_string, expect: success}\n"
        "  - {characteristic: battery_level, expect: blocklisted}\n"
        "  - {characteristic: '11', expect: success}\n"
        "characteristicWriteValue:\n"
        "  - {characteristic: 0x2345, value_to_write: {fill: 0, length: 600}, expect: success}\n"
    )
    problems = TestCaseCatalog.from_yaml(path).check_consistency(registry, blocklist)
    assert len(problems) == 4


def test_unknown_expectation_rejected(write_yaml):
    path = write_yaml("descriptorReadValue:\n  - {descriptor: 0x2902, expect: maybe}\n")
    with pytest.raises(DataFileError):
        TestCaseCatalog.from_yaml(path)


def test_non_boolean_disconnect_rejected(write_yaml):
    path = write_yaml("descriptorReadValue:\n  - {descriptor: 0x2902, must_disconnect: sometimes}\n")
    with pytest.raises(DataFileError):
        TestCaseCatalog.from_yaml(path)


def test_unknown_category_in_file_rejected(write_yaml):
    path = write_yaml("characteristicNotifyValue:\n  - {characteristic: 0x2a37}\n")
    with pytest.raises(DataFileError):
        TestCaseCatalog.from_yaml(path)


def test_bad_payload_rejected(write_yaml):
    path = write_yaml("characteristicWriteValue:\n  - {characteristic: 0x2345, value_to_write: [300]}\n")
    with pytest.raises(DataFileError):
        TestCaseCatalog.from_yaml(path)


@pytest.mark.parametrize("options", [
    "{filters: [battery_service]}",
    "{filters: {services: [battery_service]}}",
    "{filters: [{services: battery_service}]}",
    "{optional_services: cycling_power}",
])
def test_malformed_options_rejected(write_yaml, options):
    path = write_yaml(
        f"getCharacteristic:\n  - {{characteristic: battery_level, options: {options}}}\n"
    )
    with pytest.raises(DataFileError):
        TestCaseCatalog.from_yaml(path)


def test_negative_payload_length_rejected(write_yaml):
    path = write_yaml(
        "characteristicWriteValue:\n  - {characteristic: 0x2345, value_to_write: {length: -1}}\n"
    )
    with pytest.raises(DataFileError):
        TestCaseCatalog.from_yaml(path)


def test_expected_uuid_is_normalised(write_yaml):
    path = write_yaml(
        "bluetoothUUID:\n"
        "  - {identifier: 0x2a19, expected_uuid: '00002A19-0000-1000-8000-00805F9B34FB'}\n"
    )
    case = TestCaseCatalog.from_yaml(path).case(Category.BLUETOOTH_UUID, 1)
    assert case.expected_uuid == "00002a19-0000-1000-8000-00805f9b34fb"


def test_malformed_expected_uuid_rejected(write_yaml):
    path = write_yaml("bluetoothUUID:\n  - {identifier: 0x2a19, expected_uuid: '2a19'}\n")
    with pytest.raises(DataFileError):
        TestCaseCatalog.from_yaml(path)
