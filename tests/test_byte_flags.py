"""Tests for ByteFlags (8-bit container)."""

import json
import sys
from pathlib import Path

import pytest

# Add parent directory to path to import byteflags
sys.path.insert(0, str(Path(__file__).parent.parent))

from byteflags import ByteFlags, ShortFlags, create_byte_flags
from byteflags import DuplicateName, InvalidArgument, UnknownFlag


@pytest.fixture
def flags():
    return ByteFlags("f0", "f1", "f2")


def test_constructs_with_valid_flag_names():
    flags = ByteFlags("f0", "f1")
    assert flags.get_flag_names() == ["f0", "f1"]
    assert flags.to_byte() == 0


def test_allows_exactly_8_flags():
    names = [f"f{i}" for i in range(8)]
    flags = ByteFlags(*names)
    assert flags.get_flag_names() == names


def test_rejects_more_than_8_flags_but_short_accepts_them():
    names = [f"f{i}" for i in range(9)]
    with pytest.raises(InvalidArgument):
        ByteFlags(*names)

    assert ShortFlags(*names).get_flag_names() == names


def test_rejects_no_flags():
    with pytest.raises(InvalidArgument):
        ByteFlags()


def test_rejects_duplicate_flag_names():
    with pytest.raises(DuplicateName) as exc_info:
        ByteFlags("f0", "f1", "f0")
    assert exc_info.value.name == "f0"


def test_duplicate_check_is_case_sensitive():
    flags = ByteFlags("Read", "read")
    assert flags.get_flag_names() == ["Read", "read"]


@pytest.mark.parametrize("bad_name", ["", "   ", None, 3])
def test_rejects_blank_or_non_string_names(bad_name):
    with pytest.raises(InvalidArgument):
        ByteFlags("ok", bad_name)


def test_sets_and_gets_flags_by_name(flags):
    flags.set_flag("f0", True)
    assert flags.get_flag("f0") is True
    flags.set_flag("f0", False)
    assert flags.get_flag("f0") is False


def test_toggles_flags(flags):
    flags.toggle_flag("f1")
    assert flags.get_flag("f1") is True
    flags.toggle_flag("f1")
    assert flags.get_flag("f1") is False


def test_unknown_flag_raises_for_get_set_toggle():
    flags = ByteFlags("f0")
    with pytest.raises(UnknownFlag):
        flags.get_flag("nope")
    with pytest.raises(UnknownFlag):
        flags.set_flag("nope", True)
    with pytest.raises(UnknownFlag):
        flags.toggle_flag("nope")
    assert flags.to_byte() == 0


def test_direct_attribute_access():
    flags = ByteFlags("foo", "bar")
    flags.foo = True
    assert flags.get_flag("foo") is True
    flags.bar = False
    assert flags.get_flag("bar") is False
    assert flags.foo is True
    assert flags.bar is False

    flags.set_flag("bar", True)
    assert flags.bar is True


def test_set_flags_and_to_dict():
    flags = ByteFlags("f0", "f1")
    flags.set_flags({"f0": True, "f1": False})
    assert flags.to_dict() == {"f0": True, "f1": False}
    assert flags.to_byte() == 1


def test_to_byte_and_from_byte():
    flags = ByteFlags("f0", "f1")
    flags.set_flags({"f0": True, "f1": False})
    byte = flags.to_byte()
    assert byte == 1

    new_flags = ByteFlags("f0", "f1")
    new_flags.from_byte(byte)
    assert new_flags.to_dict() == {"f0": True, "f1": False}


@pytest.mark.parametrize("bad_value", [-1, 256, 1.5, "1", None, True])
def test_invalid_from_byte(bad_value):
    flags = ByteFlags("f0")
    with pytest.raises(InvalidArgument):
        flags.from_byte(bad_value)
    assert flags.to_byte() == 0


def test_from_byte_accepts_boundaries():
    flags = ByteFlags("f0")
    assert flags.from_byte(255).to_byte() == 255
    assert flags.from_byte(0).to_byte() == 0


def test_to_json_and_from_json():
    flags = ByteFlags("f0", "f1")
    flags.set_flags({"f0": True, "f1": False})
    assert flags.to_json() == '{"f0":true,"f1":false}'

    restored = ByteFlags.from_json(flags.to_json())
    assert isinstance(restored, ByteFlags)
    assert restored.to_dict() == {"f0": True, "f1": False}


def test_from_json_accepts_string_and_mapping():
    from_string = ByteFlags.from_json(json.dumps({"foo": True, "bar": False}))
    assert from_string.get_flag_names() == ["foo", "bar"]
    assert from_string.to_dict() == {"foo": True, "bar": False}

    from_mapping = ByteFlags.from_json({"f0": True, "f1": False})
    assert from_mapping.get_flag_names() == ["f0", "f1"]
    assert from_mapping.to_dict() == {"f0": True, "f1": False}


def test_from_json_rejects_more_than_8_keys():
    too_many = {f"f{i}": True for i in range(9)}
    with pytest.raises(InvalidArgument):
        ByteFlags.from_json(too_many)
    with pytest.raises(InvalidArgument):
        ByteFlags.from_json(json.dumps(too_many))


def test_from_json_rejects_invalid_json():
    with pytest.raises(InvalidArgument) as exc_info:
        ByteFlags.from_json("not a json")
    assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)


def test_all_any_of_none_of(flags):
    flags.set_flags({"f0": True, "f1": False, "f2": True})
    assert flags.all("f0", "f2") is True
    assert flags.all("f0", "f1") is False
    assert flags.any_of("f1", "f2") is True
    assert flags.any_of("f1") is False
    assert flags.none_of("f1") is True
    assert flags.none_of("f0", "f2") is False


def test_iterator_and_str():
    flags = ByteFlags("f0", "f1")
    flags.set_flags({"f0": True, "f1": False})
    assert list(flags) == [("f0", True), ("f1", False)]
    assert str(flags) == "ByteFlags {f0=true, f1=false}"


def test_get_flag_names_and_deprecated_get_flags(flags):
    assert flags.get_flag_names() == ["f0", "f1", "f2"]
    with pytest.deprecated_call():
        assert flags.get_flags() == ["f0", "f1", "f2"]


def test_create_byte_flags_returns_instance():
    flags = create_byte_flags("foo", "bar")
    assert isinstance(flags, ByteFlags)
    flags.foo = True
    flags.bar = False
    assert flags.foo is True
    assert flags.bar is False
    assert flags.to_byte() == 1
