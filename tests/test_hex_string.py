import pytest

from aptos_rest.errors import ErrorKind, FormatError
from aptos_rest.hex_string import HexString


def test_ensure_adds_prefix_once():
    assert HexString.ensure("abc1").hex() == "0xabc1"
    assert HexString.ensure("0xabc1").hex() == "0xabc1"


def test_ensure_is_idempotent():
    for raw in ["1", "0x1", "", "0x", "00ff", "0xDEADbeef", HexString("0x2")]:
        once = HexString.ensure(raw)
        assert HexString.ensure(once) is once
        assert HexString.ensure(once.hex()) == once


def test_bytes_round_trip():
    samples = [b"", b"\x00", b"\x00" * 32, bytes(range(32)), b"\xff\x00\x10"]
    for data in samples:
        value = HexString.from_bytes(data)
        assert value.hex().startswith("0x")
        assert HexString.ensure(value.hex()).to_bytes() == data


def test_digits_are_normalized_to_lowercase():
    assert HexString("0xABCD") == HexString("abcd")
    assert HexString("0xABCD").hex() == "0xabcd"
    assert hash(HexString("0xABCD")) == hash(HexString("0xabcd"))


def test_short_form_keeps_one_digit():
    assert HexString.from_bytes(b"\x00" * 32).short_form() == "0x0"
    assert HexString("0x").short_form() == "0x0"
    assert HexString("0x000abc").short_form() == "0xabc"
    assert HexString("0x1").short_form() == "0x1"


def test_long_form_pads_to_address_width():
    assert HexString("0x1").long_form() == "0x" + "0" * 63 + "1"
    with pytest.raises(FormatError):
        HexString("0x" + "1" * 65).long_form()


def test_non_hex_characters_rejected():
    with pytest.raises(FormatError) as excinfo:
        HexString("0xzz")
    assert excinfo.value.kind is ErrorKind.FORMAT
    assert isinstance(excinfo.value, ValueError)


def test_odd_length_cannot_become_bytes():
    value = HexString("0x123")
    assert value.hex() == "0x123"
    with pytest.raises(FormatError):
        value.to_bytes()


def test_strict_rejects_odd_digit_count():
    with pytest.raises(FormatError) as excinfo:
        HexString("0x123", strict=True)
    assert excinfo.value.value == "0x123"
    assert HexString("0x0123", strict=True).to_bytes() == b"\x01\x23"
    assert HexString("0x", strict=True).to_bytes() == b""


def test_str_and_no_prefix():
    value = HexString("0x0a0b")
    assert str(value) == "0x0a0b"
    assert value.no_prefix() == "0a0b"
