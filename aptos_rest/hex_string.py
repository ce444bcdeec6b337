"""Canonical ``0x``-prefixed hex values for addresses and hashes."""

from __future__ import annotations

import re
from typing import Union

from aptos_rest.errors import FormatError

HEX_PREFIX = "0x"
ADDRESS_LENGTH = 32
HEX_DIGITS_REGEX = re.compile(r"^[0-9a-fA-F]*$")


class HexString:
    """
    Immutable hex value that always renders with a single ``0x`` prefix.

    Digits are stored lowercase so two spellings of the same value compare
    equal. The constructor rejects non-hex characters; odd digit counts are
    allowed (``0x1`` is a valid short address) but cannot be turned into bytes.
    Pass ``strict=True`` where the value must be whole bytes, such as a hash.
    """

    __slots__ = ("_digits",)

    def __init__(self, hex_string: str, *, strict: bool = False) -> None:
        if not isinstance(hex_string, str):
            raise FormatError(f"Expected hex string, got {type(hex_string).__name__}", value=hex_string)
        digits = hex_string[len(HEX_PREFIX):] if hex_string.startswith(HEX_PREFIX) else hex_string
        if not HEX_DIGITS_REGEX.fullmatch(digits):
            raise FormatError(f"Invalid hex string: {hex_string!r}", value=hex_string)
        if strict and len(digits) % 2:
            raise FormatError(f"Odd number of hex digits: {hex_string!r}", value=hex_string)
        self._digits = digits.lower()

    @classmethod
    def ensure(cls, value: "MaybeHexString") -> "HexString":
        """Return ``value`` unchanged if already a HexString, otherwise wrap it."""
        if isinstance(value, HexString):
            return value
        return cls(value)

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, memoryview]) -> "HexString":
        return cls(bytes(data).hex())

    def hex(self) -> str:
        return f"{HEX_PREFIX}{self._digits}"

    def no_prefix(self) -> str:
        return self._digits

    def short_form(self) -> str:
        """Strip leading zeroes after the prefix, keeping at least one digit."""
        trimmed = self._digits.lstrip("0")
        return f"{HEX_PREFIX}{trimmed or '0'}"

    def long_form(self, width: int = ADDRESS_LENGTH) -> str:
        """Left-pad to ``width`` bytes, the fixed size of an account address."""
        trimmed = self._digits.lstrip("0")
        if len(trimmed) > width * 2:
            raise FormatError(f"Hex value longer than {width} bytes: {self.hex()}", value=self.hex())
        return f"{HEX_PREFIX}{trimmed.rjust(width * 2, '0')}"

    def to_bytes(self) -> bytes:
        if len(self._digits) % 2:
            raise FormatError(f"Hex string has an odd number of digits: {self.hex()}", value=self.hex())
        return bytes.fromhex(self._digits)

    def __str__(self) -> str:
        return self.hex()

    def __repr__(self) -> str:
        return f"HexString({self.hex()!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HexString):
            return self._digits == other._digits
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._digits)


MaybeHexString = Union[HexString, str]

__all__ = ["HexString", "MaybeHexString", "ADDRESS_LENGTH"]
