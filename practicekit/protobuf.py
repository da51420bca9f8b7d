"""Decoding of a small subset of the protobuf wire format."""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Iterator
from typing import Protocol, TypeVar, Union

_MAX_VARINT_BYTES = 7


class DecodeError(ValueError):
    """Raised when input bytes are not a valid message."""


class WireType(enum.IntEnum):
    """A wire type as seen on the wire."""

    VARINT = 0
    LEN = 2

    @classmethod
    def from_tag_bits(cls, value: int) -> WireType:
        try:
            return cls(value)
        except ValueError:
            raise DecodeError(f"Invalid wire type: {value}") from None


@dataclasses.dataclass(frozen=True)
class Field:
    """A field, holding its number and a value typed by its wire type."""

    field_num: int
    value: Union[int, bytes]

    def as_str(self) -> str:
        """Return the value of a ``Len`` field decoded as UTF-8."""
        if not isinstance(self.value, bytes):
            raise DecodeError("Expected string to be a `Len` field")
        try:
            return self.value.decode("utf-8")
        except UnicodeDecodeError as err:
            raise DecodeError(f"Invalid string: {err}") from err

    def as_bytes(self) -> bytes:
        """Return the raw value of a ``Len`` field."""
        if not isinstance(self.value, bytes):
            raise DecodeError("Expected bytes to be a `Len` field")
        return self.value

    def as_int(self) -> int:
        """Return the value of a ``Varint`` field."""
        if not isinstance(self.value, int):
            raise DecodeError("Expected `u64` to be a `Varint` field")
        return self.value


def parse_varint(data: bytes) -> tuple[int, bytes]:
    """Parse a VARINT, returning its value and the remaining bytes."""
    value = 0
    for index, byte in enumerate(data[:_MAX_VARINT_BYTES]):
        value |= (byte & 0x7F) << (7 * index)
        if not byte & 0x80:
            return value, data[index + 1 :]
    if len(data) < _MAX_VARINT_BYTES:
        raise DecodeError("Not enough bytes for varint")
    raise DecodeError("Too many bytes for varint")


def unpack_tag(tag: int) -> tuple[int, WireType]:
    """Split a tag into a field number and a wire type."""
    return tag >> 3, WireType.from_tag_bits(tag & 0x7)


def parse_field(data: bytes) -> tuple[Field, bytes]:
    """Parse one field, returning it and the remaining bytes."""
    tag, remainder = parse_varint(data)
    field_num, wire_type = unpack_tag(tag)
    if wire_type is WireType.VARINT:
        value, remainder = parse_varint(remainder)
        return Field(field_num, value), remainder
    length, remainder = parse_varint(remainder)
    if len(remainder) < length:
        raise DecodeError("Unexpected EOF")
    return Field(field_num, bytes(remainder[:length])), remainder[length:]


def iter_fields(data: bytes) -> Iterator[Field]:
    """Yield every field in ``data``, consuming all of it."""
    data = bytes(data)
    while data:
        field, data = parse_field(data)
        yield field


class _ProtoMessage(Protocol):
    def add_field(self, field: Field) -> None: ...


M = TypeVar("M", bound=_ProtoMessage)


def parse_message(cls: type[M], data: bytes) -> M:
    """Build a ``cls`` instance, feeding it every field found in ``data``."""
    result = cls()
    for field in iter_fields(data):
        result.add_field(field)
    return result


@dataclasses.dataclass
class PhoneNumber:
    number: str = ""
    type_: str = ""

    def add_field(self, field: Field) -> None:
        if field.field_num == 1:
            self.number = field.as_str()
        elif field.field_num == 2:
            self.type_ = field.as_str()


@dataclasses.dataclass
class Person:
    name: str = ""
    id: int = 0
    phone: list[PhoneNumber] = dataclasses.field(default_factory=list)

    def add_field(self, field: Field) -> None:
        if field.field_num == 1:
            self.name = field.as_str()
        elif field.field_num == 2:
            self.id = field.as_int()
        elif field.field_num == 3:
            self.phone.append(parse_message(PhoneNumber, field.as_bytes()))