"""Packed on-disk structures of the Windows BMP format."""

from __future__ import annotations

import struct
from dataclasses import astuple, dataclass
from typing import ClassVar


class BmpError(Exception):
    """Raised when BMP data cannot be read, written or understood."""


def _unpack(layout: struct.Struct, data: bytes, name: str) -> tuple:
    if len(data) < layout.size:
        raise BmpError(
            f"{name} needs {layout.size} bytes, got {len(data)}"
        )
    return layout.unpack_from(data)


def _pack(layout: struct.Struct, values: tuple, name: str) -> bytes:
    try:
        return layout.pack(*values)
    except struct.error as err:
        raise BmpError(f"cannot encode {name}: {err}") from err


@dataclass(frozen=True)
class FileHeader:
    """The 14-byte BITMAPFILEHEADER."""

    file_type: int
    size: int
    reserved1: int
    reserved2: int
    off_bits: int

    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<HIHHI")
    SIZE: ClassVar[int] = _LAYOUT.size

    @classmethod
    def from_bytes(cls, data: bytes) -> FileHeader:
        """Decode the header from the first bytes of ``data``."""
        return cls(*_unpack(cls._LAYOUT, data, "file header"))

    def to_bytes(self) -> bytes:
        """Encode the header in its little-endian packed form."""
        return _pack(self._LAYOUT, astuple(self), "file header")


@dataclass(frozen=True)
class InfoHeader:
    """The 40-byte BITMAPINFOHEADER."""

    size: int
    width: int
    height: int
    planes: int
    bit_count: int
    compression: int
    size_image: int
    x_pels_per_meter: int
    y_pels_per_meter: int
    clr_used: int
    clr_important: int

    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<IiiHHIIiiII")
    SIZE: ClassVar[int] = _LAYOUT.size

    @classmethod
    def from_bytes(cls, data: bytes) -> InfoHeader:
        """Decode the header from the first bytes of ``data``."""
        return cls(*_unpack(cls._LAYOUT, data, "info header"))

    def to_bytes(self) -> bytes:
        """Encode the header in its little-endian packed form."""
        return _pack(self._LAYOUT, astuple(self), "info header")


@dataclass(frozen=True)
class RgbQuad:
    """One palette entry, stored blue first."""

    blue: int
    green: int
    red: int
    reserved: int = 0

    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<BBBB")
    SIZE: ClassVar[int] = _LAYOUT.size

    @classmethod
    def from_bytes(cls, data: bytes) -> RgbQuad:
        """Decode a palette entry from the first four bytes of ``data``."""
        return cls(*_unpack(cls._LAYOUT, data, "palette entry"))

    def to_bytes(self) -> bytes:
        """Encode the entry as four bytes."""
        return _pack(self._LAYOUT, astuple(self), "palette entry")