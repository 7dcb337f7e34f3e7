"""Big-endian binary readers and writers for game data files.

Strings use the framing of Java's ``DataOutputStream.writeUTF``: an
unsigned 16-bit byte count followed by modified UTF-8, where NUL is
written as two bytes and characters outside the BMP as two surrogates.
"""

from __future__ import annotations

import struct

MAX_UTF_LENGTH = 0xFFFF

_INT = struct.Struct(">i")
_LONG = struct.Struct(">q")
_USHORT = struct.Struct(">H")


class DataFormatError(ValueError):
    """The bytes do not match the expected layout."""


# -- modified UTF-8 ------------------------------------------------------------


def encode_modified_utf8(text: str) -> bytes:
    units = text.encode("utf-16-be", "surrogatepass")
    out = bytearray()
    for k in range(0, len(units), 2):
        c = (units[k] << 8) | units[k + 1]
        if 0x0001 <= c <= 0x007F:
            out.append(c)
        elif c <= 0x07FF:
            out.append(0xC0 | (c >> 6))
            out.append(0x80 | (c & 0x3F))
        else:
            out.append(0xE0 | (c >> 12))
            out.append(0x80 | ((c >> 6) & 0x3F))
            out.append(0x80 | (c & 0x3F))
    return bytes(out)


def decode_modified_utf8(data: bytes) -> str:
    units = bytearray()
    i = 0
    n = len(data)
    while i < n:
        b = data[i]
        kind = b >> 4
        if kind <= 7:
            c = b
            i += 1
        elif kind in (12, 13):
            if i + 1 >= n or data[i + 1] & 0xC0 != 0x80:
                raise DataFormatError(f"malformed 2-byte sequence at byte {i}")
            c = ((b & 0x1F) << 6) | (data[i + 1] & 0x3F)
            i += 2
        elif kind == 14:
            if (
                i + 2 >= n
                or data[i + 1] & 0xC0 != 0x80
                or data[i + 2] & 0xC0 != 0x80
            ):
                raise DataFormatError(f"malformed 3-byte sequence at byte {i}")
            c = ((b & 0x0F) << 12) | ((data[i + 1] & 0x3F) << 6) | (data[i + 2] & 0x3F)
            i += 3
        else:
            raise DataFormatError(f"invalid byte 0x{b:02x} at byte {i}")
        units += bytes((c >> 8, c & 0xFF))
    return units.decode("utf-16-be", "surrogatepass")


# -- streams -------------------------------------------------------------------


class DataReader:
    """Sequential reader over a fully loaded payload."""

    def __init__(self, payload: bytes) -> None:
        self._data = payload
        self._pos = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def _take(self, size: int) -> bytes:
        if size > self.remaining:
            raise DataFormatError(
                f"unexpected end of data: wanted {size} bytes at offset "
                f"{self._pos}, {self.remaining} left"
            )
        chunk = self._data[self._pos : self._pos + size]
        self._pos += size
        return chunk

    def read_int(self) -> int:
        return _INT.unpack(self._take(_INT.size))[0]

    def read_long(self) -> int:
        return _LONG.unpack(self._take(_LONG.size))[0]

    def read_utf(self) -> str:
        (length,) = _USHORT.unpack(self._take(_USHORT.size))
        return decode_modified_utf8(self._take(length))


class DataWriter:
    """Accumulates a payload; call :meth:`getvalue` when done."""

    def __init__(self) -> None:
        self._buf = bytearray()

    def _pack(self, fmt: struct.Struct, value: int) -> None:
        try:
            self._buf += fmt.pack(value)
        except struct.error as exc:
            raise DataFormatError(f"{value!r} does not fit: {exc}") from exc

    def write_int(self, value: int) -> None:
        self._pack(_INT, value)

    def write_long(self, value: int) -> None:
        self._pack(_LONG, value)

    def write_utf(self, text: str) -> None:
        encoded = encode_modified_utf8(text)
        if len(encoded) > MAX_UTF_LENGTH:
            raise DataFormatError(
                f"encoded string too long: {len(encoded)} bytes "
                f"(max {MAX_UTF_LENGTH})"
            )
        self._buf += _USHORT.pack(len(encoded))
        self._buf += encoded

    def getvalue(self) -> bytes:
        return bytes(self._buf)
