"""Minimal DER reading and writing for RSA key envelopes.

Only the handful of constructs that appear around an RSA key body are
supported: tags, definite lengths (short and long form) and raw byte runs.
Every read is bounds checked and reports ``Asn1ParseError`` instead of
running off the end of the buffer.
"""

from __future__ import annotations

from ..errors import Asn1ParseError

# Long-form lengths wider than this cannot describe a key we can hold
_MAX_LENGTH_OCTETS = 4


class DerReader:
    """Forward-only cursor over a DER byte string.

    Attributes:
        data: The buffer being read.
        offset: Index of the next unread byte.
    """

    def __init__(self, data: bytes) -> None:
        self.data = bytes(data)
        self.offset = 0

    @property
    def remaining(self) -> int:
        return len(self.data) - self.offset

    def _require(self, count: int) -> None:
        if count < 0 or self.remaining < count:
            raise Asn1ParseError(
                f"Unexpected end of DER data at offset {self.offset}: "
                f"need {count} bytes, have {self.remaining}"
            )

    def peek(self) -> int:
        """Return the next byte without consuming it."""
        self._require(1)
        return self.data[self.offset]

    def read_byte(self) -> int:
        self._require(1)
        value = self.data[self.offset]
        self.offset += 1
        return value

    def read_bytes(self, count: int) -> bytes:
        self._require(count)
        chunk = self.data[self.offset : self.offset + count]
        self.offset += count
        return chunk

    def skip(self, count: int) -> None:
        self._require(count)
        self.offset += count

    def expect_byte(self, value: int, what: str = "byte") -> None:
        """Consume one byte and check it equals ``value``."""
        offset = self.offset
        actual = self.read_byte()
        if actual != value:
            raise Asn1ParseError(
                f"Expected {what} 0x{value:02x} at offset {offset}, found 0x{actual:02x}"
            )

    def expect_tag(self, tag: int) -> None:
        self.expect_byte(tag, what="tag")

    def expect_bytes(self, expected: bytes, what: str = "bytes") -> None:
        offset = self.offset
        if self.read_bytes(len(expected)) != expected:
            raise Asn1ParseError(f"Unexpected {what} at offset {offset}")

    def read_length(self) -> int:
        """Read a definite DER length in short or long form."""
        first = self.read_byte()
        if first < 0x80:
            return first
        octets = first & 0x7F
        if octets == 0:
            raise Asn1ParseError("Indefinite length is not allowed in DER")
        if octets > _MAX_LENGTH_OCTETS:
            raise Asn1ParseError(f"Length field of {octets} octets is too large")
        return int.from_bytes(self.read_bytes(octets), "big")

    def rest(self) -> bytes:
        """Return all unread bytes."""
        return self.data[self.offset :]


def encode_length(length: int) -> bytes:
    """Encode a DER length.

    Values below 128 use the one-byte short form; larger values use
    ``0x80 | n`` followed by the ``n``-byte minimal big-endian value.
    """
    if length < 0:
        raise ValueError(f"Length cannot be negative: {length}")
    if length < 0x80:
        return bytes([length])
    octets = (length.bit_length() + 7) // 8
    return bytes([0x80 | octets]) + length.to_bytes(octets, "big")
