"""SipHash-2-4 with 64-bit output.

This is the hash behind Rust's (deprecated) `std::hash::SipHasher`, which
Cargo used to derive registry cache directory names. The digest and the byte
encoding of hashed values are a fixed format: changing either produces names
that no longer match directories Cargo has already created.

`SipHasher` mirrors the Rust `Hasher` API: bytes are written incrementally and
`finish()` returns the 64-bit value without consuming the hasher.
"""

import struct

_MASK = 0xFFFFFFFFFFFFFFFF


def _rotl(x: int, b: int) -> int:
    return ((x << b) | (x >> (64 - b))) & _MASK


def _sipround(v0: int, v1: int, v2: int, v3: int) -> tuple[int, int, int, int]:
    v0 = (v0 + v1) & _MASK
    v1 = _rotl(v1, 13)
    v1 ^= v0
    v0 = _rotl(v0, 32)
    v2 = (v2 + v3) & _MASK
    v3 = _rotl(v3, 16)
    v3 ^= v2
    v0 = (v0 + v3) & _MASK
    v3 = _rotl(v3, 21)
    v3 ^= v0
    v2 = (v2 + v1) & _MASK
    v1 = _rotl(v1, 17)
    v1 ^= v2
    v2 = _rotl(v2, 32)
    return v0, v1, v2, v3


class SipHasher:
    """Streaming SipHash-2-4 keyed with two 64-bit integers."""

    C_ROUNDS = 2
    D_ROUNDS = 4

    def __init__(self, k0: int = 0, k1: int = 0) -> None:
        self._v0 = k0 ^ 0x736F6D6570736575
        self._v1 = k1 ^ 0x646F72616E646F6D
        self._v2 = k0 ^ 0x6C7967656E657261
        self._v3 = k1 ^ 0x7465646279746573
        self._tail = b""
        self._length = 0

    def _compress(self, m: int) -> None:
        v0, v1, v2, v3 = self._v0, self._v1, self._v2, self._v3
        v3 ^= m
        for _ in range(self.C_ROUNDS):
            v0, v1, v2, v3 = _sipround(v0, v1, v2, v3)
        v0 ^= m
        self._v0, self._v1, self._v2, self._v3 = v0, v1, v2, v3

    def write(self, data: bytes) -> None:
        """Feed raw bytes into the hash."""
        self._length += len(data)
        buf = self._tail + data
        full = len(buf) - len(buf) % 8
        for (m,) in struct.iter_unpack("<Q", buf[:full]):
            self._compress(m)
        self._tail = buf[full:]

    def write_u8(self, value: int) -> None:
        self.write(struct.pack("<B", value))

    def write_isize(self, value: int) -> None:
        """Feed a pointer-sized signed integer (8 bytes, little-endian)."""
        self.write(struct.pack("<q", value))

    def write_str(self, value: str) -> None:
        """Feed a string the way Rust's `impl Hash for str` does.

        The UTF-8 bytes are followed by a 0xff terminator byte so that
        ("ab", "c") and ("a", "bc") hash differently.
        """
        self.write(value.encode("utf-8"))
        self.write_u8(0xFF)

    def finish(self) -> int:
        """Return the 64-bit hash of everything written so far."""
        b = (self._length & 0xFF) << 56
        b |= int.from_bytes(self._tail, "little")

        v0, v1, v2, v3 = self._v0, self._v1, self._v2, self._v3
        v3 ^= b
        for _ in range(self.C_ROUNDS):
            v0, v1, v2, v3 = _sipround(v0, v1, v2, v3)
        v0 ^= b
        v2 ^= 0xFF
        for _ in range(self.D_ROUNDS):
            v0, v1, v2, v3 = _sipround(v0, v1, v2, v3)
        return v0 ^ v1 ^ v2 ^ v3

    def digest(self) -> bytes:
        """Return the hash as 8 little-endian bytes."""
        return struct.pack("<Q", self.finish())

    def hexdigest(self) -> str:
        return self.digest().hex()


def siphash24(data: bytes, k0: int = 0, k1: int = 0) -> int:
    """One-shot SipHash-2-4 of `data`."""
    hasher = SipHasher(k0, k1)
    hasher.write(data)
    return hasher.finish()
