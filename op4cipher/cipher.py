"""The OP4 block cipher with ECB, CBC, OFB and CTR modes."""

from __future__ import annotations

import struct
from typing import Iterator, Optional

BLOCK_SIZE = 16
KEY_SIZE = 32
NONCE_SIZE = 12
KEY_WORDS = 4
ROUNDS = 8
ROUND_KEY_SIZE = BLOCK_SIZE * ROUNDS

MUL_COEFFS = bytes((
    113, 233, 97, 211,
    71, 223, 241, 53,
    23, 47, 79, 37,
    73, 193, 227, 191,
))

INV_MUL_COEFFS = bytes((
    145, 89, 161, 91,
    119, 31, 17, 29,
    167, 207, 175, 173,
    249, 65, 203, 63,
))

_MASK32 = 0xFFFFFFFF
_OBFUSCATION_SHIFTS = (17, 23, 7, 13, 29, 21, 19, 15)


def _rotl32(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK32


def _rotr32(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK32


def _rotl8(x: int, n: int) -> int:
    return ((x << n) | (x >> (8 - n))) & 0xFF


def _words(data: bytes) -> list[int]:
    return list(struct.unpack(f"<{len(data) // 4}I", data))


def _pack(words: list[int]) -> bytes:
    return struct.pack(f"<{len(words)}I", *words)


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


def _exact(data, size: int, what: str) -> bytes:
    value = bytes(data)
    if len(value) != size:
        raise ValueError(f"{what} must be {size} bytes, got {len(value)}")
    return value


def shift_bits_add(state: bytes) -> bytes:
    """Mix the four little-endian words of a block by rotation and addition."""
    v0, v1, v2, v3 = _words(_exact(state, BLOCK_SIZE, "state"))
    v0 = (_rotl32(v0, 13) + v1 + v2 + v3) & _MASK32
    v1 = (_rotl32(v1, 19) + v2 + v3 + v0) & _MASK32
    v2 = (_rotl32(v2, 11) + v3 + v0 + v1) & _MASK32
    v3 = (_rotl32(v3, 17) + v0 + v1 + v2) & _MASK32
    return _pack([v0, v1, v2, v3])


def shift_bits_sub(state: bytes) -> bytes:
    """Undo :func:`shift_bits_add`."""
    v0, v1, v2, v3 = _words(_exact(state, BLOCK_SIZE, "state"))
    v3 = _rotr32((v3 - v0 - v1 - v2) & _MASK32, 17)
    v2 = _rotr32((v2 - v3 - v0 - v1) & _MASK32, 11)
    v1 = _rotr32((v1 - v2 - v3 - v0) & _MASK32, 19)
    v0 = _rotr32((v0 - v1 - v2 - v3) & _MASK32, 13)
    return _pack([v0, v1, v2, v3])


def multiply(state: bytes) -> bytes:
    """Multiply each byte by its odd coefficient modulo 256."""
    block = _exact(state, BLOCK_SIZE, "state")
    return bytes((b * c) & 0xFF for b, c in zip(block, MUL_COEFFS))


def inv_multiply(state: bytes) -> bytes:
    """Undo :func:`multiply`."""
    block = _exact(state, BLOCK_SIZE, "state")
    return bytes((b * c) & 0xFF for b, c in zip(block, INV_MUL_COEFFS))


def _prevent_weak_key(key: bytes) -> bytes:
    return bytes((k ^ i ^ (k << 1) ^ (k >> 4)) & 0xFF for i, k in enumerate(key))


def _obfuscate_key(key: bytes) -> bytes:
    k = bytearray(key)
    for i in range(0, KEY_SIZE, 4):
        mixed = k[i] ^ k[i + 1] ^ k[i + 2] ^ k[i + 3]
        k[i] = (k[i] + _rotl8(mixed, 5)) & 0xFF
    v = _words(bytes(k))
    count = len(v)
    t = [
        (v[j] + _rotl32(((v[(j + 1) % count] ^ v[j]) + v[j - 1]) & _MASK32, shift))
        & _MASK32
        for j, shift in enumerate(_OBFUSCATION_SHIFTS)
    ]
    return _pack(t)


def expand_key(key: bytes) -> bytes:
    """Derive the 128-byte round key from a 32-byte master key."""
    current = _exact(key, KEY_SIZE, "key")
    round_key = bytearray()
    for _ in range(KEY_WORDS):
        for _ in range(ROUNDS):
            current = _obfuscate_key(_prevent_weak_key(current))
        round_key += current
    return bytes(round_key)


def _round_keys(round_key: bytes) -> Iterator[bytes]:
    for r in range(ROUNDS):
        yield round_key[r * BLOCK_SIZE:(r + 1) * BLOCK_SIZE]


def _encrypt(state: bytes, round_key: bytes) -> bytes:
    for rk in _round_keys(round_key):
        state = _xor(multiply(shift_bits_add(state)), rk)
    return state


def _decrypt(state: bytes, round_key: bytes) -> bytes:
    for rk in reversed(list(_round_keys(round_key))):
        state = shift_bits_sub(inv_multiply(_xor(state, rk)))
    return state


def _whole_blocks(data) -> Iterator[bytes]:
    payload = bytes(data)
    if len(payload) % BLOCK_SIZE:
        raise ValueError(
            f"data length must be a multiple of {BLOCK_SIZE}, got {len(payload)}"
        )
    for i in range(0, len(payload), BLOCK_SIZE):
        yield payload[i:i + BLOCK_SIZE]


class OP4:
    """An OP4 cipher bound to one key; without a key the round key is all zero."""

    __slots__ = ("_round_key",)

    def __init__(self, key: Optional[bytes] = None) -> None:
        self._round_key = bytes(ROUND_KEY_SIZE) if key is None else expand_key(key)

    @property
    def round_key(self) -> bytes:
        """The expanded round key."""
        return self._round_key

    def encrypt_block(self, block: bytes) -> bytes:
        """Encrypt one 16-byte block."""
        return _encrypt(_exact(block, BLOCK_SIZE, "block"), self._round_key)

    def decrypt_block(self, block: bytes) -> bytes:
        """Decrypt one 16-byte block."""
        return _decrypt(_exact(block, BLOCK_SIZE, "block"), self._round_key)

    def ecb_encrypt(self, data: bytes) -> bytes:
        return b"".join(_encrypt(b, self._round_key) for b in _whole_blocks(data))

    def ecb_decrypt(self, data: bytes) -> bytes:
        return b"".join(_decrypt(b, self._round_key) for b in _whole_blocks(data))

    def cbc_encrypt(self, data: bytes, iv: bytes) -> bytes:
        previous = _exact(iv, BLOCK_SIZE, "iv")
        out = bytearray()
        for block in _whole_blocks(data):
            previous = _encrypt(_xor(previous, block), self._round_key)
            out += previous
        return bytes(out)

    def cbc_decrypt(self, data: bytes, iv: bytes) -> bytes:
        previous = _exact(iv, BLOCK_SIZE, "iv")
        out = bytearray()
        for block in _whole_blocks(data):
            out += _xor(_decrypt(block, self._round_key), previous)
            previous = block
        return bytes(out)

    def ofb_xcrypt(self, data: bytes, iv: bytes) -> bytes:
        """Encrypt or decrypt in OFB mode; the same call does both."""
        feedback = _exact(iv, BLOCK_SIZE, "iv")
        payload = bytes(data)
        out = bytearray()
        for i in range(0, len(payload), BLOCK_SIZE):
            feedback = _encrypt(feedback, self._round_key)
            out += _xor(payload[i:i + BLOCK_SIZE], feedback)
        return bytes(out)

    def ctr_xcrypt(self, data: bytes, nonce: bytes, counter: int = 0) -> bytes:
        """Encrypt or decrypt in CTR mode with a 32-bit little-endian counter."""
        prefix = _exact(nonce, NONCE_SIZE, "nonce")
        payload = bytes(data)
        counter &= _MASK32
        out = bytearray()
        for i in range(0, len(payload), BLOCK_SIZE):
            keystream = _encrypt(prefix + struct.pack("<I", counter), self._round_key)
            out += _xor(payload[i:i + BLOCK_SIZE], keystream)
            counter = (counter + 1) & _MASK32
        return bytes(out)