# op4cipher

OP4 is a small experimental block cipher with a 16-byte block and a
32-byte key. Each of its 8 rounds mixes the block's four little-endian
32-bit words by rotation and addition, multiplies every byte by an odd
constant modulo 256, and XORs in 16 bytes of round key. This package
implements the cipher, its key schedule and four modes of operation,
together with helpers that format byte strings as hex.

OP4 has not been analysed by anyone. Use it to learn and to experiment,
not to protect real data.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the cipher

```python
from op4cipher.cipher import OP4, expand_key

key = bytes(range(32))            # 32-byte key
op4 = OP4(key)

block = bytes(16)
ct = op4.encrypt_block(block)
assert op4.decrypt_block(ct) == block

data = bytes(32)                  # ECB and CBC work on whole 16-byte blocks
iv = bytes(16)

assert op4.ecb_decrypt(op4.ecb_encrypt(data)) == data
assert op4.cbc_decrypt(op4.cbc_encrypt(data, iv), iv) == data

# OFB and CTR are stream modes: the same call encrypts and decrypts,
# and the data may have any length.
assert op4.ofb_xcrypt(op4.ofb_xcrypt(data, iv), iv) == data

nonce = bytes(12)                 # 12-byte nonce, 32-bit little-endian block counter
assert op4.ctr_xcrypt(op4.ctr_xcrypt(data, nonce, 0), nonce, 0) == data
```

- `OP4(key)` expands a 32-byte key; `OP4()` with no key uses an all-zero
  round key.
- `OP4.round_key` is the 128-byte expanded round key, and
  `expand_key(key)` computes the same bytes without building a cipher
  object.
- The IV for CBC and OFB is 16 bytes; the CTR nonce is 12 bytes. The CTR
  counter is taken modulo 2**32 and wraps around.
- A key, block, IV or nonce of the wrong size, or ECB/CBC data whose
  length is not a multiple of 16, raises `ValueError`.

The single-round building blocks `shift_bits_add`, `shift_bits_sub`,
`multiply` and `inv_multiply` are public too. Each takes a 16-byte block
and returns a new one, which makes it easy to study how a change in one
input bit spreads through the state.

## Hex dumps

```python
from op4cipher.cipher import OP4, expand_key
from op4cipher.hexdump import format_hex, format_diff_hex

op4 = OP4(bytes(range(32)))
print(format_hex(op4.encrypt_block(bytes(16)), per_line=16, indent=True))
print(format_diff_hex(op4.round_key, expand_key(bytes(32)), per_line=24, indent=True))
```

`format_hex` writes two hex digits per byte, separated by spaces, with a
line break after every `per_line` bytes; `indent=True` starts each line
with a tab. `format_diff_hex` puts two byte strings side by side, padding
the shorter one with blanks. `format_hex_line` formats a single row.
With `color=True`, zero bytes are shown in red and `0xff` bytes in
yellow using ANSI escape codes.

## Demonstration

```
op4cipher-demo
```

(or `python -m op4cipher.demo`). This prints two reports. The first
expands two keys that differ in a single bit and shows their round keys
side by side, confirming that the key schedule does not collapse them into
the same round key; if it does, the command prints the comparison and
exits with status 1. The second encrypts a sample plaintext with a fixed
key, IV and nonce in every mode, prints the ciphertexts, and reports any
mode whose ciphertext does not decrypt back to the plaintext.

From Python, `op4cipher.demo.weak_key_report()` and
`op4cipher.demo.verification_report()` return the same reports as
strings; the former raises `op4cipher.demo.WeakKeyError` when the round
keys match.

## What it does not do

There is no command for encrypting files or streams and no padding
scheme: callers supply ECB and CBC data already a multiple of 16 bytes,
and manage keys, IVs and nonces themselves. There is no message
authentication.