"""Self-check report: key-schedule sensitivity and round trips through every mode."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence

from .cipher import OP4
from .hexdump import format_diff_hex, format_hex

_RESET = "\x1b[0m"
_FAIL = "\x1b[91m"

WEAK_KEY_LEFT = b"\x80" + bytes(31)
WEAK_KEY_RIGHT = b"\x40" + bytes(31)

MASTER_KEY = b"\xff" * 31 + b"\x7f"
MASTER_IV = b"\xff" * 16
MASTER_NONCE = b"\xff" * 12
PLAINTEXT = b"\x00\x01" * 16
CTR_COUNTER = 0x1234567890ABCDEF

ROUND_KEY_HEADER = "Round key (left):\t\t\t\t\t\t\t\tRound key (Right):\n"
SECURE_MESSAGE = "The key extension algorithm is secure.\n"
WEAK_MESSAGE = "Weak key has been formed!\n"


class WeakKeyError(RuntimeError):
    """Two different master keys expanded to the same round key."""

    def __init__(self, report: str) -> None:
        super().__init__(report)
        self.report = report


def weak_key_report() -> str:
    """Compare round keys of two keys differing in one bit.

    Returns the report text; raises :class:`WeakKeyError` if the round keys match.
    """
    left = OP4(WEAK_KEY_LEFT).round_key
    right = OP4(WEAK_KEY_RIGHT).round_key
    report = ROUND_KEY_HEADER + format_diff_hex(left, right, per_line=24, indent=True)
    if left == right:
        raise WeakKeyError(report + WEAK_MESSAGE)
    return report + SECURE_MESSAGE


def _section(title: str, data: bytes, color: str = "") -> str:
    heading = f"{color}{title}\n{_RESET}" if color else f"{title}\n"
    return heading + format_hex(data, 16, trailing_newline=True, indent=True)


def verification_report() -> str:
    """Encrypt and decrypt a fixed message in ECB, CBC, OFB and CTR modes."""
    op4 = OP4(MASTER_KEY)
    parts = [
        _section("Master key:", MASTER_KEY),
        _section("Master Nonce:", MASTER_NONCE),
        _section("Master IV:", MASTER_IV),
        _section("Round key", op4.round_key),
        _section("Plaintext", PLAINTEXT),
    ]

    modes: list[tuple[str, str, Callable[[bytes], bytes], Callable[[bytes], bytes]]] = [
        (
            "ECB",
            "\x1b[92m",
            op4.ecb_encrypt,
            op4.ecb_decrypt,
        ),
        (
            "CBC",
            "\x1b[94m",
            lambda data: op4.cbc_encrypt(data, MASTER_IV),
            lambda data: op4.cbc_decrypt(data, MASTER_IV),
        ),
        (
            "OFB",
            "\x1b[95m",
            lambda data: op4.ofb_xcrypt(data, MASTER_IV),
            lambda data: op4.ofb_xcrypt(data, MASTER_IV),
        ),
        (
            "CTR",
            "\x1b[96m",
            lambda data: op4.ctr_xcrypt(data, MASTER_NONCE, CTR_COUNTER),
            lambda data: op4.ctr_xcrypt(data, MASTER_NONCE, CTR_COUNTER),
        ),
    ]

    for name, color, encrypt, decrypt in modes:
        ciphertext = encrypt(PLAINTEXT)
        parts.append(_section(f"{name} Ciphertext", ciphertext, color))
        if decrypt(ciphertext) != PLAINTEXT:
            parts.append(f"{_FAIL}[!] {name} Decryption failed! [!]\n{_RESET}")

    return "".join(parts)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print both reports; return 1 if a weak key was formed."""
    parser = argparse.ArgumentParser(
        prog="op4cipher-demo",
        description="Check the OP4 key schedule and round-trip every cipher mode.",
    )
    parser.parse_args(argv)

    try:
        sys.stdout.write(weak_key_report())
    except WeakKeyError as exc:
        sys.stdout.write(exc.report)
        return 1
    sys.stdout.write(verification_report())
    return 0


if __name__ == "__main__":
    sys.exit(main())