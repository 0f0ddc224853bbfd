"""Hex dump formatting for byte strings, optionally side by side and coloured."""

from __future__ import annotations

_RED = "\x1b[91m"
_YELLOW = "\x1b[93m"
_RESET = "\x1b[0m"


def _hex_byte(value: int, suffix: str, color: bool) -> str:
    text = f"{value:02x}{suffix}"
    if not color:
        return text
    if value == 0:
        return f"{_RED}{text}{_RESET}"
    if value == 0xFF:
        return f"{_YELLOW}{text}{_RESET}"
    return text


def format_hex_line(data: bytes, start: int, per_line: int, color: bool = False) -> str:
    """Format ``per_line`` bytes of ``data`` from ``start``, padding missing ones."""
    return "".join(
        _hex_byte(data[pos], " ", color) if pos < len(data) else "   "
        for pos in range(start, start + per_line)
    )


def format_hex(
    data: bytes,
    per_line: int = 16,
    trailing_newline: bool = True,
    indent: bool = False,
    color: bool = False,
) -> str:
    """Format ``data`` as hex, ``per_line`` bytes to a line."""
    if per_line <= 0:
        raise ValueError("per_line must be positive")
    parts = []
    for i, value in enumerate(data):
        if indent and i % per_line == 0:
            parts.append("\t")
        parts.append(_hex_byte(value, "", color))
        parts.append(" " if (i + 1) % per_line else "\n")
    if trailing_newline:
        parts.append("\n")
    return "".join(parts)


def format_diff_hex(
    left: bytes,
    right: bytes,
    per_line: int = 16,
    indent: bool = False,
    color: bool = False,
) -> str:
    """Format two byte strings as hex in two columns, line by line."""
    if per_line <= 0:
        raise ValueError("per_line must be positive")
    longest = max(len(left), len(right))
    lines = []
    for start in range(0, longest, per_line):
        prefix = "\t" if indent else ""
        lines.append(
            f"{prefix}{format_hex_line(left, start, per_line, color)}"
            f"\t\t{format_hex_line(right, start, per_line, color)}\n"
        )
    return "".join(lines)