"""Text helpers: bounded search, substrings, trimming, hashing and numeric parsing."""

from __future__ import annotations

import re

NPOS = -1
"""Returned by :func:`find` when the substring does not occur."""

_C_WHITESPACE = " \t\n\v\f\r"
_UINT32 = 0xFFFFFFFF
_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)
_ULONG_MAX = 2**64 - 1

_INTEGER = re.compile(r"([+-]?)(\d+)")
_FLOAT = re.compile(
    r"""
    [+-]?
    (?:
        0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?
      | (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
      | inf(?:inity)?
      | nan(?:\([0-9A-Za-z_]*\))?
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)


def find(text: str, sub: str, pos: int = 0) -> int:
    """Return the index of the first occurrence of ``sub`` at or after ``pos``.

    Returns :data:`NPOS` when there is none; raises IndexError when ``pos``
    lies past the end of ``text``.
    """
    if pos < 0 or pos > len(text):
        raise IndexError("pos is out of range")
    return text.find(sub, pos)


def substr(text: str, begin: int, length: int | None = None) -> str:
    """Return up to ``length`` characters of ``text`` starting at ``begin``.

    A ``length`` of None takes everything to the end. Raises IndexError when
    ``begin`` lies past the end of ``text``.
    """
    if begin < 0 or begin > len(text):
        raise IndexError("out of range begin for substr")
    if length is None:
        return text[begin:]
    return text[begin : begin + length]


def left_trim(text: str) -> str:
    """Strip leading ASCII whitespace."""
    return text.lstrip(_C_WHITESPACE)


def right_trim(text: str) -> str:
    """Strip trailing ASCII whitespace."""
    return text.rstrip(_C_WHITESPACE)


def trim(text: str) -> str:
    """Strip leading and trailing ASCII whitespace."""
    return right_trim(left_trim(text))


def string_hash(text: str | bytes) -> int:
    """Return the 32-bit one-at-a-time hash of ``text``.

    Strings are hashed as their UTF-8 bytes; bytes are treated as signed,
    so values of 0x80 and above contribute negatively.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    h = 0
    for byte in data:
        signed = byte - 256 if byte >= 0x80 else byte
        h = (h + signed) & _UINT32
        h = (h + (h << 10)) & _UINT32
        h ^= h >> 6
    h = (h + (h << 3)) & _UINT32
    h ^= h >> 11
    h = (h + (h << 15)) & _UINT32
    return h


def _parse_integer(text: str) -> tuple[bool, int]:
    """Parse a leading decimal integer; return (negative, magnitude)."""
    match = _INTEGER.match(text.lstrip(_C_WHITESPACE))
    if match is None:
        return False, 0
    return match.group(1) == "-", int(match.group(2))


def stol(text: str) -> int:
    """Parse a leading base-10 integer, saturating at the 64-bit signed range.

    Text with no leading number yields 0.
    """
    negative, magnitude = _parse_integer(text)
    value = -magnitude if negative else magnitude
    return max(_LONG_MIN, min(_LONG_MAX, value))


def stoi(text: str) -> int:
    """Parse like :func:`stol`, then wrap the result to a 32-bit signed int."""
    value = stol(text) & _UINT32
    return value - 2**32 if value >= 2**31 else value


def stoul(text: str) -> int:
    """Parse a leading base-10 integer as an unsigned 64-bit value.

    A minus sign negates modulo 2**64; magnitudes too large saturate.
    """
    negative, magnitude = _parse_integer(text)
    if magnitude > _ULONG_MAX:
        return _ULONG_MAX
    return (-magnitude) & _ULONG_MAX if negative else magnitude


def stod(text: str) -> float:
    """Parse the longest leading floating-point number; 0.0 if there is none.

    Accepts decimal and hexadecimal forms, ``inf``/``infinity`` and ``nan``.
    """
    match = _FLOAT.match(text.lstrip(_C_WHITESPACE))
    if match is None:
        return 0.0
    token = match.group(0)
    body = token.lstrip("+-")
    negative = token.startswith("-")
    lowered = body.lower()
    if lowered.startswith("0x"):
        value = float.fromhex(body)
    elif lowered.startswith("nan"):
        value = float("nan")
    elif lowered.startswith("inf"):
        value = float("inf")
    else:
        value = float(body)
    return -value if negative else value