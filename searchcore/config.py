"""Key/value configuration files of ``key: value`` lines."""

from __future__ import annotations

import math
import os
import re
import struct

from searchcore.text import trim

_MISSING = object()

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_FLOAT = re.compile(
    r"""
    [ \t\n\v\f\r]*
    (
      [+-]?
      (?:
          0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?
        | (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
        | inf(?:inity)?
        | nan(?:\([0-9A-Za-z_]*\))?
      )
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)


class ConfigError(ValueError):
    """Raised for unreadable files, missing keys and unparseable values."""


def parse_config(text: str) -> dict[str, str]:
    """Parse configuration text into a mapping of keys to values.

    Each line is trimmed; blank lines, lines starting with ``#`` and lines
    without a colon are ignored. The key is everything before the first
    colon and the value everything after it, both trimmed. Later keys
    overwrite earlier ones.
    """
    values: dict[str, str] = {}
    for raw in text.split("\n"):
        if raw.endswith("\r"):
            raw = raw[:-1]
        line = trim(raw)
        if not line or line.startswith("#"):
            continue
        key, colon, value = line.partition(":")
        if not colon:
            continue
        values[trim(key)] = trim(value)
    return values


def _parse_int(key: str, text: str) -> int:
    match = _INTEGER.match(text)
    if match is None:
        raise ConfigError(f"value of key {key} is not an integer: {text!r}")
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ConfigError(f"value of key {key} is out of range: {text!r}")
    return value


def _parse_double(key: str, text: str) -> float:
    match = _FLOAT.match(text)
    if match is None:
        raise ConfigError(f"value of key {key} is not a number: {text!r}")
    token = match.group(1)
    body = token.lstrip("+-")
    lowered = body.lower()
    if lowered.startswith("0x"):
        try:
            value = float.fromhex(body)
        except OverflowError:
            value = math.inf
    elif lowered.startswith("nan"):
        value = math.nan
    elif lowered.startswith("inf"):
        value = math.inf
    else:
        value = float(body)
        if math.isinf(value):
            raise ConfigError(f"value of key {key} is out of range: {text!r}")
    if math.isinf(value) and not lowered.startswith("inf"):
        raise ConfigError(f"value of key {key} is out of range: {text!r}")
    return -value if token.startswith("-") else value


def _to_float32(key: str, value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError as exc:
        raise ConfigError(f"value of key {key} is out of range for a float") from exc


class Config:
    """Settings read from ``<base_dir>/<file>``."""

    def __init__(self, file: str, base_dir: str | os.PathLike = "config") -> None:
        path = os.path.join(base_dir, file)
        try:
            with open(path, encoding="utf-8", errors="replace", newline="") as handle:
                content = handle.read()
        except FileNotFoundError as exc:
            raise ConfigError(f"failed to open file: {path}") from exc
        except OSError as exc:
            raise ConfigError(f"error reading config file: {path}") from exc
        self._values = parse_config(content)

    @classmethod
    def from_text(cls, text: str) -> "Config":
        """Build a configuration from text instead of a file."""
        config = cls.__new__(cls)
        config._values = parse_config(text)
        return config

    def _lookup(self, key: str) -> str:
        try:
            return self._values[key]
        except KeyError:
            raise ConfigError(f"key {key} not found") from None

    def get_string(self, key: str, default=_MISSING) -> str:
        """Return the value of ``key``; ``default`` if given and the key is absent."""
        if key not in self._values and default is not _MISSING:
            return default
        return self._lookup(key)

    def get_int(self, key: str, default=_MISSING) -> int:
        """Return the value of ``key`` parsed as a 32-bit integer."""
        if key not in self._values and default is not _MISSING:
            return default
        return _parse_int(key, self._lookup(key))

    def get_double(self, key: str, default=_MISSING) -> float:
        """Return the value of ``key`` parsed as a double."""
        if key not in self._values and default is not _MISSING:
            return default
        return _parse_double(key, self._lookup(key))

    def get_float(self, key: str, default=_MISSING) -> float:
        """Return the value of ``key`` parsed and rounded to single precision."""
        if key not in self._values and default is not _MISSING:
            return default
        return _to_float32(key, _parse_double(key, self._lookup(key)))

    def __contains__(self, key: object) -> bool:
        return key in self._values