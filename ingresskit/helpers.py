"""Small parsing and hashing helpers."""

from __future__ import annotations

import os
import re

from .log import get_logger

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1

_FNV128_OFFSET = 0x6C62272E07BB014262B821756295C58D
_FNV128_PRIME = 0x0000000001000000000000000000013B
_MASK128 = (1 << 128) - 1

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_TIME_UNITS = (
    ("ms", 1),
    ("s", 1000),
    ("m", 1000 * 60),
    ("h", 1000 * 60 * 60),
    ("d", 1000 * 60 * 60 * 24),
)

_SIZE_UNITS = (
    ("k", 1024),
    ("m", 1024 * 1024),
    ("g", 1024 * 1024 * 1024),
)


def home_dir() -> str:
    """The user's home directory from HOME, falling back to USERPROFILE."""
    return os.environ.get("HOME") or os.environ.get("USERPROFILE", "")


def hash_bytes(data: bytes) -> str:
    """Hex digest of the 128-bit FNV-1a hash of ``data``."""
    value = _FNV128_OFFSET
    for byte in data:
        value ^= byte
        value = (value * _FNV128_PRIME) & _MASK128
    return value.to_bytes(16, "big").hex()


def parse_int(data: str) -> int:
    """Parse a signed decimal 64-bit integer; raise ValueError otherwise."""
    if not _INT_RE.fullmatch(data):
        raise ValueError(f"invalid syntax: {data!r}")
    value = int(data)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"value out of range: {data!r}")
    return value


def parse_time(data: str) -> int:
    """Parse a duration such as ``500ms``, ``5s`` or ``1d`` into milliseconds."""
    for suffix, factor in _TIME_UNITS:
        if data.endswith(suffix):
            return parse_int(data[: -len(suffix)]) * factor
    return parse_int(data)


def parse_size(size: str) -> int:
    """Parse a size such as ``16k`` or ``2g`` into bytes."""
    for suffix, factor in _SIZE_UNITS:
        if size.endswith(suffix):
            return parse_int(size[: -len(suffix)]) * factor
    return parse_int(size)


def get_bool_value(data_value: str, data_name: str) -> bool:
    """Parse a boolean, accepting deprecated on/off/enabled/disabled with a warning."""
    if data_value in _TRUE_WORDS:
        return True
    if data_value in _FALSE_WORDS:
        return False
    lowered = data_value.lower()
    if lowered in ("enabled", "on", "disabled", "off"):
        get_logger().warningf(
            '%s - [%s] is DEPRECATED, use "true" or "false"', data_name, data_value
        )
        return lowered in ("enabled", "on")
    raise ValueError(f"invalid boolean value for {data_name}: {data_value!r}")


def get_pod_prefix(pod_name: str) -> str:
    """Strip the two trailing dash-separated parts from a pod name."""
    cut = pod_name.rfind("-")
    if cut != -1:
        cut = pod_name.rfind("-", 0, cut)
    if cut == -1:
        raise ValueError(f"incorrect podName format: '{pod_name}'")
    return pod_name[:cut]