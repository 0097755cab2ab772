from __future__ import annotations

from typing import Callable

__all__ = ["full_trim", "trim_to_empty"]

_EXTRA_TRIM_CHARS = {"\u00a0", "\u3000"}


def trim_to_empty(text: str | None) -> str:
    """Strip control characters and ASCII spaces from both ends; ``None`` becomes ``""``."""
    if text is None:
        return ""
    return _strip(text, _is_control_or_space)


def _is_control_or_space(ch: str) -> bool:
    return ord(ch) <= 0x20


def _is_trimmable(ch: str) -> bool:
    return _is_control_or_space(ch) or ch in _EXTRA_TRIM_CHARS


def _strip(text: str, trimmable: Callable[[str], bool]) -> str:
    start = 0
    end = len(text)
    while start < end and trimmable(text[start]):
        start += 1
    while start < end and trimmable(text[end - 1]):
        end -= 1
    if start == 0 and end == len(text):
        return text
    return text[start:end]


def full_trim(text: str | None) -> str | None:
    """
    Strip control characters, spaces, NBSP and ideographic spaces from both ends.

    ``None`` and ``""`` are returned unchanged.
    """
    if not text:
        return text
    return _strip(text, _is_trimmable)
