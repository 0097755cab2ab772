from __future__ import annotations

import re
import zlib

from .chars import hiragana_to_katakana_char
from .variants import VariantMap, default_variant_map
from .width import to_zenkaku_katakana

__all__ = ["Normalizer", "combine_checksums", "hash_key", "normalize"]

_SPACE_PATTERN = re.compile(r"[\s\u3000]", re.ASCII)


def combine_checksums(high: int, low: int) -> int:
    """Pack two 32-bit checksums into one unsigned 64-bit value."""
    return ((high & 0xFFFFFFFF) << 32) | (low & 0xFFFFFFFF)


class Normalizer:
    """
    Collapse spelling variants of Japanese names into one lookup key.

    Hiragana is shifted to katakana, variant glyphs are replaced by their
    canonical form, whitespace (including U+3000) is removed, and half-width
    katakana is widened with voiced marks composed.
    """

    def __init__(self, variants: VariantMap) -> None:
        self.variants = variants

    def normalize(self, text: str | None) -> str | None:
        if text is None:
            return None
        canonical = self.variants.canonical
        chars = [canonical(hiragana_to_katakana_char(ch)) for ch in text]
        return to_zenkaku_katakana(_SPACE_PATTERN.sub("", "".join(chars)))

    def hash_key(self, text: str) -> int:
        """
        Return a 64-bit key for ``text``: CRC-32 of the normalized UTF-8 bytes
        in the high half and Adler-32 in the low half.
        """
        normalized = self.normalize(text)
        if normalized is None:
            raise TypeError("hash_key() requires a string, not None")
        data = normalized.encode("utf-8")
        return combine_checksums(zlib.crc32(data), zlib.adler32(data))


def normalize(text: str | None, *, variants: VariantMap | None = None) -> str | None:
    return Normalizer(variants if variants is not None else default_variant_map()).normalize(text)


def hash_key(text: str, *, variants: VariantMap | None = None) -> int:
    return Normalizer(variants if variants is not None else default_variant_map()).hash_key(text)
