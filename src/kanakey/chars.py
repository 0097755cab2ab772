from __future__ import annotations

__all__ = [
    "FULL_WIDTH_OFFSET",
    "FULL_WIDTH_SIGNS",
    "HIRAGANA_KATAKANA_OFFSET",
    "hiragana_to_katakana_char",
    "is_full_width_alpha",
    "is_full_width_digit",
    "is_full_width_sign",
    "is_half_width_katakana",
    "is_half_width_target",
    "is_hiragana",
]

# "Ａ" - "A"
FULL_WIDTH_OFFSET = 0xFEE0
# "ァ" - "ぁ"
HIRAGANA_KATAKANA_OFFSET = 0x60

FULL_WIDTH_SIGNS = frozenset(
    "！＃＄％＆（）＊＋，−－．／：；＜＝＞？＠［］＾＿｛｜｝"
)

_HIRAGANA_FIRST = 0x3041  # ぁ
_HIRAGANA_LAST = 0x3093  # ん
_HANKAKU_KATAKANA_FIRST = 0xFF61  # ｡
_HANKAKU_KATAKANA_LAST = 0xFF9F  # ﾟ


def is_full_width_alpha(ch: str) -> bool:
    code = ord(ch)
    return 0xFF21 <= code <= 0xFF3A or 0xFF41 <= code <= 0xFF5A


def is_full_width_digit(ch: str) -> bool:
    return 0xFF10 <= ord(ch) <= 0xFF19


def is_full_width_sign(ch: str) -> bool:
    return ch in FULL_WIDTH_SIGNS


def is_half_width_target(ch: str) -> bool:
    """Return True when ``ch`` is shifted down by ``FULL_WIDTH_OFFSET`` in half-width conversion."""
    return is_full_width_alpha(ch) or is_full_width_digit(ch) or is_full_width_sign(ch)


def is_hiragana(ch: str) -> bool:
    # ゔ and the small ゕゖ sit above ん and are left alone.
    return _HIRAGANA_FIRST <= ord(ch) <= _HIRAGANA_LAST


def is_half_width_katakana(ch: str) -> bool:
    return _HANKAKU_KATAKANA_FIRST <= ord(ch) <= _HANKAKU_KATAKANA_LAST


def hiragana_to_katakana_char(ch: str) -> str:
    if is_hiragana(ch):
        return chr(ord(ch) + HIRAGANA_KATAKANA_OFFSET)
    return ch
