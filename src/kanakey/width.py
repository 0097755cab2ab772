from __future__ import annotations

from .chars import FULL_WIDTH_OFFSET, is_half_width_katakana, is_half_width_target

__all__ = [
    "merge_katakana",
    "to_half_width",
    "to_zenkaku_katakana",
    "to_zenkaku_katakana_char",
]

# U+FF61..U+FF9F in code point order.
HANKAKU_KATAKANA = (
    "｡｢｣､･ｦｧｨｩｪｫｬｭｮｯｰｱｲｳｴｵｶｷｸｹｺｻｼｽｾｿﾀﾁﾂﾃﾄﾅﾆﾇﾈﾉﾊﾋﾌﾍﾎﾏﾐﾑﾒﾓﾔﾕﾖﾗﾘﾙﾚﾛﾜﾝﾞﾟ"
)
ZENKAKU_KATAKANA = (
    "。「」、・ヲァィゥェォャュョッーアイウエオカキクケコサシスセソタチツテトナニヌネノハヒフヘホマミムメモヤユヨラリルレロワン゛゜"
)
_KATAKANA_TABLE = dict(zip(HANKAKU_KATAKANA, ZENKAKU_KATAKANA))

HANKAKU_VOICED_MARK = "ﾞ"
HANKAKU_SEMI_VOICED_MARK = "ﾟ"

_VOICED = dict(
    zip(
        "ｶｷｸｹｺｻｼｽｾｿﾀﾁﾂﾃﾄﾊﾋﾌﾍﾎｳ",
        "ガギグゲゴザジズゼゾダヂヅデドバビブベボヴ",
    )
)
_SEMI_VOICED = dict(zip("ﾊﾋﾌﾍﾎ", "パピプペポ"))


def _shift_half_width(ch: str) -> str:
    # 16-bit wraparound: U+2212 MINUS SIGN lands on U+2332, not on "-".
    return chr((ord(ch) - FULL_WIDTH_OFFSET) & 0xFFFF)


def to_half_width(text: str | None) -> str | None:
    """Convert full-width Latin letters, digits and common signs to their ASCII forms."""
    if text is None:
        return None
    return "".join(_shift_half_width(ch) if is_half_width_target(ch) else ch for ch in text)


def to_zenkaku_katakana_char(ch: str) -> str:
    """Convert a single half-width katakana character without mark composition."""
    if is_half_width_katakana(ch):
        return _KATAKANA_TABLE[ch]
    return ch


def merge_katakana(first: str, second: str) -> str:
    """
    Compose ``first`` with a following half-width (semi-)voiced mark.

    Returns the precomposed full-width katakana when the pair composes,
    otherwise ``first`` unchanged.
    """
    if second == HANKAKU_VOICED_MARK:
        return _VOICED.get(first, first)
    if second == HANKAKU_SEMI_VOICED_MARK:
        return _SEMI_VOICED.get(first, first)
    return first


def to_zenkaku_katakana(text: str | None) -> str | None:
    if text is None:
        return None
    out: list[str] = []
    idx = 0
    length = len(text)
    while idx < length:
        ch = text[idx]
        if idx + 1 < length:
            merged = merge_katakana(ch, text[idx + 1])
            if merged != ch:
                out.append(merged)
                idx += 2
                continue
        out.append(to_zenkaku_katakana_char(ch))
        idx += 1
    return "".join(out)
