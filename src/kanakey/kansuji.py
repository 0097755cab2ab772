from __future__ import annotations

__all__ = ["KansujiError", "convert_kansuji", "get_kanji_digit", "to_kanji"]

KANJI_DIGITS = {
    "一": 1,
    "二": 2,
    "三": 3,
    "四": 4,
    "五": 5,
    "六": 6,
    "七": 7,
    "八": 8,
    "九": 9,
}
KANJI_PLACES = {"十": 10, "百": 100, "千": 1_000}
KANJI_MAGNITUDES = {"万": 10_000, "億": 100_000_000}
KANJI_ZERO = "零"
# to_kanji renders zero as 〇, so it is accepted as a whole-string zero too.
KANJI_ZERO_FORMS = {KANJI_ZERO, "〇"}

_DIGIT_KANJI = {value: kanji for kanji, value in KANJI_DIGITS.items()}
_DIGIT_KANJI[10] = "十"


class KansujiError(ValueError):
    """Raised when a string is not a kanji numeral."""

    def __init__(self, message: str, *, text: str | None = None, char: str | None = None) -> None:
        super().__init__(message)
        self.text = text
        self.char = char


def convert_kansuji(text: str | None) -> str:
    """
    Convert a kanji numeral such as ``百二十三`` to its decimal string ``"123"``.

    Only the most recent digit before a place marker counts (``二三十`` is 30);
    a bare place or magnitude marker stands for one of that unit.
    """
    if not text:
        raise KansujiError("Input string is empty or None", text=text)
    if text in KANJI_ZERO_FORMS:
        return "0"

    digit = 1
    tier = 0
    total = 0
    for ch in text:
        if ch in KANJI_DIGITS:
            digit = KANJI_DIGITS[ch]
        elif ch in KANJI_PLACES:
            tier += (digit or 1) * KANJI_PLACES[ch]
            digit = 0
        elif ch in KANJI_MAGNITUDES:
            tier += digit
            total += (tier or 1) * KANJI_MAGNITUDES[ch]
            tier = 0
            digit = 0
        else:
            raise KansujiError(f"Invalid kanji character found: {ch}", text=text, char=ch)
    return str(total + tier + digit)


def get_kanji_digit(num: int) -> str:
    """Return the single kanji for 1-10, or ``""`` outside that range."""
    return _DIGIT_KANJI.get(num, "")


def to_kanji(num: int) -> str | None:
    """Render 0-100 in kanji numerals; other values return ``None``."""
    if num < 0:
        return None
    if num == 0:
        return "〇"
    if num <= 10:
        return get_kanji_digit(num)
    if num < 100:
        tens, ones = divmod(num, 10)
        return (
            (get_kanji_digit(tens) if tens > 1 else "")
            + "十"
            + (get_kanji_digit(ones) if ones > 0 else "")
        )
    if num == 100:
        return "百"
    return None
