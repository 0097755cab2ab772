from __future__ import annotations

from enum import IntEnum

__all__ = ["NgramState", "to_ngram"]

OPEN_PAREN = "（"
CLOSE_PAREN = "）"
IDEOGRAPHIC_SPACE = "\u3000"


class NgramState(IntEnum):
    NORMAL = 0
    SEEN_OPEN_PAREN = 1
    INSIDE_PAREN = 2


def to_ngram(text: str | None) -> str | None:
    """
    Split ``text`` into space separated single-character tokens for indexing.

    A full-width paren followed by one character and a closing paren is kept
    together as ``（x）``. An ideographic space right after a character is
    absorbed by the separator already written.
    """
    if text is None:
        return None
    state = NgramState.NORMAL
    out: list[str] = []
    last = len(text) - 1
    j = 0
    while j <= last:
        ch = text[j]
        if state is NgramState.NORMAL:
            if ch == OPEN_PAREN:
                state = NgramState.SEEN_OPEN_PAREN
                j += 1
                continue
        elif state is NgramState.SEEN_OPEN_PAREN:
            state = NgramState.INSIDE_PAREN
            j += 1
            continue
        else:
            state = NgramState.NORMAL
            if ch == CLOSE_PAREN:
                out.append(text[j - 2 : j])
            else:
                out.append(f"{text[j - 2]} {text[j - 1]} ")

        out.append(ch)
        if j < last:
            out.append(" ")
            if text[j + 1] == IDEOGRAPHIC_SPACE:
                j += 1
        j += 1

    # Unterminated group at end of input.
    if state is NgramState.SEEN_OPEN_PAREN:
        out.append(text[-1])
    elif state is NgramState.INSIDE_PAREN:
        out.append(f"{text[-2]} {text[-1]}")
    return "".join(out)
