from kanakey.trim import full_trim, trim_to_empty


def test_trim_to_empty() -> None:
    assert trim_to_empty("  abc  ") == "abc"
    assert trim_to_empty(None) == ""
    assert trim_to_empty("   ") == ""


def test_trim_to_empty_keeps_wide_spaces_and_strips_controls() -> None:
    assert trim_to_empty("\u3000abc\u3000") == "\u3000abc\u3000"
    assert trim_to_empty("\u00a0abc\u00a0") == "\u00a0abc\u00a0"
    assert trim_to_empty("\x01abc\x1f") == "abc"
    assert trim_to_empty("\x00 \u3000 ") == "\u3000"


def test_full_trim_handles_wide_and_nbsp() -> None:
    assert full_trim("　 abc　 ") == "abc"
    assert full_trim("\u00a0abc\u00a0") == "abc"
    assert full_trim("　 ") == ""
    assert full_trim("\tabc\n") == "abc"


def test_full_trim_passthrough() -> None:
    assert full_trim(None) is None
    assert full_trim("") == ""
    value = "坂崎　トモエ"
    assert full_trim(value) is value
