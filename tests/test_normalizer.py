from __future__ import annotations

import zlib

import pytest

import kanakey
from kanakey.normalizer import Normalizer, combine_checksums, hash_key, normalize
from kanakey.variants import VariantMap


def test_normalize_names_with_packaged_variants() -> None:
    # hiragana -> katakana, variant kanji, half-width katakana, spaces
    assert normalize("坂﨑 ともゑ") == "坂崎トモエ"
    assert normalize("坂﨑 ﾏﾛｶ") == "坂崎マロカ"
    assert normalize("前島") == "前島"
    assert normalize(None) is None
    assert normalize("") == ""


def test_normalize_removes_ascii_and_ideographic_spaces() -> None:
    assert normalize("山田　太郎\t") == "山田太郎"
    assert normalize(" や ま だ ") == "ヤマダ"


def test_normalize_keeps_non_ascii_spaces_other_than_ideographic() -> None:
    assert normalize("a\u00a0b") == "a\u00a0b"
    assert normalize("a\u2003b") == "a\u2003b"


def test_normalize_composes_marks_split_by_spaces() -> None:
    assert normalize("ｶ ﾞﾄ　ｳ") == "ガトウ"


def test_normalize_is_idempotent() -> None:
    samples = ["坂﨑 ともゑ", "髙橋　ﾊﾟﾝ", "ゐど ｳﾞｨ", "𠮷田", "ﾞ", "abc ＡＢＣ", "ゔ"]
    for sample in samples:
        once = normalize(sample)
        assert normalize(once) == once


def test_normalize_with_explicit_variant_map() -> None:
    variant_map = VariantMap.from_lines(["辺邊", "カヵ"])
    normalizer = Normalizer(variant_map)
    assert normalizer.normalize("邊見 ヵ") == "辺見カ"
    assert normalize("﨑", variants=variant_map) == "﨑"


def test_variants_apply_after_hiragana_shift() -> None:
    variant_map = VariantMap.from_lines(["エヱ"])
    assert Normalizer(variant_map).normalize("ゑ") == "エ"


def test_hash_key_matches_for_equivalent_names() -> None:
    assert hash_key("坂﨑 ともゑ") == hash_key("坂崎トモヱ")
    assert hash_key("坂﨑 ﾏﾛｶ") == hash_key("坂崎 まろか")
    assert hash_key("坂崎") != hash_key("坂本")


def test_hash_key_layout() -> None:
    data = "坂崎トモエ".encode("utf-8")
    expected = (zlib.crc32(data) << 32) | zlib.adler32(data)
    assert hash_key("坂﨑 ともゑ") == expected
    assert 0 <= expected < 2**64


def test_hash_key_of_empty_string() -> None:
    # crc32(b"") == 0 and adler32(b"") == 1
    assert hash_key("") == 1


def test_hash_key_rejects_none() -> None:
    with pytest.raises(TypeError):
        hash_key(None)  # type: ignore[arg-type]


def test_combine_checksums_masks_to_32_bits() -> None:
    assert combine_checksums(0xFFFFFFFF, 0xFFFFFFFF) == 2**64 - 1
    assert combine_checksums(1, 2) == (1 << 32) | 2
    assert combine_checksums(1 << 32, 0) == 0


def test_package_exports() -> None:
    assert kanakey.normalize is normalize
    assert kanakey.to_ngram("あい") == "あ い"
    assert kanakey.convert_kansuji("百") == "100"
    assert isinstance(kanakey.__version__, str)
