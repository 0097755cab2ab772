from __future__ import annotations

from importlib import metadata
from pathlib import Path

import tomllib

from .kansuji import KansujiError, convert_kansuji, get_kanji_digit, to_kanji
from .ngram import to_ngram
from .normalizer import Normalizer, hash_key, normalize
from .trim import full_trim, trim_to_empty
from .variants import (
    VariantMap,
    VariantMapError,
    default_variant_map,
    load_variant_map,
    set_debug_logging,
)
from .width import merge_katakana, to_half_width, to_zenkaku_katakana, to_zenkaku_katakana_char


def _read_local_version() -> str | None:
    # Only resolves from a source checkout (src/kanakey -> repo root).
    try:
        pyproject_path = Path(__file__).resolve().parents[2] / "pyproject.toml"
    except IndexError:  # pragma: no cover
        return None
    try:
        with pyproject_path.open("rb") as fh:
            data = tomllib.load(fh)
    except (FileNotFoundError, tomllib.TOMLDecodeError):
        return None
    return data.get("project", {}).get("version")


try:
    __version__ = metadata.version("kanakey")
except metadata.PackageNotFoundError:
    __version__ = _read_local_version() or "0.0.0+unknown"

__all__ = [
    "KansujiError",
    "Normalizer",
    "VariantMap",
    "VariantMapError",
    "__version__",
    "convert_kansuji",
    "default_variant_map",
    "full_trim",
    "get_kanji_digit",
    "hash_key",
    "load_variant_map",
    "merge_katakana",
    "normalize",
    "set_debug_logging",
    "to_half_width",
    "to_kanji",
    "to_ngram",
    "to_zenkaku_katakana",
    "to_zenkaku_katakana_char",
    "trim_to_empty",
]
