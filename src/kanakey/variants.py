from __future__ import annotations

import os
import re
import threading
from collections.abc import Iterable, Iterator, Mapping
from importlib import resources
from pathlib import Path

__all__ = [
    "VariantMap",
    "VariantMapError",
    "default_variant_map",
    "load_variant_map",
    "parse_variant_lines",
    "set_debug_logging",
    "variants_path",
]

_VARIANTS_ENV = "KANAKEY_VARIANTS"
_DEBUG_ENV = "KANAKEY_DEBUG"
_PACKAGED_RESOURCE = "var.txt"
# Only CR, LF and CRLF end a line; other separators such as U+2028 stay in the group.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

_DEBUG_LOG = os.environ.get(_DEBUG_ENV, "").strip().lower() in {"1", "true", "yes"}


def set_debug_logging(enabled: bool) -> None:
    global _DEBUG_LOG
    _DEBUG_LOG = enabled


def _debug_log(message: str) -> None:
    if _DEBUG_LOG:
        print(f"[kanakey debug] {message}")


class VariantMapError(RuntimeError):
    """Raised when the variant character resource cannot be found or read."""


def parse_variant_lines(lines: Iterable[str]) -> dict[str, str]:
    """
    Build a ``source -> canonical`` dict from variant resource lines.

    The first character of each line is the canonical form; every following
    character on the line maps to it. Lines shorter than two characters are
    ignored. A source listed on several lines keeps the last assignment.
    """
    mapping: dict[str, str] = {}
    for raw in lines:
        line = raw.rstrip("\r\n")
        if len(line) < 2:
            continue
        target = line[0]
        for source in line[1:]:
            mapping[source] = target
    return mapping


class VariantMap(Mapping[str, str]):
    """Read-only mapping from a variant character to its canonical character."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(data or {})

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> VariantMap:
        return cls(parse_variant_lines(lines))

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"VariantMap({len(self._data)} entries)"

    def canonical(self, ch: str) -> str:
        return self._data.get(ch, ch)


def variants_path() -> Path | None:
    """Return the resource path configured through ``KANAKEY_VARIANTS``, if any."""
    env_path = os.environ.get(_VARIANTS_ENV)
    if env_path:
        return Path(env_path).expanduser()
    return None


def _read_packaged_text() -> str:
    try:
        resource = resources.files("kanakey") / "data" / _PACKAGED_RESOURCE
        return resource.read_text("utf-8")
    except FileNotFoundError as exc:
        raise VariantMapError(
            f"Resource '{_PACKAGED_RESOURCE}' not found in kanakey/data."
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise VariantMapError(f"Failed to load packaged '{_PACKAGED_RESOURCE}'.") from exc


def load_variant_map(path: Path | str | None = None) -> VariantMap:
    """
    Read a variant resource and return a new :class:`VariantMap`.

    Without ``path`` the ``KANAKEY_VARIANTS`` override is used, falling back
    to the ``var.txt`` shipped inside the package.
    """
    resolved = Path(path).expanduser() if path is not None else variants_path()
    if resolved is None:
        text = _read_packaged_text()
        source = f"kanakey/data/{_PACKAGED_RESOURCE}"
    else:
        if not resolved.is_file():
            raise VariantMapError(f"Variant resource not found: {resolved}")
        try:
            text = resolved.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise VariantMapError(f"Failed to load variant resource: {resolved}") from exc
        source = str(resolved)
    variant_map = VariantMap.from_lines(_LINE_BREAK.split(text))
    _debug_log(f"Loaded {len(variant_map)} variant entries from {source}")
    return variant_map


_DEFAULT_MAP: VariantMap | None = None
_DEFAULT_MAP_LOCK = threading.Lock()


def default_variant_map() -> VariantMap:
    """Return the process-wide variant map, loading it on first use."""
    global _DEFAULT_MAP
    cached = _DEFAULT_MAP
    if cached is not None:
        return cached
    with _DEFAULT_MAP_LOCK:
        if _DEFAULT_MAP is None:
            _DEFAULT_MAP = load_variant_map()
        return _DEFAULT_MAP
