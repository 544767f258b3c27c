"""Utility helpers for field names, versions and ASCII-safe keys."""

from __future__ import annotations

import re
import unicodedata
from typing import Any

VERSION_PATTERN = re.compile(r"^\s*(\d+)(?:\.(\d+))?(?:\.(\d+))?")

# Letters NFKD cannot decompose into ASCII.
TRANSLITERATIONS = {
    "Æ": "AE",
    "æ": "ae",
    "Ð": "D",
    "ð": "d",
    "Đ": "D",
    "đ": "d",
    "Ħ": "H",
    "ħ": "h",
    "ı": "i",
    "Ł": "L",
    "ł": "l",
    "Ŋ": "NG",
    "ŋ": "ng",
    "Ø": "O",
    "ø": "o",
    "Œ": "OE",
    "œ": "oe",
    "ß": "ss",
    "ẞ": "SS",
    "Þ": "TH",
    "þ": "th",
    "×": "x",
}


def method_to_field(name: str) -> str:
    """Translate a Python attribute name into its kebab-case field name."""
    return name.replace("_", "-")


def is_empty(value: Any) -> bool:
    """Treat None, empty strings and empty collections as empty.

    Model parts are never empty, whatever their fields hold.
    """
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict, set)):
        return len(value) == 0
    return False


def version_tuple(version: str) -> tuple[int, int, int] | None:
    """Parse the numeric part of a dotted version string."""
    match = VERSION_PATTERN.match(str(version))
    if not match:
        return None
    return tuple(int(part) if part else 0 for part in match.groups())  # type: ignore[return-value]


def update_cff_version(version: str, minimum: str) -> str:
    """Raise an out-of-date ``cff-version`` to the minimum validatable one."""
    if not version:
        return version
    current = version_tuple(version)
    floor = version_tuple(minimum)
    if current is None or floor is None:
        return version
    return minimum if current < floor else version


def transliterate(value: str, fallback: str = "") -> str:
    """Map accented Latin text onto plain ASCII.

    Characters with no ASCII equivalent are replaced with ``fallback``.
    """
    output: list[str] = []
    for char in value:
        if char in TRANSLITERATIONS:
            output.append(TRANSLITERATIONS[char])
            continue
        decomposed = unicodedata.normalize("NFKD", char)
        base = "".join(part for part in decomposed if not unicodedata.combining(part))
        output.append(base if base.isascii() else fallback)
    return "".join(output)


def parameterize(value: str, separator: str = "_") -> str:
    """Create an ASCII key from ``value``.

    Anything other than letters, digits, ``-`` and ``_`` collapses into a
    single separator, with no separator at either end.
    """
    text = transliterate(value)
    text = re.sub(r"[^a-zA-Z0-9\-_]+", separator, text)
    if separator:
        sep = re.escape(separator)
        text = re.sub(f"{sep}{{2,}}", separator, text)
        text = re.sub(f"^{sep}|{sep}$", "", text)
    return text
