"""Front-matter extraction and validation."""

from __future__ import annotations

from typing import Final, Mapping

RESERVED_KEYS: Final[tuple[str, ...]] = ("Title", "Author", "Published")
_QUOTES = "\"'"


def extract_front_matter(text: str | None) -> dict[str, str]:
    """Read ``key: value`` pairs from a front-matter block.

    Lines without exactly one colon are skipped, so values such as ISO
    timestamps (``10:00:00``) are not picked up. Keys and values are trimmed of
    whitespace and surrounding quotes; the first occurrence of a key wins.
    """
    pairs: dict[str, str] = {}
    if not text:
        return pairs
    for line in text.splitlines():
        parts = line.split(":")
        if len(parts) != 2:
            continue
        key = parts[0].strip().strip(_QUOTES)
        value = parts[1].strip().strip(_QUOTES)
        pairs.setdefault(key, value)
    return pairs


def validate_metadata(pairs: Mapping[str, str]) -> dict[str, str]:
    """Return metadata with ``Title``, ``Author`` and ``Published`` first.

    Each reserved key is looked up as written, then in lowercase, and stored
    under its canonical spelling (empty when missing). The remaining pairs
    follow in their original order.
    """
    remaining = dict(pairs)
    validated: dict[str, str] = {}
    for key in RESERVED_KEYS:
        if key in remaining:
            validated[key] = remaining.pop(key)
        elif key.lower() in remaining:
            validated[key] = remaining.pop(key.lower())
        else:
            validated[key] = ""
    validated.update(remaining)
    return validated
