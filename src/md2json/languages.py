"""Canonical display names for code-block language monikers."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

UNKNOWN_LANGUAGE: Final[str] = "UNKNOWN"

# Exact, case-sensitive matches only. "charp" is a common typo kept on purpose.
LANGUAGE_NAMES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "csharp": "CSharp",
        "charp": "CSharp",
        "python": "Python",
        "javascript": "JavaScript",
        "js": "JavaScript",
        "nodejs": "NodeJS",
        "java": "Java",
        "powershell": "PowerShell",
        "batch": "Batch",
    }
)


def normalize_language(moniker: str) -> str:
    """Return the display name for ``moniker``, or ``UNKNOWN`` if unmapped."""
    return LANGUAGE_NAMES.get(moniker, UNKNOWN_LANGUAGE)


def is_known_language(moniker: str) -> bool:
    return moniker in LANGUAGE_NAMES
