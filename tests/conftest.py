"""Test setup for md2json."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from markdown_it import MarkdownIt  # noqa: E402

from md2json.parser import build_markdown_engine  # noqa: E402

CASES = Path(__file__).resolve().parent / "cases"


@pytest.fixture
def cases_dir() -> Path:
    """Directory holding the Markdown fixture documents."""
    return CASES


@pytest.fixture
def engine() -> MarkdownIt:
    """Engine with fixed code-block settings, independent of the environment."""
    return build_markdown_engine(css_class="code", copy_label="Copy")
