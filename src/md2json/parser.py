"""Convert Markdown into rendered HTML, a heading tree and metadata."""

from __future__ import annotations

import logging
from typing import Any, MutableMapping, Sequence

from markdown_it import MarkdownIt
from markdown_it.token import Token
from mdit_py_plugins.anchors import anchors_plugin
from mdit_py_plugins.front_matter import front_matter_plugin

from md2json.code_blocks import install_code_block_decorator
from md2json.config import (
    MD2JSON_CODE_CSS_CLASS,
    MD2JSON_COPY_LABEL,
    MD2JSON_JSON_INDENT,
)
from md2json.exceptions import ParseError
from md2json.front_matter import extract_front_matter, validate_metadata
from md2json.headings import HeadingOccurrence, build_header_data, count_headers
from md2json.schemas import MarkdownData

try:
    from bs4 import BeautifulSoup
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for heading text extraction (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)


def build_markdown_engine(
    *,
    css_class: str = MD2JSON_CODE_CSS_CLASS,
    copy_label: str = MD2JSON_COPY_LABEL,
) -> MarkdownIt:
    """Create a CommonMark engine with tables, front matter, heading ids and code labels."""
    md = (
        MarkdownIt("commonmark")
        .enable("table")
        .use(front_matter_plugin)
        .use(anchors_plugin, min_level=1, max_level=6)
    )
    install_code_block_decorator(md, css_class=css_class, copy_label=copy_label)
    return md


def create_json(markdown_text: str | None, *, indent: int = MD2JSON_JSON_INDENT) -> str:
    """Convert Markdown to the JSON artifact.

    Args:
        markdown_text: Markdown source. Empty or None input yields "".
        indent: JSON indentation; 0 or less gives compact output.

    Returns:
        JSON text with ``HtmlString``, ``HeaderData`` and ``MetaData`` keys.

    Raises:
        ParseError: If the Markdown engine fails.
    """
    if not markdown_text:
        return ""
    return to_json(prepare_markdown_data(markdown_text), indent=indent)


def to_json(data: MarkdownData, *, indent: int = MD2JSON_JSON_INDENT) -> str:
    return data.model_dump_json(by_alias=True, indent=indent if indent > 0 else None)


def prepare_markdown_data(
    markdown_text: str, *, md: MarkdownIt | None = None
) -> MarkdownData:
    """Parse and render ``markdown_text`` into a :class:`MarkdownData` record."""
    engine = md or build_markdown_engine()
    env: dict[str, Any] = {}
    try:
        tokens = engine.parse(markdown_text, env)
        html = render_body(engine, tokens, env)
        occurrences = extract_headings(engine, tokens, env)
    except Exception as exc:
        raise ParseError(f"Failed to convert Markdown: {exc}") from exc

    header_data = build_header_data(occurrences)
    metadata = validate_metadata(extract_front_matter(find_front_matter(tokens)))
    logger.debug(
        "Converted document: %d headings, %d tree entries, %d metadata keys",
        len(occurrences),
        count_headers(header_data),
        len(metadata),
    )
    return MarkdownData(html_string=html, header_data=header_data, metadata=metadata)


def render_body(
    md: MarkdownIt, tokens: Sequence[Token], env: MutableMapping[str, Any]
) -> str:
    """Render the document without its front matter.

    The hidden front-matter token would otherwise make the renderer emit a
    newline before the first block.
    """
    body = [token for token in tokens if token.type != "front_matter"]
    return md.renderer.render(body, md.options, env)


def extract_headings(
    md: MarkdownIt, tokens: Sequence[Token], env: MutableMapping[str, Any]
) -> list[HeadingOccurrence]:
    """List the headings of a parsed document in document order."""
    occurrences: list[HeadingOccurrence] = []
    for idx, token in enumerate(tokens):
        if token.type != "heading_open":
            continue
        inline = tokens[idx + 1]
        anchor_id = token.attrGet("id")
        occurrences.append(
            HeadingOccurrence(
                level=int(token.tag[1:]),
                text=_plain_text(md, inline, env),
                anchor_id=str(anchor_id) if anchor_id is not None else "",
            )
        )
    return occurrences


def find_front_matter(tokens: Sequence[Token]) -> str | None:
    """Return the body of the first front-matter block, if any."""
    for token in tokens:
        if token.type == "front_matter":
            return token.content
    return None


def _plain_text(md: MarkdownIt, inline: Token, env: MutableMapping[str, Any]) -> str:
    html = md.renderer.renderInline(inline.children or [], md.options, env)
    text = BeautifulSoup(html, "html.parser").get_text()
    return " ".join(text.split())
