"""Conversion output model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from md2json.schemas.headers import Header


class MarkdownData(BaseModel):
    """Rendered HTML, heading tree and validated metadata for one document.

    Attributes:
        html_string: The rendered HTML body (front matter excluded).
        header_data: Top-level headings; the synthetic root is never included.
        metadata: Validated front matter. ``Title``, ``Author`` and ``Published``
            always come first, followed by any other keys in document order.
    """

    html_string: str = Field(serialization_alias="HtmlString")
    header_data: list[Header] = Field(default_factory=list, serialization_alias="HeaderData")
    metadata: dict[str, str] = Field(default_factory=dict, serialization_alias="MetaData")
