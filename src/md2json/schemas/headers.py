"""Heading tree output model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Header(BaseModel):
    """A table-of-contents entry as it appears in the JSON artifact.

    Placeholder entries synthesized for skipped heading levels carry an empty
    ``id`` and ``text``.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default="", serialization_alias="Id")
    text: str = Field(default="", serialization_alias="Text")
    children: list["Header"] = Field(default_factory=list, serialization_alias="Children")
