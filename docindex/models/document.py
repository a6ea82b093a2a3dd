"""Document-level data models."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ExtractedDocument(BaseModel):
    """Raw extractor output for one file: body markup, metadata and the parsed body tree."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    raw_markup: str = ""
    metadata: Dict[str, str] = Field(default_factory=dict)
    body: Any = None

    @property
    def content_type(self) -> Optional[str]:
        return self.metadata.get("Content-Type")


class Sentence(BaseModel):
    id: int
    content: str


class Paragraph(BaseModel):
    id: int
    content: str
    sentences: List[Sentence] = Field(default_factory=list)


class Page(BaseModel):
    """One page of normalized markup split into paragraphs."""

    id: int
    content: str
    paragraphs: List[Paragraph] = Field(default_factory=list)


class Table(BaseModel):
    """A table rendered as a markup fragment."""

    id: int
    content: str


class Attachment(BaseModel):
    """Extracted content and metadata of the indexed file."""

    date: Optional[str] = None
    title: Optional[str] = None
    keywords: Optional[str] = None
    content_length: int = 0
    content_type: Optional[str] = None
    content: Optional[str] = None
    pages: List[Page] = Field(default_factory=list)
    tables: List[Table] = Field(default_factory=list)


class DocumentRecord(BaseModel):
    """The unit written to the search index."""

    timestamp: str
    username: str
    filename: str
    folder: str = ""
    attachment: Attachment
