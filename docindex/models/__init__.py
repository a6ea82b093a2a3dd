"""Typed models shared across the application."""

from .document import (
    Attachment,
    DocumentRecord,
    ExtractedDocument,
    Page,
    Paragraph,
    Sentence,
    Table,
)
from .index import ItemRef, RunResult, RunStatus

__all__ = [
    "Attachment",
    "DocumentRecord",
    "ExtractedDocument",
    "ItemRef",
    "Page",
    "Paragraph",
    "RunResult",
    "RunStatus",
    "Sentence",
    "Table",
]
