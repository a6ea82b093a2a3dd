"""Models describing index writes and run outcomes."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class ItemRef(BaseModel):
    """Handle to a record stored in the index."""

    index: str
    id: str
    document_id: str


class RunStatus(str, Enum):
    INDEXED = "indexed"
    PARTIAL = "partial"
    INVALID_INPUT = "invalid_input"


class RunResult(BaseModel):
    """Outcome of processing one file."""

    source_path: str
    status: RunStatus
    item: Optional[ItemRef] = None
    page_count: int = 0
    table_count: int = 0
    augmented_table_count: int = 0
    error: Optional[str] = None
