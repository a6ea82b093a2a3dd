"""Combine metadata, text and segments into the record sent to the index."""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Mapping, Optional, Union

from docindex.config import settings
from docindex.models.document import Attachment, DocumentRecord, Page, Table

PathLike = Union[str, Path]


def assemble(
    metadata: Mapping[str, str],
    content: Optional[str],
    pages: List[Page],
    tables: List[Table],
    file_path: PathLike,
    source_path: Optional[PathLike] = None,
    username: Optional[str] = None,
    folder: Optional[str] = None,
    timestamp: Optional[str] = None,
) -> DocumentRecord:
    """Build a DocumentRecord.

    Args:
        metadata: Flat extractor metadata; ``date``, ``title``, ``keywords`` and
            ``Content-Type`` are copied as-is, missing keys stay empty.
        content: Normalized full-text markup of the document body.
        pages: Segmented pages in document order.
        tables: Tables found in the extracted markup.
        file_path: File whose size is recorded as ``content_length``.
        source_path: File the run started from; defaults to ``file_path``.
            Only its basename is stored.
    """
    origin = Path(source_path if source_path is not None else file_path)
    attachment = Attachment(
        date=metadata.get("date"),
        title=metadata.get("title"),
        keywords=metadata.get("keywords"),
        content_length=os.stat(file_path).st_size,
        content_type=metadata.get("Content-Type"),
        content=content,
        pages=pages,
        tables=tables,
    )
    return DocumentRecord(
        timestamp=timestamp or datetime.now(timezone.utc).isoformat(),
        username=username if username is not None else settings.index_username,
        filename=origin.name,
        folder=folder if folder is not None else settings.index_folder,
        attachment=attachment,
    )
