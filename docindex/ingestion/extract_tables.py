"""Detect tables in a PDF with PyMuPDF and return their cell grids."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import fitz

from docindex.errors import ExtractionError

logger = logging.getLogger(__name__)

Grid = List[List[str]]


def extract_pdf_tables(pdf_path: Path) -> List[Grid]:
    """Return one grid of cell text per detected table, page by page."""
    try:
        doc = fitz.open(str(pdf_path), filetype="pdf")
    except Exception as exc:
        raise ExtractionError(f"Cannot open {pdf_path.name} as PDF: {exc}") from exc

    grids: List[Grid] = []
    try:
        for page in doc:
            for table in page.find_tables().tables:
                grids.append([[cell or "" for cell in row] for row in table.extract()])
    except Exception as exc:
        raise ExtractionError(f"Table detection failed on {pdf_path.name}: {exc}") from exc
    finally:
        doc.close()
    logger.info("Found %s tables in %s", len(grids), pdf_path.name)
    return grids
