"""Extract XHTML markup and metadata from a document through Apache Tika."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from bs4 import BeautifulSoup
from tika import parser

from docindex.config import settings
from docindex.errors import ExtractionError
from docindex.models.document import ExtractedDocument

logger = logging.getLogger(__name__)


def flatten_metadata(raw: Mapping[str, Any]) -> Dict[str, str]:
    """Tika reports repeated keys as lists; join them into one string."""
    flat: Dict[str, str] = {}
    for key, value in raw.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            flat[key] = ", ".join(str(item) for item in value)
        else:
            flat[key] = str(value)
    return flat


def parse_xhtml(xhtml: str, metadata: Optional[Mapping[str, Any]] = None) -> ExtractedDocument:
    """Parse Tika XHTML output.

    Metadata reported alongside the markup is overridden by the ``<title>`` and
    ``<meta name=...>`` entries of the document head. Empty ``<p>`` elements are
    removed from the body before anything else sees it.
    """
    soup = BeautifulSoup(xhtml or "", "html.parser")
    meta = flatten_metadata(metadata or {})

    head = soup.head
    if head is not None:
        title = head.find("title")
        if title is not None:
            meta["title"] = title.decode_contents()
        for node in head.find_all("meta", attrs={"name": True}):
            meta[node["name"]] = node.get("content", "")

    body = soup.body or soup
    for paragraph in body.find_all("p"):
        if not paragraph.decode_contents().strip():
            paragraph.decompose()

    return ExtractedDocument(
        raw_markup=body.decode_contents(),
        metadata=meta,
        body=body,
    )


def extract_content(path: Path) -> ExtractedDocument:
    logger.info("Extracting content from %s", path.name)
    options: Dict[str, Any] = {"xmlContent": True, "requestOptions": {"timeout": settings.extraction_timeout}}
    if settings.tika_server_endpoint:
        options["serverEndpoint"] = settings.tika_server_endpoint
    try:
        parsed = parser.from_file(str(path), **options)
    except Exception as exc:
        raise ExtractionError(f"Tika failed on {path.name}: {exc}") from exc

    status = parsed.get("status")
    if status != 200:
        raise ExtractionError(f"Tika returned status {status} for {path.name}")

    document = parse_xhtml(parsed.get("content") or "", parsed.get("metadata") or {})
    logger.debug("Extracted %s chars of markup from %s", len(document.raw_markup), path.name)
    return document
