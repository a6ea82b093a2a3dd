"""Run one document through extraction, segmentation and indexing."""

from __future__ import annotations

import argparse
import logging
import tempfile
from pathlib import Path
from typing import Callable, List, Optional

from docindex.config import settings
from docindex.errors import ConversionError, IndexWriteError
from docindex.index.gateway import IndexGateway
from docindex.ingestion.assemble import assemble
from docindex.ingestion.convert_office import convert_to_pdf, is_office_file
from docindex.ingestion.extract_content import extract_content
from docindex.ingestion.extract_tables import Grid, extract_pdf_tables
from docindex.ingestion.normalize import normalize
from docindex.ingestion.segment import segment_pages
from docindex.ingestion.tables import project_from_grids, project_from_markup
from docindex.models.document import DocumentRecord, ExtractedDocument, Table
from docindex.models.index import RunResult, RunStatus
from docindex.utils.counters import RunCounters

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


def is_pdf(extracted: ExtractedDocument, path: Path) -> bool:
    content_type = extracted.content_type
    if content_type:
        return content_type.split(";", 1)[0].strip().lower() == PDF_CONTENT_TYPE
    return path.suffix.lower() == ".pdf"


class DocumentPipeline:
    """Extract, segment and index a single file per ``run`` call."""

    def __init__(
        self,
        gateway: Optional[IndexGateway] = None,
        index_name: Optional[str] = None,
        content_extractor: Callable[[Path], ExtractedDocument] = extract_content,
        table_extractor: Callable[[Path], List[Grid]] = extract_pdf_tables,
        converter: Callable[[Path, Path], Path] = convert_to_pdf,
        reset_table_counter_on_augment: Optional[bool] = None,
    ) -> None:
        self.gateway = gateway or IndexGateway()
        self.index_name = index_name or settings.index_name
        self.content_extractor = content_extractor
        self.table_extractor = table_extractor
        self.converter = converter
        if reset_table_counter_on_augment is None:
            reset_table_counter_on_augment = settings.reset_table_counter_on_augment
        self.reset_table_counter_on_augment = reset_table_counter_on_augment

    def build_record(
        self, extracted: ExtractedDocument, path: Path, counters: RunCounters
    ) -> DocumentRecord:
        pages = segment_pages(extracted.body, counters)
        tables = project_from_markup(extracted.body, counters)
        return assemble(
            metadata=extracted.metadata,
            content=normalize(extracted.raw_markup),
            pages=pages,
            tables=tables,
            file_path=path,
            source_path=path,
        )

    def extract_grid_tables(
        self, extracted: ExtractedDocument, path: Path, counters: RunCounters
    ) -> List[Table]:
        if is_pdf(extracted, path):
            grids = self.table_extractor(path)
        elif is_office_file(path):
            with tempfile.TemporaryDirectory(prefix="docindex-") as tmp:
                try:
                    pdf_path = self.converter(path, Path(tmp))
                except ConversionError as exc:
                    logger.warning("Skipping table extraction for %s: %s", path.name, exc)
                    return []
                grids = self.table_extractor(pdf_path)
        else:
            logger.info("No table extraction for %s (%s)", path.name, extracted.content_type)
            return []

        # Grid tables continue the markup table numbering unless the reset setting
        # asks for them to start again at 1.
        if self.reset_table_counter_on_augment:
            counters.reset_tables()
        return project_from_grids(grids, counters)

    def run(self, source_path: str | Path) -> RunResult:
        path = Path(source_path)
        if not path.is_file():
            logger.error("File not found: %s", path)
            return RunResult(
                source_path=str(path),
                status=RunStatus.INVALID_INPUT,
                error=f"File not found: {path}",
            )

        counters = RunCounters()
        extracted = self.content_extractor(path)
        record = self.build_record(extracted, path, counters)
        item = self.gateway.create(self.index_name, path.name, record)
        result = RunResult(
            source_path=str(path),
            status=RunStatus.INDEXED,
            item=item,
            page_count=len(record.attachment.pages),
            table_count=len(record.attachment.tables),
        )

        tables = self.extract_grid_tables(extracted, path, counters)
        if not tables:
            return result
        try:
            self.gateway.update(item, tables)
        except IndexWriteError as exc:
            logger.error("Record %s indexed without its tables: %s", item.document_id, exc)
            result.status = RunStatus.PARTIAL
            result.error = str(exc)
            return result
        result.augmented_table_count = len(tables)
        return result


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point. Exits with status 1 unless the document was fully indexed."""
    arg_parser = argparse.ArgumentParser(description="Index one document into the search index.")
    arg_parser.add_argument("path", help="Document to index (PDF, PPT/PPTX, ...)")
    arg_parser.add_argument("--index", default=None, help="Target index name")
    args = arg_parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level)
    result = DocumentPipeline(index_name=args.index).run(args.path)
    logger.info(
        "Run finished for %s: status=%s pages=%s tables=%s augmented=%s",
        result.source_path,
        result.status.value,
        result.page_count,
        result.table_count,
        result.augmented_table_count,
    )
    if result.status != RunStatus.INDEXED:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
