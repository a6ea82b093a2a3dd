"""Convert office documents to PDF with a headless LibreOffice."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from docindex.config import settings
from docindex.errors import ConversionError

logger = logging.getLogger(__name__)


def is_office_file(path: Path) -> bool:
    return path.suffix.lower() in {ext.lower() for ext in settings.office_extensions}


def convert_to_pdf(source: Path, output_dir: Path) -> Path:
    command = [
        settings.soffice_binary,
        "--headless",
        "--convert-to",
        "pdf",
        "--outdir",
        str(output_dir),
        str(source),
    ]
    logger.info("Converting %s to PDF", source.name)
    try:
        completed = subprocess.run(
            command,
            capture_output=True,
            text=True,
            timeout=settings.conversion_timeout,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        raise ConversionError(f"Could not run {settings.soffice_binary} on {source.name}: {exc}") from exc

    if completed.returncode != 0:
        raise ConversionError(
            f"{settings.soffice_binary} exited with {completed.returncode} for {source.name}: "
            f"{completed.stderr.strip()}"
        )

    pdf_path = output_dir / f"{source.stem}.pdf"
    if not pdf_path.exists():
        raise ConversionError(f"No PDF produced for {source.name}")
    return pdf_path
