import fitz
import pytest

from docindex.errors import ExtractionError
from docindex.ingestion.extract_tables import extract_pdf_tables


def test_pdf_without_tables_yields_no_grids(tmp_path):
    pdf_path = tmp_path / "plain.pdf"
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), "Just a sentence, no table.")
    doc.save(str(pdf_path))
    doc.close()

    assert extract_pdf_tables(pdf_path) == []


def test_missing_pdf_is_an_extraction_error(tmp_path):
    with pytest.raises(ExtractionError):
        extract_pdf_tables(tmp_path / "missing.pdf")


def test_ruled_table_becomes_one_grid_of_text(tmp_path):
    pdf_path = tmp_path / "table.pdf"
    doc = fitz.open()
    page = doc.new_page()
    xs, ys = (72, 222, 372), (100, 140, 180)
    for x in xs:
        page.draw_line((x, ys[0]), (x, ys[-1]))
    for y in ys:
        page.draw_line((xs[0], y), (xs[-1], y))
    for row, y in enumerate(ys[:-1]):
        for col, x in enumerate(xs[:-1]):
            page.insert_text((x + 10, y + 25), f"R{row}C{col}")
    doc.save(str(pdf_path))
    doc.close()

    grids = extract_pdf_tables(pdf_path)

    assert len(grids) == 1
    grid = grids[0]
    assert len(grid) == 2
    assert all(len(row) == 2 for row in grid)
    assert all(isinstance(cell, str) for row in grid for cell in row)
    assert "R0C0" in grid[0][0]
    assert "R1C1" in grid[1][1]
