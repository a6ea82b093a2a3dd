from docindex.ingestion.assemble import assemble
from docindex.models.document import Page, Paragraph, Sentence, Table


def test_record_fields_come_from_metadata_and_the_file(tmp_path):
    converted = tmp_path / "slides.pdf"
    converted.write_bytes(b"x" * 42)
    pages = [
        Page(
            id=1,
            content="<p>Hi.</p>",
            paragraphs=[Paragraph(id=1, content="Hi.", sentences=[Sentence(id=1, content="Hi.")])],
        )
    ]
    tables = [Table(id=1, content="<table></table>")]

    record = assemble(
        metadata={
            "title": "Quarterly",
            "date": "2015-12-31",
            "keywords": "finance, report",
            "Content-Type": "application/pdf",
        },
        content="<p>Hi.</p>",
        pages=pages,
        tables=tables,
        file_path=converted,
        source_path=tmp_path / "decks" / "slides.pptx",
        timestamp="2024-01-01T00:00:00+00:00",
    )

    assert record.filename == "slides.pptx"
    assert record.timestamp == "2024-01-01T00:00:00+00:00"
    assert record.username == "admin"
    assert record.folder == ""
    attachment = record.attachment
    assert attachment.content_length == 42
    assert attachment.title == "Quarterly"
    assert attachment.date == "2015-12-31"
    assert attachment.keywords == "finance, report"
    assert attachment.content_type == "application/pdf"
    assert attachment.content == "<p>Hi.</p>"
    assert attachment.pages == pages
    assert attachment.tables == tables


def test_missing_metadata_yields_empty_fields(tmp_path):
    source = tmp_path / "empty.pdf"
    source.write_bytes(b"")

    record = assemble({}, None, [], [], source)

    assert record.filename == "empty.pdf"
    assert record.timestamp
    attachment = record.attachment
    assert attachment.content_length == 0
    assert attachment.title is None
    assert attachment.date is None
    assert attachment.keywords is None
    assert attachment.content_type is None
    assert attachment.content is None
    assert attachment.pages == []
    assert attachment.tables == []


def test_record_dump_is_nested_json(tmp_path):
    source = tmp_path / "doc.pdf"
    source.write_bytes(b"%PDF")

    payload = assemble({"title": "T"}, "c", [], [], source, username="ops", folder="inbox").model_dump(
        mode="json"
    )

    assert payload["username"] == "ops"
    assert payload["folder"] == "inbox"
    assert payload["attachment"]["pages"] == []
    assert payload["attachment"]["tables"] == []
    assert payload["attachment"]["content_length"] == 4
