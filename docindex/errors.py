"""Error taxonomy for a document run."""


class DocumentIndexError(Exception):
    """Base class for failures raised while processing a document."""


class ExtractionError(DocumentIndexError):
    """The content or table extractor could not read the file."""


class ConversionError(DocumentIndexError):
    """An office file could not be converted to PDF."""


class IndexWriteError(DocumentIndexError):
    """The search index rejected or could not receive a write."""
