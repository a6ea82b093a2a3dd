"""Decompose a document into pages, paragraphs, sentences and tables and index it."""

__version__ = "0.1.0"
