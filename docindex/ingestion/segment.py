"""Split page markup into paragraphs and sentences with run-scoped ids."""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from bs4 import Tag

from docindex.ingestion.normalize import normalize
from docindex.models.document import Page, Paragraph, Sentence
from docindex.utils.counters import RunCounters

logger = logging.getLogger(__name__)

PARAGRAPH_OPEN_PATTERN = re.compile(r"<p(?:\s[^>]*)?>", re.IGNORECASE)
BLOCK_TAG_PATTERN = re.compile(r"</?(?:p|div)(?:\s[^>]*)?>", re.IGNORECASE)
NEWLINE_PATTERN = re.compile(r"[ \t]*(?:\r?\n)+[ \t]*")
TERMINATOR_PATTERN = re.compile(r"([.!?]+)")
SENTENCE_BOUNDARY = "\n"


def split_paragraphs(page_markup: str) -> List[str]:
    """Return the trimmed, tag-stripped paragraph texts of a page, empties removed."""
    fragments = PARAGRAPH_OPEN_PATTERN.split(page_markup)
    paragraphs: List[str] = []
    for fragment in fragments:
        text = BLOCK_TAG_PATTERN.sub("", fragment).strip()
        if text:
            paragraphs.append(text)
    return paragraphs


def split_sentences(paragraph: str) -> List[str]:
    """Split paragraph text after every run of terminal punctuation.

    A blank fragment left after the final terminator is dropped; any other
    fragment is kept even when it trims to an empty string.
    """
    text = NEWLINE_PATTERN.sub(" ", paragraph)
    marked = TERMINATOR_PATTERN.sub(r"\1" + SENTENCE_BOUNDARY, text)
    fragments = [fragment.strip() for fragment in marked.split(SENTENCE_BOUNDARY)]
    if len(fragments) > 1 and not fragments[-1]:
        fragments.pop()
    return fragments


def segment_page(page_markup: str, counters: RunCounters) -> Optional[Page]:
    """Segment one page, or return None when it has no non-empty paragraph.

    A skipped page draws no ids.
    """
    content = (normalize(page_markup) or "").strip()
    texts = split_paragraphs(content)
    if not texts:
        return None
    page_id = counters.next_page()
    paragraphs: List[Paragraph] = []
    for text in texts:
        paragraph_id = counters.next_paragraph()
        sentences = [
            Sentence(id=counters.next_sentence(), content=sentence)
            for sentence in split_sentences(text)
        ]
        paragraphs.append(Paragraph(id=paragraph_id, content=text, sentences=sentences))
    return Page(id=page_id, content=content, paragraphs=paragraphs)


def find_page_nodes(body: Tag) -> List[Tag]:
    """Page containers in document order, skipping pages without child elements."""
    pages = []
    for node in body.find_all(class_="page"):
        if node.find(True, recursive=False) is None:
            continue
        pages.append(node)
    return pages


def segment_pages(body: Tag, counters: RunCounters) -> List[Page]:
    if body is None:
        return []
    pages: List[Page] = []
    for node in find_page_nodes(body):
        page = segment_page(str(node), counters)
        if page is not None:
            pages.append(page)
    logger.debug(
        "Segmented %s pages into %s paragraphs and %s sentences",
        len(pages),
        counters.paragraph,
        counters.sentence,
    )
    return pages
