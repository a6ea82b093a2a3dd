"""Clean up extracted XHTML before it is segmented or indexed."""

from __future__ import annotations

import re
from typing import Optional

# A paragraph boundary that splits a sentence: no terminal punctuation before the
# close and a lowercase letter (or an entity) right after the next open.
PARAGRAPH_BREAK_PATTERN = re.compile(
    r"(?<=[^.?!\s])\s*</p\s*>\s*<p(?:\s[^>]*)?>\s*(?=(?-i:[a-z&]))",
    re.IGNORECASE,
)
NBSP_PATTERN = re.compile(r"&#x0*a0;|&#0*160;|&nbsp;|\u00a0", re.IGNORECASE)
RSQUO_PATTERN = re.compile(r"&#x0*2019;|&#0*8217;|&rsquo;|\u2019", re.IGNORECASE)


def collapse_paragraph_breaks(markup: str) -> str:
    return PARAGRAPH_BREAK_PATTERN.sub(" ", markup)


def replace_entities(markup: str) -> str:
    markup = NBSP_PATTERN.sub(" ", markup)
    return RSQUO_PATTERN.sub("'", markup)


def normalize(markup: Optional[str]) -> Optional[str]:
    """Rejoin run-on paragraphs and replace the nbsp / right-quote entities.

    Missing markup is passed through untouched.
    """
    if not markup:
        return markup
    return replace_entities(collapse_paragraph_breaks(markup))
