"""
HTML Extractor - Find class attributes in HTML documents using BeautifulSoup.

BeautifulSoup normalizes the class attribute into a list, so source
positions are recovered from the tag's `sourceline`/`sourcepos` and the
raw attribute text.

Usage:
    from token_guard.analyzers import HTMLExtractor

    for value in HTMLExtractor(html).extract():
        print(value.line, value.text)
"""

import logging
import re
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from ..contracts.tokens import ClassValue
from .source_extractor import LineIndex


logger = logging.getLogger(__name__)


class HTMLExtractor:
    """Extracts `class` attribute values from HTML with source positions."""

    CLASS_ATTRIBUTE = re.compile(
        r"""\sclass\s*=\s*(?:(["'])(.*?)\1|([^\s"'=<>`]+))""",
        re.IGNORECASE | re.DOTALL,
    )

    def __init__(self, html: str):
        """
        Initialize extractor with HTML content.

        Args:
            html: Raw HTML string to parse
        """
        self._html = html
        self._soup = BeautifulSoup(html, "html.parser")
        self._lines = LineIndex(html)

    @property
    def soup(self) -> BeautifulSoup:
        """Access the underlying BeautifulSoup object."""
        return self._soup

    @property
    def lines(self) -> LineIndex:
        return self._lines

    def extract(self) -> List[ClassValue]:
        """
        Extract every class attribute in document order.

        Returns:
            List of ClassValue
        """
        values = []
        for element in self._soup.find_all(class_=True):
            value = self._class_value(element)
            if value is not None:
                values.append(value)

        logger.debug(f"Extracted {len(values)} class attributes from HTML")
        return values

    def _class_value(self, element: Tag) -> Optional[ClassValue]:
        """Locate the raw class attribute text of an element."""
        tag_start = self._tag_offset(element)
        if tag_start is not None:
            match = self.CLASS_ATTRIBUTE.search(self._html, tag_start, self._tag_end(tag_start))
            if match:
                group = 2 if match.group(1) else 3
                start = match.start(group)
                line, column = self._lines.position(start)
                return ClassValue(
                    text=match.group(group),
                    start=start,
                    line=line,
                    column=column,
                    quote=match.group(1) or "",
                    fixable=True,
                    origin="class",
                )

        # Position unknown; report at the tag, but never rewrite
        classes = element.get("class") or []
        if isinstance(classes, str):
            classes = [classes]
        return ClassValue(
            text=" ".join(classes),
            start=tag_start or 0,
            line=element.sourceline or 1,
            column=(element.sourcepos or 0) + 1,
            fixable=False,
            located=False,
            origin="class",
        )

    def _tag_end(self, tag_start: int) -> int:
        """Offset of the '>' closing an opening tag, skipping quoted attribute values."""
        quote = None
        for pos in range(tag_start + 1, len(self._html)):
            char = self._html[pos]
            if quote:
                if char == quote:
                    quote = None
            elif char in "\"'":
                quote = char
            elif char == ">":
                return pos
        return len(self._html)

    def _tag_offset(self, element: Tag) -> Optional[int]:
        """Absolute offset of the element's opening '<'."""
        if element.sourceline is None or element.sourcepos is None:
            return None
        if element.sourceline > len(self._lines):
            return None
        return self._lines.offset(element.sourceline, element.sourcepos + 1)


def extract_html_class_values(html: Optional[str]) -> List[ClassValue]:
    """
    Extract class attribute values from an HTML document.

    Args:
        html: Document text (None yields nothing)

    Returns:
        List of ClassValue in document order
    """
    if not html:
        return []
    return HTMLExtractor(html).extract()
