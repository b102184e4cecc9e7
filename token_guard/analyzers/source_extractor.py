"""
Source Extractor - Find class strings in JSX/TSX/JS source text.

Finds:
- className="..." / className='...'
- className={"..."} / className={`...`}
- direct string and template arguments of clsx(), cn(), classnames(), classNames()

Template literal interpolations are dropped; the literal fragments are
joined with a single space so they never fuse into one class.

Usage:
    from token_guard.analyzers import SourceExtractor

    extractor = SourceExtractor(source)
    for value in extractor.extract():
        print(value.line, value.text)
"""

import bisect
import logging
import re
from typing import List, Optional, Tuple

from ..contracts.tokens import ClassValue


logger = logging.getLogger(__name__)


class LineIndex:
    """Offset to (line, column) mapping for a source text."""

    def __init__(self, source: str):
        self._source = source
        self._starts = [0] + [m.end() for m in re.finditer(r"\n", source)]

    def position(self, offset: int) -> Tuple[int, int]:
        """
        Get the 1-based (line, column) of an absolute offset.

        Args:
            offset: Offset into the source

        Returns:
            Tuple of line and column, both starting at 1
        """
        line = bisect.bisect_right(self._starts, offset) - 1
        return line + 1, offset - self._starts[line] + 1

    def offset(self, line: int, column: int) -> int:
        """Inverse of position(); both arguments 1-based."""
        return self._starts[line - 1] + column - 1

    def line_text(self, line: int) -> str:
        """Get the text of a 1-based line without its newline."""
        start = self._starts[line - 1]
        end = self._starts[line] - 1 if line < len(self._starts) else len(self._source)
        return self._source[start:end]

    def __len__(self) -> int:
        return len(self._starts)


class SourceExtractor:
    """
    Extracts class strings from JavaScript-family source.

    This is a targeted scanner, not a parser: it only understands
    string literals, template literals and bracket nesting well enough
    to find the class strings it is looking for.
    """

    CLASS_FUNCTIONS = ("clsx", "cn", "classnames", "classNames")

    ATTRIBUTE_PATTERN = re.compile(r"(?<=\s)className\s*=(?!=)\s*")
    PRECEDING_WORD = re.compile(r"[\w$-]+$")
    JS_DECLARATIONS = ("const", "let", "var")
    CALL_PATTERN = re.compile(r"\b(clsx|cn|classnames|classNames)\s*\(")

    QUOTES = "\"'"

    def __init__(self, source: str):
        """
        Initialize extractor with source text.

        Args:
            source: Full file contents
        """
        self._source = source
        self._lines = LineIndex(source)

    @property
    def lines(self) -> LineIndex:
        return self._lines

    # =========================================================================
    # MAIN EXTRACTION
    # =========================================================================

    def extract(self) -> List[ClassValue]:
        """
        Extract all class strings in source order.

        Returns:
            List of ClassValue sorted by source offset
        """
        values: List[ClassValue] = []

        for match in self.ATTRIBUTE_PATTERN.finditer(self._source):
            if self._in_line_comment(match.start()) or not self._is_jsx_attribute(match.start()):
                continue
            value = self._read_attribute_value(match.end())
            if value is not None:
                values.append(value)

        for match in self.CALL_PATTERN.finditer(self._source):
            if self._in_line_comment(match.start()):
                continue
            values.extend(self._read_call_arguments(match.end(), match.group(1)))

        values.sort(key=lambda v: v.start)
        logger.debug(f"Extracted {len(values)} class values")
        return values

    # =========================================================================
    # ATTRIBUTES AND CALLS
    # =========================================================================

    def _read_attribute_value(self, pos: int) -> Optional[ClassValue]:
        """Read the value after `className=`."""
        source = self._source
        if pos >= len(source):
            return None

        if source[pos] in self.QUOTES:
            return self._literal_value(pos, "className")

        if source[pos] != "{":
            return None

        inner = self._skip_whitespace(pos + 1)
        if inner >= len(source) or source[inner] not in self.QUOTES + "`":
            # Expression container; class-function calls are found separately
            return None

        value, end = self._read_literal(inner, "className")
        if value is None:
            return None
        if self._peek(self._skip_whitespace(end)) != "}":
            return None
        return value

    def _read_call_arguments(self, pos: int, function: str) -> List[ClassValue]:
        """
        Collect direct string/template arguments of a class-function call.

        Args:
            pos: Offset just after the opening parenthesis
            function: Name of the called function

        Returns:
            ClassValues for arguments that are a bare literal
        """
        source = self._source
        values = []

        while pos < len(source):
            pos = self._skip_whitespace(pos)
            char = self._peek(pos)
            if char in ("", ")"):
                break
            if char == ",":
                pos += 1
                continue

            if char in self.QUOTES + "`":
                value, end = self._read_literal(pos, function)
                if value is None:
                    break
                after = self._skip_whitespace(end)
                if self._peek(after) in (",", ")"):
                    values.append(value)
                    pos = after
                    continue
                pos = end

            pos = self._skip_expression(pos)

        return values

    # =========================================================================
    # LITERALS
    # =========================================================================

    def _read_literal(self, pos: int, origin: str) -> Tuple[Optional[ClassValue], int]:
        """Read a string or template literal starting at `pos`."""
        if self._source[pos] == "`":
            quasis, end = self._read_template(pos)
            if end < 0:
                return None, len(self._source)
            return self._template_value(quasis, origin), end

        end = self._string_end(pos)
        if end < 0:
            return None, len(self._source)
        return self._literal_value(pos, origin), end

    def _literal_value(self, pos: int, origin: str) -> Optional[ClassValue]:
        """Build a ClassValue from the quoted string at `pos`."""
        end = self._string_end(pos)
        if end < 0:
            return None
        line, column = self._lines.position(pos + 1)
        return ClassValue(
            text=self._source[pos + 1:end - 1],
            start=pos + 1,
            line=line,
            column=column,
            quote=self._source[pos],
            fixable=True,
            origin=origin,
        )

    def _template_value(self, quasis: List[Tuple[str, int]], origin: str) -> ClassValue:
        """Join template fragments into one ClassValue."""
        segments = []
        parts = []
        offset = 0
        for text, start in quasis:
            segments.append((offset, start))
            parts.append(text)
            offset += len(text) + 1

        start = quasis[0][1]
        line, column = self._lines.position(start)
        return ClassValue(
            text=" ".join(parts),
            start=start,
            line=line,
            column=column,
            quote="`",
            fixable=len(quasis) == 1,
            origin=origin,
            segments=segments,
        )

    def _string_end(self, pos: int) -> int:
        """
        Find the offset just past the closing quote of a string literal.

        Returns:
            End offset, or -1 for an unterminated string
        """
        source = self._source
        quote = source[pos]
        index = pos + 1
        while index < len(source):
            char = source[index]
            if char == "\\":
                index += 2
                continue
            if char == quote:
                return index + 1
            if char == "\n":
                return -1
            index += 1
        return -1

    def _read_template(self, pos: int) -> Tuple[List[Tuple[str, int]], int]:
        """
        Read a template literal into its literal fragments.

        Returns:
            Tuple of [(fragment text, fragment source offset)] and the end
            offset past the closing backtick (-1 if unterminated)
        """
        source = self._source
        quasis = []
        fragment_start = pos + 1
        index = pos + 1

        while index < len(source):
            char = source[index]
            if char == "\\":
                index += 2
                continue
            if char == "`":
                quasis.append((source[fragment_start:index], fragment_start))
                return quasis, index + 1
            if source.startswith("${", index):
                quasis.append((source[fragment_start:index], fragment_start))
                index = self._skip_balanced(index + 1)
                if index < 0:
                    return quasis, -1
                fragment_start = index
                continue
            index += 1

        return quasis, -1

    # =========================================================================
    # SCANNING HELPERS
    # =========================================================================

    def _skip_balanced(self, pos: int) -> int:
        """Skip from an opening bracket to just past its match (-1 if none)."""
        source = self._source
        depth = 0
        index = pos
        while index < len(source):
            char = source[index]
            if char in self.QUOTES:
                index = self._string_end(index)
                if index < 0:
                    return -1
                continue
            if char == "`":
                _, index = self._read_template(index)
                if index < 0:
                    return -1
                continue
            if char in "([{":
                depth += 1
            elif char in ")]}":
                depth -= 1
                if depth == 0:
                    return index + 1
            index += 1
        return -1

    def _skip_expression(self, pos: int) -> int:
        """Skip one call argument, stopping at a top-level ',' or ')'."""
        source = self._source
        index = pos
        while index < len(source):
            char = source[index]
            if char in ",)":
                return index
            if char in "([{" or char in self.QUOTES or char == "`":
                if char in self.QUOTES:
                    nxt = self._string_end(index)
                elif char == "`":
                    _, nxt = self._read_template(index)
                else:
                    nxt = self._skip_balanced(index)
                if nxt < 0:
                    return len(source)
                index = nxt
                continue
            index += 1
        return index

    def _skip_whitespace(self, pos: int) -> int:
        while pos < len(self._source) and self._source[pos].isspace():
            pos += 1
        return pos

    def _peek(self, pos: int) -> str:
        return self._source[pos] if pos < len(self._source) else ""

    def _is_jsx_attribute(self, offset: int) -> bool:
        """
        Check that `className=` follows a tag name, attribute or expression.

        Bindings such as `const className = ...` or `({ className = ... })`
        are plain JavaScript and never linted.
        """
        head = self._source[max(0, offset - 200):offset].rstrip()
        if not head:
            return False
        if head[-1] in "\"'}":
            return True
        word = self.PRECEDING_WORD.search(head)
        return word is not None and word.group(0) not in self.JS_DECLARATIONS

    def _in_line_comment(self, offset: int) -> bool:
        """Check if the match sits on a commented-out line."""
        line, _ = self._lines.position(offset)
        head = self._lines.line_text(line).lstrip()
        return head.startswith(("//", "/*", "*"))


def extract_class_values(source: Optional[str]) -> List[ClassValue]:
    """
    Extract class strings from JavaScript-family source.

    Args:
        source: File contents (None yields nothing)

    Returns:
        List of ClassValue in source order
    """
    if not source:
        return []
    return SourceExtractor(source).extract()
