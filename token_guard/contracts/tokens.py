"""
Tokens - Class tokens and the raw class strings they come from.

ClassToken is a single utility class split into variant prefix and base.
ClassValue is one class string found in source text, with enough
position data to map a token back to an absolute source offset.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class ClassToken:
    """
    A single utility class.

    Example:
        token = ClassToken(raw="md:hover:h-10", base="h-10", variant_prefix="md:hover:")
        token.with_base("h-size-md")  # "md:hover:h-size-md"
    """

    raw: str
    """Full class string as written."""

    base: str
    """Class without variant prefix or important marker."""

    variant_prefix: str = ""
    """Responsive/state prefix chain (and '!' marker), kept verbatim."""

    start: int = 0
    """Offset of the token inside the string it was tokenized from."""

    @property
    def end(self) -> int:
        """Offset just past the token."""
        return self.start + len(self.raw)

    @property
    def has_variant(self) -> bool:
        """Check if the token carries a variant prefix."""
        return bool(self.variant_prefix)

    def with_base(self, base: str) -> str:
        """Reattach this token's variant prefix to another base class."""
        return f"{self.variant_prefix}{base}"

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            "raw": self.raw,
            "base": self.base,
            "variant_prefix": self.variant_prefix,
            "start": self.start,
        }


@dataclass
class ClassValue:
    """
    One class string extracted from a source file.

    For template literals the literal fragments are joined with a single
    space; `segments` maps each fragment back to where it starts in the
    source so offsets survive the join.
    """

    text: str
    """Class string handed to the tokenizer."""

    start: int
    """Absolute source offset of the first character of `text`."""

    line: int = 1
    """1-based line of `start`."""

    column: int = 1
    """1-based column of `start`."""

    quote: str = '"'
    """Delimiter of the literal (", ' or `)."""

    fixable: bool = True
    """Plain literal or single-fragment template that can be rewritten."""

    located: bool = True
    """False when only the owning tag position is known; `start`, `line`
    and `column` then point at the tag rather than the class text."""

    origin: str = "className"
    """Where the value came from ('className', 'cn', 'class', ...)."""

    segments: List[Tuple[int, int]] = field(default_factory=list)
    """(offset in text, offset in source) for each literal fragment."""

    def source_offset(self, text_offset: int) -> int:
        """
        Map an offset inside `text` to an absolute source offset.

        Args:
            text_offset: Offset relative to the start of `text`

        Returns:
            Absolute offset in the source file
        """
        if not self.segments:
            return self.start + text_offset
        base_text, base_source = self.segments[0]
        for seg_text, seg_source in self.segments:
            if seg_text > text_offset:
                break
            base_text, base_source = seg_text, seg_source
        return base_source + (text_offset - base_text)

    def __len__(self) -> int:
        return len(self.text)
