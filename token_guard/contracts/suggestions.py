"""
Suggestions - Ranked replacement candidates for a non-semantic class.

Candidates are produced in a fixed order (exact equivalents, then
nearest alternatives, then fallbacks) and never re-sorted downstream,
so "first candidate" is always the default fix.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..semantic_tokens import SemanticTokens


REMOVE_CLASS = SemanticTokens.REMOVE_CLASS


@dataclass(frozen=True)
class SuggestionCandidate:
    """A single replacement candidate."""

    replacement: str
    """Full class string (variant prefix reapplied) or REMOVE_CLASS."""

    rank: int
    """Assignment order, 0 is the preferred fix."""

    @property
    def is_removal(self) -> bool:
        """Check if applying this candidate deletes the class."""
        return self.replacement == REMOVE_CLASS

    @property
    def applied_text(self) -> str:
        """Text that replaces the offending class in source."""
        return "" if self.is_removal else self.replacement

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {"replacement": self.replacement, "rank": self.rank}

    @classmethod
    def from_dict(cls, data: Dict) -> "SuggestionCandidate":
        """Create from dictionary."""
        return cls(replacement=data["replacement"], rank=data.get("rank", 0))


def rank_candidates(replacements: List[str]) -> List[SuggestionCandidate]:
    """Wrap replacements in candidates, ranked by position."""
    return [
        SuggestionCandidate(replacement=replacement, rank=index)
        for index, replacement in enumerate(replacements)
    ]


@dataclass(frozen=True)
class Resolution:
    """
    Outcome of resolving one non-semantic class.

    An empty candidate list is a valid result: the class is still a
    violation, there is just no confident fix. `hint` then carries
    human-readable guidance (e.g. the two nearest scale steps).
    """

    candidates: List[SuggestionCandidate] = field(default_factory=list)
    hint: Optional[str] = None

    @property
    def has_candidates(self) -> bool:
        return len(self.candidates) > 0

    @property
    def first(self) -> Optional[SuggestionCandidate]:
        """Preferred candidate, or None."""
        return self.candidates[0] if self.candidates else None

    @property
    def suggestion(self) -> Optional[str]:
        """First replacement if any, otherwise the hint."""
        if self.candidates:
            return self.candidates[0].replacement
        return self.hint

    def replacements(self) -> List[str]:
        """Candidate replacements in rank order."""
        return [c.replacement for c in self.candidates]

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            "candidates": [c.to_dict() for c in self.candidates],
            "hint": self.hint,
        }
