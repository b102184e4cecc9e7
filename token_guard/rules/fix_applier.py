"""
Fix Applier - Apply diagnostic fixes to source text.

Fixes are spliced from the end of the file backwards so earlier
offsets stay valid while later ones are rewritten.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from ..contracts.validation import Diagnostic


logger = logging.getLogger(__name__)


@dataclass
class FixResult:
    """Outcome of applying fixes to one source text."""

    source: str
    """Rewritten source."""

    applied: List[Diagnostic] = field(default_factory=list)
    """Diagnostics whose preferred candidate was applied."""

    skipped: List[Diagnostic] = field(default_factory=list)
    """Diagnostics without an applicable fix."""

    @property
    def changed(self) -> bool:
        return len(self.applied) > 0

    def describe(self) -> str:
        """Generate human-readable summary."""
        return f"{len(self.applied)} fix(es) applied, {len(self.skipped)} skipped"


def apply_fixes(source: str, diagnostics: List[Diagnostic]) -> FixResult:
    """
    Apply the first candidate of every fixable diagnostic.

    Diagnostics without candidates, in non-fixable class values, or
    overlapping an already-applied span are skipped.

    Args:
        source: Source text the diagnostics were produced from
        diagnostics: Diagnostics for that source

    Returns:
        FixResult with the rewritten source
    """
    applied = []
    skipped = []
    boundary = len(source) + 1

    for diagnostic in sorted(diagnostics, key=lambda d: d.start, reverse=True):
        if not diagnostic.has_fix or diagnostic.end > boundary:
            skipped.append(diagnostic)
            continue
        try:
            source = diagnostic.apply(source)
        except ValueError as e:
            logger.warning(f"Skipping fix for {diagnostic.class_name}: {e}")
            skipped.append(diagnostic)
            continue
        applied.append(diagnostic)
        boundary = diagnostic.start

    applied.reverse()
    skipped.reverse()
    return FixResult(source=source, applied=applied, skipped=skipped)
