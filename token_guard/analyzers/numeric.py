"""
Numeric utilities shared by the scale-based classifiers and the resolver.

Tailwind numeric values are scale steps: `N` means `N * 0.25rem`.
"""

import re
from typing import List, Optional, Sequence, Tuple

from ..semantic_tokens import ScaleStep, SemanticTokens


_NUMBER_PATTERN = re.compile(r"^\d+(\.\d+)?$")
_FRACTION_PATTERN = re.compile(r"^\d+/\d+$")
_ARBITRARY_PATTERN = re.compile(r"^\[.+\]$")


def is_fraction(value: str) -> bool:
    """Check for fraction values like '1/2'."""
    return bool(_FRACTION_PATTERN.match(value))


def is_arbitrary(value: str) -> bool:
    """Check for arbitrary bracket values like '[300px]'."""
    return bool(_ARBITRARY_PATTERN.match(value))


def is_exempt_value(value: str) -> bool:
    """Check for keyword, fraction and arbitrary values that are never flagged."""
    return value in SemanticTokens.EXEMPT_VALUES or is_fraction(value) or is_arbitrary(value)


def parse_scale_value(value: str) -> Optional[float]:
    """
    Parse a Tailwind numeric scale value.

    Args:
        value: Value part of a class ('4', '2.5', 'md', ...)

    Returns:
        Numeric value, or None for anything that is not a plain number
    """
    if not _NUMBER_PATTERN.match(value):
        return None
    return float(value)


def to_rem(step: float) -> float:
    """Convert a Tailwind numeric step to rem."""
    return step * SemanticTokens.REM_PER_STEP


def in_range(value: float, low: float, high: float) -> bool:
    """Inclusive range check."""
    return low <= value <= high


def rank_by_distance(
    scale: Sequence[ScaleStep], target_rem: float
) -> List[Tuple[ScaleStep, float]]:
    """
    Order scale steps by distance to a target.

    Ties prefer the lower step, then declaration order.

    Args:
        scale: Semantic steps in declaration order
        target_rem: Value to match, in rem

    Returns:
        List of (step, distance) nearest first
    """
    ranked = [
        (index, step, abs(step.rem - target_rem)) for index, step in enumerate(scale)
    ]
    ranked.sort(key=lambda item: (item[2], item[1].rem, item[0]))
    return [(step, distance) for _, step, distance in ranked]


def match_prefix(base: str, prefixes: Sequence[str]) -> Optional[Tuple[str, str]]:
    """
    Match the longest `prefix-` at the start of a class.

    Args:
        base: Class without variants ('gap-x-4')
        prefixes: Candidate utility prefixes

    Returns:
        Tuple of (prefix, value), e.g. ('gap-x', '4'), or None
    """
    for prefix in sorted(prefixes, key=len, reverse=True):
        head = f"{prefix}-"
        if base.startswith(head) and len(base) > len(head):
            return prefix, base[len(head):]
    return None
