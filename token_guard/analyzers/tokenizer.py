"""
Class Tokenizer - Split a raw class string into ClassTokens.

Usage:
    from token_guard.analyzers import extract_tailwind_classes

    tokens = extract_tailwind_classes("p-4 hover:h-10  shadow")
    [t.raw for t in tokens]  # ["p-4", "hover:h-10", "shadow"]
"""

import re
from typing import List, Optional, Tuple

from ..contracts.tokens import ClassToken


_TOKEN_PATTERN = re.compile(r"\S+")


def split_variant(raw: str) -> Tuple[str, str]:
    """
    Split a class into (variant_prefix, base).

    The prefix runs up to the last ':' that is not inside brackets or
    parentheses, so arbitrary variants like `[&>*]:p-4` and arbitrary
    values like `bg-[url(a:b)]` survive intact. A leading '!' on the
    base (important marker) is kept with the prefix.

    Args:
        raw: Full class string

    Returns:
        Tuple of prefix (possibly empty) and base class
    """
    depth = 0
    split_at = -1
    for index, char in enumerate(raw):
        if char in "[(":
            depth += 1
        elif char in "])":
            depth = max(0, depth - 1)
        elif char == ":" and depth == 0:
            split_at = index

    prefix, base = raw[: split_at + 1], raw[split_at + 1:]
    while base.startswith("!"):
        prefix, base = prefix + "!", base[1:]
    return prefix, base


def extract_tailwind_classes(value: Optional[str]) -> List[ClassToken]:
    """
    Tokenize a class string on whitespace.

    Order is preserved and duplicates are kept, each with its own offset.
    None or non-string input yields no tokens.

    Args:
        value: Raw class attribute text

    Returns:
        List of ClassToken in source order
    """
    if not isinstance(value, str):
        return []

    tokens = []
    for match in _TOKEN_PATTERN.finditer(value):
        raw = match.group(0)
        prefix, base = split_variant(raw)
        if not base:
            continue
        tokens.append(
            ClassToken(raw=raw, base=base, variant_prefix=prefix, start=match.start())
        )
    return tokens
