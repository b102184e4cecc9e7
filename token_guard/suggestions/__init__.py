"""
Suggestions - Resolve non-semantic classes to ranked semantic candidates.
"""

from .resolver import DEFAULT_RESOLVER, SuggestionResolver, get_suggestion

__all__ = [
    "DEFAULT_RESOLVER",
    "SuggestionResolver",
    "get_suggestion",
]
