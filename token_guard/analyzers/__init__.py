"""
Analyzers - Turn source text into class tokens.

Provides:
- extract_tailwind_classes: whitespace tokenizer with variant splitting
- SourceExtractor / extract_class_values: JSX, template and clsx/cn strings
- HTMLExtractor / extract_html_class_values: HTML class attributes (BeautifulSoup)
- numeric helpers shared by the scale classifiers
"""

from .tokenizer import extract_tailwind_classes, split_variant
from .source_extractor import LineIndex, SourceExtractor, extract_class_values
from .html_extractor import HTMLExtractor, extract_html_class_values

__all__ = [
    "extract_tailwind_classes",
    "split_variant",
    "LineIndex",
    "SourceExtractor",
    "extract_class_values",
    "HTMLExtractor",
    "extract_html_class_values",
]
