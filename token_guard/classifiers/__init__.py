"""
Classifiers - One classifier per governed category plus ordered dispatch.

Provides:
- CategoryClassifier: Abstract base for category classifiers
- SizingClassifier, SpacingClassifier, ColorClassifier,
  ShadowClassifier, BorderRadiusClassifier
- ClassificationDispatcher / classify: color → spacing → sizing → shadow → borderRadius
"""

from .base_classifier import CategoryClassifier, UtilityParts
from .sizing_classifier import SizingClassifier
from .spacing_classifier import SpacingClassifier
from .color_classifier import ColorClassifier
from .shadow_classifier import ShadowClassifier
from .border_radius_classifier import BorderRadiusClassifier
from .dispatcher import (
    DEFAULT_DISPATCHER,
    ClassificationDispatcher,
    as_token,
    classify,
    is_non_semantic,
)

__all__ = [
    "CategoryClassifier",
    "UtilityParts",
    "SizingClassifier",
    "SpacingClassifier",
    "ColorClassifier",
    "ShadowClassifier",
    "BorderRadiusClassifier",
    "DEFAULT_DISPATCHER",
    "ClassificationDispatcher",
    "as_token",
    "classify",
    "is_non_semantic",
]
