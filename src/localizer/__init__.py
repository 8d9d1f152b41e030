"""Localizer package for translation accessors and locale-prefixed pathnames."""

from .config import Settings, build_manager
from .exceptions import InvalidPathError, LocaleNotFoundError, LocaleShapeError, LocalizerError
from .manager import I18N
from .models import Accessor, KeyPath, LocaleTable, TranslationNode, TranslationTree
from .ops import StructuredLogger
from .schema import assert_same_shape, key_paths, shape_differences
from .templates import interpolate, placeholders

__all__ = [
    "Accessor",
    "I18N",
    "InvalidPathError",
    "KeyPath",
    "LocaleNotFoundError",
    "LocaleShapeError",
    "LocaleTable",
    "LocalizerError",
    "Settings",
    "StructuredLogger",
    "TranslationNode",
    "TranslationTree",
    "assert_same_shape",
    "build_manager",
    "interpolate",
    "key_paths",
    "placeholders",
    "shape_differences",
]
