"""Custom exception hierarchy for the localizer package."""

from __future__ import annotations

from typing import Mapping, Sequence, Tuple


class LocalizerError(Exception):
    """Base class for all localizer specific errors."""


class LocaleNotFoundError(LocalizerError):
    """Raised when a locale identifier is not part of the locale table."""

    def __init__(self, locale: str) -> None:
        super().__init__(f"The key '{locale}' was not found in the locales object.")
        self.locale = locale


class InvalidPathError(LocalizerError):
    """Raised when a key path does not resolve to exactly one leaf."""

    def __init__(self, path: Sequence[str]) -> None:
        self.path: Tuple[str, ...] = tuple(path)
        super().__init__(f"The path '{'.'.join(self.path)}' does not point to a translation.")


class LocaleShapeError(LocalizerError):
    """Raised when locales do not share the same set of key paths."""

    def __init__(self, differences: Mapping[str, Mapping[str, Tuple[str, ...]]]) -> None:
        self.differences = {locale: dict(entry) for locale, entry in differences.items()}
        super().__init__(f"Locales do not share the same keys: {', '.join(sorted(self.differences))}.")
