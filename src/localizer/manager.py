"""Localization manager coordinating translation accessors and localized pathnames."""

from __future__ import annotations

import threading
from typing import Any, Dict, FrozenSet, Mapping, Optional, Sequence, Set, Union

from .exceptions import InvalidPathError, LocaleNotFoundError
from .models import Accessor, KeyPath, LocaleTable, TranslationNode, map_leaves
from .ops import StructuredLogger
from .pathnames import first_segment, insert_first_segment, remove_first_segment
from .schema import assert_same_shape, key_paths

PathLike = Union[str, Sequence[str]]


class I18N:
    """Own a locale table and derive string accessors and localized pathnames from it.

    The locale table is treated as immutable input: it is never modified and the
    accessor tree built for each locale is cached for the lifetime of the manager.
    """

    __slots__ = (
        "_locales",
        "_available",
        "_default",
        "_cache",
        "_cache_lock",
        "_keys",
        "_logger",
    )

    def __init__(
        self,
        locales: LocaleTable,
        default_locale: str,
        *,
        validate_shape: bool = False,
        logger: StructuredLogger | None = None,
    ) -> None:
        self._locales = locales
        self._available: FrozenSet[str] = frozenset(locales)
        self._logger = logger or StructuredLogger()
        self._require_locale(default_locale, operation="init")
        if validate_shape:
            assert_same_shape(locales, reference=default_locale)
        self._default = default_locale
        self._cache: Dict[str, TranslationNode] = {}
        self._cache_lock = threading.Lock()
        self._keys: TranslationNode | None = None
        self._logger.log("manager_created", locales=sorted(self._available), default=default_locale)

    # ------------------------------------------------------------------
    # Locale queries
    # ------------------------------------------------------------------
    @property
    def available_locales(self) -> Set[str]:
        return set(self._available)

    @property
    def default_locale(self) -> str:
        return self._default

    @property
    def keys(self) -> TranslationNode:
        """Key paths of the default locale, shaped like its translation tree.

        ``i18n.keys.nested.child`` is ``KeyPath(("nested", "child"))``.
        """

        if self._keys is None:
            self._keys = map_leaves(self._locales[self._default], lambda path, _template: path)
        return self._keys

    @property
    def logger(self) -> StructuredLogger:
        return self._logger

    def __contains__(self, locale: object) -> bool:
        return locale in self._available

    def __repr__(self) -> str:
        return f"I18N(locales={sorted(self._available)!r}, default_locale={self._default!r})"

    # ------------------------------------------------------------------
    # Translations
    # ------------------------------------------------------------------
    def localize(self, locale: str) -> TranslationNode:
        """Return the cached accessor tree for ``locale``, building it on first use."""

        self._require_locale(locale, operation="localize")
        tree = self._cache.get(locale)
        if tree is not None:
            return tree
        with self._cache_lock:
            tree = self._cache.get(locale)
            if tree is None:
                source = self._locales[locale]
                tree = map_leaves(source, lambda _path, template: Accessor(template))
                self._cache[locale] = tree
                self._logger.log("locale_built", locale=locale, leaves=len(key_paths(source)))
        return tree

    def translations(self, locale: str) -> TranslationNode:
        """Return the raw templates of ``locale`` as a read-only tree of strings."""

        self._require_locale(locale, operation="translations")
        return map_leaves(self._locales[locale], lambda _path, template: template)

    @staticmethod
    def from_values(tree: Mapping[str, Any], key_path: PathLike) -> Any:
        """Resolve ``key_path`` against a localized or raw tree.

        Raises :class:`InvalidPathError` when a segment is missing or the path
        stops on a sub-tree instead of a leaf.
        """

        path = KeyPath.parse(key_path) if isinstance(key_path, str) else KeyPath(key_path)
        node: Any = tree
        for segment in path:
            if not isinstance(node, Mapping) or segment not in node:
                raise InvalidPathError(path)
            node = node[segment]
        if isinstance(node, Mapping):
            raise InvalidPathError(path)
        return node

    def translate(
        self,
        locale: str,
        key_path: PathLike,
        args: Optional[Mapping[str, Any]] = None,
        **kwargs: Any,
    ) -> str:
        accessor: Accessor = self.from_values(self.localize(locale), key_path)
        return accessor(args, **kwargs)

    # ------------------------------------------------------------------
    # Pathnames
    # ------------------------------------------------------------------
    def get_locale_identifier_from_pathname(self, pathname: str) -> Optional[str]:
        """Return the locale named by the first segment of ``pathname``, if any.

        The whole segment is compared, so ``/enfoo`` does not match ``en``.
        """

        candidate = first_segment(pathname)
        if candidate is not None and candidate in self._available:
            return candidate
        return None

    def is_localized_pathname(self, pathname: str) -> bool:
        return self.get_locale_identifier_from_pathname(pathname) is not None

    def locale_from_pathname_or_default(self, pathname: str) -> str:
        return self.get_locale_identifier_from_pathname(pathname) or self._default

    def get_canonical_pathname(self, pathname: str) -> str:
        if not self.is_localized_pathname(pathname):
            return pathname
        return remove_first_segment(pathname)

    def localize_pathname(self, pathname: str, locale: str) -> str:
        """Prefix the canonical form of ``pathname`` with ``locale``.

        Already localized pathnames are re-localized rather than prefixed twice.
        """

        self._require_locale(locale, operation="localize_pathname")
        return insert_first_segment(self.get_canonical_pathname(pathname), locale)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _require_locale(self, locale: str, *, operation: str) -> None:
        if locale not in self._available:
            self._logger.log("locale_not_found", locale=locale, operation=operation)
            raise LocaleNotFoundError(locale)


__all__ = ["I18N", "PathLike"]
