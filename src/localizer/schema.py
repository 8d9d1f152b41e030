"""Compare the key shape of translation trees across locales."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Tuple

from .exceptions import LocaleShapeError
from .models import KeyPath, LocaleTable, TranslationTree


def key_paths(tree: TranslationTree, *, prefix: KeyPath | None = None) -> Tuple[KeyPath, ...]:
    """Return the key path of every leaf in ``tree``, depth first."""

    base = prefix if prefix is not None else KeyPath()
    paths: List[KeyPath] = []
    for key, value in tree.items():
        path = base.child(key)
        if isinstance(value, Mapping):
            paths.extend(key_paths(value, prefix=path))
        else:
            paths.append(path)
    return tuple(paths)


def shape_differences(
    locales: LocaleTable, *, reference: Optional[str] = None
) -> Dict[str, Dict[str, Tuple[str, ...]]]:
    """Report, per locale, the dotted key paths missing or extra relative to ``reference``.

    ``reference`` defaults to the first locale of the table. Locales whose shape
    matches the reference are left out of the result.
    """

    if not locales:
        return {}
    reference = reference if reference is not None else next(iter(locales))
    expected = set(key_paths(locales[reference]))
    differences: Dict[str, Dict[str, Tuple[str, ...]]] = {}
    for locale, tree in locales.items():
        if locale == reference:
            continue
        actual = set(key_paths(tree))
        missing = tuple(sorted(str(path) for path in expected - actual))
        extra = tuple(sorted(str(path) for path in actual - expected))
        if missing or extra:
            differences[locale] = {"missing": missing, "extra": extra}
    return differences


def assert_same_shape(locales: LocaleTable, *, reference: Optional[str] = None) -> None:
    differences = shape_differences(locales, reference=reference)
    if differences:
        raise LocaleShapeError(differences)


__all__ = ["assert_same_shape", "key_paths", "shape_differences"]
