"""Domain models used by the localizer package."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Iterator, Mapping, Optional, Tuple, TypeVar, Union

from .templates import interpolate, placeholders

TranslationTree = Mapping[str, Union[str, "TranslationTree"]]
LocaleTable = Mapping[str, TranslationTree]

T = TypeVar("T")


class KeyPath(tuple):
    """Ordered segments addressing one leaf of a translation tree."""

    __slots__ = ()

    def __new__(cls, segments: Iterable[str] = ()) -> "KeyPath":
        return super().__new__(cls, segments)

    @classmethod
    def parse(cls, dotted: str) -> "KeyPath":
        """Build a key path from its dotted form, e.g. ``"nested.child"``."""

        return cls(dotted.split(".")) if dotted else cls()

    def child(self, segment: str) -> "KeyPath":
        return KeyPath((*self, segment))

    def __str__(self) -> str:
        return ".".join(self)

    def __repr__(self) -> str:
        return f"KeyPath({str(self)!r})"


@dataclass(frozen=True, slots=True)
class Accessor:
    """Callable wrapper around one translation template."""

    template: str

    def __call__(self, args: Optional[Mapping[str, Any]] = None, /, **kwargs: Any) -> str:
        return interpolate(self.template, args, **kwargs)

    @property
    def placeholders(self) -> Tuple[str, ...]:
        return placeholders(self.template)

    def __str__(self) -> str:
        return self.template


class TranslationNode(Mapping[str, Any]):
    """Read-only nested mapping that also exposes its children as attributes.

    Names shadowed by :class:`~collections.abc.Mapping` methods (``keys``,
    ``items``, ``values``, ``get``) are only reachable through item access.
    """

    __slots__ = ("_children",)

    def __init__(self, children: Mapping[str, Any]) -> None:
        self._children: Dict[str, Any] = dict(children)

    def __getitem__(self, key: str) -> Any:
        return self._children[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._children[name]
        except KeyError as exc:
            raise AttributeError(f"{type(self).__name__} has no key '{name}'") from exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._children!r})"

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain nested ``dict`` copy of the node."""

        return {
            key: value.to_dict() if isinstance(value, TranslationNode) else value
            for key, value in self._children.items()
        }


def map_leaves(
    tree: TranslationTree,
    transform: Callable[[KeyPath, str], T],
    *,
    prefix: KeyPath | None = None,
) -> TranslationNode:
    """Rebuild ``tree`` as a :class:`TranslationNode`, transforming each string leaf."""

    base = prefix if prefix is not None else KeyPath()
    children: Dict[str, Any] = {}
    for key, value in tree.items():
        path = base.child(key)
        if isinstance(value, str):
            children[key] = transform(path, value)
        elif isinstance(value, Mapping):
            children[key] = map_leaves(value, transform, prefix=path)
        else:
            raise TypeError(f"Translation '{path}' must be a string or a mapping, got {type(value).__name__}.")
    return TranslationNode(children)


__all__ = [
    "Accessor",
    "KeyPath",
    "LocaleTable",
    "TranslationNode",
    "TranslationTree",
    "map_leaves",
]
