"""Utilities for working with ``{name}`` placeholder templates."""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional, Tuple

PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


def interpolate(template: str, args: Optional[Mapping[str, Any]] = None, /, **kwargs: Any) -> str:
    """Replace every ``{key}`` in ``template`` with ``str(value)``.

    Replacements are applied in the iteration order of ``args`` followed by
    ``kwargs``. Placeholders without a matching argument are left untouched and
    arguments without a matching placeholder are ignored.
    """

    result = template
    for values in (args or {}, kwargs):
        for key, value in values.items():
            result = result.replace(f"{{{key}}}", str(value))
    return result


def placeholders(template: str) -> Tuple[str, ...]:
    """Return the distinct placeholder names of ``template`` in order of appearance."""

    return tuple(dict.fromkeys(PLACEHOLDER.findall(template)))


__all__ = ["PLACEHOLDER", "interpolate", "placeholders"]
