"""Environment driven configuration for building a localization manager."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from .manager import I18N
from .models import LocaleTable
from .ops import StructuredLogger

load_dotenv()

DEFAULT_LOCALE_VAR = "LOCALIZER_DEFAULT_LOCALE"
VALIDATE_SHAPE_VAR = "LOCALIZER_VALIDATE_SHAPE"
LOG_PATH_VAR = "LOCALIZER_LOG_PATH"
FALLBACK_LOCALE = "en"
TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})


def _as_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in TRUTHY_VALUES


@dataclass(frozen=True, slots=True)
class Settings:
    """Settings used by :func:`build_manager`."""

    default_locale: str = FALLBACK_LOCALE
    validate_shape: bool = False
    log_path: Path | None = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        log_path = env.get(LOG_PATH_VAR)
        return cls(
            default_locale=env.get(DEFAULT_LOCALE_VAR) or FALLBACK_LOCALE,
            validate_shape=_as_bool(env.get(VALIDATE_SHAPE_VAR)),
            log_path=Path(log_path) if log_path else None,
        )


def build_manager(locales: LocaleTable, *, settings: Settings | None = None) -> I18N:
    """Construct an :class:`I18N` for ``locales`` using ``settings`` or the environment."""

    settings = settings or Settings.from_env()
    return I18N(
        locales,
        settings.default_locale,
        validate_shape=settings.validate_shape,
        logger=StructuredLogger(path=settings.log_path),
    )


__all__ = [
    "DEFAULT_LOCALE_VAR",
    "FALLBACK_LOCALE",
    "LOG_PATH_VAR",
    "VALIDATE_SHAPE_VAR",
    "Settings",
    "build_manager",
]
