from pathlib import Path

import pytest

from localizer.config import Settings, build_manager
from localizer.exceptions import LocaleNotFoundError, LocaleShapeError

LOCALES = {
    "en": {"title": "Home"},
    "fr": {"title": "Accueil"},
}


def test_settings_defaults() -> None:
    settings = Settings.from_env({})

    assert settings == Settings()
    assert settings.default_locale == "en"
    assert settings.validate_shape is False
    assert settings.log_path is None


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LOCALIZER_DEFAULT_LOCALE", "fr")
    monkeypatch.setenv("LOCALIZER_VALIDATE_SHAPE", "Yes")
    monkeypatch.setenv("LOCALIZER_LOG_PATH", str(tmp_path / "events.log"))

    settings = Settings.from_env()

    assert settings.default_locale == "fr"
    assert settings.validate_shape is True
    assert settings.log_path == tmp_path / "events.log"


@pytest.mark.parametrize("raw", ["0", "false", "no", "", "maybe"])
def test_settings_treat_other_values_as_false(raw: str) -> None:
    assert Settings.from_env({"LOCALIZER_VALIDATE_SHAPE": raw}).validate_shape is False


def test_build_manager_uses_settings(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "i18n.jsonl"

    i18n = build_manager(LOCALES, settings=Settings(default_locale="fr", log_path=log_path))

    assert i18n.default_locale == "fr"
    assert i18n.logger.path == log_path
    assert log_path.exists()


def test_build_manager_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOCALIZER_DEFAULT_LOCALE", "cn")
    monkeypatch.delenv("LOCALIZER_LOG_PATH", raising=False)

    with pytest.raises(LocaleNotFoundError):
        build_manager(LOCALES)


def test_build_manager_validates_shape_when_enabled() -> None:
    locales = {"en": {"title": "Home"}, "fr": {}}

    with pytest.raises(LocaleShapeError):
        build_manager(locales, settings=Settings(validate_shape=True))
