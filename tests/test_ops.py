import json
from pathlib import Path

import pytest

from localizer.ops import DEFAULT_CAPACITY, StructuredLogger


def test_log_records_entries_in_memory() -> None:
    logger = StructuredLogger()

    entry = logger.log("locale_built", locale="en", leaves=3)

    assert entry["event"] == "locale_built"
    assert entry["locale"] == "en"
    assert "timestamp" in entry
    assert logger.tail() == (entry,)


def test_log_writes_json_lines(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "events.log"
    logger = StructuredLogger(path=path)

    logger.log("manager_created", locales=["en", "fr"], default="en")
    logger.log("locale_not_found", locale="cn", operation="localize")

    lines = path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["event"] for line in lines] == ["manager_created", "locale_not_found"]


def test_tail_and_events_filtering() -> None:
    logger = StructuredLogger()
    for locale in ("en", "fr", "de"):
        logger.log("locale_built", locale=locale)
    logger.log("locale_not_found", locale="cn")

    assert [entry["locale"] for entry in logger.tail(2)] == ["de", "cn"]
    assert len(logger.events("locale_built")) == 3
    assert len(logger.events()) == 4


def test_in_memory_window_is_bounded(tmp_path: Path) -> None:
    path = tmp_path / "events.log"
    logger = StructuredLogger(path=path, capacity=3)

    for index in range(10):
        logger.log("locale_not_found", locale=f"x{index}")

    assert logger.capacity == 3
    assert [entry["locale"] for entry in logger.events()] == ["x7", "x8", "x9"]
    assert [entry["locale"] for entry in logger.tail(2)] == ["x8", "x9"]
    assert logger.tail(0) == ()
    assert len(path.read_text(encoding="utf-8").splitlines()) == 10


def test_default_logger_has_a_capacity() -> None:
    logger = StructuredLogger()

    for index in range(DEFAULT_CAPACITY + 5):
        logger.log("locale_built", locale=str(index))

    assert len(logger.events()) == DEFAULT_CAPACITY


def test_clear_and_invalid_capacity() -> None:
    logger = StructuredLogger()
    logger.log("manager_created")

    logger.clear()

    assert logger.events() == ()
    with pytest.raises(ValueError):
        StructuredLogger(capacity=0)
