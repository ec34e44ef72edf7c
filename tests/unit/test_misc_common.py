import json
import logging
from pathlib import Path

from comparators.common.deterministic import stable_sorted
from comparators.common.logging import JsonLineFormatter, build_logger, get_logger, log_event
from comparators.core.comparator import sort_asc_by_key


def test_stable_sorted_keeps_input_order_for_ties():
    rows = [{"k": 2, "id": "a"}, {"k": 1, "id": "b"}, {"k": 2, "id": "c"}]
    assert [row["id"] for row in stable_sorted(rows, sort_asc_by_key("k"))] == ["b", "a", "c"]


def test_json_line_formatter_emits_stable_fields():
    record = logging.LogRecord("comparators.test", logging.INFO, __file__, 1, "hello", None, None)
    record.event = "PROFILE_LOADED"
    record.profile = "menu"

    payload = json.loads(JsonLineFormatter().format(record))

    assert payload["message"] == "hello"
    assert payload["event"] == "PROFILE_LOADED"
    assert payload["profile"] == "menu"
    assert payload["level"] == "INFO"
    assert payload["error_code"] is None


def test_get_logger_is_namespaced():
    assert get_logger("builder").name == "comparators.builder"


def test_build_logger_writes_json_lines_to_file(tmp_path: Path):
    log_path = tmp_path / "logs" / "comparators.log.jsonl"
    logger = build_logger("DEBUG", log_path=log_path)
    try:
        log_event(get_logger("test"), "something happened", event="TEST_EVENT", source="unit")
        for handler in logger.handlers:
            handler.flush()

        lines = log_path.read_text(encoding="utf-8").splitlines()
        payload = json.loads(lines[-1])
        assert payload["event"] == "TEST_EVENT"
        assert payload["source"] == "unit"
        assert payload["logger"] == "comparators.test"
    finally:
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
