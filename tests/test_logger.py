import json
import logging
from kitties_core.logger import get_logger


def test_logger_writes_json_lines_to_env_file(tmp_path, monkeypatch):
    log_path = tmp_path / "logs" / "kitties.log"
    monkeypatch.setenv("KITTIES_LOG_FILE", str(log_path))
    monkeypatch.setenv("KITTIES_LOG_LEVEL", "debug")

    log = get_logger("Kitties.Test.File")
    log.debug("hello")
    for handler in log.handlers:
        handler.flush()

    assert log.level == logging.DEBUG
    record = json.loads(log_path.read_text().splitlines()[-1])
    assert record["msg"] == "hello"
    assert record["level"] == "DEBUG"
    assert record["name"] == "Kitties.Test.File"


def test_logger_handlers_added_once(monkeypatch):
    monkeypatch.delenv("KITTIES_LOG_FILE", raising=False)
    log = get_logger("Kitties.Test.Once", level="INFO")
    count = len(log.handlers)
    assert get_logger("Kitties.Test.Once", level="INFO").handlers == log.handlers
    assert count == 1
