import json
import logging
from pathlib import Path

from testfacts.config import JSONFormatter, TestFactsSettings, setup_logging
from testfacts.config.settings import DEFAULT_MESSAGES_PATH
from testfacts.facts import FalseFact, TrueFact


# --- Settings ---
def test_settings_defaults(monkeypatch):
    for key in (
        "TESTFACTS_MESSAGES_PATH",
        "TESTFACTS_MAX_COLLECTION_ITEMS",
        "TESTFACTS_STRICT_ARGS",
        "TESTFACTS_DEBUG",
    ):
        monkeypatch.delenv(key, raising=False)
    s = TestFactsSettings()
    assert s.messages_path == DEFAULT_MESSAGES_PATH
    assert s.max_collection_items == 20
    assert s.strict_args is True
    assert s.debug is False


def test_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("TESTFACTS_MESSAGES_PATH", str(tmp_path / "m.yaml"))
    monkeypatch.setenv("TESTFACTS_MAX_COLLECTION_ITEMS", "5")
    monkeypatch.setenv("TESTFACTS_STRICT_ARGS", "off")
    monkeypatch.setenv("TESTFACTS_DEBUG", "yes")
    s = TestFactsSettings()
    assert s.messages_path == tmp_path / "m.yaml"
    assert s.max_collection_items == 5
    assert s.strict_args is False
    assert s.debug is True


def test_settings_ignore_malformed_values(monkeypatch):
    monkeypatch.setenv("TESTFACTS_MAX_COLLECTION_ITEMS", "many")
    monkeypatch.setenv("TESTFACTS_STRICT_ARGS", "maybe")
    s = TestFactsSettings()
    assert s.max_collection_items == 20
    assert s.strict_args is True


def test_settings_programmatic_override():
    s = TestFactsSettings(max_collection_items=3, messages_path=Path("x.yaml"))
    assert s.as_dict()["max_collection_items"] == 3
    assert s.as_dict()["messages_path"] == "x.yaml"


def test_default_bundle_ships_with_package():
    assert DEFAULT_MESSAGES_PATH.is_file()


# --- Logging ---
def test_short_circuit_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="testfacts")
    FalseFact("a").and_(lambda: TrueFact("b"))
    TrueFact("a").or_(lambda: FalseFact("b"))
    messages = [r.getMessage() for r in caplog.records]
    assert "'and' short-circuited on a false left operand" in messages
    assert "'or' short-circuited on a true left operand" in messages


def test_setup_logging_attaches_handler():
    logger = logging.getLogger("testfacts")
    handler = setup_logging("debug", fmt="json")
    try:
        assert handler in logger.handlers
        assert isinstance(handler.formatter, JSONFormatter)
        assert logger.level == logging.DEBUG
    finally:
        logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


def test_json_formatter_includes_extras():
    record = logging.LogRecord("testfacts.facts.base", logging.DEBUG, __file__, 1, "hello", None, None)
    record.fact_kind = "and"
    payload = json.loads(JSONFormatter().format(record))
    assert payload["message"] == "hello"
    assert payload["level"] == "DEBUG"
    assert payload["fact_kind"] == "and"
