import json
import logging
import sys

from literate_randomizer.utils.loggers.json_logger import (
    JsonLogger,
    determine_log_path,
    get_logger,
    setup_log_file,
)


def make_record(msg="Markov chain built", **extra):
    record = logging.LogRecord("literate_randomizer", logging.INFO, "/tmp/x.py", 10, msg, None, None, "build")
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_logger_format():
    payload = json.loads(JsonLogger().format(make_record(metrics={"words": 4, "keys": ("a", "b")})))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "literate_randomizer"
    assert payload["message"] == "Markov chain built"
    assert payload["line"] == 10
    assert payload["function"] == "build"
    assert payload["metrics"] == {"words": 4, "keys": ["a", "b"]}
    assert "exception" not in payload


def test_json_logger_formats_exceptions():
    try:
        raise ValueError("bad corpus")
    except ValueError:
        record = make_record()
        record.exc_info = sys.exc_info()

    payload = json.loads(JsonLogger().format(record))
    assert payload["exception"]["type"] == "ValueError"
    assert payload["exception"]["message"] == "bad corpus"
    assert "Traceback" in payload["exception"]["traceback"]


def test_get_logger_console_handler():
    logger = get_logger("literate_randomizer.test_console", console_level=logging.WARNING)
    assert len(logger.handlers) == 1
    assert logger.handlers[0].level == logging.WARNING
    assert isinstance(logger.handlers[0].formatter, JsonLogger)

    logger = get_logger("literate_randomizer.test_console", console_json=False)
    assert len(logger.handlers) == 1
    assert logger.handlers[0].level == logging.INFO
    assert not isinstance(logger.handlers[0].formatter, JsonLogger)


def test_get_logger_keeps_existing_handlers():
    first = get_logger("literate_randomizer.test_keep", console_level=logging.ERROR)
    second = get_logger("literate_randomizer.test_keep", clear_existing=False,
                        console_level=logging.DEBUG)
    assert first is second
    assert [handler.level for handler in second.handlers] == [logging.ERROR]


def test_get_logger_writes_json_file(tmp_path):
    log_file = tmp_path / "logs" / "run.log"
    logger = get_logger("literate_randomizer.test_file", log_file=str(log_file),
                        console_level=logging.CRITICAL)

    logger.debug("Sentence generated", extra={"metrics": {"words": 5}})
    for handler in logger.handlers:
        handler.flush()

    lines = log_file.read_text(encoding="utf-8").strip().splitlines()
    payload = json.loads(lines[-1])
    assert payload["level"] == "DEBUG"
    assert payload["metrics"] == {"words": 5}

    get_logger("literate_randomizer.test_file", console_level=logging.CRITICAL)


def test_get_logger_rebuild_closes_file_handler(tmp_path):
    log_file = tmp_path / "first.log"
    logger = get_logger("literate_randomizer.test_rebuild", log_file=str(log_file))
    file_handler = logger.handlers[1]

    logger = get_logger("literate_randomizer.test_rebuild", console_level=logging.DEBUG)

    assert file_handler not in logger.handlers
    assert file_handler.stream is None
    assert [handler.level for handler in logger.handlers] == [logging.DEBUG]


def test_setup_log_file_creates_directory(tmp_path):
    path = tmp_path / "nested" / "dir" / "out.log"
    assert setup_log_file(str(path)) == str(path)
    assert path.parent.is_dir()


def test_determine_log_path_default(mocker, tmp_path):
    mocker.patch("literate_randomizer.utils.loggers.json_logger.get_project_root", return_value=str(tmp_path))
    path = determine_log_path()
    assert path.startswith(str(tmp_path / "logs"))
    assert path.endswith(".log")
    assert "literate_randomizer_" in path
