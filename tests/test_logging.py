import io
import json
import logging

import pytest

from fars.data.reader import fars_read_years
from fars.utils.logging import JsonFormatter, configure_logging


@pytest.fixture
def fars_logger():
    logger = logging.getLogger("fars")
    saved_handlers, saved_level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


def test_json_formatter_merges_extra():
    record = logging.LogRecord(
        name="fars.data.reader", level=logging.WARNING, pathname=__file__,
        lineno=1, msg="invalid year: %s", args=(2049,), exc_info=None,
    )
    record.year = "2049"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "fars.data.reader"
    assert payload["msg"] == "invalid year: 2049"
    assert payload["year"] == "2049"
    assert "lineno" not in payload


def test_configure_logging_json_invalid_year(fars_logger, fars_dir):
    stream = io.StringIO()
    configure_logging(level="WARNING", json_format=True, stream=stream)

    fars_read_years([2049], data_dir=fars_dir)

    lines = stream.getvalue().strip().splitlines()
    assert len(lines) == 1
    payload = json.loads(lines[0])
    assert payload["msg"] == "invalid year: 2049"
    assert payload["data_file"] == "accident_2049.csv.bz2"


def test_configure_logging_is_idempotent(fars_logger):
    configure_logging()
    configure_logging(level=logging.DEBUG)

    installed = [h for h in fars_logger.handlers if getattr(h, "_fars_handler", False)]
    assert len(installed) == 1
    assert fars_logger.level == logging.DEBUG


def test_json_formatter_timestamp_is_utc():
    record = logging.LogRecord(
        name="fars", level=logging.INFO, pathname=__file__,
        lineno=1, msg="x", args=(), exc_info=None,
    )
    record.created = 0.0

    payload = json.loads(JsonFormatter().format(record))

    assert payload["ts"] == "1970-01-01T00:00:00Z"
