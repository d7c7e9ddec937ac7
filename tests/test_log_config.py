# tests/test_log_config.py
import io
import logging

import pytest

from fasthenry_builder.log_config import setup_logging


@pytest.fixture
def restore_logging():
    yield
    setup_logging()


def test_setup_logging_writes_formatted_records(restore_logging):
    stream = io.StringIO()
    setup_logging("debug", stream=stream)
    logging.getLogger("fasthenry_builder.test").debug("segment registered")
    output = stream.getvalue()
    assert "[DEBUG] [fasthenry_builder.test] segment registered" in output
    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_replaces_previous_handlers(restore_logging):
    setup_logging(logging.WARNING, stream=io.StringIO())
    setup_logging(logging.WARNING, stream=io.StringIO())
    stream_handlers = [h for h in logging.getLogger().handlers if type(h) is logging.StreamHandler]
    assert len(stream_handlers) == 1


def test_setup_logging_rejects_unknown_level_name(restore_logging):
    with pytest.raises(ValueError):
        setup_logging("chatty")
