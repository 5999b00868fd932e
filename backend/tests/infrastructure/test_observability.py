"""Structured Logging — verifies JSON formatter output and extra field handling."""

import json
import logging
from contextlib import contextmanager

from user_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "user_api.test", logging.INFO, __file__, 1, "User created", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formats_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "user_api.test"
    assert log["message"] == "User created"
    assert "timestamp" in log


def test_surfaces_known_extra_fields():
    log = json.loads(JSONFormatter().format(
        _record(user_id=7, error_code="USER_ALREADY_EXISTS"),
    ))
    assert log["user_id"] == 7
    assert log["error_code"] == "USER_ALREADY_EXISTS"


def test_ignores_unknown_extra_fields():
    log = json.loads(JSONFormatter().format(_record(email="a@example.com")))
    assert "email" not in log


def test_registry_logs_creation(caplog):
    from user_api.core.domain_types import UserRecord
    from user_api.core.user_registry import UserRegistry

    with caplog.at_level(logging.INFO, logger="user_api.core.user_registry"):
        UserRegistry().create_user(UserRecord(name="John", email="a@example.com"))

    assert any(
        r.message == "User created" and r.user_id == 1 for r in caplog.records
    )


@contextmanager
def _bare_root_logger():
    """Run with no root handlers, then put back whatever was installed."""
    level, handlers = logging.root.level, logging.root.handlers[:]
    logging.root.handlers[:] = []
    try:
        yield
    finally:
        logging.root.setLevel(level)
        logging.root.handlers[:] = handlers


def test_setup_logging_installs_json_handler():
    with _bare_root_logger():
        setup_logging("DEBUG", "json")
        assert logging.root.level == logging.DEBUG
        (handler,) = logging.root.handlers
        assert isinstance(handler.formatter, JSONFormatter)


def test_setup_logging_twice_keeps_one_handler():
    with _bare_root_logger():
        setup_logging("INFO", "json")
        setup_logging("INFO", "text")
        assert len(logging.root.handlers) == 1
