"""
Tests for structured logging
"""

import io
import json
import logging
import pytest
import sys

from simple_banking.logging_config import (
    JSONFormatter, setup_logging, get_logger, log_action
)


@pytest.fixture
def stream_logger():
    """Logger writing JSON lines into a buffer"""
    logger = setup_logging("DEBUG", logger_name="simple_banking_test")
    stream = io.StringIO()
    logger.handlers[0].setStream(stream)
    yield logger, stream
    logger.handlers.clear()


class TestJSONFormatter:

    def test_structured_fields(self, stream_logger):
        logger, stream = stream_logger
        log_action(
            logger, "info", "Transaction successful",
            action="credit_posted", resource="account:1000001",
            extra={"amount": "250.00"}
        )

        entry = json.loads(stream.getvalue())
        assert entry["level"] == "INFO"
        assert entry["logger"] == "simple_banking_test"
        assert entry["message"] == "Transaction successful"
        assert entry["action"] == "credit_posted"
        assert entry["resource"] == "account:1000001"
        assert entry["extra"] == {"amount": "250.00"}
        assert "timestamp" in entry

    def test_none_fields_omitted(self, stream_logger):
        logger, stream = stream_logger
        logger.warning("plain message")

        entry = json.loads(stream.getvalue())
        assert entry["message"] == "plain message"
        assert "action" not in entry
        assert "extra" not in entry

    def test_exception_included(self):
        formatter = JSONFormatter()
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.getLogger("x").makeRecord(
                "x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )
        entry = json.loads(formatter.format(record))
        assert "RuntimeError: boom" in entry["exception"]


class TestSetupLogging:

    def test_no_duplicate_handlers(self):
        setup_logging(logger_name="simple_banking_dup")
        logger = setup_logging(logger_name="simple_banking_dup")
        assert len(logger.handlers) == 1
        assert logger.propagate is False
        logger.handlers.clear()

    def test_text_format(self):
        logger = setup_logging("WARNING", logger_name="simple_banking_text", fmt="text")
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert logger.level == logging.WARNING
        logger.handlers.clear()

    def test_log_action_respects_level(self, stream_logger):
        logger, stream = stream_logger
        logger.setLevel(logging.WARNING)
        log_action(logger, "info", "hidden")
        assert stream.getvalue() == ""

    def test_get_logger(self):
        assert get_logger().name == "simple_banking"
        assert get_logger("simple_banking.ledger").name == "simple_banking.ledger"


class TestLedgerLogging:

    def test_rejections_logged_as_warnings(self, ledger, caplog):
        with caplog.at_level(logging.INFO, logger="simple_banking.ledger"):
            account_id = ledger.create_account("John Doe", 10)
            ledger.withdraw(account_id, 50)

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert warnings[0].action == "withdraw"
        assert warnings[0].extra["code"] == "insufficient_funds"

        infos = [r for r in caplog.records if r.levelno == logging.INFO]
        assert any(getattr(r, "action", None) == "create_account" for r in infos)
        assert any(getattr(r, "action", None) == "credit_posted" for r in infos)
