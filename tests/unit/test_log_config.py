"""Unit tests for logging setup and the colored operation logger."""

import logging

import pytest

from recordbook.config import Settings
from recordbook.infrastructure.logging.colored_logger import OperationLogger, StoreOperation
from recordbook.infrastructure.logging.log_config import _parse_level, setup_logging


def test_parse_level():
    assert _parse_level("debug") == logging.DEBUG
    assert _parse_level("ERROR") == logging.ERROR
    assert _parse_level("nonsense") == logging.INFO


def test_setup_logging_applies_category_levels():
    settings = Settings(
        _env_file=None,
        log_level="ERROR",
        log_level_store="DEBUG",
        log_level_storage="INFO",
        log_level_cli="WARNING",
    )
    setup_logging(settings)

    assert logging.getLogger().level == logging.ERROR
    assert logging.getLogger("RecordStore").level == logging.DEBUG
    assert logging.getLogger("recordbook.infrastructure.storage.delimited_file").level == logging.INFO
    assert logging.getLogger("recordbook.presentation.cli").level == logging.WARNING


def test_timed_step_logs_success(caplog):
    log = OperationLogger("RecordStore.Test")
    with caplog.at_level(logging.DEBUG, logger="RecordStore.Test"):
        with log.timed_step(StoreOperation.SAVE, "items.txt"):
            pass
    messages = [r.getMessage() for r in caplog.records]
    assert any("[SAVE]" in m and "items.txt" in m for m in messages)
    assert caplog.records[-1].levelno == logging.INFO


def test_timed_step_logs_and_reraises_errors(caplog):
    log = OperationLogger("RecordStore.Test")
    with caplog.at_level(logging.DEBUG, logger="RecordStore.Test"):
        with pytest.raises(OSError):
            with log.timed_step(StoreOperation.LOAD, "items.txt"):
                raise OSError("disk gone")
    assert caplog.records[-1].levelno == logging.ERROR
    assert "OSError: disk gone" in caplog.records[-1].getMessage()


def test_not_found_is_info(caplog):
    log = OperationLogger("RecordStore.Test")
    with caplog.at_level(logging.INFO, logger="RecordStore.Test"):
        log.not_found("update", "Tea")
    assert "no record with key 'Tea'" in caplog.records[-1].getMessage()
