from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
log file rotation and teardown of our own handlers only.
"""

import logging
import time
from logging.handlers import QueueHandler
from pathlib import Path
from unittest.mock import patch

import pytest

from npmfs.infra.logging import (
    _ATEXIT_FLAG_ATTR,
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    get_logger,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove our handlers before and after each test, restoring the root level."""
    root = logging.getLogger()
    level = root.level
    shutdown_logging()
    yield
    shutdown_logging()
    root.setLevel(level)


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    """TC-01: Verify that repeated config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    first = _our_handlers()
    configure_logging(cfg)

    assert _our_handlers() == first
    assert len(first) == 1


def test_force_reconfigures() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_log_rotation(tmp_path: Path) -> None:
    """TC-02: Verify file rotation when size limit is exceeded."""
    log_file = tmp_path / "nested" / "npmfs.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    )

    configure_logging(cfg)
    logger = get_logger("test_rotate")
    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    # Drain the queue before looking at the files
    shutdown_logging()
    time.sleep(0.1)

    assert log_file.exists()
    assert (tmp_path / "nested" / "npmfs.log.1").exists(), "Rotation backup file was not created."


def test_queue_listener_architecture() -> None:
    """TC-03: Verify the root logger only holds a tagged QueueHandler."""
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    ours = _our_handlers()

    assert len(ours) == 1 and isinstance(ours[0], QueueHandler)
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None
    assert getattr(root, _CONFIGURED_FLAG_ATTR) is True


def test_foreign_handlers_survive_shutdown() -> None:
    """TC-04: Verify teardown leaves handlers we did not install."""
    foreign = logging.NullHandler()
    root = logging.getLogger()
    root.addHandler(foreign)
    try:
        configure_logging(LoggingConfig())
        shutdown_logging()

        assert foreign in root.handlers
        assert _our_handlers() == []
        assert getattr(root, _QUEUE_LISTENER_ATTR) is None
    finally:
        root.removeHandler(foreign)


def test_unknown_level_defaults_to_warning() -> None:
    configure_logging(LoggingConfig(level="chatty"))
    assert logging.getLogger().level == logging.WARNING


def test_unwritable_log_file_is_skipped(tmp_path: Path, capsys) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    configure_logging(LoggingConfig(console=False, log_file=str(blocker / "x.log")))

    assert "cannot open log file" in capsys.readouterr().err
    assert _our_handlers() == []


def test_cli_preset() -> None:
    assert LoggingConfig.for_cli().level == "WARNING"
    assert LoggingConfig.for_cli(debug=True, log_file="x.log").log_file == "x.log"


def test_reconfigure_closes_previous_handlers(tmp_path: Path) -> None:
    """TC-05: Verify a forced reconfigure closes the old listener's file handler."""
    configure_logging(LoggingConfig(console=False, log_file=str(tmp_path / "first.log")))
    first_listener = getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR)
    (old_file_handler,) = first_listener.handlers

    configure_logging(LoggingConfig(console=False, log_file=str(tmp_path / "second.log")), force=True)

    assert old_file_handler.stream is None
    assert getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR) is not first_listener


def test_exit_hook_registered_once(monkeypatch) -> None:
    """TC-06: Verify repeated forced configuration registers a single exit hook."""
    monkeypatch.setattr(logging.getLogger(), _ATEXIT_FLAG_ATTR, False, raising=False)

    with patch("npmfs.infra.logging.core.atexit.register") as mock_register:
        for _ in range(3):
            configure_logging(LoggingConfig(), force=True)

    assert mock_register.call_count == 1
    assert mock_register.call_args.args == (shutdown_logging,)
