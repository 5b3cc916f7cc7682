from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
log file rotation and shutdown.
"""

import logging
from logging.handlers import QueueListener
from pathlib import Path

import pytest

from treecraft.infra.logging import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    """Clean up our root logger handlers before and after each test."""
    root = logging.getLogger()

    def _reset() -> None:
        listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
        if isinstance(listener, QueueListener) and getattr(listener, "_thread", None) is not None:
            listener.stop()
        setattr(root, _QUEUE_LISTENER_ATTR, None)
        for h in list(root.handlers):
            if getattr(h, _HANDLER_TAG_ATTR, False):
                root.removeHandler(h)
                h.close()
        setattr(root, _CONFIGURED_FLAG_ATTR, False)

    _reset()
    yield
    _reset()


def _our_handlers() -> list:
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    """TC-01: Verify that multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial = len(_our_handlers())

    configure_logging(cfg)
    assert len(_our_handlers()) == initial == 1


def test_force_reconfigures_level() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_log_rotation(tmp_path: Path) -> None:
    """TC-02: Verify file rotation when size limit is exceeded."""
    log_file = tmp_path / "test_rotate.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    )

    configure_logging(cfg)
    logger = logging.getLogger("test_rotate")
    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    # Stopping the listener drains the queue
    shutdown_logging()

    assert log_file.exists()
    assert (tmp_path / "test_rotate.log.1").exists(), "Rotation backup file was not created."


def test_queue_listener_architecture() -> None:
    """TC-03: Verify that the root logger uses a QueueHandler-based architecture."""
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    assert len(_our_handlers()) > 0
    assert isinstance(getattr(root, _QUEUE_LISTENER_ATTR), QueueListener)


def test_shutdown_detaches_handlers() -> None:
    configure_logging(LoggingConfig(level="INFO", console=True))
    shutdown_logging()

    root = logging.getLogger()
    assert _our_handlers() == []
    assert getattr(root, _QUEUE_LISTENER_ATTR) is None
    assert getattr(root, _CONFIGURED_FLAG_ATTR) is False


def test_unwritable_log_file_falls_back_to_console(tmp_path: Path, capsys) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    configure_logging(LoggingConfig(level="INFO", console=True, log_file=str(blocker / "x.log")))

    assert "Cannot open log file" in capsys.readouterr().err
    assert len(_our_handlers()) == 1


def test_default_log_path_under_user_data_dir(tmp_path: Path) -> None:
    with pytest.MonkeyPatch.context() as mp:
        mp.setattr("treecraft.infra.logging.core.get_user_data_dir", lambda: str(tmp_path))
        assert get_default_log_path() == str(tmp_path / "logs" / "treecraft.log")


@pytest.mark.parametrize(
    "level, expected",
    [("INFO", "WARNING"), ("DEBUG", "DEBUG"), ("warning", "WARNING"), ("ERROR", "ERROR"), ("bogus", "WARNING")],
)
def test_console_level_derived_from_level(level: str, expected: str) -> None:
    assert LoggingConfig(level=level).resolved_console_level() == expected


def test_explicit_console_level_wins() -> None:
    assert LoggingConfig(level="INFO", console_level="INFO").resolved_console_level() == "INFO"


def test_console_quiet_while_file_keeps_info(tmp_path: Path, capsys) -> None:
    """TC-04: INFO records go to the log file but not to stderr."""
    log_file = tmp_path / "session.log"
    configure_logging(LoggingConfig(level="INFO", console=True, log_file=str(log_file)))

    logger = logging.getLogger("test_split_levels")
    logger.info("progress detail")
    logger.warning("worth showing")
    shutdown_logging()

    err = capsys.readouterr().err
    assert "progress detail" not in err
    assert "WARNING | worth showing" in err

    content = log_file.read_text(encoding="utf-8")
    assert "progress detail" in content
    assert "worth showing" in content
