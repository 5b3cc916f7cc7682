from __future__ import annotations

"""
Logging Session Lifecycle.

A session hangs one tagged QueueHandler on the root logger and drains it
from a QueueListener thread into the stderr and log file sinks. Each sink
filters at its own level, so the terminal can stay quiet while the log
file records the full run.
"""

import atexit
import logging
import os
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from treecraft.infra.fs import get_user_data_dir
from treecraft.infra.logging.config import (
    _LEVEL_MAP,
    CONSOLE_FORMAT,
    DATE_FORMAT,
    FILE_FORMAT,
    LoggingConfig,
)
from treecraft.infra.logging.handlers import (
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_treecraft_configured"
_QUEUE_LISTENER_ATTR: str = "_treecraft_queue_listener"

DEFAULT_LOG_NAME = "treecraft.log"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def get_default_log_path(file_name: str = DEFAULT_LOG_NAME) -> str:
    """Path of the log file kept under the user data directory."""
    return os.path.join(get_user_data_dir(), "logs", file_name)


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Start a logging session on the root logger.

    A second call is a no-op while a session is active, unless force is
    set; then our previous handlers and listener are replaced. Handlers we
    did not install (pytest caplog, library handlers) are never touched.

    Args:
        cfg: Session settings.
        force: Replace an active session.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    _detach_session(root)

    sinks = _build_sinks(cfg)
    if not sinks:
        return root

    # The root passes whatever the most verbose sink wants
    root.setLevel(min(h.level for h in sinks))

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    queue_handler = QueueHandler(log_queue)
    _tag_handler(queue_handler)

    listener = QueueListener(log_queue, *sinks, respect_handler_level=True)
    listener.start()
    atexit.register(_stop_listener, listener)

    root.addHandler(queue_handler)
    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """End the session: flush queued records and detach our handlers."""
    root = logging.getLogger()
    _detach_session(root)
    setattr(root, _CONFIGURED_FLAG_ATTR, False)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _build_sinks(cfg: LoggingConfig) -> List[logging.Handler]:
    """Create the stderr and file handlers requested by cfg."""
    sinks: List[logging.Handler] = []

    if cfg.console:
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(_parse_level(cfg.resolved_console_level()))
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        _tag_handler(console)
        sinks.append(console)

    if cfg.log_file:
        file_handler = _create_rotating_file_handler(
            cfg.log_file,
            _parse_level(cfg.level),
            logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if file_handler:
            sinks.append(file_handler)

    return sinks


def _parse_level(level: Optional[str]) -> int:
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def _detach_session(root: logging.Logger) -> None:
    """Stop the active listener, then close its sinks and our root handlers."""
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    _stop_listener(listener)
    setattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener is not None:
        for sink in listener.handlers:
            sink.close()

    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()


def _stop_listener(listener: Optional[QueueListener]) -> None:
    # stop() fails on a listener whose thread was already joined (atexit after shutdown)
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()
