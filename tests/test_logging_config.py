from __future__ import annotations

import io
import logging
from pathlib import Path

from anchor_core.logging_config import setup_logging


def test_setup_logging_is_rerun_safe(tmp_path: Path) -> None:
    log_file = tmp_path / "anchor.log"
    stream = io.StringIO()
    setup_logging(logging.DEBUG, log_file=str(log_file), stream=stream)
    setup_logging(logging.DEBUG, log_file=str(log_file), stream=stream)

    logger = logging.getLogger("anchor_core")
    assert len(logger.handlers) == 2

    logging.getLogger("anchor_core.clamping").debug("edit ignored")
    for handler in logger.handlers:
        handler.flush()
    assert "anchor_core.clamping - DEBUG - edit ignored" in stream.getvalue()
    assert "edit ignored" in log_file.read_text(encoding="utf-8")

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_rerun_closes_previous_file_handler(tmp_path: Path) -> None:
    setup_logging(logging.INFO, log_file=str(tmp_path / "first.log"), stream=io.StringIO())
    logger = logging.getLogger("anchor_core")
    first = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(first) == 1

    setup_logging(logging.INFO, stream=io.StringIO())
    assert first[0].stream is None
    assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
