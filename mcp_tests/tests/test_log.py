import logging
import sys

import pytest

from core.log import setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def _own_handlers(root):
    return [h for h in root.handlers if getattr(h, "_github_repo_mcp", False)]


def test_setup_logging_writes_to_stderr(root_logger):
    setup_logging("debug")

    handlers = _own_handlers(root_logger)
    assert len(handlers) == 1
    assert handlers[0].stream is sys.stderr
    assert root_logger.level == logging.DEBUG


def test_setup_logging_is_idempotent(root_logger):
    setup_logging(logging.INFO)
    setup_logging(logging.WARNING)

    assert len(_own_handlers(root_logger)) == 1
    assert root_logger.level == logging.WARNING


def test_setup_logging_unknown_level_defaults_to_info(root_logger):
    setup_logging("chatty")
    assert root_logger.level == logging.INFO
