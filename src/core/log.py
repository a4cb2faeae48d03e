"""Logging setup for the server process.

The stdio transport owns stdout, so every record goes to stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    # Re-running setup (tests, reloads) must not stack handlers.
    for handler in list(root.handlers):
        if getattr(handler, "_github_repo_mcp", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._github_repo_mcp = True  # type: ignore[attr-defined]
    root.addHandler(handler)

    # httpx logs every request at INFO; keep that out of normal output.
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
