"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (GitHub
API endpoint, HTTP timeout and TLS verification, log level).
"""

from __future__ import annotations

import os


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


# GitHub REST API (override for GitHub Enterprise)
GITHUB_API_URL = (os.environ.get("GITHUB_API_URL") or "https://api.github.com").strip().rstrip("/")
GITHUB_TIMEOUT = _env_float("GITHUB_TIMEOUT", 20.0)

# Network / HTTP
HTTP_VERIFY = _env_bool("HTTP_VERIFY", True)

# Logging
LOG_LEVEL = (os.environ.get("LOG_LEVEL") or "INFO").strip().upper()
