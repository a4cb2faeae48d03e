from __future__ import annotations

import re

from core.errors import InvalidPathError, InvalidUrlError
from core.models import RepoRef
from core.paths import has_dot_segment, normalize_posix_relpath


# First two path segments after the host; anything after them is ignored.
_REPO_URL_RE = re.compile(r"github\.com/([^/\s?#]+)/([^/\s?#]+)", re.IGNORECASE)
_GIT_SUFFIX_RE = re.compile(r"\.git$", re.IGNORECASE)


def parse_repo_url(repo_url: str) -> RepoRef:
    raw = (repo_url or "").strip()
    m = _REPO_URL_RE.search(raw)
    if not m:
        raise InvalidUrlError("Invalid GitHub repository URL")

    owner = m.group(1)
    repo = _GIT_SUFFIX_RE.sub("", m.group(2))
    if not owner or not repo or owner in (".", "..") or repo in (".", ".."):
        raise InvalidUrlError("Invalid GitHub repository URL")
    return RepoRef(owner=owner, repo=repo)


def normalize_path(path: str) -> str:
    # Keep GitHub paths stable and OS-independent:
    # - Convert "\" to "/"
    # - Drop leading "/" and repeated "./"
    # An empty result means the repository root.
    path_clean = normalize_posix_relpath(path)
    # httpx collapses dot segments, which would move the request off /contents/.
    if has_dot_segment(path_clean):
        raise InvalidPathError(f"Invalid path: {path_clean!r} must not contain '.' or '..' segments")
    return path_clean
