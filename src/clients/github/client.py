"""GitHub contents client: one read of the contents API per call.

The client only knows how to fetch the metadata/content for a path and
hand back one of the two explicit variants from `core.models`. It does
not retry, paginate or cache; a failed request surfaces immediately as
`FetchError` carrying GitHub's own message.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping, Optional
from urllib.parse import quote

import httpx

from core.errors import FetchError, InvalidUrlError, NotAFileError
from core.models import DirectoryEntry, DirectoryListing, RepoContent, RepoRef, SingleEntry
from core.paths import has_dot_segment

from .inputs import normalize_path

logger = logging.getLogger(__name__)


class GitHubClient:
    """Async GitHub client for the repository contents endpoint.

    Purpose:
      - get_content(repo, path) -> DirectoryListing | SingleEntry
      - list_root(repo) -> DirectoryListing
      - list_directory(repo, path) -> DirectoryListing
      - read_file(repo, path) -> SingleEntry

    The instance holds configuration only (base URL, headers, timeout,
    TLS verification). Each call opens its own httpx.AsyncClient, so one
    instance can be shared by concurrent tool invocations.
    """

    BASE_URL = "https://api.github.com"
    JSON_ACCEPT = "application/vnd.github+json"
    USER_AGENT = "github-repo-mcp"

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        timeout: float = 20.0,
        verify: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = (base_url or self.BASE_URL).rstrip("/")
        self._timeout = float(timeout)
        self._verify = bool(verify)
        self._transport = transport

        self._headers = self._build_headers()

    async def get_content(self, repo: RepoRef, path: str = "") -> RepoContent:
        """Fetch `path` (empty for the root) and classify the result."""
        path_clean = normalize_path(path)
        if has_dot_segment(repo.owner) or has_dot_segment(repo.repo):
            raise InvalidUrlError("Invalid GitHub repository URL")
        owner, name = quote(repo.owner, safe=""), quote(repo.repo, safe="")
        url = f"/repos/{owner}/{name}/contents/{quote(path_clean)}"

        logger.debug("GET %s%s", self._base_url, url)
        async with self._create_client() as client:
            try:
                resp = await client.get(url)
            except httpx.HTTPError as e:
                raise FetchError(str(e) or type(e).__name__) from e

            self._raise_for_status(resp)

            try:
                data = resp.json()
            except ValueError as e:
                raise FetchError("Unexpected response from GitHub contents API") from e

        if isinstance(data, list):
            return DirectoryListing(entries=tuple(_entry(item) for item in data if isinstance(item, Mapping)))
        if isinstance(data, Mapping):
            return _single(data)
        raise FetchError("Unexpected response from GitHub contents API")

    async def list_root(self, repo: RepoRef) -> DirectoryListing:
        return await self.list_directory(repo, "")

    async def list_directory(self, repo: RepoRef, path: str) -> DirectoryListing:
        content = await self.get_content(repo, path)
        if isinstance(content, DirectoryListing):
            return content
        # A single object where a listing was expected is reported as empty.
        return DirectoryListing()

    async def read_file(self, repo: RepoRef, path: str) -> SingleEntry:
        content = await self.get_content(repo, path)
        if isinstance(content, DirectoryListing) or content.type != "file":
            raise NotAFileError("Requested path is not a file")
        return content

    # --- HTTP helpers ---

    def _build_headers(self) -> dict[str, str]:
        headers = {
            "Accept": self.JSON_ACCEPT,
            "User-Agent": self.USER_AGENT,
        }
        # Optional token is passed through untouched; no credential handling here.
        token = (os.environ.get("GITHUB_TOKEN") or "").strip()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _create_client(self) -> httpx.AsyncClient:
        kwargs: dict[str, Any] = {}
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._headers,
            timeout=self._timeout,
            verify=self._verify,
            **kwargs,
        )

    def _raise_for_status(self, resp: httpx.Response) -> None:
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(_error_message(resp) or str(e), status_code=resp.status_code) from e


def _error_message(resp: httpx.Response) -> str:
    # GitHub error bodies look like {"message": "Not Found", "documentation_url": ...}
    try:
        body = resp.json()
    except ValueError:
        return ""
    if not isinstance(body, Mapping):
        return ""

    message = body.get("message")
    if not isinstance(message, str) or not message.strip():
        return ""
    docs = body.get("documentation_url")
    if isinstance(docs, str) and docs.strip():
        return f"{message.strip()} - {docs.strip()}"
    return message.strip()


def _entry(item: Mapping[str, Any]) -> DirectoryEntry:
    return DirectoryEntry(
        name=str(item.get("name") or ""),
        type=str(item.get("type") or ""),
        path=str(item.get("path") or ""),
    )


def _single(item: Mapping[str, Any]) -> SingleEntry:
    encoding = item.get("encoding")
    content = item.get("content")
    return SingleEntry(
        name=str(item.get("name") or ""),
        path=str(item.get("path") or ""),
        type=str(item.get("type") or ""),
        encoding=encoding if isinstance(encoding, str) else None,
        content=content if isinstance(content, str) else None,
    )
