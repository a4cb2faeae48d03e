"""MCP tool that reads one file from a GitHub repository.

Registers 'getRepoFile', which returns the decoded text of a file, or a
short notice instead of the content for known binary file types.
"""

from __future__ import annotations

import logging
from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import AnyUrl, Field

from clients.github import GitHubClient, parse_repo_url
from config import GITHUB_API_URL, GITHUB_TIMEOUT, HTTP_VERIFY
from core.errors import RepoBrowserError
from core.formatting import error_result, file_result

logger = logging.getLogger(__name__)

ACTION = "fetching file"


def register(mcp: FastMCP, *, github_client: Optional[GitHubClient] = None) -> None:
    client = github_client or GitHubClient(base_url=GITHUB_API_URL, timeout=GITHUB_TIMEOUT, verify=HTTP_VERIFY)

    @mcp.tool(name="getRepoFile")
    async def get_repo_file(
        repoUrl: Annotated[AnyUrl, Field(description="The URL of the Github repo")],  # noqa: N803
        path: Annotated[str, Field(description="The file path to fetch")],
    ) -> CallToolResult:
        """Read a file from a GitHub repository and return it as text.

        Params:
          - repoUrl: repository URL, e.g. https://github.com/owner/repo.
          - path: file path relative to the repository root.

        Returns:
          The UTF-8 file content. Images, media, archives and executables
          (by extension) are not decoded; a notice is returned instead.
          Directories and other non-file paths come back with isError set.
        """
        try:
            repo = parse_repo_url(str(repoUrl))
            entry = await client.read_file(repo, path)
            return file_result(repo, path, entry)
        except RepoBrowserError as e:
            logger.error("Error %s: %s", ACTION, e)
            return error_result(ACTION, e)
        except Exception as e:
            logger.exception("Unexpected error %s", ACTION)
            return error_result(ACTION, e)
