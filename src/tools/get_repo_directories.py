"""MCP tool that lists one directory of a GitHub repository.

Registers 'getRepoDirectories'. Same output shape as
'getRepoAllDirectories', for a caller-supplied path.
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
from core.formatting import error_result, listing_result

logger = logging.getLogger(__name__)

ACTION = "fetching directory"


def register(mcp: FastMCP, *, github_client: Optional[GitHubClient] = None) -> None:
    client = github_client or GitHubClient(base_url=GITHUB_API_URL, timeout=GITHUB_TIMEOUT, verify=HTTP_VERIFY)

    @mcp.tool(name="getRepoDirectories")
    async def get_repo_directories(
        repoUrl: Annotated[AnyUrl, Field(description="The URL of the Github repo")],  # noqa: N803
        path: Annotated[str, Field(description="The directory path to fetch")],
    ) -> CallToolResult:
        """List the entries of a directory inside a GitHub repository.

        Only the first page of a very large directory is returned.
        """
        try:
            repo = parse_repo_url(str(repoUrl))
            listing = await client.list_directory(repo, path)
            return listing_result(f"Contents for {path} in {repo.full_name}", listing)
        except RepoBrowserError as e:
            logger.error("Error %s: %s", ACTION, e)
            return error_result(ACTION, e)
        except Exception as e:
            logger.exception("Unexpected error %s", ACTION)
            return error_result(ACTION, e)
