"""MCP tool that lists the root of a GitHub repository.

Registers 'getRepoAllDirectories', which returns the name/type/path of
every entry at the repository root as formatted JSON text.
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

ACTION = "fetching repo"


def register(mcp: FastMCP, *, github_client: Optional[GitHubClient] = None) -> None:
    client = github_client or GitHubClient(base_url=GITHUB_API_URL, timeout=GITHUB_TIMEOUT, verify=HTTP_VERIFY)

    @mcp.tool(name="getRepoAllDirectories")
    async def get_repo_all_directories(
        repoUrl: Annotated[AnyUrl, Field(description="The URL of the Github repo")],  # noqa: N803
    ) -> CallToolResult:
        """List the files and directories at the root of a GitHub repository.

        Params:
          - repoUrl: repository URL, e.g. https://github.com/owner/repo.

        Returns:
          Text with a JSON array of {name, type, path} records, in the
          order GitHub returns them. Failures come back with isError set.
        """
        try:
            repo = parse_repo_url(str(repoUrl))
            listing = await client.list_root(repo)
            return listing_result(f"Repository root contents for {repo.full_name}", listing)
        except RepoBrowserError as e:
            logger.error("Error %s: %s", ACTION, e)
            return error_result(ACTION, e)
        except Exception as e:
            logger.exception("Unexpected error %s", ACTION)
            return error_result(ACTION, e)
