"""Server bootstrap for the GitHub repository browser MCP service.

Creates the FastMCP instance, builds the shared GitHub client, registers
the three repository tools and starts the MCP server (stdio transport).
"""

import logging

from mcp.server.fastmcp import FastMCP

from clients.github import GitHubClient
from config import GITHUB_API_URL, GITHUB_TIMEOUT, HTTP_VERIFY, LOG_LEVEL
from core.log import setup_logging

from tools.get_repo_all_directories import register as register_get_repo_all_directories
from tools.get_repo_directories import register as register_get_repo_directories
from tools.get_repo_file import register as register_get_repo_file

logger = logging.getLogger(__name__)

mcp = FastMCP("github-repo-mcp")


def register_tools() -> None:
    # One client for the whole process; it only carries network configuration.
    github_client = GitHubClient(base_url=GITHUB_API_URL, timeout=GITHUB_TIMEOUT, verify=HTTP_VERIFY)

    register_get_repo_all_directories(mcp, github_client=github_client)
    register_get_repo_directories(mcp, github_client=github_client)
    register_get_repo_file(mcp, github_client=github_client)


register_tools()


def main() -> None:
    setup_logging(LOG_LEVEL)
    logger.info("Starting github-repo-mcp on stdio (GitHub API: %s)", GITHUB_API_URL)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
