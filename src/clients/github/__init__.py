from .client import GitHubClient
from .inputs import normalize_path, parse_repo_url

__all__ = ["GitHubClient", "normalize_path", "parse_repo_url"]
