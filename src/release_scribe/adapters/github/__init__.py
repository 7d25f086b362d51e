"""GitHub API adapter."""

from release_scribe.adapters.github.client import GitHubClient, decode_message

__all__ = ["GitHubClient", "decode_message"]
