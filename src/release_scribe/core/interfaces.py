"""Core interfaces for adapters."""

from abc import ABC, abstractmethod

from release_scribe.core.entities import (
    ApiResult,
    CommitRecord,
    Comparison,
    Issue,
    ReleasePayload,
    Tag,
)


class GitHubAPI(ABC):
    """Interface for the hosting API operations the pipeline needs."""

    @abstractmethod
    async def list_tags(self, org: str, repo: str, page: int = 1) -> list[Tag]:
        """Fetch one page of tags, newest first."""
        pass

    @abstractmethod
    async def list_releases(self, org: str, repo: str, page: int = 1) -> list[str]:
        """Fetch one page of releases, returning their tag names."""
        pass

    @abstractmethod
    async def compare(self, org: str, repo: str, base: str, head: str) -> Comparison:
        """Compare two commits."""
        pass

    @abstractmethod
    async def get_issue(self, org: str, repo: str, number: int) -> Issue:
        """Fetch an issue or pull request by number."""
        pass

    @abstractmethod
    async def create_release(self, org: str, repo: str, payload: ReleasePayload) -> ApiResult:
        """Create a release, returning it or the API's error message."""
        pass


class NotesGenerator(ABC):
    """Interface for rendering release notes."""

    @abstractmethod
    def generate(self, commits: list[CommitRecord]) -> str:
        """Render release notes body from categorized commits."""
        pass
