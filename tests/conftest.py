"""Shared test fixtures."""

from typing import Optional

import pytest

from release_scribe.core import (
    ApiResult,
    Comparison,
    GitHubAPI,
    Issue,
    NotFoundError,
    Release,
    ReleasePayload,
    Tag,
)


class FakeGitHub(GitHubAPI):
    """In-memory GitHub API that records every call."""

    def __init__(
        self,
        tags: Optional[list[Tag]] = None,
        releases: Optional[list[str]] = None,
        comparison: Optional[Comparison] = None,
        issues: Optional[dict[tuple[str, str, int], Issue]] = None,
        release_result: Optional[ApiResult] = None,
        page_size: int = 2,
    ) -> None:
        self.tags = tags or []
        self.releases = releases or []
        self.comparison = comparison or Comparison(base="", head="")
        self.issues = issues or {}
        self.release_result = release_result
        self.page_size = page_size
        self.calls: list[tuple] = []

    def _page(self, items: list, page: int) -> list:
        start = (page - 1) * self.page_size
        return items[start:start + self.page_size]

    async def list_tags(self, org: str, repo: str, page: int = 1) -> list[Tag]:
        self.calls.append(("list_tags", org, repo, page))
        return self._page(self.tags, page)

    async def list_releases(self, org: str, repo: str, page: int = 1) -> list[str]:
        self.calls.append(("list_releases", org, repo, page))
        return self._page(self.releases, page)

    async def compare(self, org: str, repo: str, base: str, head: str) -> Comparison:
        self.calls.append(("compare", org, repo, base, head))
        return self.comparison

    async def get_issue(self, org: str, repo: str, number: int) -> Issue:
        self.calls.append(("get_issue", org, repo, number))
        try:
            return self.issues[(org, repo, number)]
        except KeyError:
            raise NotFoundError("Not Found", status_code=404) from None

    async def create_release(self, org: str, repo: str, payload: ReleasePayload) -> ApiResult:
        self.calls.append(("create_release", org, repo, payload))
        if self.release_result is not None:
            return self.release_result
        return Release(
            id=1,
            tag_name=payload.tag_name,
            name=payload.name,
            html_url=f"https://github.com/{org}/{repo}/releases/tag/{payload.tag_name}",
            draft=payload.draft,
            prerelease=payload.prerelease,
        )

    def called(self, name: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == name]


@pytest.fixture
def fake_github() -> type[FakeGitHub]:
    """The fake API class, so tests can build it with their own data."""
    return FakeGitHub


@pytest.fixture
def tags() -> list[Tag]:
    """Tags newest first, the way the API lists them."""
    return [
        Tag(name="v2.0.0", sha="sha-200"),
        Tag(name="v1.9.0", sha="sha-190"),
        Tag(name="v1.8.0", sha="sha-180"),
    ]
