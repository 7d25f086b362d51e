"""Business logic use cases."""

from collections.abc import AsyncIterator
from typing import Optional

from release_scribe.core import (
    ApiMessage,
    ApiMutationError,
    CategorizationProgress,
    CommitRecord,
    GitHubAPI,
    NotesGenerator,
    Release,
    ReleasePayload,
    ReleaseTag,
    TagRange,
    TagStatus,
)
from release_scribe.core.categorizer import categorize_commits
from release_scribe.core.harvester import harvest_commits
from release_scribe.core.tag_resolver import fetch_all_tags, parse_release_tag, resolve_range


class ReleaseNotesService:
    """Service for building release notes between two tags."""

    def __init__(self, api: GitHubAPI, notes_generator: NotesGenerator) -> None:
        self.api = api
        self.notes_generator = notes_generator

    async def prepare(
        self, org: str, repo: str, tag: str, from_tag: Optional[str] = None
    ) -> tuple[ReleaseTag, TagRange, list[CommitRecord]]:
        """Parse the tag, resolve the range to diff and harvest its commits.

        The tag is parsed before anything is fetched so a malformed tag fails
        without touching the API.

        Raises:
            TagParseError: If the tag is not a release version.
            TagNotFoundError: If the tag or its predecessor cannot be resolved.
            GitHubAPIError: If listing tags or comparing fails.
        """
        release_tag = parse_release_tag(tag)

        tags = await fetch_all_tags(self.api, org, repo)
        tag_range = resolve_range(tags, tag, from_tag)

        comparison = await self.api.compare(org, repo, tag_range.base_sha, tag_range.head_sha)
        return release_tag, tag_range, harvest_commits(comparison)

    def categorize(
        self, org: str, repo: str, commits: list[CommitRecord]
    ) -> AsyncIterator[CategorizationProgress]:
        """Categorize commits in place, yielding a progress event per commit."""
        return categorize_commits(self.api, org, repo, commits)

    def build_notes(self, commits: list[CommitRecord]) -> str:
        return self.notes_generator.generate(commits)

    async def tag_statuses(self, org: str, repo: str) -> list[TagStatus]:
        """List every tag, flagging the ones that already have a release."""
        tags = await fetch_all_tags(self.api, org, repo)

        released: set[str] = set()
        page = 1
        batch = await self.api.list_releases(org, repo, page)
        while batch:
            released.update(batch)
            page += 1
            batch = await self.api.list_releases(org, repo, page)

        return [TagStatus(tag=tag, released=tag.name in released) for tag in tags]


class ReleasePublisher:
    """Service for creating the release on GitHub."""

    def __init__(self, api: GitHubAPI) -> None:
        self.api = api

    def build_payload(
        self, tag: str, body: str, draft: bool = True, prerelease: Optional[bool] = None
    ) -> ReleasePayload:
        """Build the release payload.

        Args:
            tag: Release tag, parsed for the release name
            body: Release notes body
            draft: Whether to create the release as a draft
            prerelease: Explicit prerelease flag; derived from the tag when None

        Raises:
            TagParseError: If the tag is not a release version.
        """
        release_tag = parse_release_tag(tag)
        return ReleasePayload(
            tag_name=tag,
            name=release_tag.name,
            body=body,
            draft=draft,
            prerelease=release_tag.is_prerelease if prerelease is None else prerelease,
        )

    async def publish(self, org: str, repo: str, payload: ReleasePayload) -> Release:
        """Create the release.

        Raises:
            ApiMutationError: If GitHub answers with an error message.
        """
        result = await self.api.create_release(org, repo, payload)
        if isinstance(result, ApiMessage):
            raise ApiMutationError(result.message, result.errors)
        return result
