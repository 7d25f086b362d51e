"""Resolve a release tag and its predecessor from the repository's tag list."""

import re
from typing import Optional

from release_scribe.core.entities import ReleaseTag, Tag, TagRange
from release_scribe.core.errors import PreviousTagNotFoundError, TagNotFoundError, TagParseError
from release_scribe.core.interfaces import GitHubAPI

RELEASE_TAG_PATTERN = re.compile(r"(\d+\.\d+\.\d+)(?:-([^.]+)\.(\d+))?")


def parse_release_tag(tag: str) -> ReleaseTag:
    """Parse a tag like ``v3.1.0-beta.2`` into its version parts.

    Raises:
        TagParseError: If no ``MAJOR.MINOR.PATCH`` version is found in the tag.
    """
    match = RELEASE_TAG_PATTERN.search(tag)
    if not match:
        raise TagParseError(tag)

    version, label, number = match.groups()
    return ReleaseTag(
        tag=tag,
        version=version,
        prerelease_label=label,
        prerelease_number=number,
    )


async def fetch_all_tags(api: GitHubAPI, org: str, repo: str) -> list[Tag]:
    """Fetch every page of tags until an empty page comes back."""
    tags: list[Tag] = []
    page = 1
    batch = await api.list_tags(org, repo, page)
    while batch:
        tags.extend(batch)
        page += 1
        batch = await api.list_tags(org, repo, page)
    return tags


def find_tag(tags: list[Tag], name: str) -> Optional[int]:
    """Index of the tag with exactly this name, or None."""
    for index, tag in enumerate(tags):
        if tag.name == name:
            return index
    return None


def resolve_range(tags: list[Tag], target: str, previous: Optional[str] = None) -> TagRange:
    """Resolve the target tag and the tag to diff it against.

    Tags are newest first, so without an explicit ``previous`` the predecessor
    is the next entry in the list. Matching is by name only; no version
    ordering is applied.

    Raises:
        TagNotFoundError: If ``target`` is not in ``tags``.
        PreviousTagNotFoundError: If ``previous`` is not in ``tags``, or the
            target is the oldest tag.
    """
    target_index = find_tag(tags, target)
    if target_index is None:
        raise TagNotFoundError(target)

    if previous is not None:
        previous_index = find_tag(tags, previous)
        if previous_index is None:
            raise PreviousTagNotFoundError(previous)
    else:
        previous_index = target_index + 1
        if previous_index >= len(tags):
            raise PreviousTagNotFoundError()

    return TagRange(base=tags[previous_index], head=tags[target_index])
