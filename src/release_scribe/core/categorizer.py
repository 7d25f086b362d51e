"""Categorize commits by the labels of the issues they resolve."""

import re
from collections.abc import AsyncIterator, Iterable
from typing import Optional

from release_scribe.core.entities import (
    CategorizationProgress,
    Category,
    CommitRecord,
    Issue,
    IssueRef,
)
from release_scribe.core.errors import GitHubAPIError, IssueLookupError
from release_scribe.core.interfaces import GitHubAPI

# "fixes #12", "Resolves: org/repo#3", "fix https://github.com/org/repo/issues/7"
RESOLVES_PATTERN = re.compile(
    r"(?:resolv(?:es?)?|fix(?:es)?):?\s+"
    r"(?:https://github\.com/)?"
    r"(?:([\w\-]+)/([\w.\-]+))?"
    r"(?:/issues/|#)(\d+)",
    re.IGNORECASE,
)

BREAKING_LABEL = "breaking-change"
ENHANCEMENT_LABEL = "enhancement"
BUG_LABEL = "bug"


def find_resolved_issue(text: Optional[str], org: str, repo: str) -> Optional[IssueRef]:
    """Find the first issue that ``text`` claims to fix or resolve."""
    if not text:
        return None

    match = RESOLVES_PATTERN.search(text)
    if not match:
        return None

    ref_org, ref_repo, number = match.groups()
    return IssueRef(org=ref_org or org, repo=ref_repo or repo, number=int(number))


def category_from_labels(labels: Iterable[str]) -> Optional[Category]:
    """Map issue labels to a category.

    ``breaking-change`` wins wherever it appears. Otherwise the first
    ``enhancement`` or ``bug`` label in order decides.
    """
    category: Optional[Category] = None
    for label in labels:
        if label == BREAKING_LABEL:
            return Category.BREAKING
        if category is not None:
            continue
        if label == ENHANCEMENT_LABEL:
            category = Category.ENHANCEMENT
        elif label == BUG_LABEL:
            category = Category.FIX
    return category


async def _fetch_issue(api: GitHubAPI, commit: CommitRecord, ref: IssueRef) -> Issue:
    try:
        return await api.get_issue(ref.org, ref.repo, ref.number)
    except GitHubAPIError as e:
        raise IssueLookupError(commit, ref, e) from e


async def resolve_category(
    api: GitHubAPI, org: str, repo: str, commit: CommitRecord
) -> Optional[Category]:
    """Work out the category of a single commit.

    A commit message that resolves an issue uses that issue's labels. Otherwise
    the pull request from the message is looked up: if its body resolves an
    issue, that issue's labels are used, else the pull request's own labels.

    Raises:
        IssueLookupError: If an issue or pull request could not be fetched.
    """
    ref = find_resolved_issue(commit.message, org, repo)
    if ref is not None:
        issue = await _fetch_issue(api, commit, ref)
        return category_from_labels(issue.labels)

    if commit.pr is None:
        return None

    pull = await _fetch_issue(api, commit, IssueRef(org=org, repo=repo, number=commit.pr))
    ref = find_resolved_issue(pull.body, org, repo)
    if ref is not None:
        issue = await _fetch_issue(api, commit, ref)
        return category_from_labels(issue.labels)

    return category_from_labels(pull.labels)


async def categorize_commits(
    api: GitHubAPI, org: str, repo: str, commits: list[CommitRecord]
) -> AsyncIterator[CategorizationProgress]:
    """Categorize commits one at a time, yielding progress after each.

    Lookups are sequential to stay clear of secondary rate limits. A failed
    lookup leaves that commit uncategorized and is reported on its event.
    """
    total = len(commits)
    for index, commit in enumerate(commits, 1):
        error: Optional[IssueLookupError] = None
        try:
            commit.category = await resolve_category(api, org, repo, commit)
        except IssueLookupError as e:
            commit.category = None
            error = e
        yield CategorizationProgress(index=index, total=total, commit=commit, error=error)
