"""Tests for commit categorization."""

import pytest

from release_scribe.core import Category, CommitRecord, Issue, IssueLookupError, IssueRef
from release_scribe.core.categorizer import (
    categorize_commits,
    category_from_labels,
    find_resolved_issue,
    resolve_category,
)

ORG = "dojo"
REPO = "widgets"


@pytest.mark.parametrize(
    "text",
    ["fixes #7", "Fix #7", "fix: #7", "Resolves #7", "resolve #7", "RESOLVES: #7", "resolv #7"],
)
def test_find_resolved_issue_verbs(text: str) -> None:
    assert find_resolved_issue(text, ORG, REPO) == IssueRef(ORG, REPO, 7)


def test_find_resolved_issue_cross_repository() -> None:
    """Test an org/repo prefix points at another repository."""
    ref = find_resolved_issue("Fixes other-org/other-repo#15", ORG, REPO)

    assert ref == IssueRef("other-org", "other-repo", 15)


def test_find_resolved_issue_url() -> None:
    ref = find_resolved_issue("resolves https://github.com/acme/app.js/issues/99", ORG, REPO)

    assert ref == IssueRef("acme", "app.js", 99)


@pytest.mark.parametrize("text", ["", None, "Closes #7", "fixes the bug", "Add feature (#12)"])
def test_find_resolved_issue_no_reference(text) -> None:
    assert find_resolved_issue(text, ORG, REPO) is None


def test_category_from_labels_priority() -> None:
    """breaking-change always wins; otherwise first matching label decides."""
    assert category_from_labels(["bug", "breaking-change"]) is Category.BREAKING
    assert category_from_labels(["breaking-change", "bug"]) is Category.BREAKING
    assert category_from_labels(["enhancement", "bug"]) is Category.ENHANCEMENT
    assert category_from_labels(["bug", "enhancement"]) is Category.FIX
    assert category_from_labels(["docs", "bug"]) is Category.FIX
    assert category_from_labels(["docs", "question"]) is None
    assert category_from_labels([]) is None


def test_category_from_labels_idempotent() -> None:
    labels = ("bug", "breaking-change", "enhancement")

    assert category_from_labels(labels) == category_from_labels(labels) == Category.BREAKING


@pytest.mark.asyncio
async def test_resolve_category_from_message_reference(fake_github) -> None:
    """A "fixes #7" message uses issue #7's labels."""
    api = fake_github(issues={(ORG, REPO, 7): Issue(number=7, body="", labels=("enhancement",))})

    category = await resolve_category(api, ORG, REPO, CommitRecord("Add widget, fixes #7"))

    assert category is Category.ENHANCEMENT
    assert api.called("get_issue") == [("get_issue", ORG, REPO, 7)]


@pytest.mark.asyncio
async def test_resolve_category_message_reference_beats_pr(fake_github) -> None:
    """Test the PR is not looked up when the message references an issue."""
    api = fake_github(
        issues={
            (ORG, REPO, 7): Issue(number=7, body="", labels=("bug",)),
            (ORG, REPO, 50): Issue(number=50, body="", labels=("enhancement",)),
        }
    )

    category = await resolve_category(api, ORG, REPO, CommitRecord("Fix crash (#50)\n\nfixes #7", pr=50))

    assert category is Category.FIX
    assert [call[3] for call in api.called("get_issue")] == [7]


@pytest.mark.asyncio
async def test_resolve_category_follows_pr_body(fake_github) -> None:
    """A PR body that resolves an issue uses that issue's labels, not the PR's."""
    api = fake_github(
        issues={
            (ORG, REPO, 42): Issue(number=42, body="This resolves acme/core#3", labels=("enhancement",)),
            ("acme", "core", 3): Issue(number=3, body="", labels=("bug", "breaking-change")),
        }
    )

    category = await resolve_category(api, ORG, REPO, CommitRecord("Rework API (#42)", pr=42))

    assert category is Category.BREAKING
    assert [call[1:] for call in api.called("get_issue")] == [(ORG, REPO, 42), ("acme", "core", 3)]


@pytest.mark.asyncio
async def test_resolve_category_uses_pr_labels(fake_github) -> None:
    api = fake_github(issues={(ORG, REPO, 42): Issue(number=42, body="No references", labels=("bug",))})

    category = await resolve_category(api, ORG, REPO, CommitRecord("Fix crash (#42)", pr=42))

    assert category is Category.FIX


@pytest.mark.asyncio
async def test_resolve_category_without_references(fake_github) -> None:
    api = fake_github()

    assert await resolve_category(api, ORG, REPO, CommitRecord("Tidy up")) is None
    assert api.calls == []


@pytest.mark.asyncio
async def test_resolve_category_missing_issue(fake_github) -> None:
    api = fake_github()
    commit = CommitRecord("fixes #404")

    with pytest.raises(IssueLookupError) as exc_info:
        await resolve_category(api, ORG, REPO, commit)

    assert exc_info.value.commit is commit
    assert exc_info.value.ref == IssueRef(ORG, REPO, 404)


@pytest.mark.asyncio
async def test_categorize_commits_yields_progress_and_continues(fake_github) -> None:
    """A failed lookup leaves one commit uncategorized and processing goes on."""
    api = fake_github(
        issues={
            (ORG, REPO, 1): Issue(number=1, body="", labels=("bug",)),
            (ORG, REPO, 2): Issue(number=2, body="", labels=("enhancement",)),
        }
    )
    commits = [
        CommitRecord("Fix thing (#1)", pr=1),
        CommitRecord("Broken ref, fixes #999"),
        CommitRecord("Add thing (#2)", pr=2),
        CommitRecord("Plain commit"),
    ]

    events = [event async for event in categorize_commits(api, ORG, REPO, commits)]

    assert [(e.index, e.total) for e in events] == [(1, 4), (2, 4), (3, 4), (4, 4)]
    assert [c.category for c in commits] == [Category.FIX, None, Category.ENHANCEMENT, None]
    assert events[1].error is not None
    assert events[1].error.ref == IssueRef(ORG, REPO, 999)
    assert all(e.error is None for i, e in enumerate(events) if i != 1)
    assert events[2].commit is commits[2]


@pytest.mark.asyncio
async def test_categorize_commits_empty(fake_github) -> None:
    events = [event async for event in categorize_commits(fake_github(), ORG, REPO, [])]

    assert events == []
