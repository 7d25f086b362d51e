"""Core domain layer."""

from release_scribe.core.entities import (
    ApiMessage,
    ApiResult,
    CategorizationProgress,
    Category,
    Changes,
    CommitRecord,
    Comparison,
    ComparisonCommit,
    FieldError,
    Issue,
    IssueRef,
    Release,
    ReleasePayload,
    ReleaseTag,
    Tag,
    TagRange,
    TagStatus,
)
from release_scribe.core.errors import (
    ApiMutationError,
    GitHubAPIError,
    IssueLookupError,
    NotFoundError,
    PreviousTagNotFoundError,
    ReleaseScribeError,
    TagNotFoundError,
    TagParseError,
)
from release_scribe.core.interfaces import GitHubAPI, NotesGenerator

__all__ = [
    "ApiMessage",
    "ApiResult",
    "CategorizationProgress",
    "Category",
    "Changes",
    "CommitRecord",
    "Comparison",
    "ComparisonCommit",
    "FieldError",
    "Issue",
    "IssueRef",
    "Release",
    "ReleasePayload",
    "ReleaseTag",
    "Tag",
    "TagRange",
    "TagStatus",
    "ApiMutationError",
    "GitHubAPIError",
    "IssueLookupError",
    "NotFoundError",
    "PreviousTagNotFoundError",
    "ReleaseScribeError",
    "TagNotFoundError",
    "TagParseError",
    "GitHubAPI",
    "NotesGenerator",
]
