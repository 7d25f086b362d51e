"""Core domain entities."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from release_scribe.core.errors import IssueLookupError


class Category(str, Enum):
    """Category of a change in the release notes."""

    BREAKING = "breaking"
    ENHANCEMENT = "enhancement"
    FIX = "fix"


@dataclass(frozen=True)
class Tag:
    """Git tag as listed by the hosting API."""

    name: str
    sha: str


@dataclass(frozen=True)
class ComparisonCommit:
    """Single commit of a comparison."""

    sha: str
    message: str


@dataclass
class Comparison:
    """Commits between a base and a head reference, in API order."""

    base: str
    head: str
    commits: list[ComparisonCommit] = field(default_factory=list)


@dataclass
class CommitRecord:
    """Commit message prepared for release notes."""

    message: str
    pr: Optional[int] = None
    category: Optional[Category] = None

    @property
    def title(self) -> str:
        return self.message.splitlines()[0] if self.message else ""


@dataclass(frozen=True)
class Issue:
    """Issue or pull request, labels kept in API order."""

    number: int
    body: str
    labels: tuple[str, ...] = ()


@dataclass(frozen=True)
class IssueRef:
    """Reference to an issue found in free text."""

    org: str
    repo: str
    number: int


@dataclass
class Changes:
    """Commit records partitioned by category."""

    breaking: list[CommitRecord] = field(default_factory=list)
    enhancement: list[CommitRecord] = field(default_factory=list)
    fix: list[CommitRecord] = field(default_factory=list)
    uncategorized: list[CommitRecord] = field(default_factory=list)

    @classmethod
    def from_commits(cls, commits: list[CommitRecord]) -> "Changes":
        changes = cls()
        for commit in commits:
            if commit.category is None:
                changes.uncategorized.append(commit)
            elif commit.category is Category.BREAKING:
                changes.breaking.append(commit)
            elif commit.category is Category.ENHANCEMENT:
                changes.enhancement.append(commit)
            else:
                changes.fix.append(commit)
        return changes

    def __len__(self) -> int:
        return len(self.breaking) + len(self.enhancement) + len(self.fix) + len(self.uncategorized)


@dataclass(frozen=True)
class TagRange:
    """Pair of tags to diff: base is the previous tag, head the target."""

    base: Tag
    head: Tag

    @property
    def base_sha(self) -> str:
        return self.base.sha

    @property
    def head_sha(self) -> str:
        return self.head.sha


@dataclass(frozen=True)
class ReleaseTag:
    """Release tag parsed into version and optional prerelease parts."""

    tag: str
    version: str
    prerelease_label: Optional[str] = None
    prerelease_number: Optional[str] = None

    @property
    def is_prerelease(self) -> bool:
        return self.prerelease_label is not None

    @property
    def name(self) -> str:
        if not self.prerelease_label:
            return f"Release {self.version}"
        label = self.prerelease_label[:1].upper() + self.prerelease_label[1:]
        return f"Release {self.version} {label} {self.prerelease_number}"


@dataclass(frozen=True)
class ReleasePayload:
    """Body of a create-release request."""

    tag_name: str
    name: str
    body: str
    draft: bool = True
    prerelease: bool = False

    def to_dict(self) -> dict[str, object]:
        return {
            "tag_name": self.tag_name,
            "name": self.name,
            "body": self.body,
            "draft": self.draft,
            "prerelease": self.prerelease,
        }


@dataclass(frozen=True)
class Release:
    """Release created on the hosting API."""

    id: int
    tag_name: str
    name: str
    html_url: str
    draft: bool = False
    prerelease: bool = False


@dataclass(frozen=True)
class FieldError:
    """Per-field validation error reported by the API."""

    resource: str = ""
    field: str = ""
    code: str = ""
    message: str = ""

    def __str__(self) -> str:
        if self.message:
            return self.message
        where = ".".join(part for part in (self.resource, self.field) if part)
        return f"{where}: {self.code}" if where else self.code


@dataclass(frozen=True)
class ApiMessage:
    """Error-shaped response body: a message and optional field errors."""

    message: str
    errors: tuple[FieldError, ...] = ()
    documentation_url: Optional[str] = None


ApiResult = Union[Release, ApiMessage]


@dataclass
class CategorizationProgress:
    """Progress event emitted after each commit is categorized."""

    index: int
    total: int
    commit: CommitRecord
    error: Optional["IssueLookupError"] = None


@dataclass(frozen=True)
class TagStatus:
    """Tag along with whether a release exists for it."""

    tag: Tag
    released: bool
