"""Errors raised by the release notes pipeline."""

from typing import Optional

from release_scribe.core.entities import ApiMessage, CommitRecord, FieldError, IssueRef


class ReleaseScribeError(Exception):
    """Base error for everything the CLI reports and exits on."""


class TagParseError(ReleaseScribeError):
    """Tag does not look like MAJOR.MINOR.PATCH[-LABEL.N]."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"Could not parse release tag: {tag}")
        self.tag = tag


class TagNotFoundError(ReleaseScribeError):
    """Tag is not in the repository's tag list."""

    def __init__(self, tag: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Tag not found: {tag}")
        self.tag = tag


class PreviousTagNotFoundError(TagNotFoundError):
    """Predecessor tag could not be resolved."""

    def __init__(self, tag: Optional[str] = None) -> None:
        message = f"Unable to resolve previous tag: {tag}" if tag else "Unable to resolve previous tag."
        super().__init__(tag or "", message)


class GitHubAPIError(ReleaseScribeError):
    """Request to the hosting API failed."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        api_message: Optional[ApiMessage] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.api_message = api_message


class NotFoundError(GitHubAPIError):
    """Requested resource does not exist."""


class IssueLookupError(ReleaseScribeError):
    """Issue or pull request for a commit could not be fetched."""

    def __init__(self, commit: CommitRecord, ref: Optional[IssueRef], cause: Exception) -> None:
        target = f"{ref.org}/{ref.repo}#{ref.number}" if ref else "issue"
        super().__init__(f"Could not look up {target}: {cause}")
        self.commit = commit
        self.ref = ref
        self.cause = cause


class ApiMutationError(ReleaseScribeError):
    """Release creation was rejected by the API."""

    def __init__(self, message: str, errors: tuple[FieldError, ...] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.errors = errors

    def __str__(self) -> str:
        if not self.errors:
            return self.message
        details = "; ".join(str(error) for error in self.errors)
        return f"{self.message} ({details})"
