"""GitHub REST API client."""

from typing import Any, Optional

import httpx

from release_scribe.config import ClientConfig
from release_scribe.core import (
    ApiMessage,
    ApiResult,
    Comparison,
    ComparisonCommit,
    FieldError,
    GitHubAPI,
    GitHubAPIError,
    Issue,
    NotFoundError,
    Release,
    ReleasePayload,
    Tag,
)


def decode_message(data: Any) -> Optional[ApiMessage]:
    """Decode an error-shaped body.

    GitHub does not always pair validation failures with an error status, so a
    body is treated as an error whenever it carries a string ``message``.
    """
    if not isinstance(data, dict) or not isinstance(data.get("message"), str):
        return None

    errors: list[FieldError] = []
    for error in data.get("errors") or []:
        if isinstance(error, dict):
            errors.append(
                FieldError(
                    resource=str(error.get("resource", "")),
                    field=str(error.get("field", "")),
                    code=str(error.get("code", "")),
                    message=str(error.get("message", "")),
                )
            )
        else:
            errors.append(FieldError(message=str(error)))

    return ApiMessage(
        message=data["message"],
        errors=tuple(errors),
        documentation_url=data.get("documentation_url"),
    )


class GitHubClient(GitHubAPI):
    """Async GitHub API client."""

    def __init__(self, config: ClientConfig) -> None:
        self.config = config
        self.api_base = config.api_base

    async def list_tags(self, org: str, repo: str, page: int = 1) -> list[Tag]:
        data = await self._get(f"/repos/{org}/{repo}/tags", params={"page": page})
        return [Tag(name=tag["name"], sha=tag["commit"]["sha"]) for tag in data]

    async def list_releases(self, org: str, repo: str, page: int = 1) -> list[str]:
        data = await self._get(f"/repos/{org}/{repo}/releases", params={"page": page})
        return [release["tag_name"] for release in data]

    async def compare(self, org: str, repo: str, base: str, head: str) -> Comparison:
        data = await self._get(f"/repos/{org}/{repo}/compare/{base}...{head}")
        commits = [
            ComparisonCommit(sha=commit["sha"], message=commit["commit"]["message"])
            for commit in data.get("commits", [])
        ]
        return Comparison(base=base, head=head, commits=commits)

    async def get_issue(self, org: str, repo: str, number: int) -> Issue:
        data = await self._get(f"/repos/{org}/{repo}/issues/{number}")
        labels = tuple(
            label["name"] if isinstance(label, dict) else str(label)
            for label in data.get("labels", [])
        )
        return Issue(number=data["number"], body=data.get("body") or "", labels=labels)

    async def create_release(self, org: str, repo: str, payload: ReleasePayload) -> ApiResult:
        status_code, data = await self._request(
            "POST", f"/repos/{org}/{repo}/releases", json=payload.to_dict()
        )

        message = decode_message(data)
        if message is not None:
            return message
        if status_code >= 400 or not isinstance(data, dict) or "id" not in data:
            return ApiMessage(message=f"Unexpected response from GitHub (HTTP {status_code})")

        return Release(
            id=data["id"],
            tag_name=data["tag_name"],
            name=data.get("name") or payload.name,
            html_url=data.get("html_url", ""),
            draft=data.get("draft", payload.draft),
            prerelease=data.get("prerelease", payload.prerelease),
        )

    async def _get(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        """GET a resource, raising on error-shaped responses."""
        status_code, data = await self._request("GET", path, params=params)

        message = decode_message(data)
        if message is not None:
            error_cls = NotFoundError if status_code == 404 or message.message == "Not Found" else GitHubAPIError
            raise error_cls(
                f"GitHub API error for {path}: {message.message}",
                status_code=status_code,
                api_message=message,
            )
        if status_code >= 400 or data is None:
            error_cls = NotFoundError if status_code == 404 else GitHubAPIError
            raise error_cls(f"GitHub API error for {path}: HTTP {status_code}", status_code=status_code)

        return data

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
    ) -> tuple[int, Any]:
        """Send a request and return the status code with the decoded body."""
        async with httpx.AsyncClient(timeout=self.config.timeout) as client:
            try:
                response = await client.request(
                    method,
                    f"{self.api_base}{path}",
                    headers=self._get_headers(),
                    params=params,
                    json=json,
                )
            except httpx.HTTPError as e:
                raise GitHubAPIError(f"{method} {path} failed: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = None

        return response.status_code, data

    def _get_headers(self) -> dict[str, str]:
        """Get headers for GitHub API requests."""
        return {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "Authorization": f"Bearer {self.config.token}",
            "User-Agent": self.config.user_agent,
        }
