"""CLI entry point for release scribe."""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from release_scribe.adapters.github import GitHubClient
from release_scribe.adapters.notes import MarkdownNotesGenerator
from release_scribe.config import ClientConfig, Settings, get_settings
from release_scribe.core import ReleaseScribeError
from release_scribe.use_cases import ReleaseNotesService, ReleasePublisher

app = typer.Typer(
    help="Generate GitHub release notes from the commits between two tags.",
    no_args_is_help=True,
    add_completion=False,
)


def _client_config(settings: Settings) -> ClientConfig:
    try:
        return settings.client_config()
    except ValueError as e:
        print(f"❌ Error! {e}")
        raise typer.Exit(1)


@app.command()
def release(
    repo: str = typer.Argument(..., help="GitHub repository to release"),
    tag: str = typer.Argument(..., help="Git tag to create the release for"),
    draft: Optional[bool] = typer.Option(
        None, "--draft/--no-draft", help="Create the release as a draft (default from config)"
    ),
    from_tag: Optional[str] = typer.Option(
        None, "--from", help="Generate notes from this tag instead of the previous one"
    ),
    org: Optional[str] = typer.Option(None, "--org", "--owner", help="GitHub organization/owner"),
    prerelease: Optional[bool] = typer.Option(
        None,
        "--prerelease/--no-prerelease",
        help="Mark as a pre-release (default: determined by the tag name)",
    ),
    config: Path = typer.Option(Path("config.yaml"), "--config", help="Path to config.yaml"),
) -> None:
    """Generate release notes for TAG and create the release on GitHub."""
    settings = get_settings(config)
    client_config = _client_config(settings)

    try:
        asyncio.run(
            async_release(
                client_config,
                org=org or settings.default_org,
                repo=repo,
                tag=tag,
                from_tag=from_tag,
                draft=settings.release.draft if draft is None else draft,
                prerelease=prerelease,
            )
        )
    except ReleaseScribeError as e:
        print(f"❌ {e}\n")
        raise typer.Exit(1)


@app.command()
def tags(
    repo: str = typer.Argument(..., help="GitHub repository to list tags for"),
    org: Optional[str] = typer.Option(None, "--org", "--owner", help="GitHub organization/owner"),
    config: Path = typer.Option(Path("config.yaml"), "--config", help="Path to config.yaml"),
) -> None:
    """List the tags of a repository and mark the released ones."""
    settings = get_settings(config)
    client_config = _client_config(settings)

    try:
        asyncio.run(async_tags(client_config, org=org or settings.default_org, repo=repo))
    except ReleaseScribeError as e:
        print(f"❌ {e}\n")
        raise typer.Exit(1)


async def async_release(
    client_config: ClientConfig,
    org: str,
    repo: str,
    tag: str,
    from_tag: Optional[str],
    draft: bool,
    prerelease: Optional[bool],
) -> None:
    """Async implementation of the release command."""
    print(f"\n- Creating release notes for: {org}/{repo} {tag}\n")

    api = GitHubClient(client_config)
    service = ReleaseNotesService(api, MarkdownNotesGenerator())
    publisher = ReleasePublisher(api)

    release_tag, tag_range, commits = await service.prepare(org, repo, tag, from_tag)
    print(f"  • {release_tag.name}")
    print(f"  • Range: {tag_range.base.name} ({tag_range.base_sha[:7]}) → {tag_range.head.name} ({tag_range.head_sha[:7]})")
    print(f"  • Commits: {len(commits)}")

    failures = 0
    async for event in service.categorize(org, repo, commits):
        category = event.commit.category.value if event.commit.category else "uncategorized"
        print(f"  [{event.index}/{event.total}] {event.commit.title[:70]} → {category}")
        if event.error:
            failures += 1
            print(f"  └─ ⚠️  {event.error}")

    if failures:
        print(f"\n⚠️  {failures} commit(s) left uncategorized after failed lookups")

    payload = publisher.build_payload(tag, service.build_notes(commits), draft, prerelease)
    created = await publisher.publish(org, repo, payload)

    print(f"\n✓ Created release notes for: {created.name}")
    print(f"  at: {created.html_url}\n")


async def async_tags(client_config: ClientConfig, org: str, repo: str) -> None:
    """Async implementation of the tags command."""
    print(f"\n- Fetching tags for: {org}/{repo}\n")

    service = ReleaseNotesService(GitHubClient(client_config), MarkdownNotesGenerator())
    for status in await service.tag_statuses(org, repo):
        print(f"{status.tag.name} [released]" if status.released else status.tag.name)
    print()


if __name__ == "__main__":
    app()
