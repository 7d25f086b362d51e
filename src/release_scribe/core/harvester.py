"""Turn a comparison into commit records for the release notes."""

import re
from typing import Optional

from release_scribe.core.entities import CommitRecord, Comparison

METADATA_PATTERN = re.compile(r"Update\spackage\smetadata", re.IGNORECASE)
PR_PATTERN = re.compile(r"\(#(\d+)\)")


def is_metadata_update(message: str) -> bool:
    return METADATA_PATTERN.search(message) is not None


def extract_pr_number(message: str) -> Optional[int]:
    match = PR_PATTERN.search(message)
    return int(match.group(1)) if match else None


def harvest_messages(messages: list[str]) -> list[CommitRecord]:
    """Build commit records from raw messages.

    Metadata update commits are dropped wherever they appear, and the last
    remaining message is dropped as well since it is the release commit.
    """
    kept = [message for message in messages if not is_metadata_update(message)]
    if kept:
        kept.pop()

    return [CommitRecord(message=message, pr=extract_pr_number(message)) for message in kept]


def harvest_commits(comparison: Comparison) -> list[CommitRecord]:
    """Build commit records from a comparison, in comparison order."""
    return harvest_messages([commit.message for commit in comparison.commits])
