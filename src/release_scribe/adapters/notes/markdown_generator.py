"""Markdown release notes generator."""

import re

from release_scribe.core import Changes, CommitRecord, NotesGenerator

BREAKING_HEADER = "## ⚠️ Breaking Changes\n\n"
FIXES_HEADER = "## ✅ Fixes\n\n"
ENHANCEMENTS_HEADER = "## 👍 Enhancements\n\n"
UNCATEGORIZED_HEADER = "<!-- uncategorized -->\n---\n\n"

LINE_SPLIT = re.compile(r"\r?\n")


class MarkdownNotesGenerator(NotesGenerator):
    """Render categorized commits as a GitHub release body."""

    def generate(self, commits: list[CommitRecord]) -> str:
        """Generate markdown release notes.

        Sections come in a fixed order and empty ones are left out entirely,
        so no commits at all gives an empty string.
        """
        changes = Changes.from_commits(commits)

        sections = [
            (BREAKING_HEADER, changes.breaking),
            (FIXES_HEADER, changes.fix),
            (ENHANCEMENTS_HEADER, changes.enhancement),
            (UNCATEGORIZED_HEADER, changes.uncategorized),
        ]

        body = ""
        for header, entries in sections:
            if entries:
                body += header + "\n".join(self._format_entry(entry) for entry in entries)
        return body

    def _format_entry(self, commit: CommitRecord) -> str:
        """Format a single commit: first line as a bullet, the rest folded."""
        first_line, *rest = LINE_SPLIT.split(commit.message)
        entry = f"* {first_line}\n"
        if rest:
            details = "\n  ".join(rest)
            entry += f"  <details><summary>Details</summary>\n  {details}\n  </details>\n"
        return entry + "\n"
