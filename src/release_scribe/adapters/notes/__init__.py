"""Release notes renderers."""

from release_scribe.adapters.notes.markdown_generator import MarkdownNotesGenerator

__all__ = ["MarkdownNotesGenerator"]
