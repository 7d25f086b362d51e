"""Generate categorized GitHub release notes from the commits between two tags."""

__version__ = "0.1.0"
