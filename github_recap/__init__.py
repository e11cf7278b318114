"""Year-in-review statistics for GitHub contribution data."""
