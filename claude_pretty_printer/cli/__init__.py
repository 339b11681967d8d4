"""Command-line interface for claude-pretty-printer."""
