"""CLI command implementations."""

from sheetsense.cli.commands import chart, correlate, preview, profile, text

__all__ = [
    "chart",
    "correlate",
    "preview",
    "profile",
    "text",
]
