"""Reusable tools for fetching, markdown conversion, filesystem access, time and IP lookup."""

__version__ = "0.1.0"

__all__ = ["clock", "context7", "fetch", "fetch_markdown", "filesystem", "markdown", "myip"]