"""Shared console output utilities."""

import json
from typing import Any

from rich.console import Console

# Shared console instance for all CLI output
console = Console()


def print_json(data: Any) -> None:
    """Print data as formatted JSON to stdout."""
    print(json.dumps(data, indent=2, default=str))


def initials(title: str, max_letters: int = 2) -> str:
    """Avatar-style initials for a title, e.g. "Hero Banner" -> "HB"."""
    words = [w for w in title.split() if w[:1].isalnum()]
    if not words:
        return "?"
    return "".join(w[0] for w in words[:max_letters]).upper()
