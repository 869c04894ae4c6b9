"""Coloured status lines for warnings and successes."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text

_WARN_ICON = "⚠️ "
_WARN_FALLBACK = "!"
_SUCCESS_ICON = "✅"
_SUCCESS_FALLBACK = "✓"


def _no_emoji() -> bool:
    return "NO_EMOJI" in os.environ


def _print(text: str, style: str) -> None:
    console = Console(highlight=False, soft_wrap=True, emoji=False)
    console.print(Text(text, style=style))


def format_warn(message: str) -> str:
    """Return the warning line for ``message``, without colour."""
    icon = _WARN_FALLBACK if _no_emoji() else _WARN_ICON
    return f"{icon} {message}"


def format_success(message: str) -> str:
    """Return the success line for ``message``, without colour."""
    icon = _SUCCESS_FALLBACK if _no_emoji() else _SUCCESS_ICON
    return f"{icon} {message}"


def warn(message: str) -> None:
    """Print ``message`` as a red warning line."""
    _print(format_warn(message), "red")


def success(message: str) -> None:
    """Print ``message`` as a green success line."""
    _print(format_success(message), "green")