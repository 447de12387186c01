"""Coloured status lines for the terminal."""

import os

from rich.console import Console
from rich.text import Text


def use_emoji() -> bool:
    """Return whether emoji may be printed; setting NO_EMOJI turns them off."""
    return "NO_EMOJI" not in os.environ


def emoji(fancy: str, plain: str) -> str:
    """Pick the emoji form of a symbol, or its plain fallback."""
    return fancy if use_emoji() else plain


def _print_styled(symbol: str, message: str, style: str) -> str:
    line = Text.assemble((symbol, style), " ", (message, style))
    Console(highlight=False, soft_wrap=True).print(line)
    return line.plain


def warn(message: str) -> str:
    """Print a red warning line and return its plain text."""
    return _print_styled(emoji("⚠️ ", "!"), message, "red")


def success(message: str) -> str:
    """Print a green success line and return its plain text."""
    return _print_styled(emoji("✅", "✓"), message, "green")