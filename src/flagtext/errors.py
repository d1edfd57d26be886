"""Exception classes for flagtext.

The tokenizer itself degrades silently on malformed input. These exceptions
cover invalid configuration and the opt-in strict quote mode.
"""

from __future__ import annotations


class FlagTextError(Exception):
    """Base exception for all flagtext errors."""

    pass


class ConfigError(FlagTextError):
    """Invalid tokenizer configuration.

    Raised when a TokenizeConfig is built with values the tokenizer
    cannot work with (no quote kinds, duplicates, empty flag prefix).
    """

    pass


class UnterminatedQuoteError(FlagTextError):
    """Quoted value still open at end of input.

    Only raised when the config has ``strict_quotes`` enabled. In the
    default mode the open buffer is dropped instead.
    """

    def __init__(self, quote: str, buffer: str, fragment: int | None = None) -> None:
        """Initialize with the open quote and what was accumulated.

        Args:
            quote: The quote marker that was never closed
            buffer: Text accumulated since the quote opened
            fragment: 1-based index of the fragment that opened the quote
        """
        self.quote = quote
        self.buffer = buffer
        self.fragment = fragment

        location = f" at fragment {fragment}" if fragment is not None else ""
        super().__init__(f"Unterminated {quote} quote{location}: {buffer!r}")
