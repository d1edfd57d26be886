"""Tokenizer turning a flag-syntax text block into argument tokens.

Two passes over the input:
1. Line joining: every line (CR, LF or CRLF terminated) is joined with a
   single space, so a flag and its value may sit on different lines.
2. Quote-aware splitting: the joined line is split on single spaces and
   fragments belonging to one quoted value are glued back together.

Each finished token is trimmed and loses one matching pair of quote
markers. Empty tokens are dropped.

Example:
    >>> tokenize("--port=8081  --path '/some/path'")
    ['--port=8081', '--path', '/some/path']

Thread Safety:
    Tokenizer instances hold per-call state and are not shared. The module
    functions create a fresh instance per call and are safe from any thread.

"""

from __future__ import annotations

import io

from flagtext.config import TokenizeConfig, get_tokenize_config
from flagtext.errors import UnterminatedQuoteError
from flagtext.quotes import QuoteKind, entering, trim_quote_with
from flagtext.utils.logger import get_logger

logger = get_logger(__name__)

SPACE = " "


def join_lines(text: str) -> str:
    """Join the lines of text with a single space.

    CR, LF and CRLF all end a line. A trailing line break does not
    produce an extra empty line.
    """
    # newline=None translates \r and \r\n to \n on read
    with io.StringIO(text, newline=None) as reader:
        return SPACE.join(line[:-1] if line.endswith("\n") else line for line in reader)


def split_fragments(line: str) -> list[str]:
    """Split on the literal space character, keeping empty fragments."""
    return line.split(SPACE)


class Tokenizer:
    """Quote-aware fragment scanner for a single input text.

    The quote state is a scalar QuoteKind. While it is NONE each fragment
    is either emitted or opens a quote; while a kind is open fragments are
    buffered until one closes that kind.

    Usage:
        >>> Tokenizer('--name="a b" -v').tokenize()
        ['--name="a b"', '-v']

    """

    __slots__ = ("_text", "_config", "_tokens", "_buffer", "_state", "_index", "_opened_at")

    def __init__(self, text: str = "", config: TokenizeConfig | None = None) -> None:
        self._text = text
        self._config = config if config is not None else get_tokenize_config()
        self._reset()

    def _reset(self) -> None:
        self._tokens: list[str] = []
        self._buffer: list[str] = []
        self._state = QuoteKind.NONE
        self._index = 0
        self._opened_at = 0

    @property
    def state(self) -> QuoteKind:
        """Quote kind currently open, NONE outside quotes."""
        return self._state

    @property
    def config(self) -> TokenizeConfig:
        return self._config

    def tokenize(self) -> list[str]:
        """Tokenize the whole input text from a clean state."""
        self._reset()
        for fragment in split_fragments(join_lines(self._text)):
            self.feed(fragment)
        return self.finish()

    def feed(self, fragment: str) -> QuoteKind:
        """Consume one space-delimited fragment.

        Returns:
            The quote state after the fragment.
        """
        self._index += 1
        config = self._config

        if self._state is QuoteKind.NONE:
            kind = entering(fragment, config.quote_kinds, config.flag_prefix)
            if kind is QuoteKind.NONE:
                self._emit(fragment)
            else:
                self._state = kind
                self._buffer = [fragment]
                self._opened_at = self._index
            return self._state

        # A fragment that starts and ends with the open marker does not
        # close it and is buffered like any other.
        self._buffer.append(fragment)
        if self._state.closes(fragment):
            self._emit(SPACE.join(self._buffer))
            self._buffer = []
            self._state = QuoteKind.NONE
        return self._state

    def finish(self) -> list[str]:
        """End the scan and return the tokens.

        An unterminated quoted value is dropped, or raised as
        UnterminatedQuoteError when the config is strict.
        """
        if self._state is not QuoteKind.NONE:
            pending = SPACE.join(self._buffer)
            if self._config.strict_quotes:
                raise UnterminatedQuoteError(self._state.marker, pending, self._opened_at)
            logger.debug(
                "Dropping unterminated %s quote opened at fragment %d: %r",
                self._state.marker,
                self._opened_at,
                pending,
            )
            self._buffer = []
            self._state = QuoteKind.NONE
        return self._tokens

    def _emit(self, raw: str) -> None:
        token = trim_quote_with(raw, self._config.quote_kinds)
        if token:
            self._tokens.append(token)


def tokenize(text: str, *, config: TokenizeConfig | None = None) -> list[str]:
    """Split a flag-syntax text block into argument tokens.

    Args:
        text: Flag text, possibly spread over several lines
        config: Tokenizer config (defaults to the active context config)

    Returns:
        Non-empty tokens in order of appearance.

    Raises:
        UnterminatedQuoteError: Only with ``strict_quotes`` enabled.

    Example:
        >>> tokenize("--bool -s txt\\n--int 10")
        ['--bool', '-s', 'txt', '--int', '10']

    """
    return Tokenizer(text, config).tokenize()


def trim_quote(text: str, *, config: TokenizeConfig | None = None) -> str:
    """Trim whitespace and strip one matching pair of quote markers.

    Useful for a flag value that still carries its quotes after flag
    parsing, as with ``--comment="done"``.

    Example:
        >>> trim_quote('"done"')
        'done'

    """
    cfg = config if config is not None else get_tokenize_config()
    return trim_quote_with(text, cfg.quote_kinds)


__all__ = [
    "SPACE",
    "Tokenizer",
    "join_lines",
    "split_fragments",
    "tokenize",
    "trim_quote",
]
