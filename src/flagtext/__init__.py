"""
flagtext — Command-line flag syntax for config text

Splits a free-form text block written in command-line flag syntax into
argument tokens, so a config file can be parsed with the same rules as
the command line. Values may be wrapped in double, single or back quotes
and may span lines.

Quick Start:
    >>> from flagtext import tokenize, trim_quote
    >>> tokenize("--bool -s txt --int 10")
    ['--bool', '-s', 'txt', '--int', '10']
    >>> tokenize("--save\\n--path '/some/path'")
    ['--save', '--path', '/some/path']
    >>> trim_quote('"done"')
    'done'

With argparse:
    >>> import argparse
    >>> from flagtext import parse_text
    >>> parser = argparse.ArgumentParser()
    >>> _ = parser.add_argument("--port", type=int)
    >>> parse_text(parser, "--port=8081").port
    8081
"""

from flagtext.config import (
    TokenizeConfig,
    get_tokenize_config,
    reset_tokenize_config,
    set_tokenize_config,
    tokenize_config_context,
)
from flagtext.errors import ConfigError, FlagTextError, UnterminatedQuoteError
from flagtext.loader import parse_file, parse_text, read_text, tokenize_file
from flagtext.quotes import DEFAULT_QUOTE_KINDS, QuoteKind
from flagtext.tokenizer import Tokenizer, join_lines, split_fragments, tokenize, trim_quote

__version__ = "0.1.0"

__all__ = [
    # Core
    "tokenize",
    "trim_quote",
    "Tokenizer",
    "join_lines",
    "split_fragments",
    # Quotes
    "QuoteKind",
    "DEFAULT_QUOTE_KINDS",
    # Loading
    "read_text",
    "tokenize_file",
    "parse_text",
    "parse_file",
    # Configuration (ContextVar-based)
    "TokenizeConfig",
    "get_tokenize_config",
    "set_tokenize_config",
    "reset_tokenize_config",
    "tokenize_config_context",
    # Errors
    "FlagTextError",
    "ConfigError",
    "UnterminatedQuoteError",
    "__version__",
]
