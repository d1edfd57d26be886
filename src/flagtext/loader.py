"""Load flag-syntax config text into an argparse parser.

The config is written the way the program is invoked on the command line,
possibly over several lines:

    --save
    --port=8081
    --path '/some/path'

Flag semantics stay with argparse; this module only feeds it tokens.

Example:
    >>> parser = argparse.ArgumentParser()
    >>> _ = parser.add_argument("--port", type=int, default=8080)
    >>> parse_text(parser, "--port=8081").port
    8081

"""

from __future__ import annotations

import argparse
from pathlib import Path

from flagtext.config import TokenizeConfig
from flagtext.tokenizer import tokenize
from flagtext.utils.logger import get_logger

logger = get_logger(__name__)


def read_text(path: str | Path, encoding: str = "utf-8") -> str:
    """Read a config file. OSError propagates unchanged."""
    return Path(path).read_text(encoding=encoding)


def tokenize_file(
    path: str | Path,
    *,
    encoding: str = "utf-8",
    config: TokenizeConfig | None = None,
) -> list[str]:
    """Read a config file and tokenize its content."""
    tokens = tokenize(read_text(path, encoding), config=config)
    logger.debug("Read %d tokens from %s", len(tokens), path)
    return tokens


def parse_text(
    parser: argparse.ArgumentParser,
    text: str,
    namespace: argparse.Namespace | None = None,
    *,
    config: TokenizeConfig | None = None,
) -> argparse.Namespace:
    """Tokenize text and parse the tokens with parser.

    Args:
        parser: Parser that defines the flags
        text: Flag-syntax config text
        namespace: Optional namespace to fill (as in parse_args)
        config: Tokenizer config (defaults to the active context config)

    Returns:
        The namespace returned by ``parser.parse_args``.

    """
    return parser.parse_args(tokenize(text, config=config), namespace)


def parse_file(
    parser: argparse.ArgumentParser,
    path: str | Path,
    namespace: argparse.Namespace | None = None,
    *,
    encoding: str = "utf-8",
    config: TokenizeConfig | None = None,
) -> argparse.Namespace:
    """Read a config file and parse it with parser."""
    return parser.parse_args(tokenize_file(path, encoding=encoding, config=config), namespace)


__all__ = [
    "parse_file",
    "parse_text",
    "read_text",
    "tokenize_file",
]
