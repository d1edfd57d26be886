"""ContextVar-based tokenizer configuration for flagtext.

Provides thread-local configuration using Python's ContextVars (PEP 567).
tokenize() and trim_quote() read the active config unless one is passed in.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from flagtext.config import TokenizeConfig, tokenize_config_context

    with tokenize_config_context(TokenizeConfig(strict_quotes=True)):
        args = tokenize(text)  # raises on an unterminated quote

"""

from collections.abc import Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Iterator

from flagtext.errors import ConfigError
from flagtext.quotes import DEFAULT_QUOTE_KINDS, FLAG_PREFIX, QuoteKind


@dataclass(frozen=True, slots=True)
class TokenizeConfig:
    """Immutable tokenizer configuration.

    The defaults reproduce the standard behavior: double, single and back
    quotes in that priority order, ``-`` as flag prefix, and silent dropping
    of an unterminated quoted value.

    Attributes:
        quote_kinds: Enabled quote kinds, in priority order
        flag_prefix: Prefix that lets a quote open mid-fragment (--name="value)
        strict_quotes: Raise UnterminatedQuoteError instead of dropping

    """

    quote_kinds: tuple[QuoteKind, ...] = DEFAULT_QUOTE_KINDS
    flag_prefix: str = FLAG_PREFIX
    strict_quotes: bool = False

    def __post_init__(self) -> None:
        kinds = tuple(QuoteKind.parse(k) for k in self.quote_kinds)
        if not kinds:
            raise ConfigError("quote_kinds must not be empty")
        if QuoteKind.NONE in kinds:
            raise ConfigError("quote_kinds must not contain QuoteKind.NONE")
        if len(set(kinds)) != len(kinds):
            raise ConfigError(f"quote_kinds contains duplicates: {kinds!r}")
        if not self.flag_prefix:
            raise ConfigError("flag_prefix must not be empty")
        # Frozen: normalized value goes through object.__setattr__
        object.__setattr__(self, "quote_kinds", kinds)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "TokenizeConfig":
        """Create TokenizeConfig from a dictionary.

        Unknown keys are silently ignored. Quote kinds may be given as
        QuoteKind members, names or marker characters.

        Example:
            >>> config = TokenizeConfig.from_dict({
            ...     "quote_kinds": ["single", '"'],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.quote_kinds
            (<QuoteKind.SINGLE: "'">, <QuoteKind.DOUBLE: '"'>)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "quote_kinds" in filtered:
            kinds = filtered["quote_kinds"]
            if isinstance(kinds, (str, QuoteKind)):
                kinds = [kinds]
            filtered["quote_kinds"] = tuple(kinds)
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TokenizeConfig = TokenizeConfig()

_tokenize_config: ContextVar[TokenizeConfig] = ContextVar(
    "tokenize_config",
    default=_DEFAULT_CONFIG,
)


def get_tokenize_config() -> TokenizeConfig:
    """Get current tokenizer configuration (thread-local)."""
    return _tokenize_config.get()


def set_tokenize_config(config: TokenizeConfig) -> None:
    """Set tokenizer configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _tokenize_config.set(config)


def reset_tokenize_config() -> None:
    """Reset to the default configuration."""
    _tokenize_config.set(_DEFAULT_CONFIG)


@contextmanager
def tokenize_config_context(config: TokenizeConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with tokenize_config_context(TokenizeConfig(quote_kinds=("double",))):
        ...     tokenize("--a 'b c'")
        ['--a', "'b", "c'"]

    """
    previous = _tokenize_config.get()
    _tokenize_config.set(config)
    try:
        yield
    finally:
        _tokenize_config.set(previous)


__all__ = [
    "TokenizeConfig",
    "get_tokenize_config",
    "set_tokenize_config",
    "reset_tokenize_config",
    "tokenize_config_context",
]
