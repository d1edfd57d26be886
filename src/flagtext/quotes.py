"""Quote kinds and quote-marker predicates.

The quote state of the tokenizer is scalar: at most one kind is open at a
time. QuoteKind.NONE is the closed state; every other member carries the
marker character that both opens and closes it. There is no cross-matching,
a value opened with ``"`` only closes on ``"``.

Thread Safety:
QuoteKind is an enum (inherently immutable). All functions are pure.

"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from flagtext.errors import ConfigError

# Default flag prefix that lets a quote open mid-fragment (--name="value)
FLAG_PREFIX = "-"


class QuoteKind(Enum):
    """Quote state of the tokenizer.

    Each member's value is its marker character. NONE means no quote is open.
    """

    NONE = ""
    DOUBLE = '"'
    SINGLE = "'"
    BACK = "`"

    @property
    def marker(self) -> str:
        """The quote character, empty for NONE."""
        return self.value

    @classmethod
    def parse(cls, value: QuoteKind | str) -> QuoteKind:
        """Resolve a member, a member name or a marker character.

        Raises:
            ConfigError: If the value names no quote kind.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            if value.upper() in cls.__members__:
                return cls[value.upper()]
            for kind in cls:
                if value and kind.value == value:
                    return kind
        raise ConfigError(f"Unknown quote kind: {value!r}")

    def opens(self, fragment: str, flag_prefix: str = FLAG_PREFIX) -> bool:
        """Whether fragment enters a quoted value of this kind.

        True when the fragment starts with the marker but does not end with
        it, or when it is a flag (``--name="value``) that contains the
        marker but does not end with it. A fragment that starts and ends
        with the marker is self-contained and never opens.
        """
        q = self.value
        if not q or fragment.endswith(q):
            return False
        return fragment.startswith(q) or (fragment.startswith(flag_prefix) and q in fragment)

    def closes(self, fragment: str) -> bool:
        """Whether fragment exits an open quoted value of this kind.

        True when the fragment ends with the marker but does not start with
        it. Evaluating NONE is always False.
        """
        q = self.value
        if not q:
            return False
        return not fragment.startswith(q) and fragment.endswith(q)


DEFAULT_QUOTE_KINDS: tuple[QuoteKind, ...] = (
    QuoteKind.DOUBLE,
    QuoteKind.SINGLE,
    QuoteKind.BACK,
)


def entering(
    fragment: str,
    kinds: Iterable[QuoteKind] = DEFAULT_QUOTE_KINDS,
    flag_prefix: str = FLAG_PREFIX,
) -> QuoteKind:
    """Return the first kind (in priority order) the fragment opens, or NONE."""
    for kind in kinds:
        if kind.opens(fragment, flag_prefix):
            return kind
    return QuoteKind.NONE


def trim_quote_with(text: str, kinds: Iterable[QuoteKind] = DEFAULT_QUOTE_KINDS) -> str:
    """Trim whitespace, then strip one matching pair of quote markers.

    Kinds are tried in order and at most one pair is removed. A lone
    marker character counts as a pair and yields an empty string.

    Example:
        >>> trim_quote_with("  'some value' ")
        'some value'
        >>> trim_quote_with('"\\'nested\\'"')
        "'nested'"
    """
    value = text.strip()
    for kind in kinds:
        q = kind.value
        if q and value.startswith(q) and value.endswith(q):
            return value[len(q) : len(value) - len(q)] if len(value) > len(q) else ""
    return value


__all__ = [
    "DEFAULT_QUOTE_KINDS",
    "FLAG_PREFIX",
    "QuoteKind",
    "entering",
    "trim_quote_with",
]
