"""Error-path and malformed input tests.

The default tokenizer never raises. Strict mode turns an unterminated
quote into UnterminatedQuoteError.
"""

import logging

import pytest

from flagtext import (
    ConfigError,
    FlagTextError,
    Tokenizer,
    TokenizeConfig,
    UnterminatedQuoteError,
    tokenize,
)

STRICT = TokenizeConfig(strict_quotes=True)


# =========================================================================
# Exception construction and formatting
# =========================================================================


class TestUnterminatedQuoteErrorFormatting:
    def test_fields(self) -> None:
        err = UnterminatedQuoteError('"', '"x y', fragment=2)
        assert err.quote == '"'
        assert err.buffer == '"x y'
        assert err.fragment == 2

    def test_message(self) -> None:
        err = UnterminatedQuoteError("'", "'abc", fragment=3)
        assert str(err) == "Unterminated ' quote at fragment 3: \"'abc\""

    def test_message_without_fragment(self) -> None:
        err = UnterminatedQuoteError("`", "`abc")
        assert "at fragment" not in str(err)

    def test_hierarchy(self) -> None:
        assert issubclass(UnterminatedQuoteError, FlagTextError)
        assert issubclass(ConfigError, FlagTextError)
        assert issubclass(FlagTextError, Exception)


# =========================================================================
# Strict mode
# =========================================================================


class TestStrictQuotes:
    def test_raises_on_unterminated_quote(self) -> None:
        with pytest.raises(UnterminatedQuoteError) as exc_info:
            tokenize('--a "x y', config=STRICT)
        assert exc_info.value.quote == '"'
        assert exc_info.value.buffer == '"x y'
        assert exc_info.value.fragment == 2

    def test_fragment_index_counts_empty_fragments(self) -> None:
        with pytest.raises(UnterminatedQuoteError) as exc_info:
            tokenize("--a  --b='x", config=STRICT)
        assert exc_info.value.fragment == 3
        assert exc_info.value.quote == "'"

    def test_balanced_input_does_not_raise(self) -> None:
        assert tokenize("--a 'x y' --b", config=STRICT) == ["--a", "x y", "--b"]

    def test_finish_raises(self) -> None:
        tokenizer = Tokenizer(config=STRICT)
        tokenizer.feed("`a")
        with pytest.raises(UnterminatedQuoteError):
            tokenizer.finish()


# =========================================================================
# Silent degradation (default mode)
# =========================================================================


class TestSilentDegradation:
    @pytest.mark.parametrize(
        "text",
        [
            '"',
            "'",
            "`",
            '"""',
            "--a=\"'`",
            '"a \'b `c',
            "\r\r\n\n",
            "\x00 \t \x0b",
            "- -- --- =",
        ],
    )
    def test_never_raises(self, text: str) -> None:
        tokens = tokenize(text)
        assert all(tokens)

    def test_drop_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="flagtext")
        assert tokenize('--a "x y') == ["--a"]
        records = [r for r in caplog.records if r.name == "flagtext.tokenizer"]
        assert len(records) == 1
        assert "unterminated" in records[0].getMessage()

    def test_balanced_input_logs_nothing(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="flagtext")
        tokenize("--a 'x y'")
        assert not [r for r in caplog.records if r.name == "flagtext.tokenizer"]
