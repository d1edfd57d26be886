"""Fail loudly on an unterminated quote instead of dropping it."""

from flagtext import TokenizeConfig, UnterminatedQuoteError, tokenize, tokenize_config_context

text = '--port=8081 --comment "never closed'

print(tokenize(text))  # ['--port=8081']

with tokenize_config_context(TokenizeConfig(strict_quotes=True)):
    try:
        tokenize(text)
    except UnterminatedQuoteError as e:
        print(f"error: {e}")
