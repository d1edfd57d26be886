"""Turn flag-syntax config text into argument tokens."""

from flagtext import tokenize

args = tokenize("--comment=\"done\" --port=8081  --path '/some/path'")
print(args)
