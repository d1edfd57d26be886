"""Load a config file written in command-line syntax into argparse."""

import argparse
import tempfile
from pathlib import Path

from flagtext import parse_file, trim_quote

parser = argparse.ArgumentParser()
parser.add_argument("--save", action="store_true")
parser.add_argument("--tag", action="store_true")
parser.add_argument("--path", default="./")
parser.add_argument("--port", type=int, default=8080)
parser.add_argument("--comment", default="")

with tempfile.TemporaryDirectory() as tmp:
    conf = Path(tmp) / "app.conf"
    conf.write_text("--tag --comment=\"done\"\n--port=8081\n--path '/some/path'\n")
    args = parse_file(parser, conf)

# argparse splits --comment="done" on '=' and keeps the quotes
args.comment = trim_quote(args.comment)
print(args)
