#!/usr/bin/env python3
"""
Porter stemmer CLI

Usage:
    porterstem stem [FILE ...]              stem words from files (or stdin)
    porterstem tokenize "some text"         print stemmed search tokens
    porterstem check VOCABULARY             verify "word stem" golden pairs
    porterstem serve [--host HOST] [--port PORT]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, TextIO, Tuple

from .config import get_log_level, get_port, load_environment
from .logging_config import setup_logging
from .stemmer import StemmingError, stem
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


def stem_line(line: str) -> str:
    """Stem every whitespace-separated word of a line; unstemmable words pass through."""
    stems = []
    for word in line.split():
        try:
            stems.append(stem(word))
        except StemmingError as e:
            logger.warning(f"Passing word through unchanged: {e}")
            stems.append(word)
    return " ".join(stems)


def stem_stream(lines: Iterable[str], out: TextIO) -> int:
    """Write one stemmed line per input line. Returns the number of lines."""
    count = 0
    for line in lines:
        out.write(stem_line(line) + "\n")
        count += 1
    return count


def read_vocabulary(path: Path) -> List[Tuple[str, str]]:
    """
    Read a golden vocabulary file.

    Each non-empty line holds a word and its expected stem separated by
    whitespace. Lines starting with '#' are comments.
    """
    pairs = []
    with open(path, encoding="utf-8") as f:
        for lineno, line in enumerate(f, 1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            parts = line.split()
            if len(parts) != 2:
                raise ValueError(f"{path}:{lineno}: expected 'word stem', got {line!r}")
            pairs.append((parts[0], parts[1]))
    return pairs


def cmd_stem(args) -> int:
    """Stem words from files or stdin."""
    if not args.files:
        stem_stream(sys.stdin, sys.stdout)
        return 0

    for name in args.files:
        path = Path(name)
        if not path.exists():
            logger.error(f"File not found: {path}")
            return 1
        with open(path, encoding="utf-8") as f:
            count = stem_stream(f, sys.stdout)
        logger.info(f"Stemmed {count} lines from {path}")
    return 0


def cmd_tokenize(args) -> int:
    """Print the stemmed tokens of a text."""
    print(" ".join(tokenize(args.text, remove_stopwords=not args.keep_stopwords)))
    return 0


def cmd_check(args) -> int:
    """Verify a golden vocabulary; exit 1 on any mismatch."""
    path = Path(args.vocabulary)
    if not path.exists():
        logger.error(f"Vocabulary not found: {path}")
        return 1

    pairs = read_vocabulary(path)
    mismatches = 0
    for word, expected in pairs:
        try:
            actual = stem(word)
        except StemmingError as e:
            actual = f"<error: {e}>"
        if actual != expected:
            mismatches += 1
            print(f"✗ {word}: expected {expected}, got {actual}")

    print(f"Checked {len(pairs)} words, {mismatches} mismatches")
    return 1 if mismatches else 0


def cmd_serve(args) -> int:
    """Run the HTTP service."""
    import uvicorn

    uvicorn.run("porterstem.main:app", host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="porterstem",
        description="Porter stemmer for English words",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level for stderr output (default: LOG_LEVEL or INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # stem
    stem_parser = subparsers.add_parser("stem", help="Stem words from files or stdin")
    stem_parser.add_argument("files", nargs="*", help="Input files (default: stdin)")

    # tokenize
    tokenize_parser = subparsers.add_parser("tokenize", help="Print stemmed search tokens")
    tokenize_parser.add_argument("text", help="Text to tokenize")
    tokenize_parser.add_argument("--keep-stopwords", action="store_true", help="Do not drop stopwords")

    # check
    check_parser = subparsers.add_parser("check", help="Verify a golden vocabulary file")
    check_parser.add_argument("vocabulary", help="File of 'word stem' pairs")

    # serve
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP service")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", "-p", type=int, default=None)

    return parser


def main(argv: List[str] = None) -> int:
    load_environment()

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        console_level = getattr(logging, args.log_level.upper(), logging.INFO)
    else:
        console_level = get_log_level()
    # Stems go to stdout, so logs go to stderr and never to a file
    setup_logging(log_file=None, console_level=console_level, console_stream=sys.stderr)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "serve" and args.port is None:
        args.port = get_port()

    commands = {
        "stem": cmd_stem,
        "tokenize": cmd_tokenize,
        "check": cmd_check,
        "serve": cmd_serve,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
