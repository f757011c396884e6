"""
cli.py

Command-line entry point.

    trigramminer                    # read standard input
    trigramminer a.txt b.txt        # one table per file
    trigramminer --whole-buffer a.txt

Every input is processed on its own; a file that cannot be read is reported
on stderr and the remaining files are still processed.
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional, Sequence

from pydantic import ValidationError

from .config import DEFAULT_LIMIT, MinerConfig
from .miner import InputUnavailableError, TrigramMiner
from .ranker import TrigramResult
from .report import format_result


WHOLE_BUFFER_ENV = "TRIGRAMMINER_WHOLE_BUFFER"
_TRUTHY = {"1", "true", "yes", "on"}


def env_whole_buffer(environ=None) -> bool:
    environ = os.environ if environ is None else environ
    return environ.get(WHOLE_BUFFER_ENV, "").strip().lower() in _TRUTHY


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trigramminer",
        description="Report the most common three word phrases in text.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Text files to process. Standard input is read when none are given.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--whole-buffer",
        dest="whole_buffer",
        action="store_true",
        default=None,
        help=f"Read each input fully into memory before counting "
             f"(default taken from ${WHOLE_BUFFER_ENV}).",
    )
    mode.add_argument(
        "--streaming",
        dest="whole_buffer",
        action="store_false",
        help="Process each input line by line (default).",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=DEFAULT_LIMIT,
        help="Number of phrases to report per input (default: %(default)s).",
    )
    parser.add_argument(
        "--unicode",
        dest="ascii_only",
        action="store_false",
        help="Treat non-ASCII letters and digits as word characters.",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding of input files (default: %(default)s).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print progress messages to stderr.",
    )
    return parser


def config_from_args(args: argparse.Namespace, environ=None) -> MinerConfig:
    whole_buffer = args.whole_buffer
    if whole_buffer is None:
        whole_buffer = env_whole_buffer(environ)
    return MinerConfig(
        mode="whole_buffer" if whole_buffer else "streaming",
        limit=args.limit,
        ascii_only=args.ascii_only,
        encoding=args.encoding,
    )


def _emit(result: TrigramResult) -> None:
    print(format_result(result))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the CLI and return the process exit status.

    0 when every input was processed, 1 when at least one input failed.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.limit < 0:
        parser.error("--limit must be >= 0")
    try:
        config = config_from_args(args)
    except ValidationError as exc:
        parser.error("; ".join(err["msg"] for err in exc.errors()))

    miner = TrigramMiner(
        config,
        logger=lambda msg: print(msg, file=sys.stderr),
        verbose=args.verbose,
    )

    failures: List[str] = []
    if not args.files:
        print("Processing stdin...")
        try:
            _emit(miner.mine_stdin())
        except InputUnavailableError as exc:
            print(f"Error processing {exc.source}: {exc.reason}", file=sys.stderr)
            failures.append(exc.source)
    else:
        for path in args.files:
            print(f"Processing: {path}")
            try:
                _emit(miner.mine_file(path))
            except InputUnavailableError as exc:
                print(f"Error processing {exc.source}: {exc.reason}", file=sys.stderr)
                failures.append(exc.source)

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
