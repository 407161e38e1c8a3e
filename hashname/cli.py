import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import List, Optional, TextIO

from .dispatcher import Dispatcher
from .models import Options, Outcome
from .resolver import PathResolver

try:
    __version__ = version("hashname")
except PackageNotFoundError:
    # running from a source checkout that was never installed
    __version__ = "0+unknown"


def positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hashname",
        description="Rename files to the SHA-256 of their contents, keeping the extension.",
    )
    parser.add_argument("-d", "--dry-run", action="store_true",
                        help="Do not actually rename files")
    parser.add_argument("-f", "--force-rehash", action="store_true",
                        help="Process the file even if it looks like it has already been processed")
    parser.add_argument("-F", "--force-rename", action="store_true",
                        help="Rename the file even if another file already has the resulting name")
    parser.add_argument("-o", "--output-dir", metavar="DIR",
                        help="Move renamed files to this directory")
    parser.add_argument("-c", "--copy", action="store_true",
                        help="Copy files to the new name instead of moving them")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Report skipped files on stderr")
    parser.add_argument("-j", "--jobs", type=positive_int, metavar="N",
                        help="Number of worker threads (default: one per CPU)")
    parser.add_argument("--debug", action="store_true",
                        help="Log diagnostics to stderr")
    parser.add_argument("-V", "--version", action="version", version=__version__,
                        help="Print version and exit")
    parser.add_argument("files", nargs="*", metavar="FILE",
                        help="Files or glob patterns to process")
    return parser


def format_outcome(outcome: Outcome) -> str:
    if outcome.ok:
        return f'"{outcome.source}" -> "{outcome.destination}"'
    return f'Skipped "{outcome.source}": {outcome.reason}'


def emit(stream: TextIO, line: str) -> None:
    # one write per line so reports never interleave; undecodable path bytes are escaped
    enc = getattr(stream, "encoding", None) or "utf-8"
    line = line.encode(enc, "backslashreplace").decode(enc)
    stream.write(line + "\n")
    stream.flush()


def main(argv: Optional[List[str]] = None) -> int:
    ns = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if ns.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    opts = Options.from_namespace(ns)
    if not opts.inputs:
        return 0

    paths = PathResolver().resolve(opts.inputs)
    for outcome in Dispatcher(opts).run(paths):
        if outcome.ok:
            emit(sys.stdout, format_outcome(outcome))
        elif opts.verbose:
            emit(sys.stderr, format_outcome(outcome))
    return 0
