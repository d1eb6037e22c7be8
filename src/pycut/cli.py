from __future__ import annotations

import argparse
import codecs
import os
import sys

from . import __version__
from .api import cut_sources
from .config import DEFAULT_DELIMITER, DEFAULT_ENCODING, LOG_LEVEL_ENV, CutConfig
from .errors import PositionSpecError, SourceReadError
from .logging import LOG_LEVELS, configure_logging
from .parser import parse_positions
from .positions import PositionList


def _position_list(value: str) -> PositionList:
    # argparse only shows the message of an ArgumentTypeError.
    try:
        return parse_positions(value)
    except PositionSpecError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _delimiter(value: str) -> str:
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"must be a single character, got {value!r}")
    return value


def _encoding(value: str) -> str:
    try:
        return codecs.lookup(value).name
    except LookupError as e:
        raise argparse.ArgumentTypeError(f"unknown encoding: {value!r}") from e


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="pycut",
        description="Print selected bytes, characters or fields from each line of the input",
    )
    ap.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")

    mode = ap.add_mutually_exclusive_group(required=True)
    mode.add_argument("-f", "--fields", type=_position_list, metavar="LIST", help="Selected fields")
    mode.add_argument("-b", "--bytes", type=_position_list, metavar="LIST", help="Selected bytes")
    mode.add_argument("-c", "--chars", type=_position_list, metavar="LIST", help="Selected characters")

    ap.add_argument(
        "-d",
        "--delim",
        dest="delimiter",
        type=_delimiter,
        default=DEFAULT_DELIMITER,
        metavar="DELIM",
        help="Field delimiter (default: TAB)",
    )
    ap.add_argument(
        "--encoding",
        type=_encoding,
        default=DEFAULT_ENCODING,
        help="Text encoding of the input and of byte positions (default: utf-8)",
    )
    ap.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help=f"Diagnostic log level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    ap.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Input file(s); - reads standard input (the default)",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    try:
        config = CutConfig.from_namespace(args)
    except ValueError as e:
        ap.error(str(e))
    if config.log_level not in LOG_LEVELS:
        ap.error(f"{LOG_LEVEL_ENV} must be one of {', '.join(LOG_LEVELS)}, got {config.log_level!r}")

    configure_logging(config.log_level)
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        # U+FFFD from split bytes or non-ASCII text may not fit the locale encoding.
        reconfigure(errors="replace")
    try:
        result = cut_sources(
            config.sources,
            config.mode,
            delimiter=config.delimiter,
            encoding=config.encoding,
            out=sys.stdout,
            err=sys.stderr,
        )
        sys.stdout.flush()
    except SourceReadError as e:
        print(f"{ap.prog}: {e}", file=sys.stderr)
        return 1
    except BrokenPipeError:
        # Downstream closed the pipe (e.g. `| head`); keep interpreter shutdown quiet.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 1
    return 0 if result.ok else 1
