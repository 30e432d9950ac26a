# hex_dumper/cli.py
from __future__ import annotations

import argparse
import io
import logging
import sys
from typing import Sequence

from .__about__ import about_text
from .dump import revert, run
from .logic import (
    DEFAULT_BYTES_PER_LINE,
    ConfigurationError,
    DecodeError,
    DumpConfig,
    parse_int_maybe,
)

log = logging.getLogger(__name__)

PROG = "hex-dumper"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


# ---------- helpers ----------
def _int_arg(text: str) -> int:
    try:
        return parse_int_maybe(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from exc

def _configure_logging(verbose: bool) -> None:
    # force: main() may run more than once per process
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )

def _error(message: object) -> int:
    print(f"{PROG}: error: {message}", file=sys.stderr)
    return 1


# ---------- modes ----------
def cmd_dump(args: argparse.Namespace) -> int:
    config = DumpConfig.create(
        bytes_per_line=args.cols,
        group_size=args.group,
        little_endian=args.little_endian,
        max_bytes=args.len,
        start_offset=args.seek,
    )
    log.debug("resolved %s", config)

    if args.file is None:
        run(sys.stdin.buffer, config, sys.stdout)
    else:
        with open(args.file, "rb") as f:
            run(f, config, sys.stdout)
    sys.stdout.flush()
    return 0


def cmd_revert(args: argparse.Namespace) -> int:
    out = sys.stdout.buffer
    if args.file is None:
        # same decoding as the file branch: stray bytes become DecodeErrors
        text = io.TextIOWrapper(sys.stdin.buffer, encoding="ascii", errors="replace")
        try:
            revert(text, out)
        finally:
            text.detach()
    else:
        with open(args.file, "r", encoding="ascii", errors="replace") as f:
            revert(f, out)
    out.flush()
    return 0


# ---------- parser ----------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PROG,
        description="Make a hex dump of a file or standard input, or reverse one (-r).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=about_text())
    p.add_argument("file", nargs="?", help="input file (default: standard input)")
    p.add_argument(
        "-c", "--cols", type=_int_arg, default=DEFAULT_BYTES_PER_LINE,
        help=f"bytes per line (default: {DEFAULT_BYTES_PER_LINE})",
    )
    p.add_argument(
        "-g", "--group", type=_int_arg, default=None,
        help="bytes per group, 0 for a single group per line (default: 2, or 4 with -e)",
    )
    p.add_argument(
        "-e", "--little-endian", action="store_true",
        help="print each group as a little-endian word",
    )
    p.add_argument(
        "-l", "--len", type=_int_arg, default=None,
        help="stop after this many bytes (default: dump entire input)",
    )
    p.add_argument(
        "-s", "--seek", type=_int_arg, default=0,
        help="start at this byte offset (default: 0)",
    )
    p.add_argument(
        "-r", "--revert", action="store_true",
        help="convert a hex dump back into binary",
    )
    p.add_argument(
        "-v", "--verbose", action="store_true",
        help="log debug information to standard error",
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        if args.revert:
            return cmd_revert(args)
        return cmd_dump(args)
    except (ConfigurationError, DecodeError) as exc:
        return _error(exc)
    except OSError as exc:
        log.debug("I/O failure", exc_info=True)
        return _error(exc)


if __name__ == "__main__":
    raise SystemExit(main())
