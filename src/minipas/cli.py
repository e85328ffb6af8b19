from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .api import analyze_file
from .config import Options
from .errors import SourceError


_LOG = logging.getLogger("minipas")


def _setup_logging(debug: bool) -> None:
    _LOG.setLevel(logging.DEBUG if debug else logging.WARNING)
    if not _LOG.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        _LOG.addHandler(h)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="minipas",
        description="Scan and syntax-check a restricted Pascal program",
    )
    ap.add_argument("source", help="Pascal source file")
    ap.add_argument(
        "-o",
        "--tokens-out",
        default="output.txt",
        help="Where to write the token codes (default: output.txt)",
    )
    ap.add_argument(
        "--no-tokens",
        action="store_true",
        help="Do not write the token codes file",
    )
    ap.add_argument(
        "--wire-compatible",
        action="store_true",
        help="Write token codes using the reference tool's shared codes for 'integer' and strings",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = ap.parse_args(argv)

    opts = Options.from_env(wire_compatible=args.wire_compatible, debug=args.verbose)
    _setup_logging(opts.debug)

    try:
        res = analyze_file(args.source)
    except SourceError as e:
        print(f"minipas: {e}", file=sys.stderr)
        return 2

    if not args.no_tokens:
        out = Path(args.tokens_out)
        out.write_text(res.token_codes(wire_compatible=opts.wire_compatible), encoding="utf-8")
        print(f"Token codes written to: {out}")
        print()

    sys.stdout.write(res.listing())
    return 0 if res.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
