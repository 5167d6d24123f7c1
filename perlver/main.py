from __future__ import annotations

import argparse
import logging
import sys

from perlver.api import is_compatible, is_valid, parse
from perlver.config import OUTPUT_FORMATS, load_settings
from perlver.errors import InvalidVersionError, VersionContractError
from perlver.schemas import dumps_version
from perlver.version import Version


def _print_version(v: Version, *, output: str) -> None:
    if output == "json":
        print(dumps_version(v))
        return
    print(f"original: {v.raw()}")
    print(f"normal:   {v.normal()}")
    print(f"numify:   {v.numify()}")
    print(f"alpha:    {str(v.is_alpha()).lower()}")
    print(f"qv:       {str(v.is_qv()).lower()}")


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.WARNING))

    parser = argparse.ArgumentParser(prog="perlver")
    sub = parser.add_subparsers(dest="cmd", required=True)

    parse_p = sub.add_parser("parse", help="parse a version and describe it")
    parse_p.add_argument("version")
    parse_p.add_argument("--output", choices=OUTPUT_FORMATS, default=settings.output)

    normal_p = sub.add_parser("normal", help="print the normal (v-dotted) form")
    normal_p.add_argument("version")

    numify_p = sub.add_parser("numify", help="print the numeric form")
    numify_p.add_argument("version")

    valid_p = sub.add_parser("valid", help="exit 0 if the version parses")
    valid_p.add_argument("version")

    compare_p = sub.add_parser("compare", help="print -1, 0 or 1")
    compare_p.add_argument("a")
    compare_p.add_argument("b")

    compat_p = sub.add_parser("compatible", help="exit 0 if candidate >= target")
    compat_p.add_argument("candidate")
    compat_p.add_argument("target")

    args = parser.parse_args(argv)

    if args.cmd == "valid":
        return 0 if is_valid(args.version) else 1

    if args.cmd == "compatible":
        try:
            return 0 if is_compatible(args.candidate, args.target) else 1
        except VersionContractError as exc:
            print(str(exc), file=sys.stderr)
            return 2

    try:
        if args.cmd == "parse":
            _print_version(parse(args.version), output=args.output)
            return 0

        if args.cmd == "normal":
            print(parse(args.version).normal())
            return 0

        if args.cmd == "numify":
            print(parse(args.version).numify())
            return 0

        if args.cmd == "compare":
            print(parse(args.a).compare(parse(args.b)))
            return 0
    except InvalidVersionError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    raise AssertionError(f"unhandled cmd: {args.cmd}")
