#!/usr/bin/env python3
# counter.py
import argparse
import logging
import sys

from output_utils import FORMATS
from presets import PRESETS, preset_checksum, preset_title
from telemetry import ranking_summary
from user_source import UserSourceError, load_results

log = logging.getLogger("counter")


def build_parser():
    ap = argparse.ArgumentParser(description="Rank the most active GitHub users in a saved search dump.")
    ap.add_argument("--input", required=True, help="JSON dump path, http(s) URL, or - for stdin")
    ap.add_argument("--output", choices=sorted(FORMATS), default="plain")
    ap.add_argument("--amount", type=int, default=0, help="Users per ranking (0 caps at 256)")
    ap.add_argument("--preset", default="", help="Name of the location preset the dump was searched with")
    ap.add_argument("--out", default="-", help="Output file (default stdout)")
    ap.add_argument("--verbose", action="store_true")
    return ap


def options_for(args):
    options = {"amount": max(0, args.amount), "preset_title": "", "preset_checksum": ""}
    if args.preset:
        options["preset_title"] = preset_title(args.preset)
        options["preset_checksum"] = preset_checksum(args.preset)
    return options


def render(results, fmt, out, options):
    output = FORMATS[fmt]
    if out == "-":
        output(results, sys.stdout, options)
        return
    with open(out, "w", encoding="utf-8", newline="") as fh:
        output(results, fh, options)


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.preset and args.preset not in PRESETS:
        print(f"Unknown preset: {args.preset}", file=sys.stderr)
        return 2

    print("Phase 1 - Load users.", file=sys.stderr)
    try:
        results = load_results(args.input, progress=args.verbose)
    except UserSourceError as e:
        print(f"Unusable input: {e}", file=sys.stderr)
        return 2
    print(f"Phase 1 complete. Loaded {len(results['users'])} users.", file=sys.stderr)

    print(f"Phase 2 - Rank and write {args.output} output.", file=sys.stderr)
    try:
        render(results, args.output, args.out, options_for(args))
    except OSError as e:
        print(f"Write failed: {e}", file=sys.stderr)
        return 1
    print("Phase 2 complete.", file=sys.stderr)
    log.info("telemetry: %s", ranking_summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
