#!/usr/bin/env python3
"""
bfi - run a Brainfuck program file.

Program input is read from stdin and program output written to stdout as raw
bytes. Diagnostics go to stderr.
"""

import argparse
import logging
import sys

import yaml

from bfi.config import load_config
from bfi.core.bf_runner import load_source, run_program
from bfi.core.errors import SourceLoadError

PROG_NAME = "bfi"

logger = logging.getLogger(PROG_NAME)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog=PROG_NAME, description="Brainfuck interpreter with a circular 8-bit tape")
    ap.add_argument("source", help="Path to the Brainfuck source file")
    ap.add_argument("--config", default=None, help="YAML file with interpreter settings")
    ap.add_argument("--tape-size", type=int, default=None, help="Number of tape cells (default 30720)")
    ap.add_argument("--max-steps", type=int, default=None, help="Abort after this many instructions")
    ap.add_argument("--trace", action="store_true", default=None, help="Trace every step to stderr")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=f"{PROG_NAME}: %(message)s",
    )

    try:
        config = load_config(args.config, tape_size=args.tape_size,
                             max_steps=args.max_steps, trace=args.trace)
    except (OSError, TypeError, ValueError, yaml.YAMLError) as e:
        logger.error("invalid configuration: %s", e)
        return EXIT_FAILURE

    try:
        source = load_source(args.source)
    except SourceLoadError as e:
        logger.error("%s", e)
        return EXIT_FAILURE

    stdout = sys.stdout.buffer
    try:
        ok = run_program(source, sys.stdin.buffer, stdout, config)
    finally:
        stdout.flush()
    return EXIT_SUCCESS if ok else EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
