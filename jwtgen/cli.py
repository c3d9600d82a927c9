"""Command line entry point: config file in, signed token out."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass

from jwtgen import __version__
from jwtgen.config import load
from jwtgen.exceptions import JWTGenError, UsageError

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "JWTGEN_LOG_LEVEL"


@dataclass(frozen=True)
class Arguments:
    """Resolved command line arguments."""

    file: str


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(prog="jwtgen", description="JWT Generator: sign the [payload] claims of a TOML file")
    p.add_argument("-f", "--file", required=True, help="Path to the TOML config file")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def parse_args(argv: list[str] | None = None) -> Arguments:
    """Resolve the config file path from the command line.

    Raises:
        UsageError: If ``-f/--file`` is missing or the arguments are invalid.
    """
    ns = build_parser().parse_args(argv)
    return Arguments(file=ns.file)


def run(args: Arguments) -> str:
    """Load the config named by ``args`` and return the signed token."""
    logger.info("Signing claims from %s", args.file)
    return load(args.file).to_jwt()


def configure_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.captureWarnings(True)


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    try:
        token = run(parse_args(argv))
    except UsageError as e:
        build_parser().print_usage(sys.stderr)
        print(f"jwtgen: error: {e.message}", file=sys.stderr)
        return 2
    except JWTGenError as e:
        print(f"jwtgen: error: {e.stage} failed: {e.message}", file=sys.stderr)
        return 1

    print(token)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
