"""Command-line entry point: ``extfix SRC_DIR DST_DIR``.

Rewrites every source file under ``SRC_DIR`` into the same relative path
under ``DST_DIR``.  Exit status is 1 for a malformed invocation or a
missing ``SRC_DIR`` and 0 otherwise, even when some specifiers could not
be resolved.  Settings are loaded from environment variables and ``.env``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn

from pydantic import ValidationError

from extfix import __version__
from extfix.compiler.pipeline import RewritePipeline
from extfix.models.errors import UsageError
from extfix.policy.registry import PolicyRegistry, UnknownPolicyError
from extfix.settings import Settings

logger = logging.getLogger("extfix.cli")

PROG = "extfix"


class _ArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        description="Rewrite local import/export specifiers to explicit file suffixes.",
    )
    parser.add_argument("src_dir", metavar="SRC_DIR", help="Directory of sources to rewrite")
    parser.add_argument("dst_dir", metavar="DST_DIR", help="Output directory (mirrors SRC_DIR)")
    parser.add_argument(
        "--policy",
        choices=PolicyRegistry.available(),
        help="Suffix probing policy (default: RESOLUTION_POLICY setting)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every rewrite")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def usage() -> None:
    print(f"usage: {PROG} SRC_DIR DST_DIR")


def run(
    src_dir: str | Path,
    dst_dir: str | Path,
    settings: Settings | None = None,
    policy_name: str | None = None,
) -> int:
    """Run the pipeline and map the outcome to an exit status."""
    try:
        settings = settings or Settings()
        pipeline = RewritePipeline.from_settings(settings, policy_name)
        report = pipeline.run(src_dir, dst_dir)
    except (UsageError, UnknownPolicyError, ValidationError) as exc:
        logger.error("%s", exc)
        usage()
        return 1
    return report.exit_status


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, configure logging from settings, and run."""
    try:
        args = build_parser().parse_args(argv)
        settings = Settings()
        level = "DEBUG" if args.verbose else settings.log_level
        logging.basicConfig(level=level.upper())
    except (UsageError, ValidationError, ValueError) as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        usage()
        return 1

    logger.info("extfix v%s (policy=%s)", __version__, args.policy or settings.resolution_policy)

    return run(args.src_dir, args.dst_dir, settings=settings, policy_name=args.policy)


if __name__ == "__main__":
    sys.exit(main())
