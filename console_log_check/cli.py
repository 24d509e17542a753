"""CLI entry point for console-log-check.

Registered as a Stop hook. Whatever happens inside, the process exits 0
and leaves stdout empty, so the hook can never block the session. That
includes argument parsing: there is no -h, unknown arguments are ignored
and a malformed --config falls back to the default lookup. Only an
explicit --version prints anything to stdout.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from console_log_check import __version__
from console_log_check.config import load_config
from console_log_check.logging_config import configure_logging
from console_log_check.runner import HookResult, run_hook

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="console-log-check",
        description="Stop hook: warn about console.log left in changed JS/TS files",
        add_help=False,
        exit_on_error=False,
    )
    parser.add_argument(
        "--version", action="version", version=f"console-log-check {__version__}"
    )
    parser.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="YAML file overriding extensions (default: .claude/console-log-check.yaml)",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse what we recognize; never exit on bad input."""
    parser = build_parser()
    try:
        # The hook host may pass arguments we do not know about
        args, _unknown = parser.parse_known_args(argv)
    except argparse.ArgumentError as exc:
        logger.debug("Ignoring arguments %r: %s", argv, exc)
        args = argparse.Namespace(config_path=None)
    return args


def run(argv: list[str] | None = None) -> HookResult | None:
    """Parse arguments, resolve config once, and run the hook."""
    configure_logging()
    args = parse_args(argv)

    try:
        config = load_config(os.environ, Path.cwd(), args.config_path)
        result = run_hook(config)
    except Exception:
        logger.exception("Unexpected failure in stop hook")
        return None

    logger.debug("Outcome: %s", result.outcome.value)
    return result


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    run(argv)
    sys.exit(0)
