"""Command line entry point for resolving nvidia-ctk and rendering hooks."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import NoReturn

from pydantic import ValidationError

from ctk_discover.config import Settings, get_settings
from ctk_discover.core.errors import ConfigurationError
from ctk_discover.core.hooks import create_create_symlink_hook
from ctk_discover.core.logging import configure_logging
from ctk_discover.services.resolver import ExecutableResolver

logger = logging.getLogger(__name__)


def load_settings() -> Settings:
    """Load settings, converting validation failures to ConfigurationError."""
    try:
        return get_settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def _setup_logging(args: argparse.Namespace, settings: Settings) -> None:
    level = "DEBUG" if args.verbose else settings.log_level
    json_format = args.json_logs or settings.log_format == "json"
    configure_logging(level=level, json_format=json_format)


def run_resolve(args: argparse.Namespace, settings: Settings) -> int:
    """Print the resolved nvidia-ctk path.

    Args:
        args: Parsed command line arguments.
        settings: Active configuration.

    Returns:
        Exit code (always 0; resolution falls back instead of failing).
    """
    resolver = ExecutableResolver.from_settings(settings)
    print(resolver.resolve(args.name))
    return 0


def run_create_symlinks(args: argparse.Namespace, settings: Settings) -> int:
    """Print the create-symlinks hook as CDI container edits.

    Args:
        args: Parsed command line arguments.
        settings: Active configuration.

    Returns:
        Exit code (always 0).
    """
    resolver = ExecutableResolver.from_settings(settings)
    nvidia_ctk_path = resolver.resolve(args.nvidia_ctk_path)
    discoverer = create_create_symlink_hook(nvidia_ctk_path, args.links)

    hooks = [hook.to_cdi() for hook in discoverer.hooks()]
    logger.debug("Discovered %d hook(s)", len(hooks))
    print(json.dumps({"hooks": hooks}, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="ctk-discover",
        description="Resolve nvidia-ctk and build container lifecycle hooks",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands",
        required=True,
    )

    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Print the nvidia-ctk path that hooks would invoke",
    )
    resolve_parser.add_argument(
        "name",
        nargs="?",
        default="",
        help="Executable name or absolute path (default: configured executable name)",
    )

    symlinks_parser = subparsers.add_parser(
        "create-symlinks",
        help="Print the create-symlinks hook for the given links as CDI JSON",
    )
    symlinks_parser.add_argument(
        "--link",
        dest="links",
        action="append",
        default=[],
        metavar="LINK",
        help="Link specification passed to the hook (repeatable, order preserved)",
    )
    symlinks_parser.add_argument(
        "--nvidia-ctk-path",
        default="",
        help="Path or name of the nvidia-ctk executable (default: search)",
    )

    return parser


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point with subcommand support."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    _setup_logging(args, settings)

    if args.command == "resolve":
        sys.exit(run_resolve(args, settings))
    elif args.command == "create-symlinks":
        sys.exit(run_create_symlinks(args, settings))

    parser.print_help()
    sys.exit(1)


if __name__ == "__main__":
    main()
