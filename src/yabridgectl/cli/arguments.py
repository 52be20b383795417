"""Argument parser for the yabridgectl CLI."""

from __future__ import annotations

import argparse
from pathlib import Path

from yabridgectl.core.models import InstallationMethod


def _existing_path(value: str) -> Path:
    """argparse type for paths that must already exist."""
    path = Path(value).expanduser()
    if not path.exists():
        raise argparse.ArgumentTypeError(f"File or directory '{value}' could not be found")
    return path


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="yabridgectl",
        description="Manage yabridge installations for Windows VST plugins.",
    )

    parser.add_argument(
        "--version",
        action="store_true",
        help="Show yabridgectl version and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (info-level) logging.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Reduce logging output to errors only.",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        type=Path,
        help="Path to config file (default: ~/.config/yabridgectl/config.yaml).",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    add_parser = subparsers.add_parser("add", help="Add a plugin install location.")
    add_parser.add_argument(
        "path",
        type=_existing_path,
        help="Path to a directory containing Windows VST plugins.",
    )

    rm_parser = subparsers.add_parser("rm", help="Remove a plugin install location.")
    rm_parser.add_argument("path", type=Path, help="Path to a registered directory.")

    subparsers.add_parser("list", help="List the plugin install locations.")
    subparsers.add_parser("status", help="Show the installation status for all plugins.")

    set_parser = subparsers.add_parser("set", help="Change the yabridgectl settings.")
    path_group = set_parser.add_mutually_exclusive_group()
    path_group.add_argument(
        "--path",
        type=_existing_path,
        help="Directory containing libyabridge.so, overrides automatic detection.",
    )
    path_group.add_argument(
        "--path-auto",
        action="store_true",
        help="Go back to detecting the location of libyabridge.so automatically.",
    )
    set_parser.add_argument(
        "--method",
        choices=[method.value for method in InstallationMethod],
        help="Method used to install yabridge next to plugins.",
    )

    return parser
