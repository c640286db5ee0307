"""Command-line front door for yal.

Parses CLI options, loads ``yal.conf`` once, and resolves the target
directory. Then runs the scan/order/render pipeline and prints the result.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from .config import Config, load_config
from .entry_model import IdentityCache, display_name, list_directory_entries, order_entries
from .render import render_listing


def build_listing(directory: Path, config: Config, color: bool = True) -> list[str]:
    """Scan, order, and render ``directory``; ``OSError`` means it is unreadable."""
    identity_cache = IdentityCache.from_system()
    entries = list_directory_entries(directory, identity_cache, config)
    order_entries(entries, config)
    return render_listing(display_name(str(directory)), entries, config, color=color)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and list one directory to stdout.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is listed. Unreadable entries are dropped silently, while an
    unreadable target exits with a message.
    """
    parser = argparse.ArgumentParser(
        description="List a directory with icons, permissions, owners, and modification ages."
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Defaults to current directory.")
    parser.add_argument("--config", metavar="PATH", default=None, help="Read this config file instead of searching.")
    parser.add_argument("-a", "--all", action="store_true", help="Include entries whose names start with '.'.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    args = parser.parse_args()

    config = load_config(Path(args.config) if args.config is not None else None)
    if args.all:
        config = replace(config, show_hidden=True)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path) if args.path is not None else default_path
    try:
        exists = path.exists()
        is_dir = exists and path.is_dir()
        directory = path.resolve()
    except OSError as exc:
        raise SystemExit(f"Cannot read directory {path}: {exc}") from exc
    if not exists:
        raise SystemExit(f"Path not found: {path}")
    if not is_dir:
        raise SystemExit(f"Not a directory: {path}")

    try:
        lines = build_listing(directory, config, color=not args.no_color)
    except OSError as exc:
        raise SystemExit(f"Cannot read directory {directory}: {exc}") from exc

    sys.stdout.write("\n".join(lines) + "\n")


if __name__ == "__main__":
    main()
