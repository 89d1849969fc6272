"""Command-line entry point: ``python -m funcsurf``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from funcsurf import __version__
from funcsurf.config import ViewerSettings, load_settings
from funcsurf.errors import FuncSurfError
from funcsurf.logging_config import setup_logging
from funcsurf.presets import default_surfaces, find_preset

logger = logging.getLogger("funcsurf.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="funcsurf",
                                     description="Interactive viewer for z = f(x, y) surfaces.")
    parser.add_argument("--list", action="store_true", help="List the available surfaces and exit.")
    parser.add_argument("--preset", help="Title of the surface to show first.")
    parser.add_argument("--config", type=Path, help="YAML file with viewer settings.")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity (default: INFO).")
    parser.add_argument("--log-file", help="Also write log records to this file.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    try:
        settings = load_settings(args.config) if args.config else ViewerSettings()
        surfaces = default_surfaces()
        if args.list:
            for surface in surfaces:
                print(f"{surface.title}: {surface.description}")
            return 0
        initial = find_preset(args.preset or settings.preset, surfaces)
    except FuncSurfError as exc:
        logger.error("%s", exc)
        return 1

    # imported here so --list works without a display
    from funcsurf.pyglet_view import run_viewer

    logger.info("starting viewer with %r", initial.title)
    run_viewer(settings, surfaces, initial)
    return 0


if __name__ == "__main__":
    sys.exit(main())
