"""Single ``plant-finder`` entry point for the command modules.

Usage::

    plant-finder [--log-level LEVEL] <command> [args]

Every module in ``plant_finder.scripts`` defining ``main(argv)`` is a
command; ``plant_of_the_week`` becomes ``plant-of-the-week``.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import pkgutil
import sys
from pathlib import Path
from types import ModuleType

_NOT_COMMANDS = {"cli", "__main__"}


def _discover_commands() -> dict[str, str]:
    """Return mapping of command names to module paths."""
    package_dir = Path(__file__).resolve().parent
    return {
        mod.name.replace("_", "-"): f"{__package__}.{mod.name}"
        for mod in pkgutil.iter_modules([str(package_dir)])
        if not mod.ispkg and mod.name not in _NOT_COMMANDS
    }


def _summary(module: ModuleType) -> str:
    doc = (module.__doc__ or "").strip()
    return doc.splitlines()[0] if doc else ""


def _build_parser(commands: dict[str, str]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plant-finder",
        description="Rank, search and recommend plants for a hardiness zone",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="commands:\n"
        + "\n".join(
            f"  {name:<20}{_summary(importlib.import_module(path))}"
            for name, path in sorted(commands.items())
        ),
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    parser.add_argument("command", choices=sorted(commands), metavar="command")
    parser.add_argument("args", nargs=argparse.REMAINDER)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one command and return its exit status."""
    commands = _discover_commands()
    ns = _build_parser(commands).parse_args(argv)

    logging.basicConfig(level=getattr(logging, ns.log_level.upper(), logging.WARNING))

    module = importlib.import_module(commands[ns.command])
    status = module.main(ns.args)
    return status if isinstance(status, int) else 0


if __name__ == "__main__":  # pragma: no cover - manual execution
    sys.exit(main())
