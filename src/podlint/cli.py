"""Command line entry point: ``podlint <path-to-yaml>``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from podlint import __version__
from podlint.parser.loader import ManifestParseError, ManifestReadError, ManifestSafetyError
from podlint.reporting import ExitCode, format_load_error
from podlint.service.checker import ManifestChecker
from podlint.settings import Settings

logger = logging.getLogger("podlint.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="podlint",
        description="Validate a YAML Pod manifest and report every violation.",
    )
    parser.add_argument("path", type=Path, help="Path to the YAML manifest")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    """Check one manifest, print diagnostics to stdout and return the exit code."""
    args = build_parser().parse_args(argv)
    if settings is None:
        settings = Settings()

    path: Path = args.path
    checker = ManifestChecker(settings)
    try:
        report = checker.check_file(path)
    except ManifestReadError as exc:
        print(format_load_error(path.name, "read", exc))
        return ExitCode.ERROR
    except (ManifestParseError, ManifestSafetyError) as exc:
        logger.debug("failed to load %s", path, exc_info=True)
        print(format_load_error(path.name, "unmarshal", exc))
        return ExitCode.ERROR

    if report.valid:
        return ExitCode.OK
    sys.stdout.write(report.render())
    return ExitCode.INVALID


def main() -> None:
    """Run the CLI using settings from environment / .env file."""
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())
    logger.debug("podlint v%s", __version__)
    sys.exit(run(settings=settings))


if __name__ == "__main__":
    main()
