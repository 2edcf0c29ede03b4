"""Rendering of diagnostics as ``<file>:<line> <message>`` lines."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum
from pathlib import PurePath

from podlint.models.errors import Diagnostic


class ExitCode(IntEnum):
    OK = 0
    INVALID = 1
    ERROR = 2


def format_diagnostic(filename: str, diagnostic: Diagnostic) -> str:
    """One diagnostic line, without the trailing newline.

    Diagnostics without a location (line 0) are attached to the file itself.
    """
    base = PurePath(filename).name
    if diagnostic.located:
        return f"{base}:{diagnostic.line} {diagnostic.message}"
    return f"{base}: {diagnostic.message}"


def render(filename: str, diagnostics: Iterable[Diagnostic]) -> str:
    """All diagnostics for one file, each terminated by a newline."""
    return "".join(f"{format_diagnostic(filename, d)}\n" for d in diagnostics)


def format_load_error(filename: str, action: str, error: Exception) -> str:
    """Message for failures that happen before validation starts."""
    return f"{PurePath(filename).name}: cannot {action} file content: {error}"
