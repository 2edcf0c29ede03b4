"""Append-only sink for the diagnostics of one input."""

from __future__ import annotations

from collections.abc import Iterator

from podlint.models.errors import Diagnostic, ErrorKind


class ErrorCollector:
    """Ordered diagnostics for one manifest file.

    Shared by reference across the whole validation walk. Validators only
    append; nothing reads the list back until the walk is complete.
    """

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def add(self, line: int, message: str, kind: ErrorKind = ErrorKind.VALUE) -> None:
        self._diagnostics.append(Diagnostic(line=line, message=message, kind=kind))

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return list(self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._diagnostics)
