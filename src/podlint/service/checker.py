"""Manifest checking service, reusable by the CLI and by library callers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from podlint.models.errors import Diagnostic
from podlint.models.nodes import Node
from podlint.parser.loader import ManifestLoader
from podlint.reporting import render
from podlint.settings import Settings
from podlint.validation.collector import ErrorCollector
from podlint.validation.pod import validate_document

logger = logging.getLogger("podlint.service")


@dataclass
class CheckReport:
    """Result of checking one manifest file."""

    filename: str
    documents: int
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.diagnostics

    def render(self) -> str:
        return render(self.filename, self.diagnostics)


def validate_documents(documents: list[Node], errors: ErrorCollector | None = None) -> list[Diagnostic]:
    """Validate every document root in order against one shared collector."""
    if errors is None:
        errors = ErrorCollector()
    for doc in documents:
        validate_document(doc, errors)
    return errors.diagnostics


class ManifestChecker:
    """Loads manifests and validates them against the Pod schema.

    Load failures (unreadable file, malformed YAML, safety limits) propagate
    as ``ManifestLoadError`` and never become diagnostics.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        if settings is None:
            settings = Settings()
        self._loader = ManifestLoader(
            max_document_size=settings.max_document_size,
            max_depth=settings.max_depth,
            max_node_count=settings.max_node_count,
        )

    def check_string(self, content: str, filename: str = "<string>") -> CheckReport:
        documents = self._loader.load_string(content, filename=filename)
        return self._check(documents, filename)

    def check_file(self, path: Path) -> CheckReport:
        documents = self._loader.load(path)
        return self._check(documents, str(path))

    def _check(self, documents: list[Node], filename: str) -> CheckReport:
        errors = ErrorCollector()
        diagnostics = validate_documents(documents, errors)
        logger.info(
            "checked %s: %d document(s), %d diagnostic(s)",
            filename, len(documents), len(errors),
        )
        return CheckReport(filename=filename, documents=len(documents), diagnostics=diagnostics)
