"""Service layer tying the loader, validators and reporting together."""

from podlint.service.checker import CheckReport, ManifestChecker, validate_documents

__all__ = ["CheckReport", "ManifestChecker", "validate_documents"]
