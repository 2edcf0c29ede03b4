"""YAML loading with line fidelity for podlint."""

from podlint.parser.loader import (
    ManifestLoader,
    ManifestLoadError,
    ManifestParseError,
    ManifestReadError,
    ManifestSafetyError,
)

__all__ = [
    "ManifestLoadError",
    "ManifestLoader",
    "ManifestParseError",
    "ManifestReadError",
    "ManifestSafetyError",
]
