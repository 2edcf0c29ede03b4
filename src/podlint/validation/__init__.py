"""Fixed-schema validation of Pod manifests over the node model."""

from podlint.validation.collector import ErrorCollector
from podlint.validation.container import validate_container
from podlint.validation.pod import validate_document
from podlint.validation.resources import validate_resource_map

__all__ = [
    "ErrorCollector",
    "validate_container",
    "validate_document",
    "validate_resource_map",
]
