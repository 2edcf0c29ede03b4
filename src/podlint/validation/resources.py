"""Validators for ``resources.limits`` / ``resources.requests``."""

from __future__ import annotations

import re

from podlint.models.errors import ErrorKind
from podlint.models.nodes import MappingNode, Node
from podlint.validation.accessors import as_mapping, is_scalar_int, is_scalar_string
from podlint.validation.collector import ErrorCollector

MEMORY_RE = re.compile(r"[0-9]+(Ki|Mi|Gi)")

RESOURCE_SECTIONS = ("limits", "requests")


def validate_resource_requirements(node: Node, errors: ErrorCollector) -> None:
    fields = as_mapping(node)
    if fields is None:
        errors.add(node.line, "resources must be object", ErrorKind.SHAPE)
        return
    for section in RESOURCE_SECTIONS:
        resource_map = fields.get(section)
        if resource_map is not None:
            validate_resource_map(resource_map, errors, section)


def validate_resource_map(node: Node, errors: ErrorCollector, field: str) -> None:
    """Check every entry of a resource map in document order.

    Only ``cpu`` and ``memory`` are constrained; other resource names pass.
    """
    if not isinstance(node, MappingNode):
        errors.add(node.line, f"{field} must be object", ErrorKind.SHAPE)
        return

    for key, value in node.pairs:
        if not is_scalar_string(key):
            errors.add(value.line, f"{field} must be object", ErrorKind.SHAPE)
            continue
        match key.value:
            case "cpu":
                if not is_scalar_int(value):
                    errors.add(value.line, "cpu must be int", ErrorKind.TYPE)
            case "memory":
                if not is_scalar_string(value):
                    errors.add(value.line, "memory must be string", ErrorKind.TYPE)
                elif not MEMORY_RE.fullmatch(value.value):
                    errors.add(
                        value.line, f"memory has invalid format '{value.value}'", ErrorKind.VALUE
                    )
            case _:
                pass
