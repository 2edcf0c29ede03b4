"""Container validators: name, image, ports and HTTP probes."""

from __future__ import annotations

import re

from podlint.models.errors import ErrorKind
from podlint.models.nodes import Node, ScalarNode, SequenceNode
from podlint.validation.accessors import as_mapping, is_scalar_int, is_scalar_string, parse_int
from podlint.validation.collector import ErrorCollector
from podlint.validation.resources import validate_resource_requirements

# Lowercase alphanumeric runs joined by single underscores.
NAME_RE = re.compile(r"[a-z0-9]+(?:_[a-z0-9]+)*")
IMAGE_RE = re.compile(r"registry\.bigbrother\.io/[^:]+:[A-Za-z0-9._-]+")

SUPPORTED_PROTOCOLS = ("TCP", "UDP")
PORT_MIN = 1
PORT_MAX = 65535

_PROBE_FIELDS = ("readinessProbe", "livenessProbe")


def validate_container(node: Node, errors: ErrorCollector) -> str:
    """Validate one ``spec.containers`` entry.

    Returns the container name for duplicate tracking by the caller, or an
    empty string when there is no usable name.
    """
    fields = as_mapping(node)
    if fields is None:
        errors.add(node.line, "container must be object", ErrorKind.SHAPE)
        return ""

    resolved = ""
    name = fields.get("name")
    if name is None:
        errors.add(0, "name is required", ErrorKind.PRESENCE)
    else:
        if not is_scalar_string(name):
            errors.add(name.line, "name must be string", ErrorKind.TYPE)
        elif not name.value.strip():
            errors.add(name.line, "name is required", ErrorKind.PRESENCE)
        elif not NAME_RE.fullmatch(name.value):
            errors.add(name.line, f"name has invalid format '{name.value}'", ErrorKind.VALUE)
        if isinstance(name, ScalarNode):
            resolved = name.value

    image = fields.get("image")
    if image is None:
        errors.add(0, "image is required", ErrorKind.PRESENCE)
    elif not is_scalar_string(image):
        errors.add(image.line, "image must be string", ErrorKind.TYPE)
    elif not IMAGE_RE.fullmatch(image.value):
        errors.add(image.line, f"image has invalid format '{image.value}'", ErrorKind.VALUE)

    ports = fields.get("ports")
    match ports:
        case None:
            pass
        case SequenceNode(items=items):
            for item in items:
                validate_container_port(item, errors)
        case _:
            errors.add(ports.line, "ports must be array", ErrorKind.SHAPE)

    for probe_field in _PROBE_FIELDS:
        probe = fields.get(probe_field)
        if probe is not None:
            validate_probe(probe, errors, probe_field)

    resources = fields.get("resources")
    if resources is None:
        errors.add(0, "resources is required", ErrorKind.PRESENCE)
    else:
        validate_resource_requirements(resources, errors)

    return resolved


def validate_container_port(node: Node, errors: ErrorCollector) -> None:
    fields = as_mapping(node)
    if fields is None:
        errors.add(node.line, "ports item must be object", ErrorKind.SHAPE)
        return

    _check_port_number(fields.get("containerPort"), "containerPort", errors)

    protocol = fields.get("protocol")
    if protocol is None:
        return
    if not is_scalar_string(protocol):
        errors.add(protocol.line, "protocol must be string", ErrorKind.TYPE)
    elif protocol.value not in SUPPORTED_PROTOCOLS:
        errors.add(
            protocol.line, f"protocol has unsupported value '{protocol.value}'", ErrorKind.VALUE
        )


def validate_probe(node: Node, errors: ErrorCollector, field: str) -> None:
    """Only ``httpGet`` probes are supported; it is required."""
    fields = as_mapping(node)
    if fields is None:
        errors.add(node.line, f"{field} must be object", ErrorKind.SHAPE)
        return
    http_get = fields.get("httpGet")
    if http_get is None:
        errors.add(0, "httpGet is required", ErrorKind.PRESENCE)
        return
    validate_http_get(http_get, errors)


def validate_http_get(node: Node, errors: ErrorCollector) -> None:
    fields = as_mapping(node)
    if fields is None:
        errors.add(node.line, "httpGet must be object", ErrorKind.SHAPE)
        return

    path = fields.get("path")
    if path is None:
        errors.add(0, "path is required", ErrorKind.PRESENCE)
    elif not is_scalar_string(path):
        errors.add(path.line, "path must be string", ErrorKind.TYPE)
    elif not path.value.startswith("/"):
        errors.add(path.line, f"path has invalid format '{path.value}'", ErrorKind.VALUE)

    _check_port_number(fields.get("port"), "port", errors)


def _check_port_number(node: Node | None, field: str, errors: ErrorCollector) -> None:
    """Required ``!!int`` scalar within the TCP/UDP port range."""
    if node is None:
        errors.add(0, f"{field} is required", ErrorKind.PRESENCE)
        return
    if not is_scalar_int(node):
        errors.add(node.line, f"{field} must be int", ErrorKind.TYPE)
        return
    value = parse_int(node.value)
    if value is None or not PORT_MIN <= value <= PORT_MAX:
        errors.add(node.line, f"{field} value out of range", ErrorKind.VALUE)
