"""Document-level validators: root, metadata, pod spec and os."""

from __future__ import annotations

from podlint.models.errors import ErrorKind
from podlint.models.nodes import MappingNode, Node, ScalarNode, SequenceNode
from podlint.validation.accessors import as_mapping, child, is_scalar_string
from podlint.validation.collector import ErrorCollector
from podlint.validation.container import validate_container

SUPPORTED_API_VERSION = "v1"
SUPPORTED_KIND = "Pod"
SUPPORTED_OS = frozenset({"linux", "windows"})


def validate_document(doc: Node, errors: ErrorCollector) -> None:
    """Validate one top-level YAML document as a Pod manifest."""
    fields = as_mapping(doc)
    if fields is None:
        errors.add(doc.line, "root must be object", ErrorKind.SHAPE)
        return

    _check_literal(fields.get("apiVersion"), "apiVersion", SUPPORTED_API_VERSION, errors)
    _check_literal(fields.get("kind"), "kind", SUPPORTED_KIND, errors)

    metadata = fields.get("metadata")
    if metadata is None:
        errors.add(0, "metadata is required", ErrorKind.PRESENCE)
    else:
        validate_metadata(metadata, errors)

    spec = fields.get("spec")
    if spec is None:
        errors.add(0, "spec is required", ErrorKind.PRESENCE)
    else:
        validate_pod_spec(spec, errors)


def _check_literal(node: Node | None, field: str, expected: str, errors: ErrorCollector) -> None:
    """Required string field that only accepts one exact value."""
    if node is None:
        errors.add(0, f"{field} is required", ErrorKind.PRESENCE)
    elif not is_scalar_string(node):
        errors.add(node.line, f"{field} must be string", ErrorKind.TYPE)
    elif node.value != expected:
        errors.add(node.line, f"{field} has unsupported value '{node.value}'", ErrorKind.VALUE)


def validate_metadata(node: Node, errors: ErrorCollector) -> None:
    fields = as_mapping(node)
    if fields is None:
        errors.add(node.line, "metadata must be object", ErrorKind.SHAPE)
        return

    name = fields.get("name")
    if name is None:
        errors.add(0, "name is required", ErrorKind.PRESENCE)
    elif not is_scalar_string(name):
        errors.add(name.line, "name must be string", ErrorKind.TYPE)
    elif not name.value.strip():
        # An empty name counts as a missing one.
        errors.add(name.line, "name is required", ErrorKind.PRESENCE)

    namespace = fields.get("namespace")
    if namespace is not None and not is_scalar_string(namespace):
        errors.add(namespace.line, "namespace must be string", ErrorKind.TYPE)

    labels = fields.get("labels")
    if labels is not None:
        _validate_labels(labels, errors)


def _validate_labels(node: Node, errors: ErrorCollector) -> None:
    """Labels are a flat string -> string map; only the first bad entry is reported."""
    match node:
        case MappingNode(pairs=pairs):
            for key, value in pairs:
                if not (is_scalar_string(key) and is_scalar_string(value)):
                    errors.add(value.line, "labels must be object", ErrorKind.SHAPE)
                    break
        case _:
            errors.add(node.line, "labels must be object", ErrorKind.SHAPE)


def validate_pod_spec(node: Node, errors: ErrorCollector) -> None:
    fields = as_mapping(node)
    if fields is None:
        errors.add(node.line, "spec must be object", ErrorKind.SHAPE)
        return

    os_node = fields.get("os")
    if os_node is not None:
        validate_os(os_node, errors)

    containers = fields.get("containers")
    match containers:
        case None:
            errors.add(0, "containers is required", ErrorKind.PRESENCE)
        case SequenceNode(items=[]):
            errors.add(containers.line, "containers must be non-empty array", ErrorKind.CARDINALITY)
        case SequenceNode(items=items):
            _validate_containers(items, errors)
        case _:
            errors.add(containers.line, "containers must be array", ErrorKind.SHAPE)


def _validate_containers(items: list[Node], errors: ErrorCollector) -> None:
    seen: set[str] = set()
    for item in items:
        name = validate_container(item, errors)
        if not name:
            continue
        if name in seen:
            # Reported with the name format message.
            errors.add(item.line, f"name has invalid format '{name}'", ErrorKind.UNIQUENESS)
        seen.add(name)


def validate_os(node: Node, errors: ErrorCollector) -> None:
    """``os`` is either a bare string or an object with a ``name`` field."""
    match node:
        case ScalarNode():
            if not is_scalar_string(node):
                errors.add(node.line, "os must be string", ErrorKind.TYPE)
                return
            _check_os_name(node, errors)
        case MappingNode():
            name = child(node, "name")
            if name is None:
                errors.add(0, "os.name is required", ErrorKind.PRESENCE)
            elif not is_scalar_string(name):
                errors.add(name.line, "name must be string", ErrorKind.TYPE)
            else:
                _check_os_name(name, errors)
        case _:
            errors.add(node.line, "os must be string", ErrorKind.SHAPE)


def _check_os_name(node: ScalarNode, errors: ErrorCollector) -> None:
    if node.value.lower() not in SUPPORTED_OS:
        errors.add(node.line, f"os has unsupported value '{node.value}'", ErrorKind.VALUE)
