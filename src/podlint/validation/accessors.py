"""Lookup helpers over the node model, shared by every section validator."""

from __future__ import annotations

import re

from podlint.models.nodes import INT_TAG, STR_TAG, MappingNode, Node, ScalarNode

# YAML 1.2 core-schema integer forms, plus the ``_`` separators ruamel accepts.
_INT_RE = re.compile(
    r"""^(?:
        [-+]?[0-9][0-9_]*
      | 0o[0-7_]+
      | 0x[0-9a-fA-F_]+
      | 0b[01_]+
    )$""",
    re.VERBOSE,
)


def as_mapping(node: Node) -> dict[str, Node] | None:
    """Return a key -> value view of a mapping node, or ``None``.

    Duplicate keys resolve to the last occurrence. Non-scalar keys cannot be
    looked up by name and are left out.
    """
    match node:
        case MappingNode(pairs=pairs):
            return {key.value: value for key, value in pairs if isinstance(key, ScalarNode)}
        case _:
            return None


def child(node: Node, key: str) -> Node | None:
    """Value for ``key`` in a mapping node; ``None`` if absent or not a mapping."""
    mapping = as_mapping(node)
    if mapping is None:
        return None
    return mapping.get(key)


def is_scalar_string(node: Node) -> bool:
    return isinstance(node, ScalarNode) and node.tag in (STR_TAG, None)


def is_scalar_int(node: Node) -> bool:
    return isinstance(node, ScalarNode) and node.tag == INT_TAG


def parse_int(text: str) -> int | None:
    """Parse YAML integer text; ``None`` if it is not an integer literal."""
    stripped = text.strip()
    if not _INT_RE.match(stripped):
        return None
    digits = stripped.replace("_", "")
    try:
        return int(digits, 0) if digits[:2] in ("0o", "0x", "0b") else int(digits, 10)
    except ValueError:
        return None
