"""Domain models for podlint: the YAML node tree and diagnostics."""

from podlint.models.errors import Diagnostic, ErrorKind
from podlint.models.nodes import INT_TAG, STR_TAG, MappingNode, Node, ScalarNode, SequenceNode

__all__ = [
    "INT_TAG",
    "STR_TAG",
    "Diagnostic",
    "ErrorKind",
    "MappingNode",
    "Node",
    "ScalarNode",
    "SequenceNode",
]
