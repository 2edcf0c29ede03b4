"""Immutable YAML node tree. Validators only ever see these three shapes."""

from __future__ import annotations

from dataclasses import dataclass, field

STR_TAG = "!!str"
INT_TAG = "!!int"


@dataclass(frozen=True)
class ScalarNode:
    """A leaf value as written in the source, with its resolved tag."""

    value: str
    line: int
    tag: str | None = None


@dataclass(frozen=True)
class MappingNode:
    """Ordered (key, value) pairs. Keys are not guaranteed to be unique."""

    pairs: list[tuple[Node, Node]] = field(default_factory=list)
    line: int = 0


@dataclass(frozen=True)
class SequenceNode:
    """Ordered list of child nodes."""

    items: list[Node] = field(default_factory=list)
    line: int = 0


Node = ScalarNode | MappingNode | SequenceNode
