"""YAML loader that builds position-tracked node trees for validation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml import nodes as yaml_nodes
from ruamel.yaml.error import YAMLError

from podlint.models.nodes import MappingNode, Node, ScalarNode, SequenceNode

logger = logging.getLogger("podlint.parser")

# ---------------------------------------------------------------------------
# Safety limits
# ---------------------------------------------------------------------------

_MAX_DOCUMENT_SIZE = 5_000_000  # 5M characters
_MAX_NODE_COUNT = 50_000
_MAX_DEPTH = 64

_CORE_TAG_PREFIX = "tag:yaml.org,2002:"


class ManifestLoadError(Exception):
    """Base class for failures that happen before validation can start."""


class ManifestReadError(ManifestLoadError):
    """Raised when the manifest file cannot be read."""


class ManifestParseError(ManifestLoadError):
    """Raised when the manifest text is not well-formed YAML."""


class ManifestSafetyError(ManifestLoadError):
    """Raised when YAML input violates safety constraints.

    Distinct from parse errors: the text is valid YAML, but too large, too
    deep or expands into too many nodes (e.g. billion-laughs aliases).
    """


def short_tag(tag: str | None) -> str | None:
    """Render core-schema tags in ``!!`` shorthand; leave custom tags alone."""
    if tag is None:
        return None
    if tag.startswith(_CORE_TAG_PREFIX):
        return "!!" + tag[len(_CORE_TAG_PREFIX) :]
    return tag


class ManifestLoader:
    """Composes YAML text into ``Node`` trees, one per document.

    Uses ruamel.yaml's composer, so every node keeps its source mark and
    the tag the resolver assigned to it (plain ``80`` is ``!!int``, quoted
    ``"80"`` is ``!!str``).
    """

    def __init__(
        self,
        max_document_size: int = _MAX_DOCUMENT_SIZE,
        max_depth: int = _MAX_DEPTH,
        max_node_count: int = _MAX_NODE_COUNT,
    ) -> None:
        self._yaml = YAML()
        self.max_document_size = max_document_size
        self.max_depth = max_depth
        self.max_node_count = max_node_count

    # -- public loading API --------------------------------------------------

    def load(self, path: Path) -> list[Node]:
        """Read a manifest file and return its document roots."""
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise ManifestReadError(str(exc)) from exc
        try:
            content = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            # Undecodable bytes count as malformed YAML.
            raise ManifestParseError(str(exc)) from exc
        return self.load_string(content, filename=str(path))

    def load_string(self, content: str, filename: str = "<string>") -> list[Node]:
        """Parse YAML text (possibly a multi-document stream) into node trees."""
        if len(content) > self.max_document_size:
            raise ManifestSafetyError(
                f"YAML document exceeds maximum size "
                f"({len(content):,} chars > {self.max_document_size:,} limit)"
            )
        try:
            raw_documents = list(self._yaml.compose_all(content))
        except YAMLError as exc:
            raise ManifestParseError(str(exc)) from exc
        except RecursionError as exc:
            # The composer recurses once per nesting level, before _convert runs.
            raise ManifestSafetyError(
                f"YAML document exceeds maximum nesting depth ({self.max_depth})"
            ) from exc

        documents: list[Node] = []
        budget = [self.max_node_count]
        for raw in raw_documents:
            if raw is None:
                continue
            documents.append(self._convert(raw, depth=0, budget=budget))
        logger.debug("loaded %d document(s) from %s", len(documents), filename)
        return documents

    # -- conversion ----------------------------------------------------------

    def _convert(self, raw: Any, depth: int, budget: list[int]) -> Node:
        """Convert a ruamel.yaml node into the immutable node model."""
        if depth > self.max_depth:
            raise ManifestSafetyError(
                f"YAML document exceeds maximum nesting depth ({self.max_depth})"
            )
        budget[0] -= 1
        if budget[0] < 0:
            raise ManifestSafetyError(
                f"YAML document exceeds maximum node count ({self.max_node_count:,})"
            )

        line = raw.start_mark.line + 1
        if isinstance(raw, yaml_nodes.MappingNode):
            pairs = [
                (
                    self._convert(key, depth + 1, budget),
                    self._convert(value, depth + 1, budget),
                )
                for key, value in raw.value
            ]
            return MappingNode(pairs=pairs, line=line)
        if isinstance(raw, yaml_nodes.SequenceNode):
            items = [self._convert(item, depth + 1, budget) for item in raw.value]
            return SequenceNode(items=items, line=line)
        tag = short_tag(str(raw.tag)) if raw.tag is not None else None
        return ScalarNode(value=str(raw.value), line=line, tag=tag)
