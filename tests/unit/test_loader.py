"""Tests for the YAML loader and its safety limits."""

from __future__ import annotations

from pathlib import Path

import pytest

from podlint.models.nodes import INT_TAG, STR_TAG, MappingNode, ScalarNode, SequenceNode
from podlint.parser.loader import (
    ManifestLoader,
    ManifestParseError,
    ManifestReadError,
    ManifestSafetyError,
    short_tag,
)
from tests.conftest import FIXTURES_DIR, VALID_POD_YAML


class TestManifestLoader:
    def test_load_string(self, loader: ManifestLoader) -> None:
        docs = loader.load_string(VALID_POD_YAML)
        assert len(docs) == 1
        root = docs[0]
        assert isinstance(root, MappingNode)
        keys = [key.value for key, _ in root.pairs]
        assert keys == ["apiVersion", "kind", "metadata", "spec"]

    def test_load_string_empty(self, loader: ManifestLoader) -> None:
        assert loader.load_string("") == []

    def test_comments_only(self, loader: ManifestLoader) -> None:
        assert loader.load_string("# nothing here\n") == []

    def test_multi_document_stream(self, loader: ManifestLoader) -> None:
        docs = loader.load_string("a: 1\n---\nb: 2\n---\n- c\n")
        assert [type(d) for d in docs] == [MappingNode, MappingNode, SequenceNode]
        assert [d.line for d in docs] == [1, 3, 5]

    def test_load_file(self, loader: ManifestLoader) -> None:
        docs = loader.load(FIXTURES_DIR / "valid_pod.yaml")
        assert len(docs) == 1
        assert isinstance(docs[0], MappingNode)

    def test_missing_file_raises_read_error(self, loader: ManifestLoader, tmp_path: Path) -> None:
        with pytest.raises(ManifestReadError):
            loader.load(tmp_path / "missing.yaml")

    def test_invalid_utf8_raises_parse_error(self, loader: ManifestLoader, tmp_path: Path) -> None:
        path = tmp_path / "binary.yaml"
        path.write_bytes(b"a: \xff\n")
        with pytest.raises(ManifestParseError):
            loader.load(path)

    def test_malformed_yaml_raises_parse_error(self, loader: ManifestLoader) -> None:
        with pytest.raises(ManifestParseError):
            loader.load_string("key: [unclosed")


class TestLinesAndTags:
    """Lines are 1-based and belong to the node itself, not its parent."""

    YAML = 'plain: 80\nquoted: "80"\nitems:\n  - x\nempty:\ncustom: !thing value\n'

    def _values(self, loader: ManifestLoader) -> dict[str, object]:
        root = loader.load_string(self.YAML)[0]
        assert isinstance(root, MappingNode)
        return {key.value: value for key, value in root.pairs}

    def test_plain_number_is_int(self, loader: ManifestLoader) -> None:
        node = self._values(loader)["plain"]
        assert node == ScalarNode(value="80", line=1, tag=INT_TAG)

    def test_quoted_number_is_str(self, loader: ManifestLoader) -> None:
        node = self._values(loader)["quoted"]
        assert node == ScalarNode(value="80", line=2, tag=STR_TAG)

    def test_sequence_line(self, loader: ManifestLoader) -> None:
        node = self._values(loader)["items"]
        assert isinstance(node, SequenceNode)
        assert node.line == 4
        assert node.items == [ScalarNode(value="x", line=4, tag=STR_TAG)]

    def test_null_value(self, loader: ManifestLoader) -> None:
        node = self._values(loader)["empty"]
        assert isinstance(node, ScalarNode)
        assert node.tag == "!!null"
        assert node.line == 5

    def test_custom_tag_kept(self, loader: ManifestLoader) -> None:
        node = self._values(loader)["custom"]
        assert isinstance(node, ScalarNode)
        assert node.tag == "!thing"
        assert node.value == "value"

    def test_short_tag(self) -> None:
        assert short_tag("tag:yaml.org,2002:str") == "!!str"
        assert short_tag("!local") == "!local"
        assert short_tag(None) is None


class TestSafetyLimits:
    def test_oversized_document_rejected(self) -> None:
        loader = ManifestLoader(max_document_size=10)
        with pytest.raises(ManifestSafetyError, match="maximum size"):
            loader.load_string("key: " + "x" * 20)

    def test_just_under_limit_passes(self) -> None:
        loader = ManifestLoader(max_document_size=10)
        docs = loader.load_string("key: x\n")
        assert len(docs) == 1

    def test_deep_nesting_rejected(self) -> None:
        loader = ManifestLoader(max_depth=5)
        with pytest.raises(ManifestSafetyError, match="nesting depth"):
            loader.load_string("[" * 10 + "]" * 10)

    def test_very_deep_nesting_under_default_limits(self, loader: ManifestLoader) -> None:
        yaml = "a: " + "[" * 3000 + "]" * 3000 + "\n"
        with pytest.raises(ManifestSafetyError, match="nesting depth"):
            loader.load_string(yaml)

    def test_excessive_node_count_rejected(self) -> None:
        loader = ManifestLoader(max_node_count=10)
        yaml = "\n".join(f"k{i}: v{i}" for i in range(10))
        with pytest.raises(ManifestSafetyError, match="node count"):
            loader.load_string(yaml)

    def test_node_count_spans_documents(self) -> None:
        loader = ManifestLoader(max_node_count=6)
        with pytest.raises(ManifestSafetyError, match="node count"):
            loader.load_string("a: 1\n---\nb: 2\n---\nc: 3\n")

    def test_alias_expansion_counts_nodes(self) -> None:
        """Billion-laughs style aliases expand into the node budget."""
        loader = ManifestLoader(max_node_count=100)
        yaml = (
            "a: &a [x, x, x, x, x, x, x, x, x, x]\n"
            "b: &b [*a, *a, *a, *a, *a, *a, *a, *a, *a, *a]\n"
            "c: [*b, *b, *b, *b, *b, *b, *b, *b, *b, *b]\n"
        )
        with pytest.raises(ManifestSafetyError, match="node count"):
            loader.load_string(yaml)

    def test_anchors_within_budget_pass(self, loader: ManifestLoader) -> None:
        docs = loader.load_string("a: &port 8080\nb: *port\n")
        root = docs[0]
        assert isinstance(root, MappingNode)
        assert root.pairs[1][1] == ScalarNode(value="8080", line=1, tag=INT_TAG)
