"""Tests for loading schemas and building graphs."""

import pytest

from grammar.builder import build_graph, build_graph_from_files, load_definitions
from grammar.parser import parse, TrailingDataError


SCHEMA = """
// Certificates
struct {
    opaque cert_data<V>;
} Certificate;

enum {
    reserved(0),
    basic(1),
    x509(2),
    (65535)
} CredentialType;

struct {
    CredentialType credential_type;
    select (Credential.credential_type) {
        case basic:
            opaque identity<V>;

        case x509:
            Certificate chain<V>;
    };
} Credential;
"""


class TestBuildGraph:
    """Tests for build_graph()."""

    def test_nodes_follow_definitions(self):
        """Test one node per definition, in order."""
        graph = build_graph(parse("uint8 a; struct { a x; } B; enum { (1) } C;"))

        assert graph.nodes == ["a", "B", "C"]

    def test_edges_follow_dependencies(self):
        """Test that edges are the extracted dependencies."""
        graph = build_graph(parse("uint8 a; struct { a x; uint16 y; } B;"))

        assert graph.get_targets("a") == {"uint8"}
        assert graph.get_targets("B") == {"a", "uint16"}
        assert graph.get_undefined() == {"uint8", "uint16"}


class TestLoadDefinitions:
    """Tests for reading schema files."""

    def test_load_strips_comments(self, tmp_path):
        """Test that comments in files do not break parsing."""
        path = tmp_path / "credential.tls"
        path.write_text(SCHEMA, encoding="utf-8")

        definitions = load_definitions(path)

        assert [d.name for d in definitions] == ["Certificate", "CredentialType", "Credential"]

    def test_missing_file(self, tmp_path):
        """Test that read errors propagate."""
        with pytest.raises(OSError):
            load_definitions(tmp_path / "missing.tls")

    def test_parse_errors_propagate(self, tmp_path):
        """Test that parse errors propagate."""
        path = tmp_path / "broken.tls"
        path.write_text("uint8 a;\nstruct {", encoding="utf-8")

        with pytest.raises(TrailingDataError):
            load_definitions(path)

    def test_graph_from_several_files(self, tmp_path):
        """Test that definitions from several files share one graph."""
        first = tmp_path / "a.tls"
        second = tmp_path / "b.tls"
        first.write_text(SCHEMA, encoding="utf-8")
        second.write_text("struct { Credential credential; } LeafNode;", encoding="utf-8")

        graph = build_graph_from_files([first, second])

        assert graph.nodes == ["Certificate", "CredentialType", "Credential", "LeafNode"]
        assert graph.get_sources("Credential") == {"LeafNode"}
        assert graph.get_targets("Credential") == {"Certificate", "CredentialType", "opaque"}
        assert graph.get_roots() == {"LeafNode"}
