"""Tests for the Mermaid class diagram renderer."""

import pytest

from modgraph.graph import DependencyGraph, GraphBuilder
from modgraph.renderers import MermaidClassDiagram
from modgraph.renderers.class_diagram import FRONT_MATTER, INDEPENDENT_STYLE, UNUSED_STYLE


@pytest.fixture
def renderer():
    return MermaidClassDiagram()


class TestClassDiagram:
    """Test class diagram output."""

    def test_empty_graph(self, renderer):
        assert renderer.render(DependencyGraph()) == (
            FRONT_MATTER + "classDiagram\ndirection TB\n\n\n\n\n"
        )

    def test_header(self, renderer, user_database_graph):
        output = renderer.render(user_database_graph)
        assert output.startswith(
            "---\nconfig:\n  class:\n    hideEmptyMembersBox: true\n---\n"
            "classDiagram\ndirection TB\n"
        )

    def test_class_blocks_list_exports(self, renderer, user_database_graph):
        output = renderer.render(user_database_graph)
        assert "    class UserModule {\n        + UserService\n    }\n" in output
        assert "    class DatabaseModule {\n        + DatabaseService\n    }\n" in output

    def test_exports_hidden(self, user_database_graph):
        output = MermaidClassDiagram(show_exports=False).render(user_database_graph)
        assert "    class UserModule {\n    }\n" in output
        assert "+ UserService" not in output

    def test_relation_with_label(self, renderer, user_database_graph):
        output = renderer.render(user_database_graph)
        assert "    UserModule ..> DatabaseModule : DatabaseService\n" in output

    def test_relation_without_label(self, user_database_graph):
        output = MermaidClassDiagram(show_services=False).render(user_database_graph)
        assert "    UserModule ..> DatabaseModule\n" in output

    def test_relation_label_truncated(self):
        graph = (
            GraphBuilder()
            .module("A")
            .module("B")
            .edge("A", "B", ["App\\VeryLongDatabaseServiceName"])
            .build()
        )
        output = MermaidClassDiagram(max_service_length=20).render(graph)
        assert "    A ..> B : VeryLongDatabaseS...\n" in output

    def test_stereotypes(self, renderer, user_database_graph):
        output = renderer.render(user_database_graph)
        assert "    <<independent>> UserModule\n" in output
        assert "    <<independent>> DatabaseModule\n" in output
        assert "    <<unused>> UserModule\n" in output
        assert "<<unused>> DatabaseModule" not in output

    def test_class_assignments_and_defs(self, renderer, user_database_graph):
        output = renderer.render(user_database_graph)
        assert "    class UserModule:::independent\n" in output
        assert "    class UserModule:::unused\n" in output
        assert f"    classDef independent {INDEPENDENT_STYLE}\n" in output
        assert output.endswith(f"    classDef unused {UNUSED_STYLE}\n")

    def test_sanitized_names(self, renderer):
        graph = GraphBuilder().module("App\\Web-Module").build()
        output = renderer.render(graph)
        assert "    class Web_Module {\n" in output
        assert "    class Web_Module:::independent\n" in output

    def test_dangling_edge_skipped(self, renderer):
        graph = GraphBuilder().module("A").edge("A", "Ghost").build()
        assert "..>" not in renderer.render(graph)

    def test_no_classdefs_without_markers(self, renderer):
        graph = (
            GraphBuilder()
            .module("A", imports=["x"])
            .module("B", imports=["x"])
            .edge("A", "B")
            .edge("B", "A")
            .build()
        )
        assert "classDef" not in renderer.render(graph)
