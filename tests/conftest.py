"""Shared test fixtures for modgraph."""

from pathlib import Path

import pytest

from modgraph.graph import GraphBuilder

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


@pytest.fixture
def boot_graph():
    """Cfg and Db are roots, User depends on Db, Order depends on User."""
    return (
        GraphBuilder()
        .module("Cfg", exports=["C"])
        .module("Db", exports=["D"])
        .module("User", imports=["U"])
        .module("Order", imports=["O"])
        .edge("User", "Db", ["D"])
        .edge("Order", "User", ["U"])
        .build()
    )


@pytest.fixture
def user_database_graph():
    """UserModule imports DatabaseService from DatabaseModule."""
    return (
        GraphBuilder()
        .module("App\\Module\\UserModule", exports=["App\\Service\\UserService"])
        .module("App\\Module\\DatabaseModule", exports=["App\\Service\\DatabaseService"])
        .edge(
            "App\\Module\\UserModule",
            "App\\Module\\DatabaseModule",
            ["App\\Service\\DatabaseService"],
        )
        .build()
    )


@pytest.fixture
def cyclic_graph():
    """A <-> B cycle, C depends on A, Root has no dependencies."""
    return (
        GraphBuilder()
        .module("A")
        .module("B")
        .module("C")
        .module("Root")
        .edge("A", "B")
        .edge("B", "A")
        .edge("C", "A")
        .build()
    )


@pytest.fixture
def ecommerce_graph_path():
    return EXAMPLES_DIR / "ecommerce" / "graph.json"
