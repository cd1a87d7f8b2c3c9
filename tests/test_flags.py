import pytest

from graphdb.database import Database
from graphdb.flags import (
    check_flow_connectivity,
    detect_cycle,
    detect_negative_cycle,
    negative_weighted_edges,
    orphan_nodes,
)


@pytest.fixture
def db():
    return Database()


def test_no_cycle(db):
    db.add_node("A")
    db.add_node("B")
    db.add_edge("A", "B", 0)
    assert detect_cycle(db) is False


def test_simple_cycle(db):
    db.add_node("A")
    db.add_node("B")
    db.add_edge("A", "B", 0)
    db.add_edge("B", "A", 0)
    assert detect_cycle(db) is True


def test_self_loop_is_cycle(db):
    db.add_edge("A", "A", 1)
    assert detect_cycle(db) is True


def test_diamond_is_not_cycle(db):
    db.add_edge("A", "B", 1)
    db.add_edge("A", "C", 1)
    db.add_edge("B", "D", 1)
    db.add_edge("C", "D", 1)
    assert detect_cycle(db) is False


def test_empty_graph_has_no_cycle(db):
    assert detect_cycle(db) is False


def test_flow_connectivity(db):
    assert check_flow_connectivity(db) is False
    db.add_node("A")
    assert check_flow_connectivity(db) is False
    db.add_edge("A", "B", 1)
    assert check_flow_connectivity(db) is True


def test_no_negative_cycle(db):
    db.add_edge("A", "B", -1)
    db.add_edge("B", "C", 2)
    assert detect_negative_cycle(db) == []


def test_negative_cycle_is_closed_walk(db):
    db.add_edge("S", "A", 1)
    db.add_edge("A", "B", -1)
    db.add_edge("B", "A", -1)
    cycle = detect_negative_cycle(db)
    assert cycle[0] == cycle[-1]
    assert set(cycle) == {"A", "B"}
    for source, target in zip(cycle, cycle[1:]):
        assert (source, target) in db.relationships


def test_negative_weighted_edges(db):
    db.add_edge("A", "B", -2)
    db.add_edge("B", "C", 1)
    db.add_edge("C", "A", -4)
    assert negative_weighted_edges(db) == [("A", "B"), ("C", "A")]


def test_orphan_nodes(db):
    db.add_node("C")
    db.add_edge("A", "B", 1)
    assert orphan_nodes(db) == ["C"]


def test_source_with_deleted_edges_is_not_orphan(db):
    db.add_edge("A", "B", 1)
    db.delete_edge("A", "B")
    assert orphan_nodes(db) == ["B"]