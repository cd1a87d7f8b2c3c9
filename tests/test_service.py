import pytest

from graphdb.database import Database, EdgeNotFoundError, GraphError, NodeNotFoundError
from graphdb.flow import min_flow
from graphdb.report import flag_report
from graphdb.service import GraphService


@pytest.fixture
def service():
    return GraphService(Database())


def test_add_nodes(service):
    assert service.add_nodes('{"nodes":"A, B"}') == "nodes added"
    assert service.db.nodes == {"A", "B"}


def test_add_nodes_twice_keeps_set(service):
    service.add_nodes('{"nodes":"A, B"}')
    service.add_nodes('{"nodes":"B, C"}')
    assert service.db.nodes == {"A", "B", "C"}


def test_remove_nodes(service):
    service.add_nodes('{"nodes":"A, B, C"}')
    assert service.remove_nodes('{"nodes":"A, C"}') == "nodes deleted"
    assert service.db.nodes == {"B"}


def test_remove_nodes_rolls_back_on_missing(service):
    service.add_nodes('{"nodes":"A, B"}')
    with pytest.raises(NodeNotFoundError):
        service.remove_nodes('{"nodes":"A, Z"}')
    assert service.db.nodes == {"A", "B"}


def test_add_weighted_edges(service):
    result = service.add_edges('{"edges":"A -{5}-> B, B -{3}-> C"}')
    assert result == "Edges added successfully"
    assert service.db.edges == {"A": {"B": 5}, "B": {"C": 3}}
    assert service.db.nodes == {"A", "B", "C"}


def test_add_unweighted_edges_get_zero(service):
    service.add_edges('{"edges":"A -> B, B -> C"}')
    assert service.db.edges == {"A": {"B": 0}, "B": {"C": 0}}


def test_remove_edges(service):
    service.add_edges('{"edges":"A -> B, B -> C"}')
    assert service.remove_edges('{"edges":"A -> B"}') == "Edges deleted successfully"
    assert service.db.relationships == {("B", "C")}


def test_remove_missing_edge_changes_nothing(service):
    service.add_edges('{"edges":"A -> B, B -> C"}')
    with pytest.raises(EdgeNotFoundError, match="some edge not found"):
        service.remove_edges('{"edges":"A -> B, C -> A"}')
    assert service.db.relationships == {("A", "B"), ("B", "C")}


def test_children_and_parents(service):
    service.add_edges('{"edges":"A -> B, A -> C, D -> C"}')
    assert service.children('{"node":"A"}') == "B C "
    assert service.parents('{"node":"C"}') == "A D "
    assert service.children('{"node":"C"}') == ""


def test_children_without_node_raises(service):
    with pytest.raises(ValueError):
        service.children('{"node":""}')


def test_flow_on_empty_graph_raises(service):
    with pytest.raises(GraphError, match="Graph is empty!"):
        service.flow()


def test_flow_matches_module(service):
    service.add_edges('{"edges":"A -{2}-> B, B -{4}-> C"}')
    assert service.flow() == min_flow(service.db)


def test_flags_on_empty_graph(service):
    assert service.flags().startswith("Empty Graph?: Yes\n")


def test_flags_matches_report(service):
    service.add_edges('{"edges":"A -> B"}')
    assert service.flags() == flag_report(service.db)


def test_clear(service):
    service.add_edges('{"edges":"A -> B"}')
    assert service.clear() == "Graph cleared successfully"
    assert service.db.nodes == set()
    assert service.db.edges == {}
    assert service.db.relationships == set()