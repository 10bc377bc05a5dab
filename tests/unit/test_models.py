from researcher_graph.models import Connection, RelevanceIndex, Researcher


def test_from_row_normalizes_cells():
    r = Researcher.from_row({"id": 3.0, "name": None, "field": float("nan"), "keywords": "k"})
    assert r.id == "3"
    assert r.name == ""
    assert r.field == ""
    assert r.keywords == "k"
    assert r.program == ""


def test_relevance_index_accessors():
    index = RelevanceIndex(edges={"a": [Connection("b", 3)], "b": [Connection("a", 3)], "c": []})
    assert "a" in index
    assert len(index) == 3
    assert index.edge_count() == 2
    assert index.connections_for("zzz") == []
    assert index.to_dict()["a"] == [{"id": "b", "score": 3}]
