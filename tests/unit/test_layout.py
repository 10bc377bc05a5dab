from researcher_graph.layout import compute_layouts, relevance_strength
from researcher_graph.models import Researcher


def test_layouts_cover_every_researcher_and_are_deterministic():
    researchers = [
        Researcher(id="1", field="B"),
        Researcher(id="2", field="A"),
        Researcher(id="3", field="A"),
    ]
    edges = [{"source": "1", "target": "2", "value": 3}, {"source": "2", "target": "3", "value": 3}]
    field_pos, central_pos = compute_layouts(researchers, edges)
    assert set(field_pos) == set(central_pos) == {"1", "2", "3"}
    assert compute_layouts(researchers, edges) == (field_pos, central_pos)


def test_most_connected_researcher_is_nearest_center():
    researchers = [Researcher(id=str(i)) for i in range(4)]
    edges = [{"source": "0", "target": str(i), "value": 2} for i in range(1, 4)]
    _, central_pos = compute_layouts(researchers, edges)

    def dist(p):
        return (p["x"] ** 2 + p["y"] ** 2) ** 0.5

    assert dist(central_pos["0"]) < min(dist(central_pos[str(i)]) for i in range(1, 4))


def test_empty_input():
    assert compute_layouts([], []) == ({}, {})


def test_relevance_strength_sums_edge_scores():
    edges = [
        {"source": "a", "target": "b", "value": 7},
        {"source": "c", "target": "d", "value": 2},
        {"source": "c", "target": "e", "value": 2},
        {"source": "c", "target": "zzz", "value": 5},
    ]
    assert relevance_strength(["a", "b", "c", "d", "e"], edges) == {"a": 7, "b": 7, "c": 9, "d": 2, "e": 2}


def test_one_strong_link_outranks_several_weak_ones():
    researchers = [Researcher(id=n) for n in "abcde"]
    edges = [
        {"source": "a", "target": "b", "value": 7},
        {"source": "c", "target": "d", "value": 2},
        {"source": "c", "target": "e", "value": 2},
    ]
    _, strength_pos = compute_layouts(researchers, edges)

    def dist(p):
        return (p["x"] ** 2 + p["y"] ** 2) ** 0.5

    assert dist(strength_pos["a"]) < dist(strength_pos["c"]) < dist(strength_pos["d"])


def test_unconnected_researchers_sit_on_outer_ring():
    researchers = [Researcher(id="1"), Researcher(id="2")]
    _, strength_pos = compute_layouts(researchers, [])
    for p in strength_pos.values():
        assert abs((p["x"] ** 2 + p["y"] ** 2) ** 0.5 - 450.0) < 1e-6
