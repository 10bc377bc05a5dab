from researcher_graph.models import Researcher
from researcher_graph.relevance import build_graph
from researcher_graph.render.page import graph_payload, render_page
from researcher_graph.render.styles import edge_style, field_color, node_colors, text_color


def sample():
    researchers = [
        Researcher(id="1", name="Aoki", field="免疫学関連", keywords="a,b,c,d"),
        Researcher(id="2", name="Baba", field="免疫学関連", keywords="a,b,c,d"),
        Researcher(id="3", name="Chiba", field="ウイルス学関連", keywords="a"),
    ]
    return researchers, build_graph(researchers)


def test_text_color_by_brightness():
    assert text_color("#FF9999") == "#333333"
    assert text_color("#1976D2") == "#FFFFFF"


def test_field_colors_fall_back_to_other():
    assert field_color("免疫学関連") == "#FFCC99"
    assert field_color("unknown") == "#A0AEC0"
    assert node_colors("") == ["#A0AEC0"]
    assert node_colors("免疫学関連、ウイルス学関連") == ["#FFCC99", "#D0F0C0"]


def test_edge_style_tiers():
    assert edge_style(7)["tier"] == "strong"
    assert edge_style(4)["tier"] == "medium"
    assert edge_style(2)["tier"] == "weak"
    assert edge_style(1)["width"] == 0.8


def test_graph_payload_restricts_links():
    researchers, index = sample()
    payload = graph_payload(researchers, index, min_score=2)
    assert payload["researcher_count"] == 3
    assert [(l["source"], l["target"], l["value"]) for l in payload["links"]] == [("1", "2", 7)]
    assert payload["connection_count"] == 1
    assert payload["links"][0]["tier"] == "strong"

    payload = graph_payload(researchers[1:], index, min_score=1)
    assert [(l["source"], l["target"]) for l in payload["links"]] == [("2", "3")]


def test_render_page_embeds_graph():
    researchers, index = sample()
    html = render_page(researchers=researchers, index=index, min_score=2, title="Network")
    assert "<title>Network</title>" in html
    assert "Aoki" in html
    assert "const API_BASE = null" in html
