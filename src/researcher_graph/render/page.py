from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..filtering import visible_edges
from ..layout import compute_layouts
from ..models import RelevanceIndex
from .styles import edge_style, node_colors, text_color

TEMPLATES_DIR = Path(__file__).with_name('templates')


def graph_payload(visible: Sequence[Any], index: RelevanceIndex, min_score: int) -> Dict[str, Any]:
    """Nodes and styled links for the visible researchers.

    Links only join researchers that are both visible and meet ``min_score``.
    """
    links = visible_edges(index, visible, min_score=min_score)
    for link in links:
        link.update(edge_style(link['value']))
    nodes = []
    for r in visible:
        colors = node_colors(r.field)
        nodes.append({
            **r.to_dict(),
            'colors': colors,
            'text_color': text_color(colors[0]),
        })
    return {
        'nodes': nodes,
        'links': links,
        'researcher_count': len(nodes),
        'connection_count': len(links),
    }


def render_page(
    *,
    researchers: Sequence[Any],
    index: RelevanceIndex,
    min_score: int,
    title: str = 'Researcher Network',
    api_base: Optional[str] = None,
) -> str:
    """Render the network page through the Jinja2 template.

    With ``api_base`` set the page refreshes itself from the JSON API; without
    it the embedded payload is all the page shows (static export).
    """
    payload = graph_payload(researchers, index, min_score)
    field_pos, central_pos = compute_layouts(researchers, payload['links'])
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(['html', 'xml', 'j2'])
    )
    template = env.get_template('researchers_network.html.j2')
    return template.render(
        title=title,
        graph=payload,
        connections=index.to_dict(),
        field_pos=field_pos,
        central_pos=central_pos,
        api_base=api_base,
    )
