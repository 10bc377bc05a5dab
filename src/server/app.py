from __future__ import annotations

import hashlib
import logging
import threading
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from flask import Flask, Response, jsonify, request
from flask_cors import CORS

from researcher_graph.config import CONFIG
from researcher_graph.data.loaders import load_researchers
from researcher_graph.filtering import (
    ATTRIBUTE_FILTERS,
    TEXT_FILTERS,
    filter_visible,
    related_researchers,
    unique_values,
)
from researcher_graph.models import RelevanceIndex, Researcher
from researcher_graph.predicates import build_expression
from researcher_graph.relevance import build_graph
from researcher_graph.render.page import graph_payload, render_page

logger = logging.getLogger('researcher_graph')


def create_app(data_path: Optional[str] = None) -> Flask:
    app = Flask(__name__)
    CORS(app)

    csv_path = data_path or CONFIG.data_csv
    # (researchers, index) swapped as one tuple so readers never see a mix
    state: Dict[str, Tuple[List[Researcher], RelevanceIndex]] = {}

    def reload() -> Tuple[List[Researcher], RelevanceIndex]:
        researchers = load_researchers(csv_path)
        index = build_graph(researchers)
        state['data'] = (researchers, index)
        return state['data']

    reload()
    app.config['RELOAD_DATA'] = reload
    app.config['DATA_PATH'] = csv_path

    def _criteria_from_args() -> Dict[str, str]:
        """Read filter criteria from the query string.

        ``field=a|b`` passes an expression through as-is; repeated values with
        a mode (``field=a&field=b&field_mode=AND``) are encoded first.
        """
        criteria: Dict[str, str] = {}
        for key in ATTRIBUTE_FILTERS:
            values = [v for v in request.args.getlist(key) if v]
            mode = request.args.get(f'{key}_mode')
            if mode is not None or len(values) > 1:
                expression = build_expression(values, mode or 'OR')
            else:
                expression = values[0] if values else ''
            if expression:
                criteria[key] = expression
        q = (request.args.get('q') or '').strip()
        if q:
            criteria['theme'] = q
            criteria['affiliation'] = q
        for key in TEXT_FILTERS:
            value = (request.args.get(key) or '').strip()
            if value:
                criteria[key] = value
        return criteria

    def _visible() -> Tuple[List[Researcher], RelevanceIndex, List[Researcher]]:
        researchers, index = state['data']
        visible = list(filter_visible(researchers, _criteria_from_args()))
        return researchers, index, visible

    @app.errorhandler(ValueError)
    def bad_request(e):
        return jsonify({"error": str(e)}), 400

    @app.get('/')
    def index_page():
        researchers, index = state['data']
        html = render_page(
            researchers=researchers,
            index=index,
            min_score=CONFIG.display.min_edge_score,
            api_base='/api',
        )
        return Response(html, mimetype='text/html')

    @app.get('/api/health')
    def health():
        researchers, _ = state['data']
        return jsonify({"status": "ok", "researchers": len(researchers)})

    @app.get('/api/researchers')
    def api_researchers():
        _, _, visible = _visible()
        return jsonify({"total": len(visible), "items": [r.to_dict() for r in visible]})

    @app.get('/api/researchers/<rid>')
    def api_researcher_detail(rid: str):
        researchers, index, visible = _visible()
        record = next((r for r in researchers if r.id == rid), None)
        if record is None:
            return jsonify({"error": "Researcher not found"}), 404
        related = related_researchers(index, visible, rid)
        return jsonify({
            "researcher": record.to_dict(),
            "visible": any(r.id == rid for r in visible),
            "connections": [{"id": c.peer_id, "score": c.score} for c in index.connections_for(rid)],
            "related": [{**peer.to_dict(), "score": score} for peer, score in related],
        })

    @app.get('/api/filters')
    def api_filters():
        researchers, _ = state['data']
        return jsonify({
            key: unique_values(researchers, attribute)
            for key, attribute in ATTRIBUTE_FILTERS.items()
        })

    @app.get('/api/graph')
    def api_graph():
        _, index, visible = _visible()
        try:
            min_score = int(request.args.get('min_score', CONFIG.display.min_edge_score))
        except ValueError:
            return jsonify({"error": "min_score must be an integer"}), 400
        return jsonify(graph_payload(visible, index, min_score))

    @app.post('/api/reload')
    def api_reload():
        researchers, index = reload()
        return jsonify({"researchers": len(researchers), "edges": index.edge_count()})

    return app


# --- Background poller for the researcher data file ---
def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with open(path, 'rb') as f:
        for chunk in iter(lambda: f.read(1024 * 1024), b''):
            h.update(chunk)
    return h.hexdigest()


def _poll_data_file(path: Path, reload: Callable[[], Any], interval: float) -> None:
    logger.info(f"Watching researcher data: {path} (every {interval}s)")
    last_sha = _sha256_file(path) if path.exists() else None
    while True:
        time.sleep(interval)
        try:
            if not path.exists():
                continue
            sha = _sha256_file(path)
            if sha == last_sha:
                continue
            last_sha = sha
            logger.info(f"Researcher data changed (SHA: {sha[:8]}...), rebuilding")
            reload()
        except OSError as e:
            logger.warning(f"Failed to check researcher data {path}: {e}")


def start_polling(app: Flask) -> None:
    """Start the background polling thread if not already running"""
    for thread in threading.enumerate():
        if thread.name == 'data_poller' and thread.is_alive():
            return
    t = threading.Thread(
        target=_poll_data_file,
        args=(Path(app.config['DATA_PATH']), app.config['RELOAD_DATA'], CONFIG.server.poll_interval),
        name='data_poller',
        daemon=True,
    )
    t.start()


def create_app_with_polling(data_path: Optional[str] = None) -> Flask:
    """Create Flask app and start polling thread when enabled"""
    app = create_app(data_path)
    if CONFIG.server.poll_enabled:
        start_polling(app)
    return app


if __name__ == '__main__':
    from researcher_graph.logging_setup import setup_logging

    setup_logging()
    app = create_app_with_polling()
    app.run(host=CONFIG.server.host, port=CONFIG.server.port, debug=True)
