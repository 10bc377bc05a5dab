import argparse
import logging
from pathlib import Path

from .config import CONFIG
from .data.loaders import load_researchers
from .logging_setup import setup_logging
from .relevance import build_graph
from .render.page import render_page

logger = logging.getLogger('researcher_graph')


def cmd_visualize(args: argparse.Namespace) -> int:
    researchers = load_researchers(args.input or CONFIG.data_csv)
    index = build_graph(researchers)
    min_score = args.min_score if args.min_score is not None else CONFIG.display.min_edge_score
    html_content = render_page(researchers=researchers, index=index, min_score=min_score)
    out = Path(args.output or CONFIG.output_html)
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, 'w', encoding='utf-8') as f:
        f.write(html_content)
    logger.info(f"Wrote {out}")
    return 0


def cmd_related(args: argparse.Namespace) -> int:
    researchers = load_researchers(args.input or CONFIG.data_csv)
    by_id = {r.id: r for r in researchers}
    if args.id not in by_id:
        logger.error(f"Unknown researcher id: {args.id}")
        return 1
    index = build_graph(researchers)
    connections = index.connections_for(args.id)
    if args.limit:
        connections = connections[:args.limit]
    print(f"{by_id[args.id].name} ({args.id})")
    for c in connections:
        peer = by_id[c.peer_id]
        print(f"  {c.score:>3}  {peer.name}  [{peer.affiliation}]")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    from server.app import create_app_with_polling

    app = create_app_with_polling(args.input)
    app.run(host=args.host or CONFIG.server.host, port=args.port or CONFIG.server.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog='researcher-graph')
    sub = p.add_subparsers(dest='command', required=True)

    v = sub.add_parser('visualize', help='Generate network visualization HTML')
    v.add_argument('-i', '--input', help='Researcher CSV (default: RESEARCHERS_CSV)')
    v.add_argument('-o', '--output', help='Output HTML file (default: dist/index.html)')
    v.add_argument('--min-score', type=int, help='Smallest relevance score drawn as an edge')
    v.set_defaults(func=cmd_visualize)

    r = sub.add_parser('related', help='List the researchers most relevant to one researcher')
    r.add_argument('id', help='Researcher id')
    r.add_argument('-i', '--input', help='Researcher CSV (default: RESEARCHERS_CSV)')
    r.add_argument('--limit', type=int, default=10, help='Show at most N entries (0 for all)')
    r.set_defaults(func=cmd_related)

    s = sub.add_parser('serve', help='Run the JSON API and interactive page')
    s.add_argument('-i', '--input', help='Researcher CSV (default: RESEARCHERS_CSV)')
    s.add_argument('--host')
    s.add_argument('--port', type=int)
    s.set_defaults(func=cmd_serve)
    return p


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging()
    return args.func(args)


if __name__ == '__main__':
    raise SystemExit(main())
