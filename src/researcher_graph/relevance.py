"""Pairwise relevance scoring between researchers.

Scores are weighted tag overlaps: every tag of researcher A that also appears
in the same attribute of researcher B adds that attribute's weight. The full
index is computed once per loaded record set; filtering never touches it.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

from .models import Connection, RelevanceIndex
from .tags import unique_tags

logger = logging.getLogger('researcher_graph')

# Program affiliation is tokenized like the others but carries no weight:
# sharing a program is not evidence of research relevance.
WEIGHTS: Dict[str, int] = {
    'field': 3,
    'theme': 2,
    'keywords': 1,
    'keytechnology': 1,
    'program': 0,
}

SCORED_ATTRIBUTES = tuple(name for name, weight in WEIGHTS.items() if weight > 0)


def _attr(record: Any, name: str) -> str:
    return getattr(record, name, '') or ''


def _tag_profile(record: Any) -> Dict[str, List[str]]:
    """Distinct tags per scored attribute, in first-seen order."""
    return {name: unique_tags(_attr(record, name)) for name in SCORED_ATTRIBUTES}


def _score_profiles(own: Dict[str, List[str]], other: Dict[str, List[str]]) -> int:
    score = 0
    for name in SCORED_ATTRIBUTES:
        other_tags = set(other[name])
        score += WEIGHTS[name] * sum(1 for tag in own[name] if tag in other_tags)
    return score


def score_pair(a: Any, b: Any) -> int:
    """Relevance of ``b`` as seen from ``a``.

    Each distinct tag of ``a`` counts once per attribute, however often it
    repeats on either side.
    """
    return _score_profiles(_tag_profile(a), _tag_profile(b))


def build_graph(records: Sequence[Any]) -> RelevanceIndex:
    """Compute every researcher's ranked relevance list.

    Only peers with a positive score are kept. Lists are ordered by
    descending score; equal scores keep the peers' order in ``records``.
    Records are read, never modified.
    """
    profiles = [_tag_profile(r) for r in records]
    edges: Dict[str, List[Connection]] = {}

    for i, record in enumerate(records):
        rid = _attr(record, 'id')
        if rid in edges:
            continue
        connections: List[Connection] = []
        seen = set()
        for j, other in enumerate(records):
            peer_id = _attr(other, 'id')
            if peer_id == rid or peer_id in seen:
                continue
            seen.add(peer_id)
            score = _score_profiles(profiles[i], profiles[j])
            if score > 0:
                connections.append(Connection(peer_id=peer_id, score=score))
        connections.sort(key=lambda c: -c.score)
        edges[rid] = connections

    index = RelevanceIndex(edges=edges)
    logger.info(f"Relevance index built: {len(records)} researchers, {index.edge_count()} directed edges")
    return index
