"""Multi-criteria filtering of researcher records.

Criteria are a mapping from filter key to an expression string (see
:mod:`researcher_graph.predicates`). Attribute criteria are combined with a
logical AND; ``theme`` and ``affiliation`` share one free-text query matched
as a case-insensitive substring of name, theme or affiliation.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .models import RelevanceIndex
from .predicates import MODE_OR, build_expression, matches
from .tags import tokenize

# filter key -> record attribute it is evaluated against
ATTRIBUTE_FILTERS: Dict[str, str] = {
    'field': 'field',
    'keyword': 'keywords',
    'keytechnology': 'keytechnology',
    'program': 'program',
}
TEXT_FILTERS = ('theme', 'affiliation')
TEXT_TARGETS = ('name', 'theme', 'affiliation')
FILTER_KEYS = tuple(ATTRIBUTE_FILTERS) + TEXT_FILTERS

MULTI_VALUED_ATTRIBUTES = ('keywords', 'keytechnology', 'field', 'program', 'theme')


def _attr(record: Any, name: str) -> str:
    return getattr(record, name, '') or ''


def _text_query(criteria: Mapping[str, Optional[str]]) -> str:
    return criteria.get('theme') or criteria.get('affiliation') or ''


def _passes(record: Any, criteria: Mapping[str, Optional[str]], query: str) -> bool:
    if query:
        if not any(query in _attr(record, name).lower() for name in TEXT_TARGETS):
            return False
    for key, attribute in ATTRIBUTE_FILTERS.items():
        expression = criteria.get(key)
        if expression and not matches(_attr(record, attribute), expression):
            return False
    return True


def filter_visible(records: Sequence[Any], criteria: Mapping[str, Optional[str]]) -> Sequence[Any]:
    """Return the records passing every active criterion.

    With no criteria at all the input sequence itself is returned.
    """
    if not criteria:
        return records
    query = _text_query(criteria).lower()
    return [r for r in records if _passes(r, criteria, query)]


def build_criteria(
    selections: Optional[Mapping[str, Iterable[str]]] = None,
    modes: Optional[Mapping[str, str]] = None,
    search_text: str = '',
) -> Dict[str, str]:
    """Translate filter-panel state into a criteria mapping.

    ``selections`` maps attribute filter keys to chosen values and ``modes``
    maps the same keys to ``"AND"`` or ``"OR"`` (default OR). Empty entries
    are left out so that the result is ``{}`` when nothing is selected.
    """
    selections = selections or {}
    modes = modes or {}
    criteria: Dict[str, str] = {}
    for key in ATTRIBUTE_FILTERS:
        expression = build_expression(selections.get(key) or [], modes.get(key, MODE_OR))
        if expression:
            criteria[key] = expression
    if search_text:
        criteria['theme'] = search_text
        criteria['affiliation'] = search_text
    return criteria


def unique_values(records: Iterable[Any], attribute: str) -> List[str]:
    """Sorted distinct option values of ``attribute`` across ``records``."""
    values = set()
    for record in records:
        raw = getattr(record, attribute, None)
        if not isinstance(raw, str) or not raw:
            continue
        if attribute in MULTI_VALUED_ATTRIBUTES:
            for item in tokenize(raw):
                if item.strip():
                    values.add(item.strip())
        elif raw.strip():
            values.add(raw.strip())
    return sorted(values)


def related_researchers(
    index: RelevanceIndex,
    visible: Sequence[Any],
    selected_id: str,
) -> List[Tuple[Any, int]]:
    """Visible peers of ``selected_id`` with their scores, best first.

    Returns an empty list when the selected researcher is itself filtered out.
    """
    by_id = {_attr(r, 'id'): r for r in visible}
    if selected_id not in by_id:
        return []
    return [
        (by_id[c.peer_id], c.score)
        for c in index.connections_for(selected_id)
        if c.peer_id in by_id
    ]


def visible_edges(
    index: RelevanceIndex,
    visible: Sequence[Any],
    min_score: int = 1,
) -> List[Dict[str, Any]]:
    """Edges to draw between visible researchers, one per unordered pair.

    Stored scores are symmetric, so the first direction met while walking
    ``visible`` in order stands for the pair.
    """
    visible_ids = [_attr(r, 'id') for r in visible]
    visible_set = set(visible_ids)
    seen = set()
    links: List[Dict[str, Any]] = []
    for rid in visible_ids:
        for c in index.connections_for(rid):
            if c.score < min_score or c.peer_id not in visible_set:
                continue
            pair = frozenset((rid, c.peer_id))
            if pair in seen:
                continue
            seen.add(pair)
            links.append({'source': rid, 'target': c.peer_id, 'value': c.score})
    return links
