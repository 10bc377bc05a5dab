"""Lightweight typed data models for clarity in function signatures."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Mapping


@dataclass
class Researcher:
    id: str
    name: str = ''
    affiliation: str = ''
    program: str = ''
    theme: str = ''
    field: str = ''
    keywords: str = ''
    keytechnology: str = ''

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> 'Researcher':
        """Build a record from a loosely shaped row (CSV dict, JSON body).

        Missing, None and NaN cells become empty strings; numbers are kept
        as their string form so ids like ``1`` and ``"1"`` compare equal.
        """
        values = {}
        for f in fields(cls):
            values[f.name] = _clean_cell(row.get(f.name))
        return cls(**values)

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def _clean_cell(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, float):
        if math.isnan(value):
            return ''
        if value.is_integer():
            return str(int(value))
    return str(value)


@dataclass(frozen=True)
class Connection:
    peer_id: str
    score: int


@dataclass
class RelevanceIndex:
    """Relevance lists keyed by researcher id, in descending score order."""

    edges: Dict[str, List[Connection]] = field(default_factory=dict)

    def connections_for(self, researcher_id: str) -> List[Connection]:
        return self.edges.get(researcher_id, [])

    def edge_count(self) -> int:
        return sum(len(conns) for conns in self.edges.values())

    def __contains__(self, researcher_id: object) -> bool:
        return researcher_id in self.edges

    def __len__(self) -> int:
        return len(self.edges)

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        return {
            rid: [{'id': c.peer_id, 'score': c.score} for c in conns]
            for rid, conns in self.edges.items()
        }
