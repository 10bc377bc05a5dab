from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple
import numpy as np

from .tags import tokenize

R_MIN, R_MAX = 150.0, 450.0
GOLDEN_ANGLE = np.pi * (3 - np.sqrt(5.0))


def relevance_strength(ids: Sequence[str], edges: List[dict]) -> Dict[str, int]:
    """Sum of displayed edge scores touching each researcher."""
    strength: Dict[str, int] = {n: 0 for n in ids}
    for e in edges:
        value = int(e.get('value') or 0)
        for end in (e.get('source'), e.get('target')):
            if end in strength:
                strength[end] += value
    return strength


def _polar(radius: np.ndarray, angle: np.ndarray) -> np.ndarray:
    return np.column_stack((radius * np.cos(angle), radius * np.sin(angle)))


def compute_layouts(researchers: Sequence[Any], edges: List[dict]) -> Tuple[Dict[str, dict], Dict[str, dict]]:
    """Compute two deterministic layouts: field-grouped spiral and relevance-strength rings.

    Positions seed the front-end force simulation so that the initial picture
    is stable across runs.
    """
    ids = [getattr(r, 'id', '') for r in researchers if getattr(r, 'id', '')]
    unique_ids = list(dict.fromkeys(ids))
    if not unique_ids:
        return {}, {}

    primary_field = {}
    for r in researchers:
        fields = tokenize(getattr(r, 'field', ''))
        primary_field.setdefault(getattr(r, 'id', ''), fields[0] if fields else '')

    # Field-grouped spiral: researchers of one primary field sit next to each other
    order = {n: i for i, n in enumerate(unique_ids)}
    grouped = sorted(unique_ids, key=lambda n: (primary_field.get(n, ''), order[n]))
    steps = np.arange(len(grouped))
    radius = R_MIN + (R_MAX - R_MIN) * steps / max(1, len(grouped) - 1)
    # small jitter to avoid perfect overlaps
    jitter = np.random.RandomState(42).uniform(-8.0, 8.0, size=(len(grouped), 2))
    xy = _polar(radius, (steps * GOLDEN_ANGLE) % (2 * np.pi)) + jitter
    field_positions = {n: {'x': float(x), 'y': float(y)} for n, (x, y) in zip(grouped, xy)}

    # Strongest relevance toward the centre; unconnected researchers on the rim
    strength = relevance_strength(unique_ids, edges)
    ranked = sorted(unique_ids, key=lambda n: (-strength[n], order[n]))
    values = np.array([strength[n] for n in ranked], dtype=float)
    top = values.max()
    share = values / top if top > 0 else np.zeros_like(values)
    radius = R_MIN + (1.0 - np.sqrt(share)) * (R_MAX - R_MIN)
    steps = np.arange(len(ranked))
    xy = _polar(radius, (steps * GOLDEN_ANGLE) % (2 * np.pi))
    strength_positions = {n: {'x': float(x), 'y': float(y)} for n, (x, y) in zip(ranked, xy)}

    return field_positions, strength_positions
