"""Presentation policy: field colours and edge styling tiers."""

from __future__ import annotations

import math
from typing import Dict, Optional

from ..config import CONFIG
from ..tags import tokenize

OTHER_FIELD = 'その他'
MULTI_FIELD = '複数分野所属'

FIELD_COLORS: Dict[str, str] = {
    '造血器腫瘍学・造血幹細胞・造血発生関連': '#FF9999',
    '免疫学関連': '#FFCC99',
    'ウイルス学関連': '#D0F0C0',
    '細菌学(含真菌学)・寄生虫学関連': '#98D8BF',
    '血栓止血学・血管生物学関連': '#B0C4DE',
    MULTI_FIELD: '#E6E6FA',
    '医化学関連': '#FFD700',
    '分子レベルから細胞レベルの生物学関連': '#7FD1B9',
    '腫瘍生物学関連': '#FF6B6B',
    '神経内科学関連': '#B76BFF',
    OTHER_FIELD: '#A0AEC0',
}


def field_color(field: str) -> str:
    return FIELD_COLORS.get(field, FIELD_COLORS[OTHER_FIELD])


def node_colors(raw_field: str) -> list:
    """Colours for a node: one per field (rendered as a gradient when > 1)."""
    fields = tokenize(raw_field)
    if not fields:
        return [FIELD_COLORS[OTHER_FIELD]]
    return [field_color(f) for f in fields]


def text_color(hex_color: str) -> str:
    """Dark text on light backgrounds, white text on dark ones."""
    h = hex_color.lstrip('#')
    r, g, b = int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)
    brightness = 0.299 * r + 0.587 * g + 0.114 * b
    return '#333333' if brightness > 128 else '#FFFFFF'


def edge_style(score: int, display: Optional[object] = None) -> Dict[str, object]:
    display = display or CONFIG.display
    if score >= display.strong_edge_score:
        color, opacity, tier = '#1976D2', 0.8, 'strong'
    elif score >= display.medium_edge_score:
        color, opacity, tier = '#64B5F6', 0.6, 'medium'
    else:
        color, opacity, tier = '#BBDEFB', 0.4, 'weak'
    return {
        'tier': tier,
        'color': color,
        'opacity': opacity,
        'width': max(0.8, math.sqrt(score) * 0.8),
    }
