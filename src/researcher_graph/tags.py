"""Tag tokenization shared by relevance scoring and filtering."""

from __future__ import annotations

import re
from typing import Any, List

# ASCII comma (optionally followed by whitespace) or the ideographic comma.
TAG_DELIMITER = re.compile(r',\s*|、')


def tokenize(raw: Any) -> List[str]:
    """Split a delimited attribute value into its tags.

    Entries that are blank after trimming are dropped; the remaining entries
    are returned as-is (no trimming or case folding), in source order.
    """
    if raw is None:
        return []
    text = raw if isinstance(raw, str) else str(raw)
    if not text:
        return []
    return [item for item in TAG_DELIMITER.split(text) if item.strip() != '']


def unique_tags(raw: Any) -> List[str]:
    """Like :func:`tokenize` but keeps only the first occurrence of each tag."""
    return list(dict.fromkeys(tokenize(raw)))
