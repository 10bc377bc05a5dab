"""Researcher data ingestion.

Reads the researcher table (one row per researcher, header row with the
attribute names) into :class:`~researcher_graph.models.Researcher` records.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

import pandas as pd

from ..models import Researcher

logger = logging.getLogger('researcher_graph')


def load_researchers(path: Union[str, Path]) -> List[Researcher]:
    """Load researchers from a comma-delimited file.

    A missing or unreadable file is logged and yields an empty list; the
    caller shows an empty network rather than failing.
    """
    csv_path = Path(path)
    try:
        df = pd.read_csv(
            csv_path,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding='utf-8',
        )
    except FileNotFoundError:
        logger.error(f"Researcher data not found: {csv_path}")
        return []
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        logger.error(f"Failed to parse researcher data {csv_path.name}: {e}")
        return []

    df.columns = [str(c).strip() for c in df.columns]
    researchers = [Researcher.from_row(row) for row in df.to_dict(orient='records')]
    logger.info(f"Loaded {len(researchers)} researchers from {csv_path.name}")
    return researchers
