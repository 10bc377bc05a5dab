from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import CONFIG


def setup_logging(log_dir: Optional[str] = None, level: int = logging.INFO) -> logging.Logger:
    """Setup a simple, storage-friendly logging system.

    Policy:
    - Only operational steps are logged (load, index build, render).
    - Record contents are never written to logs.
    - Single rotating file plus concise console output.
    """
    logs_dir = Path(log_dir or CONFIG.log_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(level)
    for h in root.handlers[:]:
        root.removeHandler(h)

    simple_formatter = logging.Formatter('%(asctime)s | %(levelname)-7s | %(message)s')

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(simple_formatter)
    root.addHandler(console)

    file_handler = RotatingFileHandler(
        logs_dir / "researcher_graph.log",
        maxBytes=2*1024*1024,  # 2MB
        backupCount=2,
        encoding='utf-8'
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(simple_formatter)
    root.addHandler(file_handler)

    root.info(f"Logs directory: {logs_dir}")
    return root
