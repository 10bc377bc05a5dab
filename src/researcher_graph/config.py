"""Central configuration for ResearcherGraph.

Avoids global constants scattered across scripts. Import from this module.
"""

from dataclasses import dataclass, field
import os


@dataclass(frozen=True)
class DisplayConfig:
    min_edge_score: int = int(os.getenv('MIN_EDGE_SCORE', '2'))
    medium_edge_score: int = int(os.getenv('MEDIUM_EDGE_SCORE', '4'))
    strong_edge_score: int = int(os.getenv('STRONG_EDGE_SCORE', '6'))


@dataclass(frozen=True)
class ServerConfig:
    host: str = os.getenv('HOST', '127.0.0.1')
    port: int = int(os.getenv('PORT', '5000'))
    poll_enabled: bool = os.getenv('POLL_ENABLED', 'false').lower() in ('1', 'true', 'yes')
    poll_interval: float = float(os.getenv('POLL_INTERVAL', '5'))


@dataclass(frozen=True)
class AppConfig:
    data_csv: str = os.getenv('RESEARCHERS_CSV', 'data/researchers.csv')
    output_html: str = os.getenv('OUTPUT_HTML_FILE', 'dist/index.html')
    log_dir: str = os.getenv('LOG_DIR', 'logs')
    display: DisplayConfig = field(default_factory=DisplayConfig)
    server: ServerConfig = field(default_factory=ServerConfig)


CONFIG = AppConfig()
