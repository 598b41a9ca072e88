"""
Configuration constants for the graphsearch project.

Paths and tunable defaults live here. Values can be overridden through
environment variables, which are also read from a local .env file.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of graphsearch/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# Data directory (contains edge list files)
DATA_DIR = PROJECT_ROOT / "data"

# Graph loaded by the CLI when --graph is not given
DEFAULT_GRAPH_PATH = Path(
    os.environ.get("GRAPHSEARCH_GRAPH", DATA_DIR / "sample_graph.txt")
)

# Edge list files with this suffix are read as msgpack snapshots
MSGPACK_SUFFIX = ".msgpack"

# =============================================================================
# Search Configuration
# =============================================================================

# Traversal used when a caller does not name one ("dfs" or "bfs")
DEFAULT_STRATEGY = os.environ.get("GRAPHSEARCH_STRATEGY", "bfs")

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_data_files() -> dict[str, bool]:
    """Check which data files exist."""
    return {
        "default_graph": DEFAULT_GRAPH_PATH.exists(),
    }
