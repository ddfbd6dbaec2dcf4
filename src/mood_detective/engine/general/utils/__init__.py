# mood_detective/engine/general/utils/__init__.py
"""

Does: Provide seed-table loading and lightweight debug logging utilities for the judging engine.
Returns: Public API via load_config/resolve_data_dir and debug/reload_topics.
Used by: Lexicon and corpus loaders, the orchestrator, the demo, and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    load_config,
    resolve_data_dir,
)
from .log import (
    debug,
    enable_topics,
    reload_topics,
)

__all__ = [
    # Seed tables
    "load_config",
    "resolve_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "enable_topics",
    "reload_topics",
]
