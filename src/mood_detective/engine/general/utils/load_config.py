# src/mood_detective/engine/general/utils/load_config.py

"""Read the JSON seed tables (lexicon, training corpus, quiz sets) from <data/>.

Modes:
- "raw"             -> parsed JSON as-is (training corpus is a list)
- "validated_dict"  -> top-level object, optionally passed through a validator

Every seed table is read once, at import of the module that owns it, so
there is no cache: a second call re-reads the file.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any, Literal

__all__ = [
    "Mode",
    "DATA_DIR_ENV",
    "load_config",
    "resolve_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

Mode = Literal["raw", "validated_dict"]
Validator = Callable[[dict[str, Any]], dict[str, Any]]

DATA_DIR_ENV = "MOOD_DATA_DIR"

log = logging.getLogger(__name__)


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """No seed data directory could be located."""


class ConfigFileNotFound(FileNotFoundError):
    """A seed table is missing, unreadable, or outside the data directory."""


class ConfigParseError(ValueError):
    """A seed table is not valid JSON or its validator rejected it."""


class ConfigTypeError(TypeError):
    """A seed table parsed but has the wrong top-level shape."""


# ── Data directory ───────────────────────────────────────────────────────────
def resolve_data_dir(base_dir: Path | None = None, *, start: Path | None = None) -> Path:
    """
    Does: Pick the seed directory: explicit base_dir, then $MOOD_DATA_DIR,
          then the nearest 'data/' above `start` (default: this module, which
          finds the packaged mood_detective/data).
    Raises: DataDirNotFound when the walk reaches the filesystem root.
    """
    if base_dir is not None:
        return Path(base_dir).resolve()

    env = os.environ.get(DATA_DIR_ENV)
    if env:
        return Path(env).expanduser().resolve()

    here = (start or Path(__file__)).resolve()
    for folder in here.parents:
        cand = folder / "data"
        if cand.is_dir():
            return cand
    raise DataDirNotFound(f"No 'data' directory above {here}")


def _table_path(data_dir: Path, name: str | os.PathLike[str]) -> Path:
    stem = os.fspath(name)
    path = (data_dir / (stem if stem.endswith(".json") else f"{stem}.json")).resolve()
    if not path.is_relative_to(data_dir):
        raise ConfigFileNotFound(f"{path} is outside the data directory {data_dir}")
    if not path.is_file():
        raise ConfigFileNotFound(f"Seed table not found: {path}")
    return path


# ── Loader ───────────────────────────────────────────────────────────────────
def load_config(
    name: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    validator: Validator | None = None,
) -> Any:
    """Parse <data>/<name>.json; in "validated_dict" mode require an object and run `validator`."""
    path = _table_path(resolve_data_dir(base_dir), name)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path.name}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if mode == "validated_dict":
        if not isinstance(data, dict):
            raise ConfigTypeError(f"{path.name}: expected an object, got {type(data).__name__}")
        if validator is not None:
            try:
                data = validator(data)
            except Exception as e:
                raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
    elif mode != "raw":
        raise ValueError(f"Unknown mode '{mode}'")

    log.debug("Seed table loaded: %s (mode=%s)", path.name, mode)
    return data
