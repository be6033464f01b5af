"""Configuration loader: hollywood.yml parsing and defaults.

Any problem with the file (missing, unreadable, not YAML, not a mapping,
failing validation) is logged as a warning and the defaults are used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

import yaml
from pydantic import ValidationError

from hollywood_graph.logger import logger
from hollywood_graph.model import HollywoodConfig


def load_config(path: Path | None = None) -> HollywoodConfig:
    """Load config from YAML file, or return defaults if no path given."""
    if path is None:
        logger.debug("No config file provided, using defaults")
        return HollywoodConfig()

    raw, problem = _read_mapping(path)
    if problem is None:
        try:
            return HollywoodConfig.model_validate(raw)
        except ValidationError as e:
            problem = f"invalid config: {e}"

    logger.warning("Ignoring config %s (%s), using defaults", path, problem)
    return HollywoodConfig()


def _read_mapping(path: Path) -> tuple[dict[str, Any], str | None]:
    """The YAML mapping in *path*, or an empty one and why it could not be read."""
    from pathlib import Path as _Path

    try:
        raw = yaml.safe_load(_Path(str(path)).read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}, "file not found"
    except (OSError, UnicodeDecodeError) as e:
        return {}, f"cannot read file: {e}"
    except yaml.YAMLError as e:
        return {}, f"malformed YAML: {e}"

    if raw is None:
        return {}, None
    if not isinstance(raw, dict):
        return {}, f"expected a YAML mapping, got {type(raw).__name__}"
    return raw, None
