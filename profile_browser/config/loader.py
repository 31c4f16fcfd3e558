from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from profile_browser.config.model import GlobalConfig
from profile_browser.core.exceptions import ConfigError
from profile_browser.data.text_utils import replace_home_character

logger = logging.getLogger(__name__)


def _resolve_path(root: Path, raw: Optional[str]) -> Optional[Path]:
    # - Absolute paths are used as-is.
    # - Relative paths are resolved relative to the config root directory.
    if not raw:
        return None
    path = Path(replace_home_character(raw))
    if path.is_absolute():
        return path
    return (root / path).resolve()


def _as_float(raw: Any, key: str) -> float:
    try:
        return float(raw)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"'{key}' must be a number, got {raw!r}") from e


def load_global_config(root: Path | str) -> GlobalConfig:
    """
    Load configuration from a directory.

    Expected structure:

        root/
            global.json

    global.json keys:

    - ui_title: title for UI, defaults to 'PhyloProfile Browser'
    - main_input: path to the profile table (required)
    - gene_category: optional path to the gene category colour file
    - gene_order: optional path to a gene list preloaded as the sorted order
    - db_source / db_version: database used for ortholog links
    - default_zoom / default_x_axis: initial plot settings

    Relative paths are resolved relative to 'root'.

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if global.json is not valid or lacks main_input.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    try:
        with global_path.open() as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    main_input = _resolve_path(root, raw.get("main_input"))
    if main_input is None:
        raise ConfigError(f"'main_input' is required in {global_path}")

    return GlobalConfig(
        ui_title=raw.get("ui_title", "PhyloProfile Browser"),
        main_input=main_input,
        gene_category=_resolve_path(root, raw.get("gene_category")),
        gene_order=_resolve_path(root, raw.get("gene_order")),
        db_source=raw.get("db_source", "NCBI"),
        db_version=str(raw.get("db_version", "")),
        default_zoom=_as_float(raw.get("default_zoom", 0.0), "default_zoom"),
        default_x_axis=raw.get("default_x_axis", "taxa"),
    )
