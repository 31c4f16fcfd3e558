from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class GlobalConfig:
    """
    Parsed global.json.

    - ui_title: title shown in the navbar and browser tab
    - main_input: long-format profile table (TSV)
    - gene_category: optional geneID/category/colour TSV
    - gene_order: optional one-gene-per-line list used as the initial sorted order
    - db_source: database used for ortholog links (NCBI, UniProt, OrthoDB, OMA)
    - db_version: OrthoDB release, empty for the current one
    - default_zoom / default_x_axis: initial plot settings
    """
    ui_title: str
    main_input: Path
    gene_category: Optional[Path] = None
    gene_order: Optional[Path] = None
    db_source: str = "NCBI"
    db_version: str = ""
    default_zoom: float = 0.0
    default_x_axis: str = "taxa"
