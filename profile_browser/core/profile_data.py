from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple

import pandas as pd

from profile_browser.core.exceptions import ProfileSchemaError

logger = logging.getLogger(__name__)

GENE_COL = "geneID"
TAXON_COL = "ncbiID"
ORTHO_COL = "orthoID"
VAR_COLS = ("var1", "var2")

REQUIRED_COLUMNS = (GENE_COL, TAXON_COL)


def load_profile_table(path: Path | str) -> pd.DataFrame:
    """
    Read a long-format phylogenetic profile (tab-separated).

    Expected columns: geneID, ncbiID, orthoID and optionally var1 / var2.
    IDs are kept as strings so gene order levels compare cleanly.

    :raises ProfileSchemaError: if the file cannot be parsed or misses required columns
    """
    path = Path(path)
    logger.info("Loading profile table", extra={"path": str(path)})

    try:
        df = pd.read_csv(path, sep="\t", dtype={GENE_COL: str, TAXON_COL: str, ORTHO_COL: str})
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise ProfileSchemaError(f"Could not read profile table {path}: {e}") from e

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ProfileSchemaError(
            f"Profile table {path} is missing required column(s): {', '.join(missing)}"
        )

    for col in VAR_COLS:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")

    logger.info(
        "Profile table loaded",
        extra={
            "path": str(path),
            "n_rows": len(df),
            "n_genes": df[GENE_COL].nunique(),
            "n_taxa": df[TAXON_COL].nunique(),
        },
    )
    return df


def available_variables(df: pd.DataFrame) -> Tuple[str, str]:
    """Return (var1_id, var2_id), using "" for a variable the table lacks."""
    return tuple(col if col in df.columns else "" for col in VAR_COLS)


def filter_by_cutoffs(
        df: pd.DataFrame,
        var1_cutoff: Optional[Sequence[float]] = None,
        var2_cutoff: Optional[Sequence[float]] = None,
) -> pd.DataFrame:
    """
    Keep rows whose var1/var2 lie inside the inclusive cutoff ranges.
    Rows with a missing value for a variable are kept.
    """
    mask = pd.Series(True, index=df.index)
    for col, cutoff in zip(VAR_COLS, (var1_cutoff, var2_cutoff)):
        if cutoff is None or col not in df.columns:
            continue
        lo, hi = cutoff[0], cutoff[-1]
        values = df[col]
        mask &= values.isna() | values.between(lo, hi)
    return df[mask]


def profile_counts(df: pd.DataFrame) -> Tuple[int, int]:
    """Return (taxon_count, gene_count) for the given profile."""
    if df.empty:
        return 0, 0
    return int(df[TAXON_COL].nunique()), int(df[GENE_COL].nunique())
