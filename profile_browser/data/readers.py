from __future__ import annotations

import base64
import binascii
import io
import logging
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

logger = logging.getLogger(__name__)


def parse_single_col_text(text: str) -> List[str]:
    """Unique, non-blank lines of text in first-occurrence order."""
    lines = (line.strip() for line in text.splitlines())
    return list(dict.fromkeys(line for line in lines if line))


def read_single_col_file(path: Optional[Path | str]) -> Optional[List[str]]:
    """
    Read a one-value-per-line file (e.g. a gene order list).

    :return: unique values in file order, or None when no file was given
    """
    if path is None:
        return None
    return parse_single_col_text(Path(path).read_text())


def decode_upload(contents: Optional[str]) -> Optional[str]:
    """
    Decode the 'contents' payload of a dcc.Upload
    ("data:<mime>;base64,<payload>") into text.
    """
    if not contents:
        return None
    try:
        _, payload = contents.split(",", 1)
        return base64.b64decode(payload).decode("utf-8")
    except (ValueError, binascii.Error, UnicodeDecodeError):
        logger.warning("Could not decode uploaded file", exc_info=True)
        return None


def get_cat_colors(path: Path | str | io.StringIO) -> Optional[Dict[str, str]]:
    """
    Colours for gene categories.

    The file is tab-separated without header: geneID, category, colour.
    :return: {category: colour}, or None if the file is empty or does not
             have 3 columns on every row
    """
    try:
        df = pd.read_csv(
            path,
            sep="\t",
            header=None,
            comment=None,
            dtype=str,
            keep_default_na=False,
        )
    except pd.errors.EmptyDataError:
        logger.warning("Gene category file is empty", extra={"path": str(path)})
        return None
    except pd.errors.ParserError as e:
        logger.warning(
            "Gene category file has rows of uneven width",
            extra={"path": str(path), "error": str(e)},
        )
        return None

    if df.shape[1] != 3:
        logger.warning(
            "Gene category file must have 3 columns",
            extra={"n_columns": int(df.shape[1])},
        )
        return None

    pairs = df.iloc[:, [1, 2]].drop_duplicates()
    return dict(zip(pairs.iloc[:, 0], pairs.iloc[:, 1]))
