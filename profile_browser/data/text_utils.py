from __future__ import annotations

import platform
from pathlib import Path
from typing import Optional, Sequence

import numpy as np


def substr_left(text: str, n: int) -> str:
    """First n characters of text."""
    return text[:max(n, 0)]


def substr_right(text: str, n: int) -> str:
    """Last n characters of text."""
    if n <= 0:
        return ""
    return text[-n:]


def _is_windows() -> bool:
    return platform.system() == "Windows"


def replace_home_character(full_path: Optional[str]) -> Optional[str]:
    """
    Replace the first '~' in a path by the user's home folder.

    Paths are returned untouched on Windows.
    """
    if full_path is None or _is_windows():
        return full_path
    return full_path.replace("~", str(Path.home()), 1)


def check_bionf_format(ortho_id: str, seed_id: str, ncbi_id: str) -> bool:
    """
    Whether an ortholog ID follows the BIONF layout, e.g.
    Q6PCB6|SACCE@4932@qfo|PROTID|1

    The first field must equal the seed ID and the second field must
    contain the taxon's NCBI ID.
    """
    fields = str(ortho_id).split("|")
    return len(fields) >= 3 and fields[0] == seed_id and str(ncbi_id) in fields[1]


def scale01(values: Sequence[float]) -> np.ndarray:
    """
    Min-max scale values into [0, 1]. A constant vector scales to zeros.

    Missing values stay missing; an all-missing vector is returned as is.
    """
    x = np.asarray(values, dtype=float)
    if x.size == 0 or np.isnan(x).all():
        return x
    lo, hi = np.nanmin(x), np.nanmax(x)
    if hi == lo:
        return np.zeros_like(x)
    return (x - lo) / (hi - lo)
