from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from profile_browser.config.model import GlobalConfig
from profile_browser.core.ordering import SORTED_GENES_KEY


@dataclass
class AppConfig:
    """
    Shared state for the Dash app: config root, the loaded profile, the
    optional category colours and the optional preloaded gene order. Passed
    into layout + callback registration functions instead of using
    module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    profile: Optional[pd.DataFrame] = None
    category_colors: Dict[str, str] = field(default_factory=dict)
    gene_order: Optional[List[str]] = None

    def validate(self) -> None:
        """Ensure the profile is attached before the app starts."""
        if self.profile is None:
            raise RuntimeError("AppConfig.profile must be loaded.")

    def gene_order_store(self) -> Optional[Dict[str, Any]]:
        """Initial value of the gene-order store."""
        if not self.gene_order:
            return None
        return {SORTED_GENES_KEY: list(self.gene_order)}
