# scripts/mock_profile.py

from pathlib import Path

import numpy as np
import pandas as pd


def main() -> None:
    # project root = parent of this file's directory
    root = Path(__file__).resolve().parent.parent
    data_dir = root / "config" / "data"
    data_dir.mkdir(parents=True, exist_ok=True)

    # ---- basic sizes ----
    n_genes = 200
    n_taxa = 80
    presence = 0.4

    rng = np.random.default_rng(42)

    genes = [f"OG_{1000 + j}" for j in range(n_genes)]
    taxa = [f"ncbi{rng.integers(1000, 999999)}" for _ in range(n_taxa)]

    # ---- keep a random subset of gene x taxon cells ----
    mask = rng.random(size=(n_genes, n_taxa)) < presence
    gene_idx, taxon_idx = np.nonzero(mask)

    profile = pd.DataFrame(
        {
            "geneID": [genes[i] for i in gene_idx],
            "ncbiID": [taxa[k] for k in taxon_idx],
            "orthoID": [f"PROT{i:04d}_{k:03d}" for i, k in zip(gene_idx, taxon_idx)],
            "var1": rng.uniform(0, 1, size=len(gene_idx)).round(3),
            "var2": rng.uniform(0, 1, size=len(gene_idx)).round(3),
        }
    )

    out_path = data_dir / "mock_profile.tsv"
    profile.to_csv(out_path, sep="\t", index=False)

    print(f"Wrote: {out_path}")
    print("genes:", profile["geneID"].nunique(), "taxa:", profile["ncbiID"].nunique())
    print("rows:", len(profile))


if __name__ == "__main__":
    main()
