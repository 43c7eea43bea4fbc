"""Sweeps over window families and sinc lengths.

This module reads a sweep configuration specifying a base design
configuration and a parameter grid.  It enumerates all combinations of
the grid, overrides the base configuration accordingly and evaluates
each design.  Results are recorded to a table (CSV) containing the
parameter settings, the cutoff and the window properties for each
design, which is handy for comparing cutoffs across lengths.

```yaml
base_config:
  window: {family: hann, npoints: 128}
param_grid:
  window.family: [hann, blackman, blackman_harris2]
  window.npoints: [64, 128, 256]
output_root: runs
```

``base_config`` may also be a path to a YAML file; a relative path is
resolved against the directory of the sweep file.  Each design uses its
own ``analysis.oversample`` if set, so it can also be a grid key.
"""

from __future__ import annotations

import argparse
import itertools
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from ..config import design_from_config, load_config, override
from ..logging_config import setup_logging
from .runner import summarize_design

logger = logging.getLogger(__name__)


def _generate_param_combinations(param_grid: Dict[str, Iterable[Any]]) -> List[Dict[str, Any]]:
    """Return a list of dictionaries for all combinations of the grid."""
    keys = list(param_grid.keys())
    values = [param_grid[k] for k in keys]
    return [dict(zip(keys, prod)) for prod in itertools.product(*values)]


def run_sweep(sweep_cfg: Dict[str, Any], config_dir: Optional[str] = None) -> pd.DataFrame:
    """Run a sweep.

    Parameters
    ----------
    sweep_cfg : dict
        Configuration dictionary.  Must contain `base_config` (mapping
        or path to a base YAML file) and `param_grid` (dictionary
        mapping dotted parameter names to lists of values).  Optional
        keys: `output_root` and `oversample` (default for designs
        without ``analysis.oversample``).
    config_dir : str, optional
        Directory that a relative `base_config` path is resolved
        against.  Defaults to the working directory.

    Returns
    -------
    pd.DataFrame
        DataFrame with one row per design.  Columns include the
        parameter names and the summary returned by `summarize_design`.
    """
    base = sweep_cfg.get("base_config")
    if base is None:
        raise ValueError("sweep configuration must specify base_config")
    if isinstance(base, dict):
        base_cfg = base
    else:
        base_path = Path(base)
        if config_dir is not None and not base_path.is_absolute():
            base_path = Path(config_dir) / base_path
        base_cfg = load_config(str(base_path))
    param_grid = sweep_cfg.get("param_grid", {})
    default_oversample = int(sweep_cfg.get("oversample", 64))
    output_root = sweep_cfg.get("output_root", "runs")
    combos = _generate_param_combinations(param_grid)
    rows = []
    for i, combo in enumerate(combos):
        cfg = override(base_cfg, combo)
        logger.info("Evaluating combination %d/%d: %s", i + 1, len(combos), combo)
        row: Dict[str, Any] = dict(combo)
        analysis_cfg = cfg.get("analysis", {}) or {}
        oversample = int(analysis_cfg.get("oversample", default_oversample))
        row.update(summarize_design(design_from_config(cfg), oversample=oversample))
        rows.append(row)
    df = pd.DataFrame(rows)
    table_path = Path(output_root) / "cutoff_table.csv"
    table_path.parent.mkdir(parents=True, exist_ok=True)
    if table_path.exists():
        existing = pd.read_csv(table_path)
        df = pd.concat([existing, df], ignore_index=True)
    df.to_csv(table_path, index=False)
    return df


def main() -> None:
    parser = argparse.ArgumentParser(description="Sweep window designs over families and sinc lengths")
    parser.add_argument("--config", type=str, required=True, help="Path to sweep YAML configuration file")
    parser.add_argument("--verbose", action="store_true", help="Log debug output to the console")
    parser.add_argument("--log-dir", type=str, default=None, help="Also write debug logs to this directory")
    args = parser.parse_args()
    setup_logging(console_level=logging.DEBUG if args.verbose else logging.INFO, log_dir=args.log_dir)
    df = run_sweep(load_config(args.config), config_dir=os.path.dirname(os.path.abspath(args.config)))
    print("Sweep completed. Results written to cutoff_table.csv")
    print(df)


if __name__ == "__main__":
    main()
