"""CLI runner for a single window design.

`run_design` evaluates one design described by a YAML configuration.
The high level steps are:

1. Parse the ``window`` section into a `WindowDesign`.
2. Generate the window coefficients.
3. Determine the relative cutoff (explicit or fitted).
4. Characterise the window spectrum.

The runner writes its outputs to a timestamped directory under
`runs/`.  It saves the parameters, the coefficients as ``window.npy``
and the cutoff together with the window properties in JSON format.
"""

from __future__ import annotations

import argparse
import datetime
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np
import yaml

from ..config import WindowDesign, design_from_config, load_config
from ..logging_config import setup_logging
from ..metrics.properties import window_properties

logger = logging.getLogger(__name__)


def summarize_design(
    design: WindowDesign, oversample: int = 64, window: Optional[np.ndarray] = None
) -> Dict[str, Any]:
    """Return the cutoff and window properties for `design` as a flat dict.

    `window` may be passed when the coefficients were already generated.
    """
    if window is None:
        window = design.coefficients()
    summary: Dict[str, Any] = {
        "family": design.family.value,
        "npoints": design.npoints,
        "dtype": design.dtype,
        "cutoff": design.cutoff(),
        "cutoff_estimated": design.f_cutoff is None,
    }
    summary.update(window_properties(window, oversample=oversample))
    return summary


def run_design(config: Dict[str, Any], run_name: str | None = None, output_root: str = "runs") -> Dict[str, Any]:
    """Execute a single window design as specified by `config`.

    Parameters
    ----------
    config : dict
        Parsed YAML configuration.  Must contain a ``window`` section;
        ``analysis.oversample`` is optional.
    run_name : str, optional
        Short identifier for the run.  If not provided, uses the value
        of `config.get('name', 'design')`.
    output_root : str, optional
        Directory under which to create the run directory.  Defaults
        to `'runs'`.

    Returns
    -------
    dict
        The design summary (see `summarize_design`) plus the path to the
        run directory under the key `run_dir`.
    """
    design = design_from_config(config)
    analysis_cfg = config.get("analysis", {}) or {}
    oversample = int(analysis_cfg.get("oversample", 64))
    if run_name is None:
        run_name = str(config.get("name", "design"))
    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = Path(output_root) / f"{timestamp}_{run_name}"
    run_dir.mkdir(parents=True, exist_ok=True)
    with open(run_dir / "params.yaml", "w") as f:
        yaml.safe_dump(config, f)
    logger.info("Designing %s window with %d points", design.family.value, design.npoints)
    window = design.coefficients()
    np.save(run_dir / "window.npy", window)
    summary = summarize_design(design, oversample=oversample, window=window)
    summary["run_dir"] = str(run_dir)
    with open(run_dir / "metrics.json", "w") as f:
        json.dump(summary, f, indent=2)
    logger.info("Wrote design to %s", run_dir)
    return summary


def main() -> None:
    parser = argparse.ArgumentParser(description="Design a sinc window and its cutoff")
    parser.add_argument("--config", type=str, required=True, help="Path to YAML configuration file")
    parser.add_argument("--name", type=str, default=None, help="Optional short name for the run")
    parser.add_argument("--output", type=str, default="runs", help="Root directory for output runs")
    parser.add_argument("--verbose", action="store_true", help="Log debug output to the console")
    parser.add_argument("--log-dir", type=str, default=None, help="Also write debug logs to this directory")
    args = parser.parse_args()
    setup_logging(console_level=logging.DEBUG if args.verbose else logging.INFO, log_dir=args.log_dir)
    cfg = load_config(args.config)
    summary = run_design(cfg, run_name=args.name, output_root=args.output)
    print("Design completed. Summary:")
    for k, v in summary.items():
        print(f"  {k}: {v}")


if __name__ == "__main__":
    main()
