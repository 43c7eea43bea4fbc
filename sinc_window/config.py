"""Configuration handling for window designs.

Designs are described by plain dictionaries, normally parsed from YAML.
Only the ``window`` section is interpreted here:

```yaml
window:
  family: blackman_harris2
  npoints: 256
  dtype: float64
  f_cutoff: null
```

`design_from_config` validates that section and returns a `WindowDesign`
which can produce both the coefficients and the cutoff.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np
import yaml

from .dsp.cutoff import calculate_cutoff
from .dsp.sample import sample_dtype, validate_length
from .dsp.windows import WindowFamily, make_window


@dataclass(frozen=True)
class WindowDesign:
    """A window family and sinc length, plus an optional fixed cutoff.

    Attributes
    ----------
    family : WindowFamily
        Window applied to the sinc.
    npoints : int
        Sinc length.
    dtype : str
        Name of the numpy floating type used for the computations.
    f_cutoff : float | None
        Relative cutoff to use instead of the estimate.  ``None`` selects
        the fitted estimate for `family` and `npoints`.
    """

    family: WindowFamily
    npoints: int
    dtype: str = "float64"
    f_cutoff: Optional[float] = None

    def __post_init__(self) -> None:
        if not isinstance(self.family, WindowFamily):
            raise TypeError(f"family must be a WindowFamily, got {self.family!r}")
        validate_length(self.npoints)
        sample_dtype(self.dtype)
        if self.f_cutoff is not None and not 0.0 < self.f_cutoff <= 1.0:
            raise ValueError(f"f_cutoff must be in (0, 1], got {self.f_cutoff}")

    def coefficients(self) -> np.ndarray:
        return make_window(self.npoints, self.family, dtype=self.dtype)

    def cutoff(self) -> float:
        """Return `f_cutoff` when set, otherwise the fitted estimate."""
        if self.f_cutoff is not None:
            return self.f_cutoff
        return float(calculate_cutoff(self.npoints, self.family, dtype=self.dtype))


def design_from_config(cfg: Dict[str, Any]) -> WindowDesign:
    """Build a `WindowDesign` from the ``window`` section of a config.

    Raises
    ------
    ValueError
        If a required key is missing or a value is out of range.
        `UnknownWindowFamily` and `InvalidLength` are both subclasses.
    TypeError
        If ``npoints`` is not an integer or ``dtype`` is not floating.
    """
    window_cfg = cfg.get("window")
    if window_cfg is None:
        raise ValueError("window section must be specified in configuration")
    family = window_cfg.get("family")
    if family is None:
        raise ValueError("window.family must be specified in configuration")
    npoints = window_cfg.get("npoints")
    if npoints is None:
        raise ValueError("window.npoints must be specified in configuration")
    dtype = sample_dtype(window_cfg.get("dtype", "float64"))
    f_cutoff = window_cfg.get("f_cutoff")
    if f_cutoff is not None:
        f_cutoff = float(f_cutoff)
    return WindowDesign(
        family=WindowFamily.from_name(family),
        npoints=validate_length(npoints),
        dtype=dtype.name,
        f_cutoff=f_cutoff,
    )


def load_config(path: str) -> Dict[str, Any]:
    """Read a YAML configuration file."""
    with open(path, "r") as f:
        cfg = yaml.safe_load(f)
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ValueError(f"{path} must contain a mapping at the top level")
    return cfg


def override(cfg: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively override keys in a configuration dictionary.

    Keys in `overrides` can be dot separated to access nested
    dictionaries.  A new dictionary is returned; the input is not
    modified.
    """
    result = copy.deepcopy(cfg)
    for key, value in overrides.items():
        parts = key.split(".")
        d = result
        for p in parts[:-1]:
            if p not in d or not isinstance(d[p], dict):
                d[p] = {}
            d = d[p]
        d[parts[-1]] = value
    return result
