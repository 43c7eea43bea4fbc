"""Relative cutoff frequency for windowed sinc filters.

Truncating and windowing a sinc response widens its transition band, so
a filter designed with a cutoff at exactly Nyquist lets some energy
alias.  `calculate_cutoff` returns a slightly lower relative cutoff that
compensates for this, using a rational polynomial in the sinc length:

    cutoff = 1 / (k1/n + k2/n**2 + k3/n**3 + 1)

The coefficients were obtained offline by a cubic fit per window family
and give good results for sinc lengths from 32 to 2048.  Outside that
range the value is still returned but its accuracy is not guaranteed.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import numpy as np

from .sample import coerce, one, sample_dtype, validate_length
from .windows import WindowFamily

logger = logging.getLogger(__name__)

#: Sinc lengths over which the fit was verified.
CUTOFF_FIT_RANGE = (32, 2048)

# Coefficient values generated by a cubic least-squares fit, one triple per window.
CUTOFF_COEFFICIENTS: Dict[WindowFamily, Tuple[float, float, float]] = {
    WindowFamily.BLACKMAN_HARRIS: (8.041443677716476, 55.9506779343387, 898.0287985384213),
    WindowFamily.BLACKMAN_HARRIS2: (13.745202940783823, 121.73532586374934, 5964.163279612051),
    WindowFamily.BLACKMAN: (6.159598046201173, 18.926415097606878, 653.4247430458968),
    WindowFamily.BLACKMAN2: (9.506235102129398, 79.13120634953742, 1502.2316160588925),
    WindowFamily.HANN: (3.3481080887677166, 10.106519434875038, 78.96345249024414),
    WindowFamily.HANN2: (5.38751148378734, 29.69451915489501, 184.82117462266237),
}

if set(CUTOFF_COEFFICIENTS) != set(WindowFamily):
    raise RuntimeError("every WindowFamily member needs cutoff coefficients")


def calculate_cutoff(npoints: int, family: WindowFamily, dtype: Optional[Any] = None) -> np.floating:
    """Calculate a suitable relative cutoff frequency for a sinc length.

    Parameters
    ----------
    npoints : int
        The sinc length.  Must be positive; the fit is valid for
        `CUTOFF_FIT_RANGE`.
    family : WindowFamily
        Window function the sinc will be multiplied with.
    dtype : numpy dtype-like, optional
        Floating type of the result.  Defaults to ``float64``.

    Returns
    -------
    np.floating
        Cutoff as a fraction of the Nyquist frequency, in (0, 1).
    """
    if not isinstance(family, WindowFamily):
        raise TypeError(f"family must be a WindowFamily, got {family!r}")
    n = validate_length(npoints)
    lo, hi = CUTOFF_FIT_RANGE
    if not lo <= n <= hi:
        logger.warning(
            "Sinc length %d is outside the fitted range %d..%d, cutoff may be inaccurate", n, lo, hi
        )
    dt = sample_dtype(dtype)
    k1, k2, k3 = (coerce(k, dt) for k in CUTOFF_COEFFICIENTS[family])
    unity = one(dt)
    npoints_t = coerce(n, dt)
    return unity / (
        k1 / npoints_t
        + k2 / (npoints_t * npoints_t)
        + k3 / (npoints_t * npoints_t * npoints_t)
        + unity
    )


estimate_cutoff = calculate_cutoff
