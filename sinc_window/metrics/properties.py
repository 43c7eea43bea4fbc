"""Spectral characteristics of a window.

These figures summarise how a window will behave once multiplied with a
truncated sinc:

* **Coherent gain**: the mean coefficient, i.e. the DC gain relative to
  a rectangular window.
* **Equivalent noise bandwidth** (ENBW): width, in DFT bins, of the
  rectangular filter passing the same white-noise power.
* **Scallop loss**: attenuation of a tone half a bin away from DC.
* **Main lobe width**: null-to-null width of the main lobe, in bins.
* **Highest sidelobe**: peak sidelobe level relative to the main lobe.

The window itself is never modified.
"""

from __future__ import annotations

from typing import Dict

import numpy as np
from scipy import fft as sp_fft


def coherent_gain(window: np.ndarray) -> float:
    """Return the mean of the window coefficients."""
    return float(np.mean(window))


def enbw_bins(window: np.ndarray) -> float:
    """Equivalent noise bandwidth in bins, ``n * sum(w**2) / sum(w)**2``."""
    w = np.asarray(window, dtype=np.float64)
    s = np.sum(w)
    if s == 0:
        raise ValueError("ENBW is undefined for a window that sums to zero")
    return float(len(w) * np.sum(w * w) / (s * s))


def scallop_loss_db(window: np.ndarray) -> float:
    """Response half a bin from DC relative to the DC response, in dB.

    The result is negative (a loss); a flatter main lobe gives a value
    closer to zero.
    """
    w = np.asarray(window, dtype=np.float64)
    n = len(w)
    half_bin = np.abs(np.sum(w * np.exp(-1j * np.pi * np.arange(n) / n)))
    return float(20.0 * np.log10(half_bin / np.abs(np.sum(w))))


def _spectrum_db(window: np.ndarray, oversample: int) -> np.ndarray:
    """Zero padded magnitude spectrum in dB relative to DC."""
    w = np.asarray(window, dtype=np.float64)
    mag = np.abs(sp_fft.rfft(w, n=len(w) * oversample))
    # Exact nulls would give log10(0)
    mag = np.maximum(mag / mag[0], np.finfo(np.float64).tiny)
    return 20.0 * np.log10(mag)


def window_properties(window: np.ndarray, oversample: int = 64) -> Dict[str, float]:
    """Compute the spectral characteristics of a window.

    Parameters
    ----------
    window : np.ndarray
        One-dimensional window coefficients.
    oversample : int, optional
        Zero padding factor for the spectrum used to locate the first
        null and the sidelobes.  Larger values give finer resolution.

    Returns
    -------
    dict
        Keys ``coherent_gain``, ``enbw_bins``, ``scallop_loss_db``,
        ``mainlobe_width_bins`` and ``highest_sidelobe_db``.
    """
    w = np.asarray(window)
    if w.ndim != 1 or w.size < 2:
        raise ValueError("window must be a 1D array with at least two coefficients")
    if oversample < 2:
        raise ValueError("oversample must be at least 2")
    spec = _spectrum_db(w, oversample)
    # The first null is where the main lobe stops falling
    rising = np.diff(spec) > 0
    if not np.any(rising):
        raise ValueError("window spectrum has no sidelobes at this resolution")
    null_idx = int(np.argmax(rising))
    return {
        "coherent_gain": coherent_gain(w),
        "enbw_bins": enbw_bins(w),
        "scallop_loss_db": scallop_loss_db(w),
        "mainlobe_width_bins": 2.0 * null_idx / oversample,
        "highest_sidelobe_db": float(np.max(spec[null_idx:])),
    }
