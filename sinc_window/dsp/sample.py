"""Floating point capability shared by the window and cutoff routines.

Every computation in :mod:`sinc_window.dsp` is generic over a numpy
floating dtype.  The helpers here provide the handful of operations the
formulas need (zero, one, pi, coercion of integer and decimal literals)
so that all arithmetic is carried out in the caller's precision rather
than silently promoted to ``float64``.

```python
from sinc_window.dsp.sample import sample_dtype, coerce, pi

dt = sample_dtype(np.float32)
two_pi = coerce(2.0, dt) * pi(dt)
```
"""

from __future__ import annotations

import operator
from typing import Any, Optional

import numpy as np

from .errors import InvalidLength

DEFAULT_DTYPE = np.dtype(np.float64)


def sample_dtype(dtype: Optional[Any] = None) -> np.dtype:
    """Resolve ``dtype`` to a numpy floating dtype.

    Parameters
    ----------
    dtype : numpy dtype-like, optional
        Anything accepted by :func:`numpy.dtype`, e.g. ``np.float32`` or
        ``"float64"``.  ``None`` selects ``float64``.

    Returns
    -------
    np.dtype
        The resolved dtype.

    Raises
    ------
    TypeError
        If the dtype is not a real floating type, or is narrower than
        single precision.  Half precision cannot represent sinc lengths
        above 65504 and loses accuracy well before that.
    """
    if dtype is None:
        return DEFAULT_DTYPE
    resolved = np.dtype(dtype)
    if not np.issubdtype(resolved, np.floating):
        raise TypeError(f"Window samples must use a floating dtype, got {resolved}")
    if resolved.itemsize < 4:
        raise TypeError(f"Window samples need at least single precision, got {resolved}")
    return resolved


def coerce(value: Any, dtype: np.dtype) -> np.floating:
    """Convert an integer or decimal literal to a scalar of ``dtype``."""
    return dtype.type(value)


def zero(dtype: np.dtype) -> np.floating:
    return dtype.type(0)


def one(dtype: np.dtype) -> np.floating:
    return dtype.type(1)


def pi(dtype: np.dtype) -> np.floating:
    """Return pi at the full precision of ``dtype``.

    ``np.pi`` is a Python float, so ``dtype.type(np.pi)`` would truncate
    extended precision types to double precision.  Evaluating
    ``4 * arctan(1)`` in the target type avoids that.
    """
    return dtype.type(4) * np.arctan(one(dtype))


def validate_length(npoints: Any) -> int:
    """Return ``npoints`` as a positive ``int``.

    Raises
    ------
    TypeError
        If ``npoints`` is not integral (floats are rejected even when whole).
    InvalidLength
        If ``npoints`` is zero or negative.
    """
    try:
        n = operator.index(npoints)
    except TypeError as exc:
        raise TypeError(f"npoints must be an integer, got {type(npoints).__name__}") from exc
    if n <= 0:
        raise InvalidLength(n)
    return n
