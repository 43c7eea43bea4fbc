"""Window functions used to taper truncated sinc responses.

A finite sinc interpolation filter is built by multiplying an ideal sinc
response, truncated to ``npoints`` taps, with one of the windows defined
here.  The window controls the trade-off between rolloff and stopband
attenuation:

* **Hann**: fast rolloff, modest attenuation.
* **Blackman**: intermediate rolloff and attenuation.
* **Blackman-Harris**: slow rolloff, strong attenuation.

Each base window also has a squared variant which trades still slower
rolloff for better attenuation.

All windows are *periodic*: they are generated with denominator
``npoints`` rather than ``npoints - 1``, matching the first ``npoints``
samples of a symmetric window of length ``npoints + 1``.  The downstream
filter construction relies on this and the windows must not be made
symmetric.
"""

from __future__ import annotations

import enum
import logging
import re
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

import numpy as np

from .errors import UnknownWindowFamily
from .sample import coerce, pi, sample_dtype, validate_length

logger = logging.getLogger(__name__)


class WindowFamily(enum.Enum):
    """Window functions that can be used to window the sinc function."""

    #: Blackman. Intermediate rolloff and intermediate attenuation.
    BLACKMAN = "blackman"
    #: Squared Blackman. Slower rolloff but better attenuation than Blackman.
    BLACKMAN2 = "blackman2"
    #: Blackman-Harris. Slow rolloff but good attenuation.
    BLACKMAN_HARRIS = "blackman_harris"
    #: Squared Blackman-Harris. Slower rolloff but better attenuation than Blackman-Harris.
    BLACKMAN_HARRIS2 = "blackman_harris2"
    #: Hann. Fast rolloff but not very high attenuation.
    HANN = "hann"
    #: Squared Hann. Slower rolloff and higher attenuation than simple Hann.
    HANN2 = "hann2"

    @property
    def base(self) -> "WindowFamily":
        """The unsquared family this member is derived from."""
        return _FAMILY_SPLIT[self][0]

    @property
    def squared(self) -> bool:
        """True for the squared variants."""
        return _FAMILY_SPLIT[self][1]

    @classmethod
    def from_name(cls, name: str) -> "WindowFamily":
        """Parse a family from a configuration string.

        Matching ignores case and treats ``-``, ``_`` and whitespace as
        equivalent, so ``"Blackman-Harris"`` and ``"blackman_harris"`` name
        the same family.  CamelCase words are split, so ``"BlackmanHarris2"``
        is also accepted.  A trailing ``squared`` (or ``^2``) selects the
        squared variant, e.g. ``"hann squared"`` is :attr:`HANN2`.
        """
        if isinstance(name, cls):
            return name
        key = re.sub(r"(?<=[a-z])(?=[A-Z])", "_", str(name).strip())
        key = re.sub(r"[\s\-_]+", "_", key.lower())
        key = re.sub(r"_?(squared|\^2)$", "2", key)
        try:
            return cls(key)
        except ValueError:
            raise UnknownWindowFamily(
                f"Unknown window family: {name}. Options: {[f.value for f in cls]}"
            ) from None


# (base family, squared) for every public member.
_FAMILY_SPLIT: Dict[WindowFamily, Tuple[WindowFamily, bool]] = {
    WindowFamily.BLACKMAN: (WindowFamily.BLACKMAN, False),
    WindowFamily.BLACKMAN2: (WindowFamily.BLACKMAN, True),
    WindowFamily.BLACKMAN_HARRIS: (WindowFamily.BLACKMAN_HARRIS, False),
    WindowFamily.BLACKMAN_HARRIS2: (WindowFamily.BLACKMAN_HARRIS, True),
    WindowFamily.HANN: (WindowFamily.HANN, False),
    WindowFamily.HANN2: (WindowFamily.HANN, True),
}

# Cosine-sum coefficients a_k in w[x] = sum_k (-1)^k a_k cos(2 pi k x / n).
HANN_COEFFICIENTS = (0.5, 0.5)
BLACKMAN_COEFFICIENTS = (0.42, 0.5, 0.08)
BLACKMAN_HARRIS_COEFFICIENTS = (0.35875, 0.48829, 0.14128, 0.01168)


def _cosine_sum(npoints: int, coefficients: Sequence[float], dtype: np.dtype) -> np.ndarray:
    """Evaluate a periodic cosine-sum window in ``dtype``."""
    x = np.arange(npoints, dtype=dtype)
    np_f = coerce(npoints, dtype)
    window = np.full(npoints, coerce(coefficients[0], dtype), dtype=dtype)
    for k, a in enumerate(coefficients[1:], start=1):
        # 2*pi, 4*pi, 6*pi ... in the target precision
        pik = coerce(2.0 * k, dtype) * pi(dtype)
        term = coerce(a, dtype) * np.cos(pik * x / np_f)
        if k % 2:
            window -= term
        else:
            window += term
    return window


def blackman_harris(npoints: int, dtype: Optional[Any] = None) -> np.ndarray:
    """Standard Blackman-Harris window (periodic).

    ``w[x] = 0.35875 - 0.48829 cos(2 pi x/n) + 0.14128 cos(4 pi x/n) - 0.01168 cos(6 pi x/n)``
    """
    n = validate_length(npoints)
    logger.debug("Making a BlackmanHarris window with %d points", n)
    return _cosine_sum(n, BLACKMAN_HARRIS_COEFFICIENTS, sample_dtype(dtype))


def blackman(npoints: int, dtype: Optional[Any] = None) -> np.ndarray:
    """Standard Blackman window (periodic).

    ``w[x] = 0.42 - 0.5 cos(2 pi x/n) + 0.08 cos(4 pi x/n)``
    """
    n = validate_length(npoints)
    logger.debug("Making a Blackman window with %d points", n)
    return _cosine_sum(n, BLACKMAN_COEFFICIENTS, sample_dtype(dtype))


def hann(npoints: int, dtype: Optional[Any] = None) -> np.ndarray:
    """Standard Hann window (periodic).

    ``w[x] = 0.5 - 0.5 cos(2 pi x/n)``
    """
    n = validate_length(npoints)
    logger.debug("Making a Hann window with %d points", n)
    return _cosine_sum(n, HANN_COEFFICIENTS, sample_dtype(dtype))


_BASE_GENERATORS: Dict[WindowFamily, Callable[..., np.ndarray]] = {
    WindowFamily.BLACKMAN: blackman,
    WindowFamily.BLACKMAN_HARRIS: blackman_harris,
    WindowFamily.HANN: hann,
}

if set(_FAMILY_SPLIT) != set(WindowFamily):
    raise RuntimeError("every WindowFamily member needs a (base, squared) entry")


def make_window(npoints: int, family: WindowFamily, dtype: Optional[Any] = None) -> np.ndarray:
    """Make the selected window function.

    Parameters
    ----------
    npoints : int
        Number of coefficients, normally the sinc length.  Must be positive.
    family : WindowFamily
        Which window to generate.  The squared variants are produced by
        squaring every coefficient of the corresponding base window.
    dtype : numpy dtype-like, optional
        Floating type to compute in.  Defaults to ``float64``.

    Returns
    -------
    np.ndarray
        A new one-dimensional array of length ``npoints``.

    Raises
    ------
    InvalidLength
        If ``npoints`` is not positive.
    TypeError
        If ``family`` is not a :class:`WindowFamily`.
    """
    if not isinstance(family, WindowFamily):
        raise TypeError(f"family must be a WindowFamily, got {family!r}")
    base, squared = _FAMILY_SPLIT[family]
    window = _BASE_GENERATORS[base](npoints, dtype=dtype)
    if squared:
        np.multiply(window, window, out=window)
    return window


generate_window = make_window
