"""Window and cutoff primitives for sinc interpolation filters.

`windows` generates the periodic taper applied to a truncated sinc and
`cutoff` estimates the matching relative cutoff frequency.  `sample`
holds the floating point helpers both are written against.
"""

from . import errors, sample, windows, cutoff
from .cutoff import CUTOFF_COEFFICIENTS, CUTOFF_FIT_RANGE, calculate_cutoff, estimate_cutoff
from .errors import InvalidLength, UnknownWindowFamily
from .windows import WindowFamily, blackman, blackman_harris, generate_window, hann, make_window

__all__ = [
    "errors",
    "sample",
    "windows",
    "cutoff",
    "CUTOFF_COEFFICIENTS",
    "CUTOFF_FIT_RANGE",
    "InvalidLength",
    "UnknownWindowFamily",
    "WindowFamily",
    "blackman",
    "blackman_harris",
    "calculate_cutoff",
    "estimate_cutoff",
    "generate_window",
    "hann",
    "make_window",
]
