"""Window functions and cutoff estimation for sinc interpolation filters.

This package contains submodules for window generation and cutoff
estimation (dsp), window characterisation (metrics) and runners for
single designs and sweeps (exp).  The main entry points are re-exported
here:

```python
from sinc_window import WindowFamily, generate_window, estimate_cutoff

window = generate_window(256, WindowFamily.BLACKMAN_HARRIS2)
f_cutoff = estimate_cutoff(256, WindowFamily.BLACKMAN_HARRIS2)
```
"""

from .dsp import InvalidLength, WindowFamily, estimate_cutoff, generate_window

__all__ = [
    "dsp",
    "metrics",
    "exp",
    "InvalidLength",
    "WindowFamily",
    "estimate_cutoff",
    "generate_window",
]
