"""Design runners and sweeps."""

from .runner import run_design
from .sweep import run_sweep

__all__ = ["run_design", "run_sweep"]
