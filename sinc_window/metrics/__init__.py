"""Metrics describing generated windows."""

from .properties import coherent_gain, enbw_bins, scallop_loss_db, window_properties

__all__ = ["coherent_gain", "enbw_bins", "scallop_loss_db", "window_properties"]
