"""Statistical analysis of generated worlds."""

from .histogram import Histogram, world_histograms

__all__ = ["Histogram", "world_histograms"]
