"""Financial aggregation and ROI projection for a rental fleet back office."""

__version__ = "0.1.0"
