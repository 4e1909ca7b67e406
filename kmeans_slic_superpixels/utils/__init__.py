# Utility functions
from ..io import load_image, save_image
from .metrics import compute_quality_metrics

__all__ = [
    "load_image",
    "save_image",
    "compute_quality_metrics"
]
