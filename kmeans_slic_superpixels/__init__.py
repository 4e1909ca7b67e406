from .errors import InvalidInput, DegenerateClusterWarning
from .utils import load_image, save_image, compute_quality_metrics
from .core import build_feature_space, GridLayout, compute_grid_layout, grid_initial_labels, RefinementResult, kmeans_refine, within_cluster_loss, RegionColorTable, region_color_table, synthesize_region_colors, SuperpixelResult, find_slic_superpixels
from .display import DisplayLayout, layout_for_count, compose_images, show_images

__all__ = [
    "InvalidInput",
    "DegenerateClusterWarning",
    "load_image",
    "save_image",
    "compute_quality_metrics",
    "build_feature_space",
    "GridLayout",
    "compute_grid_layout",
    "grid_initial_labels",
    "RefinementResult",
    "kmeans_refine",
    "within_cluster_loss",
    "RegionColorTable",
    "region_color_table",
    "synthesize_region_colors",
    "SuperpixelResult",
    "find_slic_superpixels",
    "DisplayLayout",
    "layout_for_count",
    "compose_images",
    "show_images"
]


__version__ = '0.1.0'
