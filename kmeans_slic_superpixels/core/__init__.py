# Core clustering functionality
from ..features import build_feature_space
from ..grid import GridLayout, compute_grid_layout, grid_initial_labels
from ..refinement import RefinementResult, kmeans_refine, within_cluster_loss
from ..segmentation import SuperpixelResult, find_slic_superpixels
from ..synthesis import RegionColorTable, region_color_table, synthesize_region_colors

__all__ = [
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
    "find_slic_superpixels"
]
