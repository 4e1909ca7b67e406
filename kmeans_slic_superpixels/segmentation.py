# Module: segmentation.py
import logging
import warnings
from collections import namedtuple

import numpy as np

from .config import DEFAULT_BLOCK_SIZE, DEFAULT_EPSILON, DEFAULT_MAX_ITERATIONS
from .errors import DegenerateClusterWarning
from .features import build_feature_space, validate_image
from .grid import grid_initial_labels, validate_superpixel_count
from .refinement import kmeans_refine
from .synthesis import region_color_table, synthesize_region_colors

logger = logging.getLogger(__name__)

SuperpixelResult = namedtuple(
    "SuperpixelResult", ["image", "labels", "layout", "centroids", "losses", "empty_clusters"]
)


def find_slic_superpixels(image, superpixel_count, max_iter=DEFAULT_MAX_ITERATIONS, epsilon=DEFAULT_EPSILON,
                          block_size=DEFAULT_BLOCK_SIZE):
    """
    Split an image into superpixels and paint each one with its mean color.

    Pixels are clustered with k-means on (color, position) features, seeded
    with a regular grid of roughly `superpixel_count` square tiles.

    Parameters:
        image : ndarray
            Image of shape (rows, cols, 3), values in [0, 255].
        superpixel_count : int
            Requested number of superpixels. The number actually used is
            `result.layout.actual_cluster_count`.
        max_iter : int
            Iteration cap of the k-means refinement.
        epsilon : float
            Loss reduction below which the refinement stops early.
        block_size : int
            Largest number of pixel-to-centroid distances evaluated at once;
            bounds the memory of the assignment step.

    Returns:
        SuperpixelResult
            image : recolored image, same shape and dtype as the input
            labels : (rows, cols) cluster ids
            layout : GridLayout used for seeding
            centroids : (K, 5) final centroids
            losses : loss after each refinement iteration
            empty_clusters : ids of clusters left without pixels
    """
    image = validate_image(image)
    superpixel_count = validate_superpixel_count(superpixel_count)
    rows, cols, _ = image.shape

    features = build_feature_space(image)
    initial_labels, layout = grid_initial_labels(rows, cols, superpixel_count)
    logger.info("Seeding %d clusters (%d x %d tiles of side %d) for %d requested superpixels",
                layout.actual_cluster_count, layout.grid_rows, layout.grid_cols, layout.tile_size,
                superpixel_count)

    refined = kmeans_refine(features, initial_labels, layout.actual_cluster_count,
                            max_iter=max_iter, epsilon=epsilon, block_size=block_size)
    logger.info("Refinement finished after %d iterations, loss %.4f", refined.iterations, refined.losses[-1])

    table = region_color_table(image, refined.labels, layout.actual_cluster_count)
    empty_clusters = np.flatnonzero(table.counts == 0)
    if empty_clusters.size:
        logger.warning("%d clusters ended without pixels: %s", empty_clusters.size, empty_clusters.tolist())
        warnings.warn(f"{empty_clusters.size} clusters ended without pixels", DegenerateClusterWarning)

    recolored = synthesize_region_colors(image, refined.labels, layout.actual_cluster_count, table=table)
    return SuperpixelResult(
        recolored,
        refined.labels.reshape(rows, cols),
        layout,
        refined.centroids,
        refined.losses,
        empty_clusters,
    )
