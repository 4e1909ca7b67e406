# Module: synthesis.py
from collections import namedtuple

import numpy as np

from .config import N_COLOR_CHANNELS
from .errors import InvalidInput
from .features import validate_image

RegionColorTable = namedtuple("RegionColorTable", ["colors", "counts"])


def _flat_labels(image, labels, n_clusters):
    labels = np.asarray(labels, dtype=np.int64).ravel()
    if labels.size != image.shape[0] * image.shape[1]:
        raise InvalidInput(f"Expected {image.shape[0] * image.shape[1]} labels, got {labels.size}")
    if labels.min() < 0 or labels.max() >= n_clusters:
        raise InvalidInput(f"Labels must lie in [0, {n_clusters})")
    return labels


def region_color_table(image, labels, n_clusters):
    """
    Mean color of every cluster, truncated to integers.

    Rows of clusters without members are left at zero; check `counts`.
    """
    image = validate_image(image)
    labels = _flat_labels(image, labels, n_clusters)
    pixels = image.reshape(-1, N_COLOR_CHANNELS).astype(np.int64)

    counts = np.bincount(labels, minlength=n_clusters)
    sums = np.zeros((n_clusters, N_COLOR_CHANNELS), dtype=np.int64)
    np.add.at(sums, labels, pixels)

    colors = np.zeros_like(sums)
    populated = counts > 0
    colors[populated] = sums[populated] // counts[populated, None]
    return RegionColorTable(colors, counts)


def synthesize_region_colors(image, labels, n_clusters, table=None):
    """Replace every pixel by the mean color of its cluster."""
    image = validate_image(image)
    labels = _flat_labels(image, labels, n_clusters)
    if table is None:
        table = region_color_table(image, labels, n_clusters)

    result = image.copy()
    flat = result.reshape(-1, N_COLOR_CHANNELS)
    # Clusters with no member have no color; their pixels (if any) keep the input color.
    paint = table.counts[labels] > 0
    flat[paint] = table.colors[labels[paint]].astype(result.dtype)
    return result
