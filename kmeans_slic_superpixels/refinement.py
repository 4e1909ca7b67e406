# Module: refinement.py
import logging
from collections import namedtuple

import numpy as np
from scipy.spatial.distance import cdist

from .config import DEFAULT_BLOCK_SIZE, DEFAULT_EPSILON, DEFAULT_MAX_ITERATIONS, N_FEATURES
from .errors import InvalidInput

logger = logging.getLogger(__name__)

RefinementResult = namedtuple("RefinementResult", ["labels", "centroids", "losses", "iterations"])


def within_cluster_loss(features, labels, centroids):
    """Total squared distance of every feature vector to the centroid of its cluster."""
    residuals = features - centroids[labels]
    return float(np.sum(residuals * residuals))


def update_centroids(features, labels, n_clusters, centroids=None):
    """
    Recompute every centroid as the mean of its member feature vectors.

    Clusters without members keep the centroid given in `centroids`
    (NaN when there is none yet).

    Returns:
        centroids : ndarray of shape (n_clusters, 5)
        counts : ndarray of shape (n_clusters,)
    """
    counts = np.bincount(labels, minlength=n_clusters)
    sums = np.stack(
        [np.bincount(labels, weights=features[:, d], minlength=n_clusters) for d in range(features.shape[1])],
        axis=1,
    )
    if centroids is None:
        updated = np.full((n_clusters, features.shape[1]), np.nan)
    else:
        updated = centroids.copy()
    populated = counts > 0
    updated[populated] = sums[populated] / counts[populated, None]
    return updated, counts


def assign_labels(features, centroids, block_size=DEFAULT_BLOCK_SIZE):
    """
    Label every feature vector with its nearest centroid.

    Distances are squared Euclidean, ties go to the lowest cluster id and
    centroids that were never defined (NaN) are skipped. At most `block_size`
    distances are held in memory at once, whatever the number of clusters.

    Returns:
        labels : ndarray of shape (N,)
        loss : float
            Sum of the squared distances to the chosen centroids.
    """
    candidates = np.flatnonzero(~np.isnan(centroids).any(axis=1))
    active = centroids[candidates]

    labels = np.empty(features.shape[0], dtype=np.int64)
    loss = 0.0
    rows_per_block = max(1, block_size // max(1, len(active)))
    for start in range(0, features.shape[0], rows_per_block):
        stop = start + rows_per_block
        distances = cdist(features[start:stop], active, "sqeuclidean")
        nearest = np.argmin(distances, axis=1)
        labels[start:stop] = candidates[nearest]
        loss += float(np.sum(distances[np.arange(nearest.size), nearest]))
    return labels, loss


def _check_inputs(features, labels, n_clusters, max_iter, block_size):
    if features.ndim != 2 or features.shape[1] != N_FEATURES or features.shape[0] == 0:
        raise InvalidInput(f"Expected a non-empty (N, {N_FEATURES}) feature array, got shape {features.shape}")
    if labels.shape != (features.shape[0],):
        raise InvalidInput(f"Expected {features.shape[0]} labels, got shape {labels.shape}")
    if n_clusters < 1:
        raise InvalidInput(f"n_clusters must be positive, got {n_clusters}")
    if labels.min() < 0 or labels.max() >= n_clusters:
        raise InvalidInput(f"Labels must lie in [0, {n_clusters})")
    if max_iter < 1:
        raise InvalidInput(f"max_iter must be at least 1, got {max_iter}")
    if block_size < 1:
        raise InvalidInput(f"block_size must be at least 1, got {block_size}")


def kmeans_refine(features, labels, n_clusters, max_iter=DEFAULT_MAX_ITERATIONS, epsilon=DEFAULT_EPSILON,
                  block_size=DEFAULT_BLOCK_SIZE):
    """
    Lloyd iterations seeded with an initial labelling.

    Each iteration recomputes the centroids from the current labels, then
    relabels every pixel with its nearest centroid. The loop ends after
    `max_iter` iterations or as soon as an iteration lowers the total
    within-cluster squared distance by less than `epsilon`.

    Parameters:
        features : ndarray
            Feature vectors of shape (N, 5).
        labels : ndarray
            Initial labels of shape (N,), values in [0, n_clusters). Not modified.
        n_clusters : int
            Number of clusters.
        max_iter : int
            Maximum number of update/assignment cycles.
        epsilon : float
            Minimum loss reduction needed to keep iterating.
        block_size : int
            Largest number of pixel-to-centroid distances computed at once.

    Returns:
        RefinementResult
            labels, centroids (means of the final labels, frozen for empty
            clusters), losses (loss after each iteration) and iterations.
    """
    features = np.asarray(features, dtype=np.float64)
    labels = np.array(labels, dtype=np.int64).ravel()
    _check_inputs(features, labels, n_clusters, max_iter, block_size)

    centroids = None
    previous_loss = None
    losses = []
    for iteration in range(1, max_iter + 1):
        centroids, counts = update_centroids(features, labels, n_clusters, centroids)
        if previous_loss is None:
            previous_loss = within_cluster_loss(features, labels, centroids)

        labels, loss = assign_labels(features, centroids, block_size)
        losses.append(loss)
        logger.debug("Iteration %d: loss %.6f (%d empty clusters before assignment)",
                     iteration, loss, int(np.sum(counts == 0)))

        if previous_loss - loss < epsilon:
            break
        previous_loss = loss

    centroids, _ = update_centroids(features, labels, n_clusters, centroids)
    return RefinementResult(labels, centroids, losses, len(losses))
