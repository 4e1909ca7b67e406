# Module: features.py
import numpy as np

from .config import COLOR_SCALE, N_COLOR_CHANNELS
from .errors import InvalidInput


def validate_image(image):
    """Check that `image` is a non-empty rows x cols x 3 array and return it as ndarray."""
    image = np.asarray(image)
    if image.ndim != 3 or image.shape[2] != N_COLOR_CHANNELS:
        raise InvalidInput(f"Expected a rows x cols x {N_COLOR_CHANNELS} image, got shape {image.shape}")
    if image.shape[0] == 0 or image.shape[1] == 0:
        raise InvalidInput(f"Image is empty: shape {image.shape}")
    return image


def spatial_scale(rows, cols):
    """Half of the image diagonal, used to normalise pixel coordinates."""
    return np.sqrt(rows * rows + cols * cols) / 2


def build_feature_space(image):
    """
    Build the 5-D feature vector of every pixel.

    Parameters:
        image : ndarray
            Image of shape (rows, cols, 3) with channel values in [0, 255].

    Returns:
        features : ndarray
            Array of shape (rows*cols, 5) in row-major pixel order holding
            (c0/255, c1/255, c2/255, row/S, col/S) with S the half diagonal.
    """
    image = validate_image(image)
    rows, cols, _ = image.shape
    max_spatial_distance = spatial_scale(rows, cols)

    features = np.empty((rows * cols, 5), dtype=np.float64)
    features[:, :3] = image.reshape(-1, N_COLOR_CHANNELS) / COLOR_SCALE
    ii, jj = np.indices((rows, cols))
    features[:, 3] = ii.ravel() / max_spatial_distance
    features[:, 4] = jj.ravel() / max_spatial_distance
    return features
