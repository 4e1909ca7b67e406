"""
Configuration settings for the superpixel clustering package.
"""

import logging

# Feature normalisation
COLOR_SCALE = 255.0
N_COLOR_CHANNELS = 3
N_FEATURES = 5

# Clustering parameters
DEFAULT_SUPERPIXEL_COUNT = 64
DEFAULT_MAX_ITERATIONS = 3
DEFAULT_EPSILON = 1.0
DEFAULT_BLOCK_SIZE = 2 ** 21  # distance entries (float64) evaluated at once

# Display parameters
# (max image count, grid rows, grid cols, thumbnail size)
DISPLAY_LAYOUTS = [
    (1, 1, 1, 300),
    (2, 1, 2, 300),
    (4, 2, 2, 300),
    (6, 2, 3, 200),
    (8, 2, 4, 200),
    (12, 3, 4, 150),
]
DISPLAY_MARGIN = 20
DISPLAY_PAD_WIDTH = 100
DISPLAY_PAD_HEIGHT = 60
DEFAULT_RESULT_PATH = 'ResultingImage.jpg'
DEFAULT_WINDOW_TITLE = 'Image segmentation with SLIC super pixels.'


def setup_logging(log_level=logging.INFO):
    """
    Configure logging for the application.

    Args:
        log_level: Logging level (default: INFO)
    """
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )
