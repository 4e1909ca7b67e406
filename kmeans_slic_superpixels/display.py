# Module: display.py
from collections import namedtuple

import matplotlib.pyplot as plt
import numpy as np
from skimage import color
from skimage.transform import resize

from .config import (DEFAULT_WINDOW_TITLE, DISPLAY_LAYOUTS, DISPLAY_MARGIN, DISPLAY_PAD_HEIGHT,
                     DISPLAY_PAD_WIDTH)
from .errors import InvalidInput
from .io import save_image

DisplayLayout = namedtuple("DisplayLayout", ["rows", "cols", "thumbnail_size"])


def layout_for_count(n_images):
    """Pick the grid and thumbnail size used to show `n_images` images together."""
    if n_images <= 0:
        raise InvalidInput("Nothing to display")
    for max_count, rows, cols, size in DISPLAY_LAYOUTS:
        if n_images <= max_count:
            return DisplayLayout(rows, cols, size)
    raise InvalidInput(f"Can display at most {DISPLAY_LAYOUTS[-1][0]} images at a time, got {n_images}")


def _thumbnail(image, size):
    image = np.asarray(image)
    if image.size == 0:
        raise InvalidInput("Cannot display an empty image")
    if image.ndim == 2:
        image = color.gray2rgb(image)
    h, w = image.shape[:2]
    scale = max(h, w) / size
    shape = (max(1, int(h / scale)), max(1, int(w / scale)))
    thumb = resize(image[:, :, :3].astype(np.float64), shape, preserve_range=True, anti_aliasing=scale > 1)
    return np.clip(np.rint(thumb), 0, 255).astype(np.uint8)


def compose_images(images, layout=None):
    """
    Paste several images on one black canvas.

    Parameters:
        images : list of ndarray
            Images with values in [0, 255], placed row by row.
        layout : DisplayLayout, optional
            Grid and thumbnail size; chosen from the image count when omitted.

    Returns:
        canvas : ndarray
            uint8 array of shape (60 + size*rows, 100 + size*cols, 3), grown
            if needed so every cell fits.
    """
    images = list(images)
    if layout is None:
        layout = layout_for_count(len(images))
    if not images:
        raise InvalidInput("Nothing to display")
    if len(images) > layout.rows * layout.cols:
        raise InvalidInput(f"{len(images)} images do not fit in a {layout.rows} x {layout.cols} grid")

    size = layout.thumbnail_size
    step = size + DISPLAY_MARGIN
    height = max(DISPLAY_PAD_HEIGHT + size * layout.rows, step * layout.rows)
    width = max(DISPLAY_PAD_WIDTH + size * layout.cols, step * layout.cols)
    canvas = np.zeros((height, width, 3), dtype=np.uint8)

    for index, image in enumerate(images):
        thumb = _thumbnail(image, size)
        top = DISPLAY_MARGIN + (index // layout.cols) * step
        left = DISPLAY_MARGIN + (index % layout.cols) * step
        canvas[top:top + thumb.shape[0], left:left + thumb.shape[1]] = thumb
    return canvas


def show_images(images, title=DEFAULT_WINDOW_TITLE, layout=None, output_path=None):
    """Show images side by side in one figure, optionally saving the composed canvas."""
    canvas = compose_images(images, layout)
    if output_path:
        save_image(output_path, canvas)

    plt.figure(figsize=(canvas.shape[1] / 100, canvas.shape[0] / 100))
    plt.imshow(canvas)
    plt.title(title)
    plt.axis('off')
    plt.show()
    return canvas
