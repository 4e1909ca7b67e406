# Module: io.py
import numpy as np
from skimage import color, io
from skimage.util import img_as_ubyte

from .errors import InvalidInput


def to_rgb_ubyte(image):
    """Convert a grayscale, RGB or RGBA image to an 8-bit RGB array."""
    image = np.asarray(image)
    if image.ndim == 2:
        image = color.gray2rgb(image)
    elif image.ndim == 3 and image.shape[2] == 4:
        image = color.rgba2rgb(image)
    if image.ndim != 3 or image.shape[2] != 3:
        raise InvalidInput(f"Unsupported image shape {image.shape}")
    return img_as_ubyte(image)


def load_image(filepath):
    """Load an image as uint8 RGB."""
    return to_rgb_ubyte(io.imread(filepath))


def save_image(filepath, image):
    """Write an image with values in [0, 255] to disk as uint8."""
    image = np.clip(np.asarray(image), 0, 255).astype(np.uint8)
    io.imsave(filepath, image, check_contrast=False)
