#!/usr/bin/env python3
"""
Tests for image I/O, the side-by-side compositor and quality metrics.
"""

import inspect
import sys
sys.path.append('.')

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from kmeans_slic_superpixels import demo_script
from kmeans_slic_superpixels.config import DEFAULT_MAX_ITERATIONS, DEFAULT_SUPERPIXEL_COUNT
from kmeans_slic_superpixels.display import DisplayLayout, compose_images, layout_for_count, show_images
from kmeans_slic_superpixels.errors import InvalidInput
from kmeans_slic_superpixels.io import load_image, save_image, to_rgb_ubyte
from kmeans_slic_superpixels.segmentation import find_slic_superpixels
from kmeans_slic_superpixels.utils.metrics import compute_quality_metrics


@pytest.mark.parametrize("n_images, expected", [
    (1, (1, 1, 300)),
    (2, (1, 2, 300)),
    (3, (2, 2, 300)),
    (4, (2, 2, 300)),
    (6, (2, 3, 200)),
    (7, (2, 4, 200)),
    (12, (3, 4, 150)),
])
def test_layout_table(n_images, expected):
    assert tuple(layout_for_count(n_images)) == expected


@pytest.mark.parametrize("n_images", [0, 13])
def test_layout_rejects_bad_counts(n_images):
    with pytest.raises(InvalidInput):
        layout_for_count(n_images)


def test_compose_two_images_side_by_side():
    white = np.full((10, 20, 3), 255, dtype=np.uint8)
    canvas = compose_images([white, white])

    assert canvas.shape == (360, 700, 3)
    assert canvas.dtype == np.uint8
    assert canvas[0, 0].tolist() == [0, 0, 0]
    assert canvas[20, 20].tolist() == [255, 255, 255]
    assert canvas[20, 330].tolist() == [0, 0, 0]
    assert canvas[20, 340].tolist() == [255, 255, 255]


@pytest.mark.parametrize("n_images, expected_shape", [
    (1, (360, 400, 3)),
    (2, (360, 700, 3)),
    (4, (660, 700, 3)),
    (6, (460, 700, 3)),
    (8, (460, 900, 3)),
    (12, (510, 700, 3)),
])
def test_canvas_size_per_layout(n_images, expected_shape):
    images = [np.zeros((8, 8, 3), dtype=np.uint8)] * n_images
    assert compose_images(images).shape == expected_shape


def test_demo_uses_configured_defaults():
    params = inspect.signature(demo_script.main).parameters
    assert params["superpixel_count"].default == DEFAULT_SUPERPIXEL_COUNT
    assert params["max_iter"].default == DEFAULT_MAX_ITERATIONS
    assert "block_size" in find_slic_superpixels.__doc__


def test_compose_twelve_images_fits_canvas():
    images = [np.full((30, 30, 3), 10 * i, dtype=np.uint8) for i in range(12)]
    canvas = compose_images(images)

    assert canvas.shape == (60 + 150 * 3, 100 + 150 * 4, 3)
    assert canvas[20 + 2 * 170, 20 + 3 * 170].tolist() == [110, 110, 110]


def test_compose_rejects_overflow_and_empty_images():
    image = np.zeros((5, 5, 3), dtype=np.uint8)
    with pytest.raises(InvalidInput):
        compose_images([image, image, image], DisplayLayout(1, 2, 50))
    with pytest.raises(InvalidInput):
        compose_images([np.zeros((0, 5, 3), dtype=np.uint8)])


def test_show_images_saves_canvas(tmp_path, monkeypatch):
    monkeypatch.setattr("matplotlib.pyplot.show", lambda: None)
    image = np.zeros((12, 12, 3), dtype=np.uint8)
    image[:, 6:] = (0, 255, 0)
    result = find_slic_superpixels(image, 4)

    output_path = tmp_path / "ResultingImage.png"
    canvas = show_images([image, result.image], output_path=str(output_path))

    np.testing.assert_array_equal(load_image(str(output_path)), canvas)


def test_image_round_trip(tmp_path):
    image = np.random.default_rng(1).integers(0, 256, size=(9, 7, 3), dtype=np.uint8)
    path = str(tmp_path / "image.png")
    save_image(path, image)

    loaded = load_image(path)
    assert loaded.dtype == np.uint8
    np.testing.assert_array_equal(loaded, image)


def test_grayscale_and_rgba_become_rgb():
    gray = np.full((4, 5), 128, dtype=np.uint8)
    rgba = np.zeros((4, 5, 4), dtype=np.uint8)
    rgba[..., 3] = 255

    assert to_rgb_ubyte(gray).shape == (4, 5, 3)
    assert to_rgb_ubyte(rgba).shape == (4, 5, 3)
    with pytest.raises(InvalidInput):
        to_rgb_ubyte(np.zeros((4, 5, 2), dtype=np.uint8))


def test_quality_metrics_of_recolored_image():
    image = np.random.default_rng(2).integers(0, 256, size=(32, 32, 3), dtype=np.uint8)
    result = find_slic_superpixels(image, 16)

    psnr, ssim = compute_quality_metrics(image, result.image)
    assert np.isfinite(psnr)
    assert ssim < 1.0

    _, same = compute_quality_metrics(image, image.copy())
    assert same == pytest.approx(1.0)
