# Module: metrics.py
import numpy as np
from skimage import metrics


def compute_quality_metrics(original, recolored):
    """Compute PSNR and SSIM of a recolored image against the original, values in [0, 255]."""
    original = np.asarray(original, dtype=np.float64)
    recolored = np.asarray(recolored, dtype=np.float64)
    psnr = metrics.peak_signal_noise_ratio(original, recolored, data_range=255)
    ssim = metrics.structural_similarity(original, recolored, data_range=255, channel_axis=2)
    return psnr, ssim
