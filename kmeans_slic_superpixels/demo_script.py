import os
import sys
import time

from kmeans_slic_superpixels.config import (DEFAULT_MAX_ITERATIONS, DEFAULT_RESULT_PATH, DEFAULT_SUPERPIXEL_COUNT,
                                             setup_logging)
from kmeans_slic_superpixels.display import show_images
from kmeans_slic_superpixels.io import load_image, save_image
from kmeans_slic_superpixels.segmentation import find_slic_superpixels
from kmeans_slic_superpixels.utils.metrics import compute_quality_metrics


def main(image_path="Datasets/jermuk.png", superpixel_count=DEFAULT_SUPERPIXEL_COUNT, max_iter=DEFAULT_MAX_ITERATIONS,
         save_figures=True):

    try:
        start_time = time.time()
        output_dir = "output_figures"
        if save_figures:
            os.makedirs(output_dir, exist_ok=True)
            print(f"\nSaving figures to: {output_dir}/")

        print("\nStarting superpixel segmentation...")
        print(f"Parameters:")
        print(f"- Image: {image_path}")
        print(f"- Requested superpixels: {superpixel_count}")
        print(f"- Max iterations: {max_iter}")
        print(f"{'-'*80}\n")

        load_start = time.time()
        image = load_image(image_path)
        load_time = time.time() - load_start

        segment_start = time.time()
        result = find_slic_superpixels(image, superpixel_count, max_iter=max_iter)
        segment_time = time.time() - segment_start

        if save_figures:
            save_image(os.path.join(output_dir, 'superpixels.png'), result.image)

        # Side-by-side comparison
        show_images(
            [image, result.image],
            layout=None,
            output_path=os.path.join(output_dir, DEFAULT_RESULT_PATH) if save_figures else None,
        )

        psnr, ssim = compute_quality_metrics(image, result.image)
        total_time = time.time() - start_time
        print("\nProcessing Complete!")
        print(f"{'-'*80}")
        print(f"Image shape: {image.shape}")
        print(f"Clusters used: {result.layout.actual_cluster_count} "
              f"({result.layout.grid_rows} x {result.layout.grid_cols} tiles of side {result.layout.tile_size})")
        print(f"Refinement iterations: {len(result.losses)}")
        print(f"Loss per iteration: {', '.join(f'{loss:.4f}' for loss in result.losses)}")
        print(f"Empty clusters: {len(result.empty_clusters)}")
        print("\nTiming Information:")
        print(f"Image loading: {load_time:.2f} seconds")
        print(f"Segmentation: {segment_time:.2f} seconds")
        print(f"Total execution time: {total_time:.2f} seconds")
        print(f"\nQuality Metrics:")
        print(f"PSNR = {psnr:.4f} dB")
        print(f"SSIM = {ssim:.4f}")
        print(f"{'-'*80}\n")
        return result
    except KeyboardInterrupt:
        print("\nProcessing interrupted by user")
        sys.exit(1)
    except Exception as e:
        print(f"\nError during processing: {str(e)}")
        raise


if __name__ == "__main__":
    setup_logging()
    main(*sys.argv[1:2])
