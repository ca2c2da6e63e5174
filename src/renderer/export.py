"""Image export for rendered frames.

Example:
    >>> pixels = gamma_correct(renderer.render(world, camera), 100)
    >>> save_png(pixels, "image.png")
"""

import logging

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

logger = logging.getLogger(__name__)


def save_png(pixels: npt.NDArray[np.uint8], filepath: str) -> None:
    """Save an 8-bit RGB image as a PNG file.

    Args:
        pixels: Array of shape (height, width, 3) and dtype uint8, row 0 at
            the top of the image.
        filepath: Output file path (should end in .png).

    Raises:
        ValueError: If the array does not have the expected shape or dtype.
    """
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"Expected shape (H, W, 3), got {pixels.shape}")
    if pixels.dtype != np.uint8:
        raise ValueError(f"Expected dtype uint8, got {pixels.dtype}")

    PILImage.fromarray(pixels).save(filepath)
    logger.info("Wrote %dx%d image to %s", pixels.shape[1], pixels.shape[0], filepath)
