"""
Image output for accumulated radiance buffers.

The renderer hands back per-pixel sums of linear radiance. This module
averages them, applies square-root gamma, quantizes to 8 bits and writes
the result as a textual PPM (P3) or any raster format Pillow supports.
"""

from __future__ import annotations
from pathlib import Path
from typing import TextIO, Union

import numpy as np
from PIL import Image


def to_rgb8(summed: np.ndarray, samples: int) -> np.ndarray:
    """Convert summed radiance to 8-bit sRGB-ish pixels.

    Args:
        summed: (height, width, 3) array of radiance sums
        samples: Number of samples each pixel was summed over

    Returns:
        uint8 array with the same height and width
    """
    if samples <= 0:
        raise ValueError(f"samples must be a positive integer, got {samples}")
    averaged = np.clip(summed / samples, 0.0, None)
    corrected = np.sqrt(averaged)
    return (256 * np.clip(corrected, 0.0, 0.999)).astype(np.uint8)


def write_ppm(stream: TextIO, rgb8: np.ndarray) -> None:
    """Write pixels as a plain-text P3 pixmap, top row first."""
    height, width = rgb8.shape[:2]
    stream.write(f"P3\n{width} {height}\n255\n")
    for row in rgb8:
        for r, g, b in row:
            stream.write(f"{r} {g} {b}\n")


def save_image(summed: np.ndarray, samples: int, filename: Union[str, Path]) -> None:
    """Save a radiance buffer to disk.

    Args:
        summed: (height, width, 3) array of radiance sums
        samples: Number of samples each pixel was summed over
        filename: Output path; `.ppm` writes P3 text, other extensions
            are encoded by Pillow
    """
    rgb8 = to_rgb8(summed, samples)
    path = Path(filename)
    if path.suffix.lower() == '.ppm':
        with open(path, 'w') as f:
            write_ppm(f, rgb8)
    else:
        Image.fromarray(rgb8).save(path)
