# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Image file reading and writing through Pillow."""

import logging

import numpy as np
from PIL import Image, UnidentifiedImageError

from .errors import ImageLoadError

logger = logging.getLogger(__name__)

# modes kept as they are; anything else is converted to 8 bit grayscale
_NATIVE_MODES = ("L", "LA", "RGB", "RGBA")
_16BIT_MODES = ("I;16", "I;16B", "I;16L")


def _as_uint16(samples, path):
    # some Pillow versions decode 16 bit grayscale files as 32 bit "I"
    if samples.size and (samples.min() < 0 or samples.max() > 65535):
        raise ImageLoadError(
            f"Cannot decode {path}: samples exceed 16 bits"
        )
    return samples.astype(np.uint16)


def load_image(path):
    """
    Decode an image file into an array of samples.

    Parameters
    ----------
    path : str or os.PathLike
        Image file, e.g. a PGM/PPM, PNG or TIFF.

    Returns
    -------
    image : numpy.ndarray
        ``(height, width)`` or ``(height, width, channels)`` array of
        ``uint8`` samples, or ``uint16`` samples for 16 bit grayscale files.

    Raises
    ------
    ImageLoadError
        If the file is missing or cannot be decoded.
    """
    try:
        with Image.open(path) as img:
            img.load()
            if img.mode in _16BIT_MODES:
                image = np.asarray(img, dtype=np.uint16)
            elif img.mode == "I":
                image = _as_uint16(np.asarray(img), path)
            elif img.mode in _NATIVE_MODES:
                image = np.asarray(img, dtype=np.uint8)
            else:
                image = np.asarray(img.convert("L"), dtype=np.uint8)
    except ImageLoadError:
        raise
    except FileNotFoundError as e:
        raise ImageLoadError(f"Cannot open {path}: file not found") from e
    except (UnidentifiedImageError, OSError) as e:
        raise ImageLoadError(f"Cannot decode {path}: {e}") from e

    logger.info(
        "Loaded %s: %s %s", path, "x".join(map(str, image.shape)),
        image.dtype.name,
    )
    return image


def image_info(image):
    """``(width, height, channels, bit_depth)`` of a sample array."""
    height, width = image.shape[:2]
    channels = image.shape[2] if image.ndim == 3 else 1
    return width, height, channels, image.dtype.itemsize * 8


def save_image(path, image):
    """Encode a ``uint8``/``uint16`` sample array to ``path``."""
    image = np.ascontiguousarray(image)
    if image.dtype == np.uint16 and image.ndim != 2:
        raise ValueError("16 bit images must be single channel")
    img = Image.fromarray(image)
    img.save(path)
    logger.info("Saved %s", path)
