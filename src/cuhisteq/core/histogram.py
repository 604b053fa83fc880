# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import numpy as np

from .._misc import DEFAULT_BLOCK_SIZE, global_work_size
from ..errors import DomainError

SUPPORTED_DTYPES = (np.uint8, np.uint16)


def check_image(image, bin_count):
    """Validate a host image against ``bin_count``.

    Parameters
    ----------
    image : numpy.ndarray
        Image of unsigned 8 or 16 bit samples.
    bin_count : int
        Number of histogram bins.

    Raises
    ------
    TypeError
        If `image` is not a numpy.ndarray.
    DomainError
        If the sample type is unsupported, the image is empty or too large
        for 32 bit counters, or a sample lies outside ``[0, bin_count-1]``.
    """
    if not isinstance(image, np.ndarray):
        raise TypeError("image must be a numpy.ndarray")
    if image.dtype.type not in SUPPORTED_DTYPES:
        raise DomainError(
            f"unsupported image dtype {image.dtype.name}; expected uint8 or "
            "uint16 samples"
        )
    if image.size == 0:
        raise DomainError("image has no samples")
    if image.size > np.iinfo(np.int32).max:
        raise DomainError(
            f"image of {image.size} samples overflows 32 bit bin counters"
        )
    if bin_count < 1:
        raise DomainError(f"bin_count must be positive, got {bin_count}")
    peak = int(image.max())
    if peak >= bin_count:
        raise DomainError(
            f"sample value {peak} outside of [0, {bin_count - 1}]; "
            "increase bin_count"
        )


def intensity_histogram(program, image, bin_count,
                        block_size=DEFAULT_BLOCK_SIZE):
    """
    Count the samples of a device image into ``bin_count`` bins.

    One unit of work per sample atomically increments the bin of its
    sample, so the counts do not depend on the order the units run in.
    Every sample must lie in ``[0, bin_count-1]`` (see :func:`check_image`).

    Parameters
    ----------
    program : cuhisteq.backend.Program
        Built equalization program.
    image : device array
        Image buffer on ``program.device``.
    bin_count : int
        Number of bins.
    block_size : int, optional
        Local work size of the dispatch.

    Returns
    -------
    hist : device array
        ``int32`` histogram of length `bin_count`.
    event : cuhisteq.backend.Event
        Dispatch event; the histogram is complete once it is waited on.
    """
    device = program.device
    hist = device.zeros(bin_count, np.int32)
    total_size = image.size
    kernel = program.get_kernel("int_hist")
    event = kernel(
        global_work_size(total_size, block_size), block_size,
        (image, hist, np.int32(total_size)),
    )
    return hist, event
