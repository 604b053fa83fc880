# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import numpy as np

from .._misc import DEFAULT_BLOCK_SIZE, global_work_size
from ..errors import DomainError


def lut_scale(image_size, bin_count):
    """
    Divisor that maps cumulative counts onto the output intensities.

    ``image_size // bin_count``, truncated. It is zero, and the lookup
    table undefined, when there are more bins than samples.

    Raises
    ------
    DomainError
        If `bin_count` is not positive or exceeds `image_size`.
    """
    if bin_count < 1:
        raise DomainError(f"bin_count must be positive, got {bin_count}")
    if bin_count > image_size:
        raise DomainError(
            f"bin_count {bin_count} exceeds the image size {image_size}; "
            "the normalization scale would be zero"
        )
    return image_size // bin_count


def normalize_lut(program, cumulative, image_size, bin_count,
                  block_size=DEFAULT_BLOCK_SIZE):
    """
    Lookup table ``lut[i] = cumulative[i] // (image_size // bin_count)``.

    Both divisions truncate.

    Parameters
    ----------
    program : cuhisteq.backend.Program
        Built equalization program.
    cumulative : device array
        Cumulative histogram of length `bin_count`.
    image_size : int
        Number of samples that were counted.
    bin_count : int
        Number of bins.
    block_size : int, optional
        Local work size of the dispatch.

    Returns
    -------
    lut : device array
        ``int32`` lookup table.
    event : cuhisteq.backend.Event
        Dispatch event.

    Raises
    ------
    DomainError
        If `bin_count` exceeds `image_size`.
    """
    lut_scale(image_size, bin_count)
    lut = program.device.empty(bin_count, np.int32)
    kernel = program.get_kernel("norm_hist")
    event = kernel(
        global_work_size(bin_count, block_size), block_size,
        (cumulative, lut, np.int32(image_size), np.int32(bin_count)),
    )
    return lut, event
