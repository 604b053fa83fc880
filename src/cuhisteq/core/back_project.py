# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import numpy as np

from .._misc import DEFAULT_BLOCK_SIZE, global_work_size


def back_project(program, image, lut, block_size=DEFAULT_BLOCK_SIZE):
    """
    Map every sample of a device image through a lookup table.

    ``out[p] = lut[image[p]]``, saturated to the largest value of the image
    dtype. Each unit writes one output sample.

    Parameters
    ----------
    program : cuhisteq.backend.Program
        Built equalization program.
    image : device array
        Image buffer; every sample must be a valid index into `lut`.
    lut : device array
        ``int32`` lookup table.
    block_size : int, optional
        Local work size of the dispatch.

    Returns
    -------
    out : device array
        Same shape and dtype as `image`.
    event : cuhisteq.backend.Event
        Dispatch event.
    """
    out = program.device.empty(image.shape, image.dtype)
    total_size = image.size
    kernel = program.get_kernel("back_project")
    event = kernel(
        global_work_size(total_size, block_size), block_size,
        (image, lut, out, np.int32(total_size)),
    )
    return out, event
