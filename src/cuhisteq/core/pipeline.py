# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
from typing import Any, NamedTuple

import numpy as np

from .._misc import DEFAULT_BLOCK_SIZE
from ..backend import get_device
from ..errors import EqualizeError
from ..profiling import Profile
from .back_project import back_project
from .histogram import check_image, intensity_histogram
from .kernel import get_program_source
from .normalize import lut_scale, normalize_lut
from .scan import check_scan_domain, inclusive_scan

logger = logging.getLogger(__name__)


class EqualizeResult(NamedTuple):
    """Host copies of every array produced by one run."""

    image: np.ndarray
    histogram: np.ndarray
    cumulative_histogram: np.ndarray
    lut: np.ndarray
    profile: Any


def equalize_hist(
    image: np.ndarray,
    bin_count: int = 256,
    *,
    device=None,
    block_size: int = DEFAULT_BLOCK_SIZE,
) -> EqualizeResult:
    """
    Histogram equalization of an image on a compute device.

    The image is copied to the device once, then the four stages run in
    order, each waiting for the previous one: intensity histogram (atomic
    counting), inclusive scan of the histogram, normalization of the
    cumulative histogram into a lookup table and back-projection of the
    image through the table.

    Parameters
    ----------
    image : numpy.ndarray
        Image of ``uint8`` or ``uint16`` samples, any shape. All channels of
        a multi-channel image share one histogram.
    bin_count : int, optional
        Number of histogram bins; 256 for 8 bit images. Must not exceed the
        number of samples nor the device's largest work group.
    device : cuhisteq.backend.Device, optional
        Device to run on. Defaults to device 0 of platform 0.
    block_size : int, optional
        Local work size of the per-sample and per-bin dispatches.

    Returns
    -------
    result : EqualizeResult
        ``result.image`` has the shape and dtype of `image`; it holds
        ``lut[image]`` saturated to the largest value of the dtype.

    Raises
    ------
    TypeError
        If `image` is not a numpy.ndarray.
    DomainError
        If the image or `bin_count` is outside the supported domain.
    BuildError
        If the program fails to build for the device.
    DeviceError
        If allocation, dispatch or a transfer fails.

    Examples
    --------
    >>> import numpy as np
    >>> from cuhisteq.core import equalize_hist
    >>> from cuhisteq.backend import open_device
    >>> result = equalize_hist(np.array([[0, 1], [2, 3]], dtype=np.uint8), 4,
    ...                        device=open_device("host"))
    >>> result.image
    array([[1, 2],
           [3, 4]], dtype=uint8)
    """
    check_image(image, bin_count)
    image_size = image.size
    scale = lut_scale(image_size, bin_count)
    if device is None:
        device = get_device()
    check_scan_domain(bin_count, device)
    block_size = min(block_size, device.max_local_size)

    logger.debug(
        "equalize %s %s image, %d bins, scale %d on %r",
        image.shape, image.dtype.name, bin_count, scale, device,
    )
    profile = Profile()
    try:
        program = device.build(get_program_source(image.dtype))

        d_image, event = device.to_device(image, name="write image")
        profile.record(event)

        hist, event = intensity_histogram(
            program, d_image, bin_count, block_size=block_size
        )
        profile.record(event)

        cumulative, event = inclusive_scan(program, hist)
        profile.record(event)

        lut, event = normalize_lut(
            program, cumulative, image_size, bin_count, block_size=block_size
        )
        profile.record(event)

        d_output, event = back_project(
            program, d_image, lut, block_size=block_size
        )
        profile.record(event)

        results = []
        for name, buffer in (
            ("read histogram", hist),
            ("read cumulative histogram", cumulative),
            ("read lut", lut),
            ("read image", d_output),
        ):
            array, event = device.to_host(buffer, name=name)
            profile.record(event)
            results.append(array)
    except EqualizeError as e:
        logger.error("[cuhisteq] " + str(e), exc_info=True)
        raise

    histogram, cumulative_histogram, lut_host, output = results
    return EqualizeResult(
        output, histogram, cumulative_histogram, lut_host, profile
    )
