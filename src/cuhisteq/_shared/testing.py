# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Helpers for the test suites."""

import numpy as np
import pytest
from numpy.testing import assert_array_equal  # noqa

from ..backend import cuda_available, open_device

skipif = pytest.mark.skipif
parametrize = pytest.mark.parametrize
raises = pytest.raises

_has_cuda = cuda_available()

device_kinds = [
    pytest.param("host", id="host"),
    pytest.param(
        "cuda", id="cuda",
        marks=skipif(not _has_cuda, reason="no CUDA device available"),
    ),
]


def build(device, dtype=np.uint8):
    """Equalization program for ``device`` and images of ``dtype``."""
    from ..core.kernel import get_program_source

    return device.build(get_program_source(dtype))


def run_stage(stage, device, *args, **kwargs):
    """Run one stage function, wait for it and copy its output to the host."""
    out, event = stage(*args, **kwargs)
    event.wait()
    host, _ = device.to_host(out)
    return host


def upload(device, array):
    buffer, event = device.to_device(array)
    event.wait()
    return buffer


def sequential_equalize(image, bin_count):
    """Straightforward NumPy equalization used as the reference result."""
    hist = np.bincount(image.ravel(), minlength=bin_count).astype(np.int32)
    cumulative = np.cumsum(hist).astype(np.int32)
    lut = cumulative // (image.size // bin_count)
    out = np.minimum(lut[image], np.iinfo(image.dtype).max)
    return hist, cumulative, lut, out.astype(image.dtype)


__all__ = [
    "assert_array_equal",
    "build",
    "device_kinds",
    "open_device",
    "parametrize",
    "raises",
    "run_stage",
    "sequential_equalize",
    "skipif",
    "upload",
]
