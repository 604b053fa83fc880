# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import numpy as np
import pytest
from skimage import data

from cuhisteq._shared.testing import (
    assert_array_equal,
    build,
    run_stage,
    upload,
)
from cuhisteq.core import check_image, intensity_histogram
from cuhisteq.errors import DomainError


def _histogram(device, image, bin_count, **kwargs):
    program = build(device, image.dtype)
    d_image = upload(device, image)
    return run_stage(
        intensity_histogram, device, program, d_image, bin_count, **kwargs
    )


def test_one_sample_per_bin(device):
    image = np.array([0, 1, 2, 3], dtype=np.uint8)
    assert_array_equal(_histogram(device, image, 4), [1, 1, 1, 1])


def test_constant_image(device):
    image = np.full((2, 4), 2, dtype=np.uint8)
    assert_array_equal(_histogram(device, image, 4), [0, 0, 8, 0])


def test_counts_are_conserved(device):
    image = data.camera()
    hist = _histogram(device, image, 256)
    assert hist.dtype == np.int32
    assert hist.sum() == image.size
    assert_array_equal(hist, np.bincount(image.ravel(), minlength=256))


def test_contended_bin(device):
    # every unit increments the same counter
    image = np.full(100_000, 7, dtype=np.uint8)
    hist = _histogram(device, image, 8)
    assert hist[7] == 100_000
    assert hist.sum() == 100_000


@pytest.mark.parametrize("block_size", [32, 128, 256])
def test_partial_last_block(device, block_size):
    rng = np.random.default_rng(5)
    image = rng.integers(0, 16, size=1000, dtype=np.uint8)
    hist = _histogram(device, image, 16, block_size=block_size)
    assert_array_equal(hist, np.bincount(image, minlength=16))


def test_16bit_samples(device):
    rng = np.random.default_rng(0)
    image = rng.integers(0, 1000, size=(40, 30), dtype=np.uint16)
    hist = _histogram(device, image, 1000)
    assert_array_equal(hist, np.bincount(image.ravel(), minlength=1000))


def test_check_image_accepts_valid_image():
    check_image(np.array([[0, 255]], dtype=np.uint8), 256)


def test_check_image_rejects_sample_outside_bins():
    image = np.array([0, 1, 4], dtype=np.uint8)
    with pytest.raises(DomainError, match="sample value 4"):
        check_image(image, 4)


@pytest.mark.parametrize("dtype", [np.float32, np.int16, np.int64, bool])
def test_check_image_rejects_dtype(dtype):
    with pytest.raises(DomainError, match="unsupported image dtype"):
        check_image(np.zeros((4, 4), dtype=dtype), 4)


def test_check_image_rejects_empty_image():
    with pytest.raises(DomainError, match="no samples"):
        check_image(np.zeros((0, 4), dtype=np.uint8), 4)


def test_check_image_rejects_non_positive_bins():
    with pytest.raises(DomainError):
        check_image(np.zeros(4, dtype=np.uint8), 0)


def test_check_image_rejects_non_array():
    with pytest.raises(TypeError):
        check_image([0, 1, 2, 3], 4)
