# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import numpy as np
import pytest

from cuhisteq._shared.testing import (
    assert_array_equal,
    build,
    run_stage,
    upload,
)
from cuhisteq.backend import HostDevice
from cuhisteq.core import check_scan_domain, inclusive_scan
from cuhisteq.errors import DomainError


def _scan(device, values):
    program = build(device)
    d_values = upload(device, np.asarray(values, dtype=np.int32))
    return run_stage(inclusive_scan, device, program, d_values)


@pytest.mark.parametrize(
    "n", [1, 2, 3, 5, 16, 64, 100, 255, 256, 257, 1000, 1024]
)
def test_matches_sequential_prefix_sum(device, n):
    rng = np.random.default_rng(n)
    values = rng.integers(0, 1000, size=n, dtype=np.int32)
    cumulative = _scan(device, values)
    assert cumulative.dtype == np.int32
    assert_array_equal(cumulative, np.cumsum(values))


def test_one_count_per_bin(device):
    assert_array_equal(_scan(device, [1, 1, 1, 1]), [1, 2, 3, 4])


def test_single_populated_bin(device):
    assert_array_equal(_scan(device, [0, 0, 8, 0]), [0, 0, 8, 8])


def test_histogram_scan_is_monotonic(device):
    rng = np.random.default_rng(42)
    image = rng.integers(0, 256, size=5000)
    hist = np.bincount(image, minlength=256)
    cumulative = _scan(device, hist)
    assert np.all(np.diff(cumulative) >= 0)
    assert cumulative[-1] == image.size


def test_largest_domain_is_accepted():
    device = HostDevice(max_local_size=16)
    values = np.arange(16, dtype=np.int32)
    assert_array_equal(_scan(device, values), np.cumsum(values))


def test_larger_than_domain_is_rejected():
    device = HostDevice(max_local_size=16)
    program = build(device)
    d_values = upload(device, np.ones(17, dtype=np.int32))
    with pytest.raises(DomainError, match="synchronization domain"):
        inclusive_scan(program, d_values)


def test_empty_scan_is_rejected():
    with pytest.raises(DomainError):
        check_scan_domain(0, HostDevice())
