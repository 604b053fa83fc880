#
# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#
from unittest.mock import patch

import numpy as np
import pytest

from cuhisteq.backend import (
    KERNEL,
    HostDevice,
    get_device,
    get_platforms,
    list_platforms_devices,
    open_device,
)
from cuhisteq.core.kernel import KERNEL_NAMES, get_program_source
from cuhisteq.errors import BuildError, DeviceError


def test_host_platform_is_always_last():
    platforms = get_platforms()
    assert platforms[-1].name == "Host (NumPy)"
    assert platforms[-1].kind == "host"
    assert len(platforms[-1].device_names) == 1


def test_without_cupy_only_host_is_listed():
    with patch("cuhisteq._is_cupy_available", False):
        platforms = get_platforms()
        device = get_device(0, 0)
    assert [p.kind for p in platforms] == ["host"]
    assert isinstance(device, HostDevice)


def test_listing():
    listing = list_platforms_devices()
    assert listing.startswith(f"Found {len(get_platforms())} platform(s)")
    assert "Host (NumPy)" in listing
    assert "    Device 0, " in listing


def test_invalid_platform():
    with pytest.raises(DeviceError, match="invalid platform id"):
        get_device(len(get_platforms()), 0)
    with pytest.raises(DeviceError):
        get_device(-1, 0)


def test_invalid_host_device():
    with pytest.raises(DeviceError, match="invalid device id 1"):
        open_device("host", 1)


def test_unknown_platform_kind():
    with pytest.raises(DeviceError, match="no 'opencl' platform"):
        open_device("opencl")


def test_host_build():
    device = HostDevice()
    program = device.build(get_program_source(np.uint8))
    assert program.kernel_names == KERNEL_NAMES
    with pytest.raises(BuildError, match="not part of the program"):
        program.get_kernel("missing")


def test_host_build_reports_missing_kernels():
    source = get_program_source(np.uint8)
    source = source._replace(host_kernels={})
    with pytest.raises(BuildError) as excinfo:
        HostDevice().build(source)
    for name in KERNEL_NAMES:
        assert name in excinfo.value.log


def test_host_transfers_copy():
    device = HostDevice()
    array = np.arange(10, dtype=np.uint8)
    buffer, event = device.to_device(array)
    array[:] = 0
    assert buffer[9] == 9
    assert event.elapsed_ns >= 0
    host, _ = device.to_host(buffer)
    host[:] = 1
    assert buffer[9] == 9


def test_work_size_validation():
    device = HostDevice(max_local_size=64)
    kernel = device.build(get_program_source(np.uint8)).get_kernel("int_hist")
    image = np.zeros(16, dtype=np.uint8)
    hist = np.zeros(4, dtype=np.int32)
    with pytest.raises(DeviceError, match="local work size"):
        kernel(128, 128, (image, hist, np.int32(16)))
    with pytest.raises(DeviceError, match="not a positive multiple"):
        kernel(100, 32, (image, hist, np.int32(16)))
    event = kernel(32, 32, (image, hist, np.int32(16)))
    event.wait()
    assert event.kind == KERNEL
    assert hist[0] == 16


def test_host_dispatch_fault_is_a_device_error():
    device = HostDevice()
    kernel = device.build(get_program_source(np.uint8)).get_kernel("int_hist")
    image = np.array([0, 9], dtype=np.uint8)
    hist = np.zeros(4, dtype=np.int32)
    with pytest.raises(DeviceError, match="int_hist"):
        kernel(32, 32, (image, hist, np.int32(2)))


def test_invalid_max_local_size():
    with pytest.raises(DeviceError):
        HostDevice(max_local_size=0)
