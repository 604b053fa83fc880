# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Compute platforms and devices.

Platforms are numbered in the order returned by :func:`get_platforms`:
``NVIDIA CUDA`` first when CuPy can see at least one GPU, then
``Host (NumPy)``, which is always present.
"""

import logging
from typing import Callable, List, NamedTuple

from ..errors import DeviceError
from ._base import KERNEL, TRANSFER, Device, Event, Kernel, Program
from ._host import HostDevice

logger = logging.getLogger(__name__)

__all__ = [
    "KERNEL",
    "TRANSFER",
    "Device",
    "Event",
    "HostDevice",
    "Kernel",
    "Platform",
    "Program",
    "cuda_available",
    "get_device",
    "get_platforms",
    "list_platforms_devices",
    "open_device",
]


class Platform(NamedTuple):
    name: str
    kind: str
    device_names: List[str]
    open: Callable[[int], Device]


def _cuda_platform():
    from .. import _is_cupy_available

    if not _is_cupy_available:
        return None
    from . import _cuda

    count = _cuda.device_count()
    if count == 0:
        return None
    names = [_cuda.device_name(i) for i in range(count)]
    return Platform(
        _cuda.CudaDevice.platform_name, _cuda.CudaDevice.kind, names,
        _cuda.CudaDevice,
    )


def _host_platform():
    return Platform(
        HostDevice.platform_name, HostDevice.kind, [HostDevice().name],
        HostDevice,
    )


def cuda_available():
    """True if CuPy is installed and at least one GPU is visible."""
    return _cuda_platform() is not None


def get_platforms():
    platforms = []
    cuda = _cuda_platform()
    if cuda is not None:
        platforms.append(cuda)
    platforms.append(_host_platform())
    return platforms


def get_device(platform_id=0, device_id=0):
    """Open device ``device_id`` of platform ``platform_id``.

    Raises
    ------
    DeviceError
        If either index does not name an available platform or device.
    """
    platforms = get_platforms()
    if not 0 <= platform_id < len(platforms):
        raise DeviceError(
            f"invalid platform id {platform_id}: "
            f"{len(platforms)} platform(s) available"
        )
    platform = platforms[platform_id]
    device = platform.open(device_id)
    logger.debug("opened %s, %s", platform.name, device.name)
    return device


def open_device(kind="host", device_id=0):
    """Open a device by platform kind (``"cuda"`` or ``"host"``)."""
    for platform in get_platforms():
        if platform.kind == kind:
            return platform.open(device_id)
    raise DeviceError(f"no '{kind}' platform available")


def list_platforms_devices():
    """Human readable listing of every platform and its devices."""
    platforms = get_platforms()
    lines = [f"Found {len(platforms)} platform(s):"]
    for platform_id, platform in enumerate(platforms):
        lines.append(f"Platform {platform_id}, {platform.name}, "
                     f"{len(platform.device_names)} device(s)")
        for device_id, name in enumerate(platform.device_names):
            lines.append(f"    Device {device_id}, {name}")
    return "\n".join(lines)
