# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""NumPy device running the host emulation of the kernels."""

import logging
import platform
import time

import numpy as np

from ..errors import BuildError, DeviceError
from ._base import KERNEL, TRANSFER, Device, Event, Program

logger = logging.getLogger(__name__)

DEFAULT_MAX_LOCAL_SIZE = 1024


class HostEvent(Event):
    """Event of a command that already completed when it was returned."""

    def __init__(self, name, kind, start_ns, end_ns):
        super().__init__(name, kind)
        self._start_ns = start_ns
        self._end_ns = end_ns

    def wait(self):
        pass

    @property
    def elapsed_ns(self):
        return self._end_ns - self._start_ns


class HostDevice(Device):
    """Single device of the ``Host (NumPy)`` platform.

    Buffers are private NumPy copies, so host arrays handed to
    :meth:`to_device` are never aliased by the pipeline.

    Parameters
    ----------
    device_id : int
        Must be 0; the platform has one device.
    max_local_size : int
        Largest work group accepted by kernel dispatch.
    """

    kind = "host"
    platform_name = "Host (NumPy)"

    def __init__(self, device_id=0, max_local_size=DEFAULT_MAX_LOCAL_SIZE):
        if device_id != 0:
            raise DeviceError(
                f"invalid device id {device_id}: platform "
                f"'{self.platform_name}' has 1 device"
            )
        if max_local_size < 1:
            raise DeviceError("max_local_size must be positive")
        super().__init__(device_id)
        self._max_local_size = int(max_local_size)

    @property
    def name(self):
        return platform.processor() or platform.machine() or "cpu"

    @property
    def max_local_size(self):
        return self._max_local_size

    def build(self, source):
        kernels = {}
        missing = []
        for name in source.kernel_names:
            function = source.host_kernels.get(name)
            if function is None:
                missing.append(name)
            else:
                kernels[name] = function
        if missing:
            raise BuildError(
                "program build failed on the host device",
                log="\n".join(
                    f"error: kernel '{name}' has no host implementation"
                    for name in missing
                ),
            )
        return Program(self, kernels)

    def zeros(self, shape, dtype):
        return np.zeros(shape, dtype=dtype)

    def empty(self, shape, dtype):
        return np.empty(shape, dtype=dtype)

    def to_device(self, array, name="write"):
        start = time.perf_counter_ns()
        buffer = np.array(array, copy=True, order="C")
        end = time.perf_counter_ns()
        return buffer, HostEvent(name, TRANSFER, start, end)

    def to_host(self, buffer, name="read"):
        start = time.perf_counter_ns()
        array = np.array(buffer, copy=True)
        end = time.perf_counter_ns()
        return array, HostEvent(name, TRANSFER, start, end)

    def _launch(self, kernel, global_size, local_size, args, shared_mem):
        start = time.perf_counter_ns()
        try:
            kernel.function(global_size, local_size, *args)
        except (IndexError, TypeError, ValueError) as e:
            raise DeviceError(
                f"dispatch of kernel '{kernel.name}' failed: {e}"
            ) from e
        end = time.perf_counter_ns()
        return HostEvent(kernel.name, KERNEL, start, end)
