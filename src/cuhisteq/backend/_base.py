# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging

from ..errors import BuildError, DeviceError

logger = logging.getLogger(__name__)

KERNEL = "kernel"
TRANSFER = "transfer"


class Event:
    """Timing record of one command submitted to a device.

    ``kind`` is either ``"kernel"`` or ``"transfer"``.
    """

    def __init__(self, name, kind):
        self.name = name
        self.kind = kind

    def wait(self):
        """Block until the command has completed."""
        raise NotImplementedError

    @property
    def elapsed_ns(self):
        """Execution time of the command in nanoseconds."""
        raise NotImplementedError

    def __repr__(self):
        return f"<{type(self).__name__} {self.kind} {self.name!r}>"


class Kernel:
    """Handle to a built kernel.

    Calling the handle dispatches ``global_size`` units of work in groups of
    ``local_size`` and returns the dispatch :class:`Event` without waiting.
    """

    def __init__(self, device, name, function):
        self.device = device
        self.name = name
        self.function = function

    def __call__(self, global_size, local_size, args, shared_mem=0):
        global_size = int(global_size)
        local_size = int(local_size)
        if local_size < 1 or local_size > self.device.max_local_size:
            raise DeviceError(
                f"invalid local work size {local_size} for kernel "
                f"'{self.name}' (device maximum is "
                f"{self.device.max_local_size})"
            )
        if global_size < 1 or global_size % local_size:
            raise DeviceError(
                f"global work size {global_size} of kernel '{self.name}' is "
                f"not a positive multiple of the local work size {local_size}"
            )
        logger.debug(
            "dispatch %s: global=%d local=%d shared_mem=%d",
            self.name, global_size, local_size, shared_mem,
        )
        return self.device._launch(
            self, global_size, local_size, args, shared_mem
        )


class Program:
    """Set of kernels built for one device."""

    def __init__(self, device, kernels):
        self.device = device
        self._kernels = kernels

    @property
    def kernel_names(self):
        return tuple(self._kernels)

    def get_kernel(self, name):
        try:
            function = self._kernels[name]
        except KeyError:
            raise BuildError(
                f"kernel '{name}' is not part of the program"
            ) from None
        return Kernel(self.device, name, function)


class Device:
    """A compute device of one platform.

    Subclasses provide buffer allocation, program building, timed
    transfers and kernel launches.
    """

    kind = None
    platform_name = None

    def __init__(self, device_id=0):
        self.device_id = device_id

    @property
    def name(self):
        raise NotImplementedError

    @property
    def max_local_size(self):
        """Largest work group, i.e. the largest synchronization domain."""
        raise NotImplementedError

    def build(self, source):
        """Build ``source`` into a :class:`Program`.

        ``source`` provides ``kernel_names``, ``cuda_code`` and
        ``host_kernels``; each device builds the representation it can run.
        """
        raise NotImplementedError

    def zeros(self, shape, dtype):
        raise NotImplementedError

    def empty(self, shape, dtype):
        raise NotImplementedError

    def to_device(self, array, name="write"):
        """Copy a host array to the device, returning ``(buffer, event)``."""
        raise NotImplementedError

    def to_host(self, buffer, name="read"):
        """Copy a device buffer to the host, returning ``(array, event)``."""
        raise NotImplementedError

    def _launch(self, kernel, global_size, local_size, args, shared_mem):
        raise NotImplementedError

    def __repr__(self):
        return (
            f"<{type(self).__name__} {self.platform_name!r} "
            f"device {self.device_id}>"
        )
