# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""CUDA devices driven through CuPy."""

import contextlib
import logging

import cupy
import numpy as np

from ..errors import BuildError, DeviceError
from ._base import KERNEL, TRANSFER, Device, Event, Program

logger = logging.getLogger(__name__)

_CUDA_ERRORS = (
    cupy.cuda.runtime.CUDARuntimeError,
    cupy.cuda.driver.CUDADriverError,
    cupy.cuda.memory.OutOfMemoryError,
)


@contextlib.contextmanager
def _translate_errors(action):
    try:
        yield
    except _CUDA_ERRORS as e:
        raise DeviceError(f"{action} failed: {e}") from e


def device_count():
    """Number of visible CUDA devices, 0 when no driver is usable."""
    try:
        return cupy.cuda.runtime.getDeviceCount()
    except _CUDA_ERRORS as e:
        logger.debug("CUDA devices unavailable: %s", e)
        return 0


def device_name(device_id):
    with _translate_errors("query of device properties"):
        props = cupy.cuda.runtime.getDeviceProperties(device_id)
    name = props["name"]
    if isinstance(name, bytes):
        name = name.decode()
    return name


class CudaEvent(Event):
    """Pair of CUDA events recorded around one command."""

    def __init__(self, name, kind, start, end):
        super().__init__(name, kind)
        self._start = start
        self._end = end

    def wait(self):
        with _translate_errors(f"wait on '{self.name}'"):
            self._end.synchronize()

    @property
    def elapsed_ns(self):
        with _translate_errors(f"timing of '{self.name}'"):
            elapsed_ms = cupy.cuda.get_elapsed_time(self._start, self._end)
        return int(round(elapsed_ms * 1e6))


class CudaDevice(Device):
    """One GPU of the ``NVIDIA CUDA`` platform."""

    kind = "cuda"
    platform_name = "NVIDIA CUDA"

    def __init__(self, device_id=0):
        count = device_count()
        if not 0 <= device_id < count:
            raise DeviceError(
                f"invalid device id {device_id}: platform "
                f"'{self.platform_name}' has {count} device(s)"
            )
        super().__init__(device_id)
        self._device = cupy.cuda.Device(device_id)

    @property
    def name(self):
        return device_name(self.device_id)

    @property
    def max_local_size(self):
        with _translate_errors("query of device attributes"):
            return int(self._device.attributes["MaxThreadsPerBlock"])

    def build(self, source):
        kernels = {}
        with self._device:
            module = cupy.RawModule(code=source.cuda_code)
            for name in source.kernel_names:
                try:
                    # compilation happens on first lookup
                    kernels[name] = module.get_function(name)
                except cupy.cuda.compiler.CompileException as e:
                    raise BuildError(
                        "program build failed on "
                        f"'{self.name}'", log=str(e)
                    ) from e
                except _CUDA_ERRORS as e:
                    raise BuildError(
                        f"kernel '{name}' could not be loaded", log=str(e)
                    ) from e
        return Program(self, kernels)

    def zeros(self, shape, dtype):
        with self._device, _translate_errors("buffer allocation"):
            return cupy.zeros(shape, dtype=dtype)

    def empty(self, shape, dtype):
        with self._device, _translate_errors("buffer allocation"):
            return cupy.empty(shape, dtype=dtype)

    def _timed(self, name, kind, operation):
        with self._device, _translate_errors(f"'{name}'"):
            start = cupy.cuda.Event()
            end = cupy.cuda.Event()
            start.record()
            result = operation()
            end.record()
        return result, CudaEvent(name, kind, start, end)

    def to_device(self, array, name="write"):
        array = np.ascontiguousarray(array)
        return self._timed(name, TRANSFER, lambda: cupy.asarray(array))

    def to_host(self, buffer, name="read"):
        return self._timed(name, TRANSFER, lambda: cupy.asnumpy(buffer))

    def _launch(self, kernel, global_size, local_size, args, shared_mem):
        grid = global_size // local_size

        def launch():
            try:
                kernel.function(
                    (grid, 1, 1), (local_size, 1, 1), args,
                    shared_mem=shared_mem,
                )
            except (TypeError, ValueError) as e:
                raise DeviceError(
                    f"argument binding of kernel '{kernel.name}' failed: {e}"
                ) from e

        _, event = self._timed(kernel.name, KERNEL, launch)
        return event
