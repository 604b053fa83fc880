# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Callable, Dict, NamedTuple, Tuple

import numpy as np

from .cuda_kernel_source import get_cuda_kernel_code
from .host_kernels import host_kernels

KERNEL_NAMES = ("int_hist", "cum_hist", "norm_hist", "back_project")


class ProgramSource(NamedTuple):
    """Every representation of the equalization program a device may build."""

    kernel_names: Tuple[str, ...]
    cuda_code: str
    host_kernels: Dict[str, Callable]


def get_program_source(dtype):
    """Program source specialized for images of ``dtype``."""
    return ProgramSource(
        KERNEL_NAMES,
        get_cuda_kernel_code(np.dtype(dtype).name),
        host_kernels,
    )


__all__ = ["KERNEL_NAMES", "ProgramSource", "get_program_source"]
