# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Inclusive prefix sum confined to one synchronization domain.

The scan is the Hillis-Steele variant: ``ceil(log2(n))`` rounds, where in
round ``k`` every unit ``lid >= 2**k`` adds the value ``2**k`` positions to
its left. Each round reads the buffer written by the previous round and
writes the other one, and all units meet at a barrier before the roles of
the two buffers are swapped. Reading and writing the same buffer within a
round would let a unit observe a neighbour that was already updated.

Only arrays that fit a single work group can be scanned; there is no
multi-group pass.
"""

import numpy as np

from ..errors import DomainError


def check_scan_domain(length, device):
    """Raise DomainError unless ``length`` values fit one work group."""
    if length < 1:
        raise DomainError(f"cannot scan {length} values")
    limit = device.max_local_size
    if length > limit:
        raise DomainError(
            f"bin_count {length} exceeds the largest synchronization domain "
            f"of '{device.name}' ({limit} units); a multi-group scan is not "
            "supported"
        )


def inclusive_scan(program, values):
    """
    Inclusive prefix sum of a device array of ``int32`` values.

    Parameters
    ----------
    program : cuhisteq.backend.Program
        Built equalization program.
    values : device array
        One dimensional ``int32`` array, e.g. a histogram.

    Returns
    -------
    cumulative : device array
        ``cumulative[i] == values[:i + 1].sum()``.
    event : cuhisteq.backend.Event
        Dispatch event.

    Raises
    ------
    DomainError
        If `values` does not fit one work group of ``program.device``.
    """
    device = program.device
    n = values.size
    check_scan_domain(n, device)
    cumulative = device.empty(n, np.int32)
    kernel = program.get_kernel("cum_hist")
    # two scratch buffers of n ints in shared memory
    shared_mem = 2 * n * np.dtype(np.int32).itemsize
    event = kernel(n, n, (values, cumulative, np.int32(n)),
                   shared_mem=shared_mem)
    return cumulative, event
