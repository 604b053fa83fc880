# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""NumPy emulation of the CUDA kernels in ``cuda_kernel_source``.

Each function receives the dispatch geometry followed by the kernel
arguments. The units of work of one round are evaluated as a single
vectorized expression over the unit ids, so every read of a round completes
before any write of that round lands, which is what a barrier guarantees on
the device.
"""

import numpy as np


def _active_ids(global_size, total_size):
    gid = np.arange(global_size)
    return gid[gid < total_size]


def int_hist(global_size, local_size, image, hist, total_size):
    gid = _active_ids(global_size, int(total_size))
    # unbuffered scatter-add: every repeated bin index is counted, like
    # concurrent atomic increments
    np.add.at(hist, image.reshape(-1)[gid], 1)


def cum_hist(global_size, local_size, hist, cum, n):
    n = int(n)
    lid = np.arange(n)
    scratch = np.empty((2, n), dtype=hist.dtype)
    src = 0

    scratch[src] = hist[lid]

    stride = 1
    while stride < n:
        dst = 1 - src
        neighbour = scratch[src, np.maximum(lid - stride, 0)]
        scratch[dst] = np.where(
            lid >= stride, scratch[src] + neighbour, scratch[src]
        )
        src = dst
        stride *= 2

    cum[lid] = scratch[src]


def norm_hist(global_size, local_size, cum, lut, image_size, bin_count):
    bin_count = int(bin_count)
    gid = _active_ids(global_size, bin_count)
    scale = int(image_size) // bin_count
    lut[gid] = cum[gid] // scale


def back_project(global_size, local_size, image, lut, out, total_size):
    gid = _active_ids(global_size, int(total_size))
    image_max = np.iinfo(out.dtype).max
    flat_out = out.reshape(-1)
    flat_out[gid] = np.minimum(lut[image.reshape(-1)[gid]], image_max)


host_kernels = {
    "int_hist": int_hist,
    "cum_hist": cum_hist,
    "norm_hist": norm_hist,
    "back_project": back_project,
}
