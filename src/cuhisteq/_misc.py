# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Misc utility functions shared by the pipeline stages."""

DEFAULT_BLOCK_SIZE = 128


def global_work_size(total_size, block_size=DEFAULT_BLOCK_SIZE):
    """
    Round ``total_size`` up to a whole number of work groups.

    Parameters
    ----------
    total_size : int
        Number of units of work that do useful work.
    block_size : int
        Local work size of the dispatch.

    Returns
    -------
    global_size : int
        Smallest multiple of `block_size` that is at least `total_size`
        (and at least one group).

    Examples
    --------
    >>> global_work_size(1000, 128)
    1024
    >>> global_work_size(256, 128)
    256
    """
    groups = max(1, (int(total_size) - 1) // block_size + 1)
    return groups * block_size
