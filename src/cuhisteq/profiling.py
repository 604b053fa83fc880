# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Per-stage timing of a pipeline run."""

from .backend import KERNEL, TRANSFER

RESOLUTIONS = {
    "ns": 1,
    "us": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
}


def _check_resolution(resolution):
    if resolution not in RESOLUTIONS:
        raise ValueError(
            f"unknown resolution {resolution!r}; expected one of "
            f"{', '.join(RESOLUTIONS)}"
        )
    return RESOLUTIONS[resolution]


class Profile:
    """Ordered timing records of the commands of one run.

    Events are waited on when they are recorded, so every stored duration
    belongs to a completed command.
    """

    def __init__(self):
        self._records = []

    def record(self, event):
        """Wait for ``event`` and store its duration."""
        event.wait()
        self._records.append((event.name, event.kind, event.elapsed_ns))
        return event

    @property
    def records(self):
        """List of ``(name, kind, elapsed_ns)`` tuples in dispatch order."""
        return list(self._records)

    def elapsed_ns(self, name):
        for record_name, _, elapsed in self._records:
            if record_name == name:
                return elapsed
        raise KeyError(name)

    def _total(self, kind):
        return sum(elapsed for _, k, elapsed in self._records if k == kind)

    @property
    def kernel_time_ns(self):
        return self._total(KERNEL)

    @property
    def transfer_time_ns(self):
        return self._total(TRANSFER)

    @property
    def total_time_ns(self):
        return self.kernel_time_ns + self.transfer_time_ns

    def format(self, resolution="us"):
        """
        Render the profile as a table.

        Parameters
        ----------
        resolution : {'ns', 'us', 'ms', 's'}
            Unit of the reported durations.

        Returns
        -------
        report : str
            One line per command followed by the kernel, memory transfer
            and overall totals.
        """
        divisor = _check_resolution(resolution)

        def fmt(ns):
            if divisor == 1:
                return str(ns)
            return f"{ns / divisor:.3f}"

        width = max([len(name) for name, _, _ in self._records] + [6])
        lines = []
        for name, kind, elapsed in self._records:
            lines.append(
                f"{name:<{width}}  {kind:<8}  {fmt(elapsed)} [{resolution}]"
            )
        lines.append(
            f"Kernel execution time [{resolution}]: "
            f"{fmt(self.kernel_time_ns)}"
        )
        lines.append(
            f"Memory transfer [{resolution}]: {fmt(self.transfer_time_ns)}"
        )
        lines.append(f"Total [{resolution}]: {fmt(self.total_time_ns)}")
        return "\n".join(lines)

    def __str__(self):
        return self.format()
