# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Exceptions raised by cuHistEq.

Every error is fatal for the run that raised it: nothing is retried and no
partial result is returned.
"""

__all__ = [
    "EqualizeError",
    "BuildError",
    "DeviceError",
    "ImageLoadError",
    "DomainError",
]


class EqualizeError(Exception):
    """Base class of all cuHistEq errors."""


class BuildError(EqualizeError):
    """The compute program failed to build.

    Parameters
    ----------
    message : str
        Short description of the failure.
    log : str, optional
        Build log reported by the backend compiler.
    """

    def __init__(self, message, log=""):
        super().__init__(message)
        self.log = log


class DeviceError(EqualizeError):
    """Device selection, allocation, dispatch or transfer failed."""


class ImageLoadError(EqualizeError, OSError):
    """The input image is missing or cannot be decoded."""


class DomainError(EqualizeError, ValueError):
    """Configuration or image samples are outside the supported domain."""
