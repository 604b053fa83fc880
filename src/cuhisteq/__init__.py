#
# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""cuHistEq module

Histogram equalization of grayscale images as a four-stage data-parallel
pipeline (atomic histogram, Hillis-Steele scan, normalization,
back-projection) running on a CUDA device through CuPy, or on the host
through NumPy.

Subpackages
-----------

backend
    Compute platforms, devices, programs and kernel dispatch.
core
    The pipeline stages and their orchestration.

"""
_is_cupy_available = False

submodules = ["backend", "core", "display", "errors", "io", "profiling"]
submod_attrs = {
    "core": ["EqualizeResult", "equalize_hist"],
    "io": ["load_image", "save_image"],
}

try:
    import cupy  # noqa: F401
    _is_cupy_available = True
except ImportError:
    pass

import lazy_loader as _lazy  # noqa: E402

__version__ = "0.1.0"

__getattr__, __lazy_dir__, _ = _lazy.attach(
    __name__,
    submodules,
    submod_attrs,
)


def __dir__():
    return __lazy_dir__() + ['__version__', 'is_available']


def is_available(module_name: str = "") -> bool:
    """Check if a specific backend is available.

    If module_name is not specified, returns True if all of the backends
    are available.

    Parameters
    ----------
    module_name : str
        Name of the backend to check. (e.g. "cuda" and "host")

    Returns
    -------
    bool
        True if the backend is available, False otherwise.

    """
    if module_name == "host":
        return True
    return _is_cupy_available
