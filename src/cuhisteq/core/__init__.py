# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from .back_project import back_project
from .histogram import check_image, intensity_histogram
from .normalize import lut_scale, normalize_lut
from .pipeline import EqualizeResult, equalize_hist
from .scan import check_scan_domain, inclusive_scan

__all__ = [
    "EqualizeResult",
    "back_project",
    "check_image",
    "check_scan_domain",
    "equalize_hist",
    "inclusive_scan",
    "intensity_histogram",
    "lut_scale",
    "normalize_lut",
]
