# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import pytest

from cuhisteq._shared.testing import device_kinds, open_device


@pytest.fixture(params=device_kinds)
def device(request):
    return open_device(request.param)
