#
# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#
import pytest

from cuhisteq.backend import KERNEL, TRANSFER, Event
from cuhisteq.profiling import Profile


class FakeEvent(Event):
    def __init__(self, name, kind, elapsed_ns):
        super().__init__(name, kind)
        self._elapsed_ns = elapsed_ns
        self.waited = False

    def wait(self):
        self.waited = True

    @property
    def elapsed_ns(self):
        return self._elapsed_ns


@pytest.fixture
def profile():
    profile = Profile()
    for event in (
        FakeEvent("write image", TRANSFER, 1500),
        FakeEvent("int_hist", KERNEL, 2000),
        FakeEvent("cum_hist", KERNEL, 500),
        FakeEvent("read image", TRANSFER, 1000),
    ):
        profile.record(event)
    return profile


def test_record_waits():
    event = FakeEvent("int_hist", KERNEL, 1)
    Profile().record(event)
    assert event.waited


def test_totals(profile):
    assert profile.kernel_time_ns == 2500
    assert profile.transfer_time_ns == 2500
    assert profile.total_time_ns == 5000
    assert profile.elapsed_ns("cum_hist") == 500
    with pytest.raises(KeyError):
        profile.elapsed_ns("norm_hist")


def test_format_microseconds(profile):
    report = profile.format("us")
    lines = report.splitlines()
    assert lines[0].split() == ["write", "image", "transfer", "1.500", "[us]"]
    assert "Kernel execution time [us]: 2.500" in report
    assert "Memory transfer [us]: 2.500" in report
    assert lines[-1] == "Total [us]: 5.000"
    assert str(profile) == report


def test_format_nanoseconds(profile):
    report = profile.format("ns")
    assert "Memory transfer [ns]: 2500" in report


def test_format_unknown_resolution(profile):
    with pytest.raises(ValueError, match="unknown resolution"):
        profile.format("min")


def test_empty_profile():
    profile = Profile()
    assert profile.records == []
    assert profile.total_time_ns == 0
    assert profile.format().splitlines()[-1] == "Total [us]: 0.000"
