"""Shared test fixtures."""

import pytest

from pyrngtimer.profile import DEFAULT_PROFILE, DeviceProfile


@pytest.fixture
def nds_profile():
    return DEFAULT_PROFILE


@pytest.fixture
def even_profile():
    return DeviceProfile(name="even", frame_rate=60.0)
