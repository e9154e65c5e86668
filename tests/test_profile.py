"""Device profile tests."""

import math
from fractions import Fraction

import pytest

from pyrngtimer._constants import MIN_BOOT_TIME, NDS_FPS, RESPONSE_LATENCY, S_PER_MIN
from pyrngtimer._errors import InvalidProfileError
from pyrngtimer.profile import DEFAULT_PROFILE, DeviceName, DeviceProfile, get_profile


class TestDeviceProfile:
    def test_defaults(self):
        profile = DeviceProfile()
        assert profile.name == "nds"
        assert profile.frame_rate == NDS_FPS
        assert profile.min_boot_time == MIN_BOOT_TIME
        assert profile.response_latency == RESPONSE_LATENCY
        assert profile.seconds_per_minute == S_PER_MIN

    def test_default_profile_is_nds(self, nds_profile):
        assert nds_profile == DeviceProfile()

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_PROFILE.frame_rate = 60.0

    def test_integer_values_accepted(self):
        profile = DeviceProfile(frame_rate=60, min_boot_time=10)
        assert profile.frame_rate == 60

    def test_values_stored_as_float(self):
        profile = DeviceProfile(frame_rate=Fraction(120, 2), min_boot_time=10)
        assert profile.frame_rate == 60.0
        assert isinstance(profile.frame_rate, float)
        assert isinstance(profile.min_boot_time, float)

    @pytest.mark.parametrize(
        "kwargs",
        [
            pytest.param({"frame_rate": 0.0}, id="zero_frame_rate"),
            pytest.param({"frame_rate": -59.8}, id="negative_frame_rate"),
            pytest.param({"frame_rate": math.nan}, id="nan_frame_rate"),
            pytest.param({"seconds_per_minute": 0.0}, id="zero_minute"),
            pytest.param({"seconds_per_minute": math.inf}, id="inf_minute"),
            pytest.param({"min_boot_time": -1.0}, id="negative_min_boot"),
            pytest.param({"response_latency": -0.2}, id="negative_latency"),
            pytest.param({"response_latency": "0.2"}, id="string_latency"),
            pytest.param({"min_boot_time": True}, id="bool_min_boot"),
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(InvalidProfileError, match="invalid device profile"):
            DeviceProfile(**kwargs)

    def test_invalid_value_details(self):
        with pytest.raises(InvalidProfileError) as exc_info:
            DeviceProfile(frame_rate=0.0)
        assert "frame_rate" in exc_info.value.internal()


class TestGetProfile:
    def test_nds(self):
        assert get_profile("nds") is DEFAULT_PROFILE

    def test_enum_name(self):
        assert get_profile(DeviceName.NDS) is DEFAULT_PROFILE

    def test_unknown(self):
        with pytest.raises(ValueError, match="unknown device profile"):
            get_profile("gameboy")
