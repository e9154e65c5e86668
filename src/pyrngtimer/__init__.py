"""pyrngtimer - Compute RTC timings for hitting RNG delays on handheld consoles."""

from __future__ import annotations

from pyrngtimer._calculator import TimeData, delay_to_second, get_time_data, second_to_delay
from pyrngtimer._errors import (
    InvalidArgumentsError,
    InvalidCalibrationError,
    InvalidProfileError,
    MaxBootAdjustmentsExceededError,
    NonFiniteInputError,
    OffsetOverflowError,
    TimerError,
)
from pyrngtimer._version import __version__
from pyrngtimer.profile import DEFAULT_PROFILE, DeviceName, DeviceProfile, get_profile

__all__ = [
    "__version__",
    "delay_to_second",
    "second_to_delay",
    "get_time_data",
    "get_profile",
    "TimeData",
    "DeviceName",
    "DeviceProfile",
    "DEFAULT_PROFILE",
    "TimerError",
    "InvalidArgumentsError",
    "InvalidCalibrationError",
    "InvalidProfileError",
    "MaxBootAdjustmentsExceededError",
    "NonFiniteInputError",
    "OffsetOverflowError",
]
