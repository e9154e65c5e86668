"""Time data calculation for hitting a delay at a given clock second.

This is the algorithm shared by most RNG timers for the Nintendo DS: from a
calibration measurement (a delay observed to land on a known second) and a
target delay/second pair it derives how long to wait before booting the game,
how long to wait before loading the save file, and how many minutes to subtract
when setting the clock.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from pyrngtimer._constants import MAX_BOOT_ADJUSTMENTS, U8_MAX, U32_MAX
from pyrngtimer._errors import (
    ERR_MSG_BOOT_ADJUSTMENTS_EXCEEDED,
    ERR_MSG_INVALID_ARGUMENTS,
    ERR_MSG_INVALID_CALIBRATION,
    ERR_MSG_NON_FINITE,
    ERR_MSG_OFFSET_OVERFLOW,
    InvalidArgumentsError,
    InvalidCalibrationError,
    MaxBootAdjustmentsExceededError,
    NonFiniteInputError,
    OffsetOverflowError,
)
from pyrngtimer._utils import validate_finite, validate_unsigned
from pyrngtimer.profile import DEFAULT_PROFILE, DeviceProfile, get_profile

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimeData:
    """Intervals needed to set the clock, boot the game and load the save."""

    boot_time: float
    """Seconds between setting the clock and booting the game."""

    load_time: float
    """Seconds between booting the game and loading the save file."""

    offset: int
    """Whole minutes between setting the clock and loading the save file."""

    @property
    def total_time(self) -> float:
        return self.boot_time + self.load_time


def _resolve_profile(profile: DeviceProfile | str | None) -> DeviceProfile:
    """Return the profile to use, looking names up in the registry."""
    if profile is None:
        return DEFAULT_PROFILE
    if isinstance(profile, DeviceProfile):
        return profile
    if isinstance(profile, str):
        return get_profile(profile)
    raise InvalidArgumentsError(
        ERR_MSG_INVALID_ARGUMENTS,
        f"profile must be a DeviceProfile or a profile name, got {type(profile).__name__}",
    )


def delay_to_second(delay: int, *, profile: DeviceProfile | str | None = None) -> float:
    """Convert a delay in frames to seconds.

    Negative delays are allowed and give negative seconds.
    """
    profile = _resolve_profile(profile)
    validate_finite(delay, "delay")
    seconds = delay / profile.frame_rate
    if not math.isfinite(seconds):
        raise NonFiniteInputError(
            ERR_MSG_NON_FINITE,
            f"{delay} frames at {profile.frame_rate!r} fps is {seconds!r} s",
        )
    return seconds


def second_to_delay(seconds: float, *, profile: DeviceProfile | str | None = None) -> int:
    """Convert seconds to a delay in frames, truncating toward zero.

    Raises:
        NonFiniteInputError: If seconds is NaN or infinite.
        InvalidArgumentsError: If the frame count is not a valid unsigned 32-bit value.
    """
    profile = _resolve_profile(profile)
    validate_finite(seconds, "seconds")
    frames = seconds * profile.frame_rate
    if not math.isfinite(frames):
        raise NonFiniteInputError(
            ERR_MSG_NON_FINITE,
            f"{seconds!r} s at {profile.frame_rate!r} fps is {frames!r} frames",
        )
    delay = int(frames)
    if not 0 <= delay <= U32_MAX:
        raise InvalidArgumentsError(
            ERR_MSG_INVALID_ARGUMENTS,
            f"{seconds!r} s is {delay} frames, outside 0..{U32_MAX}",
        )
    return delay


def get_time_data(
    calibrated_delay: int,
    calibrated_second: int,
    target_delay: int,
    target_second: int,
    *,
    profile: DeviceProfile | str | None = None,
) -> TimeData:
    """Compute the time data needed to hit a target delay at a target second.

    Args:
        calibrated_delay: Delay in frames of the calibration measurement.
        calibrated_second: Clock second the calibration delay landed on.
        target_delay: Delay in frames to hit.
        target_second: Clock second the target delay should land on.
        profile: Device timing profile or registered profile name.
            Defaults to the Nintendo DS.

    Returns:
        TimeData with the boot time, load time and minute offset.

    Raises:
        InvalidArgumentsError: If an argument is not an unsigned integer of the
            expected width (32 bits for delays, 8 bits for seconds).
        NonFiniteInputError: If an argument is NaN or infinite.
        InvalidCalibrationError: If the resulting load time is not positive.
        OffsetOverflowError: If the minute offset exceeds 255.
        ValueError: If profile names an unknown device.
    """
    profile = _resolve_profile(profile)

    calibrated_delay = validate_unsigned(calibrated_delay, "calibrated_delay", U32_MAX)
    calibrated_second = validate_unsigned(calibrated_second, "calibrated_second", U8_MAX)
    target_delay = validate_unsigned(target_delay, "target_delay", U32_MAX)
    target_second = validate_unsigned(target_second, "target_second", U8_MAX)

    load_time = delay_to_second(target_delay - calibrated_delay, profile=profile) + float(
        calibrated_second
    )

    if not load_time > 0.0:
        details = (
            f"load time {load_time!r} s from calibration "
            f"({calibrated_delay}, {calibrated_second}) and target ({target_delay}, {target_second})"
        )
        _log.debug(f"rejected time data request: {details}")
        raise InvalidCalibrationError(ERR_MSG_INVALID_CALIBRATION, details)

    # math.fmod keeps the sign of the numerator, unlike the % operator
    boot_time = (
        math.fmod(float(target_second) - load_time, profile.seconds_per_minute)
        + profile.response_latency
    )

    adjustments = 0
    while boot_time < profile.min_boot_time:
        if adjustments >= MAX_BOOT_ADJUSTMENTS:
            details = (
                f"boot time {boot_time!r} s still below {profile.min_boot_time!r} s "
                f"after {adjustments} adjustments"
            )
            _log.debug(f"rejected time data request: {details}")
            raise MaxBootAdjustmentsExceededError(ERR_MSG_BOOT_ADJUSTMENTS_EXCEEDED, details)
        boot_time += profile.seconds_per_minute
        adjustments += 1

    minutes = (boot_time + load_time) / profile.seconds_per_minute
    if not math.isfinite(minutes):
        details = f"offset of {minutes!r} min does not fit in 0..{U8_MAX}"
        _log.debug(f"rejected time data request: {details}")
        raise OffsetOverflowError(ERR_MSG_OFFSET_OVERFLOW, details)
    offset = math.floor(minutes)
    if not 0 <= offset <= U8_MAX:
        details = f"offset of {offset} min does not fit in 0..{U8_MAX}"
        _log.debug(f"rejected time data request: {details}")
        raise OffsetOverflowError(ERR_MSG_OFFSET_OVERFLOW, details)

    time_data = TimeData(boot_time=boot_time, load_time=load_time, offset=offset)
    _log.debug(
        f"time data for {profile.name}: boot={boot_time:.4f}s "
        f"load={load_time:.4f}s offset={offset}min"
    )
    return time_data
