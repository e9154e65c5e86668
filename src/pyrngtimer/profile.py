"""Device timing profiles."""

from __future__ import annotations

import enum
import math
import numbers
from dataclasses import dataclass

from pyrngtimer._constants import MIN_BOOT_TIME, NDS_FPS, RESPONSE_LATENCY, S_PER_MIN
from pyrngtimer._errors import ERR_MSG_INVALID_PROFILE, InvalidProfileError


class DeviceName(enum.StrEnum):
    NDS = "nds"


@dataclass(frozen=True)
class DeviceProfile:
    """Timing characteristics of a single device.

    The defaults describe the Nintendo DS.
    """

    name: str = DeviceName.NDS
    frame_rate: float = NDS_FPS
    min_boot_time: float = MIN_BOOT_TIME
    response_latency: float = RESPONSE_LATENCY
    seconds_per_minute: float = S_PER_MIN

    def __post_init__(self) -> None:
        for attr in ("frame_rate", "min_boot_time", "response_latency", "seconds_per_minute"):
            value = getattr(self, attr)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidProfileError(
                    ERR_MSG_INVALID_PROFILE,
                    f"{attr} must be a number, got {type(value).__name__}",
                )
            if not math.isfinite(value):
                raise InvalidProfileError(
                    ERR_MSG_INVALID_PROFILE,
                    f"{attr} must be finite, got {value!r}",
                )
            object.__setattr__(self, attr, float(value))
        if self.frame_rate <= 0:
            raise InvalidProfileError(
                ERR_MSG_INVALID_PROFILE,
                f"frame_rate must be positive, got {self.frame_rate!r}",
            )
        if self.seconds_per_minute <= 0:
            raise InvalidProfileError(
                ERR_MSG_INVALID_PROFILE,
                f"seconds_per_minute must be positive, got {self.seconds_per_minute!r}",
            )
        if self.min_boot_time < 0:
            raise InvalidProfileError(
                ERR_MSG_INVALID_PROFILE,
                f"min_boot_time cannot be negative, got {self.min_boot_time!r}",
            )
        if self.response_latency < 0:
            raise InvalidProfileError(
                ERR_MSG_INVALID_PROFILE,
                f"response_latency cannot be negative, got {self.response_latency!r}",
            )


DEFAULT_PROFILE = DeviceProfile()

_REGISTRY: dict[str, DeviceProfile] = {
    DeviceName.NDS: DEFAULT_PROFILE,
}


def get_profile(name: str) -> DeviceProfile:
    """Get a device profile by name.

    Args:
        name: Profile name (e.g., "nds").

    Returns:
        The registered DeviceProfile.

    Raises:
        ValueError: If the profile name is unknown.
    """
    profile = _REGISTRY.get(name)
    if profile is None:
        raise ValueError(
            f"unknown device profile: {name!r}. "
            f"Available: {', '.join(sorted(_REGISTRY))}"
        )
    return profile
