"""Device timing constants for RTC-seeded RNG manipulation."""

S_PER_MIN = 60.0
"""Seconds in one minute."""

NDS_FPS = 59.8261
"""Nintendo DS frame rate, in frames per second."""

MIN_BOOT_TIME = 14.0
"""Minimum seconds between setting the clock and booting the game."""

RESPONSE_LATENCY = 0.2
"""Fixed input-response margin added to every boot time, in seconds."""

MAX_BOOT_ADJUSTMENTS = 1000
"""Upper bound on whole-minute corrections applied to a boot time."""

U8_MAX = 0xFF
"""Largest value of an unsigned byte, the range of clock seconds and minute offsets."""

U32_MAX = 0xFFFFFFFF
"""Largest unsigned 32-bit value, the range of delays in frames."""
