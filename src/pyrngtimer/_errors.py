"""Exception hierarchy for time data computation."""


class TimerError(Exception):
    """Base exception for time data computation errors.

    Provides dual messaging: a short user-facing message and
    internal details carrying the offending values for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidCalibrationError(TimerError):
    """Raised when a calibration/target pair yields a non-positive load time."""


class OffsetOverflowError(TimerError):
    """Raised when the minute offset does not fit in an unsigned byte."""


class NonFiniteInputError(TimerError):
    """Raised when an input value is NaN or infinite."""


class InvalidArgumentsError(TimerError):
    """Raised when an argument has the wrong type or is out of range."""


class MaxBootAdjustmentsExceededError(TimerError):
    """Raised when the boot time cannot be lifted above the minimum."""


class InvalidProfileError(TimerError):
    """Raised when a device profile holds unusable timing values."""


ERR_MSG_INVALID_CALIBRATION = "load time must be positive"
ERR_MSG_OFFSET_OVERFLOW = "minute offset out of range"
ERR_MSG_NON_FINITE = "input value must be finite"
ERR_MSG_INVALID_ARGUMENTS = "invalid function arguments"
ERR_MSG_BOOT_ADJUSTMENTS_EXCEEDED = "boot time adjustment limit exceeded"
ERR_MSG_INVALID_PROFILE = "invalid device profile"
