from expense_intake.errors import ExpenseIntakeError


class AudioError(ExpenseIntakeError):
    """Base exception for audio inspection and conversion errors."""


class InvalidAudioFileError(AudioError):
    """Raised when a file cannot be probed as audio."""

    status_code = 400


class AudioConversionError(AudioError):
    """Raised when transcoding to WAV fails."""
