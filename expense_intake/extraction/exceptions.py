from expense_intake.errors import ExpenseIntakeError


class ExtractionError(ExpenseIntakeError):
    """Raised when expense extraction fails."""


class ExtractionParseError(ExtractionError):
    """Raised when a log_expense tool call carries malformed arguments."""


class ProviderUnavailableError(ExtractionError):
    """Raised when the AI provider cannot be reached (network, timeout)."""

    status_code = 503


class ProviderRequestError(ExtractionError):
    """Raised when the AI provider rejects a request (auth, quota, bad input)."""

    status_code = 502


class InvalidOrEmptyAudioFileError(ExtractionError):
    """Raised when the audio file to transcribe is missing or empty."""

    status_code = 400
