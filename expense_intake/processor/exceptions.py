from expense_intake.errors import ExpenseIntakeError


class ProcessorError(ExpenseIntakeError):
    """Base exception for all processor-related errors."""


class NoFileUploadedError(ProcessorError):
    """Raised when a request carries no file."""

    status_code = 400


class UnsupportedFileTypeError(ProcessorError):
    """Raised when no processor accepts the declared media type."""

    status_code = 400


class MissingUploadContextError(ProcessorError):
    """Raised when the household or user of an upload is unknown."""

    status_code = 400


class FileDataUnavailableError(ProcessorError):
    """Raised when an upload has neither a disk path nor an in-memory buffer."""

    status_code = 400


class ImageReadError(ProcessorError):
    """Raised when an uploaded image cannot be read for encoding."""

    status_code = 400
