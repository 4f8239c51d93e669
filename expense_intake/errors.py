from typing import ClassVar


class ExpenseIntakeError(Exception):
    """Root of every error raised by the expense intake pipeline.

    ``status_code`` is the transport-neutral status the upload handler
    reports for this error class.
    """

    status_code: ClassVar[int] = 500
