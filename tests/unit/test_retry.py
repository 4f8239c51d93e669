from unittest.mock import MagicMock

import pytest

from expense_intake.extraction.retry import linear_backoff, with_retry


class TransientError(Exception):
    pass


class FatalError(Exception):
    pass


def _retry_transient(exc: Exception) -> bool:
    return isinstance(exc, TransientError)


class TestLinearBackoff:
    def test_delay_grows_with_attempt(self) -> None:
        delay = linear_backoff(0.5)
        assert [delay(n) for n in (1, 2, 3)] == [0.5, 1.0, 1.5]


class TestWithRetry:
    def test_returns_first_success_without_sleeping(self) -> None:
        fn = MagicMock(return_value="ok")
        sleeps: list[float] = []

        result = with_retry(
            fn,
            attempts=3,
            delay=linear_backoff(0.5),
            is_retryable=_retry_transient,
            sleep=sleeps.append,
        )

        assert result == "ok"
        assert fn.call_count == 1
        assert sleeps == []

    def test_retries_transient_errors_until_success(self) -> None:
        fn = MagicMock(side_effect=[TransientError("a"), TransientError("b"), "ok"])
        sleeps: list[float] = []

        result = with_retry(
            fn,
            attempts=3,
            delay=linear_backoff(0.5),
            is_retryable=_retry_transient,
            sleep=sleeps.append,
        )

        assert result == "ok"
        assert fn.call_count == 3
        assert sleeps == [0.5, 1.0]

    def test_raises_last_error_after_exhausting_attempts(self) -> None:
        last = TransientError("third")
        fn = MagicMock(side_effect=[TransientError("first"), TransientError("second"), last])
        sleeps: list[float] = []

        with pytest.raises(TransientError) as exc_info:
            with_retry(
                fn,
                attempts=3,
                delay=linear_backoff(0.5),
                is_retryable=_retry_transient,
                sleep=sleeps.append,
            )

        assert exc_info.value is last
        assert fn.call_count == 3
        assert sleeps == [0.5, 1.0]

    def test_non_retryable_error_propagates_immediately(self) -> None:
        fn = MagicMock(side_effect=FatalError("nope"))
        sleeps: list[float] = []

        with pytest.raises(FatalError):
            with_retry(
                fn,
                attempts=3,
                delay=linear_backoff(0.5),
                is_retryable=_retry_transient,
                sleep=sleeps.append,
            )

        assert fn.call_count == 1
        assert sleeps == []

    def test_single_attempt_never_sleeps(self) -> None:
        fn = MagicMock(side_effect=TransientError("down"))
        sleeps: list[float] = []

        with pytest.raises(TransientError):
            with_retry(
                fn,
                attempts=1,
                delay=linear_backoff(0.5),
                is_retryable=_retry_transient,
                sleep=sleeps.append,
            )

        assert fn.call_count == 1
        assert sleeps == []

    def test_rejects_zero_attempts(self) -> None:
        with pytest.raises(ValueError, match="attempts"):
            with_retry(
                MagicMock(),
                attempts=0,
                delay=linear_backoff(0.5),
                is_retryable=_retry_transient,
            )
