"""Turns a model's tool calls into an ExtractionDraft."""

import json
from collections.abc import Sequence
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any

from expense_intake.extraction.exceptions import ExtractionParseError
from expense_intake.extraction.models import ExtractionDraft, ToolCall

LOG_EXPENSE_TOOL = "log_expense"


def find_log_expense_call(tool_calls: Sequence[ToolCall]) -> ToolCall | None:
    """Return the first log_expense call, or None if the model made none."""
    for call in tool_calls:
        if call.name == LOG_EXPENSE_TOOL:
            return call
    return None


def extract_draft(tool_calls: Sequence[ToolCall]) -> ExtractionDraft | None:
    """Build a draft from the first log_expense call.

    Returns None when there is no such call: the model found nothing to log.

    Raises:
        ExtractionParseError: if the call exists but its arguments are malformed.
    """
    call = find_log_expense_call(tool_calls)
    if call is None:
        return None
    return parse_log_expense_arguments(call.arguments)


def parse_log_expense_arguments(arguments: str) -> ExtractionDraft:
    """Validate raw log_expense arguments and build an ExtractionDraft.

    Raises:
        ExtractionParseError: on any validation failure.
    """
    if not arguments or not arguments.strip():
        raise ExtractionParseError("Missing arguments in log_expense call")
    try:
        data = json.loads(arguments, parse_float=Decimal)
    except json.JSONDecodeError as exc:
        raise ExtractionParseError(f"log_expense arguments are not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ExtractionParseError("log_expense arguments must be a JSON object")

    return ExtractionDraft(
        date=_parse_date(data.get("date")),
        amount=_parse_amount(data.get("amount")),
        category=_parse_category(data.get("category")),
        subcategory=_optional_text(data.get("subcategory"), "subcategory"),
        notes=_optional_text(data.get("notes"), "notes"),
    )


def _parse_date(raw: Any) -> datetime:
    if not isinstance(raw, str) or not raw.strip():
        raise ExtractionParseError("'date' must be a non-empty string")
    try:
        parsed = datetime.fromisoformat(raw.strip())
    except ValueError as exc:
        raise ExtractionParseError(f"'date' is not an ISO-8601 date: {raw!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_amount(raw: Any) -> Decimal:
    # bool is an int subclass; "true" is not an amount
    if isinstance(raw, bool) or not isinstance(raw, (int, Decimal, str)):
        raise ExtractionParseError(f"'amount' must be a number, got {raw!r}")
    try:
        amount = Decimal(str(raw).strip())
    except InvalidOperation as exc:
        raise ExtractionParseError(f"'amount' is not numeric: {raw!r}") from exc
    if not amount.is_finite():
        raise ExtractionParseError(f"'amount' must be finite, got {raw!r}")
    if amount <= 0:
        raise ExtractionParseError(f"'amount' must be positive, got {raw!r}")
    return amount


def _parse_category(raw: Any) -> str:
    if not isinstance(raw, str) or not raw.strip():
        raise ExtractionParseError("'category' must be a non-empty string")
    return raw.strip()


def _optional_text(raw: Any, field: str) -> str | None:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise ExtractionParseError(f"'{field}' must be a string or null")
    return raw.strip() or None
