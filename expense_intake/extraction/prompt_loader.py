import json
from pathlib import Path
from typing import Any

from expense_intake.extraction.exceptions import ExtractionError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the extraction prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled extraction_prompt.txt.

    Returns:
        The raw template string with {subject}, {taxonomy}, {source}
        and {current_date} placeholders.

    Raises:
        ExtractionError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "extraction_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ExtractionError(f"Failed to load prompt template: {exc}") from exc


def load_tool_schema(path: Path | None = None) -> dict[str, Any]:
    """Load the log_expense tool definition.

    Args:
        path: Path to the tool JSON file.
              Defaults to the bundled log_expense_tool.json.

    Raises:
        ExtractionError: if the file cannot be read or is not a JSON object.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "log_expense_tool.json"
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ExtractionError(f"Failed to load tool schema: {exc}") from exc
    try:
        schema = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ExtractionError(f"Invalid tool schema JSON: {exc}") from exc
    if not isinstance(schema, dict):
        raise ExtractionError("Tool schema must be a JSON object")
    return schema
