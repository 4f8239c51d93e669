import uuid
from collections.abc import Iterable
from pathlib import Path

from expense_intake.logging.logger import Log


class TempFileHandler:
    """Creates and removes uniquely named scratch files."""

    TEMP_DIR = Path("tmp")

    def __init__(self, temp_dir: Path | None = None) -> None:
        self._temp_dir = temp_dir if temp_dir is not None else self.TEMP_DIR
        self._temp_dir.mkdir(parents=True, exist_ok=True)

    def create_temp_file(self, data: bytes, original_name: str) -> Path:
        """Write ``data`` to ``<temp_dir>/<uuid><original suffix>``.

        A partially written file is removed before the error propagates.
        """
        path = self._temp_dir / f"{uuid.uuid4().hex}{Path(original_name).suffix}"
        try:
            path.write_bytes(data)
        except OSError:
            path.unlink(missing_ok=True)
            raise
        Log.debug(f"Created temp file {path} ({len(data)} bytes)")
        return path

    def delete_temp_files(self, paths: Iterable[Path]) -> None:
        """Remove each path; failures are logged and never raised."""
        for path in paths:
            try:
                path.unlink(missing_ok=True)
            except OSError as exc:
                Log.error(f"Error deleting temp file {path}: {exc}")
