from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class UploadedFile:
    """A single uploaded file, alive for one processing call.

    Exactly one of ``path`` (disk-backed upload) or ``buffer``
    (memory-backed upload) is normally set.
    """

    media_type: str  # declared by the client, untrusted
    original_name: str
    path: Path | None = None
    buffer: bytes | None = None


@dataclass(frozen=True)
class UploadContext:
    """Who uploaded the file and on behalf of which household."""

    household_id: str
    user_id: str


@dataclass(frozen=True)
class TempFileHandle:
    """A scratch path and whether the pipeline must delete it."""

    path: Path
    owned: bool
