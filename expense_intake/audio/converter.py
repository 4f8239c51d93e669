import subprocess
from pathlib import Path

from expense_intake.audio.exceptions import AudioConversionError, InvalidAudioFileError
from expense_intake.logging.logger import Log

WAV_SUFFIX = ".wav"


def wav_path_for(source_path: Path) -> Path:
    """Deterministic conversion target: the source path plus ``.wav``."""
    return source_path.with_name(source_path.name + WAV_SUFFIX)


class AudioConverter:
    """Probes and transcodes audio through the ffprobe/ffmpeg executables."""

    def __init__(
        self,
        ffmpeg_binary: str = "ffmpeg",
        ffprobe_binary: str = "ffprobe",
        timeout_seconds: int = 120,
    ) -> None:
        self._ffmpeg = ffmpeg_binary
        self._ffprobe = ffprobe_binary
        self._timeout = timeout_seconds

    def verify_audio(self, path: Path) -> None:
        """Check that ffprobe can read container and stream metadata.

        Raises:
            InvalidAudioFileError: if probing fails for any reason.
        """
        command = [
            self._ffprobe,
            "-v", "error",
            "-show_format",
            "-show_streams",
            str(path),
        ]
        try:
            subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=True,
                timeout=self._timeout,
            )
        except subprocess.CalledProcessError as exc:
            Log.error(f"Invalid audio file {path}: {(exc.stderr or '').strip()}")
            raise InvalidAudioFileError("Invalid audio file.") from exc
        except (OSError, subprocess.TimeoutExpired) as exc:
            Log.error(f"Could not probe audio file {path}: {exc}")
            raise InvalidAudioFileError("Invalid audio file.") from exc

    def convert_to_wav(self, source_path: Path) -> Path:
        """Transcode ``source_path`` to ``<source_path>.wav``.

        A partial output file is removed when conversion fails.

        Raises:
            AudioConversionError: if ffmpeg fails, is missing, or times out.
        """
        wav_path = wav_path_for(source_path)
        command = [
            self._ffmpeg,
            "-y",
            "-v", "error",
            "-i", str(source_path),
            "-f", "wav",
            str(wav_path),
        ]
        try:
            subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=True,
                timeout=self._timeout,
            )
        except subprocess.CalledProcessError as exc:
            Log.error(f"Error during audio conversion to WAV: {(exc.stderr or '').strip()}")
            wav_path.unlink(missing_ok=True)
            raise AudioConversionError("Error converting audio file.") from exc
        except (OSError, subprocess.TimeoutExpired) as exc:
            Log.error(f"Error during audio conversion to WAV: {exc}")
            wav_path.unlink(missing_ok=True)
            raise AudioConversionError("Error converting audio file.") from exc

        Log.info(f"Converted {source_path.name} to {wav_path.name}")
        return wav_path
