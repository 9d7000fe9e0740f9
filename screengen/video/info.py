"""
Video information extraction using ffprobe.
Follows Single Responsibility Principle - only handles video metadata extraction.
"""
import json
import subprocess
from pathlib import Path
from typing import Optional
import logging

from ..core.errors import OpenError

logger = logging.getLogger(__name__)


class VideoInfo:
    """
    Extracts and provides video metadata using ffprobe.
    Durations are exposed in integer milliseconds.
    """

    def __init__(self, input_path: Path, ffprobe: str = "ffprobe"):
        self.input_path = Path(input_path)
        self.ffprobe = ffprobe
        self._format_data: Optional[dict] = None
        self._stream_data: Optional[dict] = None
        self._all_streams: list = []
        self._loaded = False

    def load(self) -> None:
        """Load video metadata synchronously."""
        if self._loaded:
            return

        self._validate_input()

        cmd = [
            self.ffprobe, "-v", "quiet", "-print_format", "json",
            "-show_format", "-show_streams",
            str(self.input_path)
        ]

        try:
            result = subprocess.run(cmd, capture_output=True, text=True)
        except OSError as e:
            raise OpenError(f"{self.ffprobe} could not be started: {e}") from e

        if result.returncode != 0:
            self._handle_ffprobe_error(result.returncode, result.stdout, result.stderr)

        try:
            self._parse_output(result.stdout.strip())
        except json.JSONDecodeError as e:
            raise OpenError(
                f"Failed to parse ffprobe output for '{self.input_path.name}': {e}"
            ) from e
        self._loaded = True
        logger.debug(
            f"Loaded {self.input_path.name}: {self.width}x{self.height}, {self.duration} ms"
        )

    def _validate_input(self) -> None:
        """Validate input file exists and is a file."""
        if not self.input_path.exists():
            raise OpenError(f"Video file does not exist: {self.input_path}")
        if not self.input_path.is_file():
            raise OpenError(f"Path is not a file: {self.input_path}")

    def _handle_ffprobe_error(self, returncode: int, stdout: str, stderr: str) -> None:
        """Raise OpenError with ffprobe's diagnostics attached."""
        error_details = []
        if stderr.strip():
            error_details.append(f"stderr: {stderr.strip()}")
        if stdout.strip():
            error_details.append(f"stdout: {stdout.strip()}")

        error_msg = f"ffprobe failed for '{self.input_path.name}' (exit code {returncode})"
        if error_details:
            error_msg += f" - {', '.join(error_details)}"
        else:
            error_msg += " - File may be corrupted or not a valid video."

        logger.error(error_msg)
        raise OpenError(error_msg)

    def _parse_output(self, output: str) -> None:
        """Parse ffprobe JSON output."""
        if not output:
            raise OpenError(f"ffprobe returned empty output for '{self.input_path.name}'")

        data = json.loads(output)

        if "format" not in data:
            raise OpenError("Invalid ffprobe output: 'format' key not found")

        self._format_data = data["format"]
        self._all_streams = data.get("streams", [])
        self._stream_data = self._first_stream("video")

        if self._stream_data is None:
            raise OpenError(f"No video stream found in '{self.input_path.name}'")
        if not self._stream_data.get("width") or not self._stream_data.get("height"):
            raise OpenError(f"Unknown frame size for '{self.input_path.name}'")

        try:
            duration = float(self._format_data.get("duration", 0))
        except (TypeError, ValueError):
            duration = 0.0
        if duration <= 0:
            raise OpenError(f"Unknown duration for '{self.input_path.name}'")

    def _first_stream(self, codec_type: str) -> Optional[dict]:
        for stream in self._all_streams:
            if stream.get("codec_type") == codec_type:
                return stream
        return None

    def _ensure_loaded(self) -> None:
        """Ensure metadata is loaded before accessing properties."""
        if not self._loaded:
            raise RuntimeError("VideoInfo not loaded. Call load() first.")

    @property
    def duration(self) -> int:
        """Video duration in milliseconds."""
        self._ensure_loaded()
        return round(float(self._format_data["duration"]) * 1_000_000) // 1000

    @property
    def width(self) -> int:
        self._ensure_loaded()
        return int(self._stream_data.get("width", 0))

    @property
    def height(self) -> int:
        self._ensure_loaded()
        return int(self._stream_data.get("height", 0))

    @property
    def video_codec_long(self) -> str:
        """Video codec long name, falling back to the short name."""
        self._ensure_loaded()
        return self._stream_data.get(
            "codec_long_name", self._stream_data.get("codec_name", "")
        )

    @property
    def audio_codec_long(self) -> str:
        """Audio codec long name, empty when there is no audio stream."""
        self._ensure_loaded()
        stream = self._first_stream("audio")
        if stream is None:
            return ""
        return stream.get("codec_long_name", stream.get("codec_name", ""))
