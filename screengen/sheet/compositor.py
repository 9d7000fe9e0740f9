"""
External compositor invocation.
"""
import subprocess
from typing import List
import logging

from ..core.errors import CompositionError
from ..core.interfaces import ICompositor

logger = logging.getLogger(__name__)


class ImageMagickCompositor(ICompositor):
    """Runs ImageMagick ``convert`` synchronously. No retry, no timeout."""

    def __init__(self, binary: str = "convert"):
        self.binary = binary

    def run(self, args: List[str]) -> None:
        cmd = [self.binary, *args]
        logger.debug(f"Running {self.binary} with {len(args)} arguments")

        try:
            result = subprocess.run(cmd, capture_output=True, text=True)
        except OSError as e:
            raise CompositionError(f"{self.binary} could not be started: {e}") from e

        if result.returncode != 0:
            stderr = result.stderr.strip()
            error_msg = f"{self.binary} failed (exit code {result.returncode})"
            if stderr:
                error_msg += f" - {stderr}"
            logger.error(error_msg)
            raise CompositionError(error_msg, returncode=result.returncode, stderr=stderr)
