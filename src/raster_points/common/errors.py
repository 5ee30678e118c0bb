from pathlib import Path
from typing_extensions import override


class DecodeError(Exception):
    """
    Raised when an image file cannot be turned into pixels.

    Covers a missing file, an unsupported or corrupt format and any I/O
    failure hit while decoding. No partial output accompanies it.
    """

    def __init__(
        self,
        message: str = "Failed to decode image.",
        path: str | Path | None = None,
    ):
        self.message: str = message
        self.path: str | None = str(path) if path is not None else None
        super().__init__(self.message)

    @override
    def __str__(self):
        if self.path is None:
            return f"DecodeError: {self.message}"
        return f"DecodeError: {self.message} ({self.path})"
