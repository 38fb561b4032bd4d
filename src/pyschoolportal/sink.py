"""Destinations for downloaded files."""

from __future__ import annotations

import asyncio
import os
import tempfile
from pathlib import Path
from typing import Any, Protocol

from .exceptions import ValidationError


class FileSink(Protocol):
    async def persist(self, data: bytes, filename: str) -> Any:
        """Store ``data`` under ``filename``."""


class DirectoryFileSink:
    """Save downloads into a local directory.

    Data is written to a temporary file next to the target and renamed into
    place, so a failed save never leaves a partial file behind.
    """

    def __init__(self, directory: str | os.PathLike[str]) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    async def persist(self, data: bytes, filename: str) -> Path:
        target = self._target_path(filename)
        return await asyncio.to_thread(self._write, data, target)

    def _target_path(self, filename: str) -> Path:
        if not isinstance(filename, str) or not filename:
            raise ValidationError("filename must be a non-empty string.")
        if Path(filename).name != filename or filename in (".", ".."):
            raise ValidationError("filename must not contain path separators.")
        return self._directory / filename

    def _write(self, data: bytes, target: Path) -> Path:
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_name = tempfile.mkstemp(
            prefix=f".{target.name}.",
            suffix=".part",
            dir=target.parent,
        )
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
            os.replace(temp_name, target)
        finally:
            if os.path.exists(temp_name):
                os.unlink(temp_name)
        return target
