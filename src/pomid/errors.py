"""Exceptions raised by pomid."""

from __future__ import annotations

from pathlib import Path


class PomidError(Exception):
    """Base class for all pomid errors."""


class InvalidIdentityError(PomidError, ValueError):
    """The identity token is empty."""


class DescriptorError(PomidError):
    """A descriptor file could not be read or written."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class ReadError(DescriptorError):
    """A descriptor exists but cannot be read or parsed."""


class WriteError(DescriptorError):
    """A descriptor could not be persisted."""
