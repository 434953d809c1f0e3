"""Store protocol: all descriptor stores conform to this interface."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from pomid.model import ProjectDescriptor


class DescriptorStore(Protocol):
    """Protocol for loading and persisting project descriptors."""

    def load(self, path: Path) -> ProjectDescriptor:
        """Read the descriptor at *path*; raise ReadError on failure."""
        ...

    def save(self, descriptor: ProjectDescriptor, path: Path) -> None:
        """Write *descriptor* to *path*; raise WriteError on failure."""
        ...

    def create_default(self, path: Path, standalone: bool) -> ProjectDescriptor:
        """Return a new descriptor for a project that has no file yet."""
        ...
