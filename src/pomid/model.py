"""Data model for project descriptors and identity tokens."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class ParentReference:
    """The ``<parent>`` block of a descriptor. Read-only once loaded."""

    group_id: str | None = None
    artifact_id: str | None = None
    version: str | None = None
    relative_path: str | None = None


@dataclass
class ProjectDescriptor:
    """Identity, packaging, parent link and module list of one project."""

    artifact_id: str | None = None
    group_id: str | None = None
    version: str | None = None
    packaging: str = "jar"
    parent: ParentReference | None = None
    modules: list[str] = field(default_factory=list)
    path: Path | None = None
    model_version: str | None = "4.0.0"
    # Parsed document kept by the store so unmodelled content survives a save.
    document: Any = field(default=None, repr=False, compare=False)

    @property
    def effective_group_id(self) -> str | None:
        """groupId, inherited from the parent reference when not declared."""
        if self.group_id is None and self.parent is not None:
            return self.parent.group_id
        return self.group_id

    @property
    def effective_version(self) -> str | None:
        """version, inherited from the parent reference when not declared."""
        if self.version is None and self.parent is not None:
            return self.parent.version
        return self.version

    def add_module(self, module_id: str) -> bool:
        """Append *module_id* unless already present; return True if added."""
        if module_id in self.modules:
            return False
        self.modules.append(module_id)
        return True


@dataclass(frozen=True)
class IdentityToken:
    """A parsed ``group:artifact:version`` token (one to three segments)."""

    segments: tuple[str, ...]

    @property
    def group_id(self) -> str | None:
        return self.segments[0] if len(self.segments) >= 2 else None

    @property
    def artifact_id(self) -> str:
        return self.segments[1] if len(self.segments) >= 2 else self.segments[0]

    @property
    def version(self) -> str | None:
        return self.segments[2] if len(self.segments) >= 3 else None

    @property
    def has_version(self) -> bool:
        return len(self.segments) >= 3
