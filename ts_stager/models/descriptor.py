"""Data models for loaded MSBuild project descriptors."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

PROJECT_REFERENCE = "ProjectReference"
TYPESCRIPT_COMPILE = "TypeScriptCompile"


@dataclass(frozen=True)
class DeclaredItem:
    """One item declared inside an <ItemGroup>."""

    item_type: str  # element name, e.g. "ProjectReference" | "TypeScriptCompile"
    include: str  # Include attribute, relative to the owning project directory

    @property
    def is_reference(self) -> bool:
        return self.item_type == PROJECT_REFERENCE


@dataclass(frozen=True)
class ProjectDescriptor:
    """A loaded project file: where it lives and what it declares."""

    path: Path  # absolute path of the project file
    directory: Path  # base directory items are relative to
    items: tuple[DeclaredItem, ...] = field(default_factory=tuple)

    @property
    def references(self) -> list[DeclaredItem]:
        return [item for item in self.items if item.is_reference]
