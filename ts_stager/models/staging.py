"""Data models for staged outputs and run results."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class StagedFileFamily:
    """The four files staged for one TypeScript source item."""

    name: str  # base name shared by every member, e.g. "util"
    source_dir: Path
    declaration: Path | None = None  # <name>.d.ts
    output: Path | None = None  # <name>.js
    source: Path | None = None  # <name>.ts.source
    source_map: Path | None = None  # <name>.js.map
    map_patched: bool = False


@dataclass
class StageResult:
    """Orchestrator return value."""

    success: bool
    families: list[StagedFileFamily] = field(default_factory=list)
    error: str | None = None
    error_type: str | None = None

    @property
    def staged_names(self) -> list[str]:
        return [family.name for family in self.families]
