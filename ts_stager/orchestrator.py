"""Staging orchestrator: discover referenced TypeScript sources and stage them."""

from __future__ import annotations

import os
from collections.abc import Callable
from itertools import islice
from pathlib import Path

import structlog

from ts_stager.descriptor.loader import load_descriptor
from ts_stager.descriptor.selector import resolve_item_path, select_source_items
from ts_stager.descriptor.walker import walk
from ts_stager.exceptions import ContractViolation
from ts_stager.models.descriptor import ProjectDescriptor
from ts_stager.models.staging import StagedFileFamily, StageResult
from ts_stager.progress import PhaseListener, RunProgress
from ts_stager.staging.copier import copy_family
from ts_stager.staging.sourcemap import patch_source_map

log = structlog.get_logger(__name__)

# (source extension, staged extension), in copy order
DECLARATION = (".d.ts", ".d.ts")
OUTPUT = (".js", ".js")
SOURCE = (".ts", ".ts.source")
SOURCE_MAP = (".js.map", ".js.map")


def _require(value: str | os.PathLike[str] | None, label: str) -> str:
    if value is None or not str(value).strip():
        raise ContractViolation(f"{label} is required")
    return str(value)


class StagingOrchestrator:
    """
    Stage the TypeScript outputs of every referenced project.

    Phase "load":     open the root project file
    Phase "discover": walk ProjectReference links, collect .ts sources
                      of every project except the root
    Phase "stage":    copy each .d.ts / .js / .ts / .js.map family into
                      the library directory and patch the copied map
    """

    def __init__(
        self,
        loader: Callable[[Path], ProjectDescriptor] = load_descriptor,
        strict_source_maps: bool = False,
        on_phase: PhaseListener | None = None,
    ) -> None:
        self.loader = loader
        self.strict_source_maps = strict_source_maps
        self.on_phase = on_phase
        self.progress = RunProgress()

    def discover(self, project_path: str | os.PathLike[str]) -> list[Path]:
        """Absolute paths of the .ts sources of every referenced project.

        The root project's own sources are not included.
        """
        root = self.loader(Path(_require(project_path, "project path")))
        sources, _ = self._collect_sources(root)
        return sources

    def _collect_sources(self, root: ProjectDescriptor) -> tuple[list[Path], int]:
        sources: list[Path] = []
        projects = 0
        # walk() yields the root first
        for descriptor in islice(walk(root, self.loader), 1, None):
            projects += 1
            for item in select_source_items(descriptor):
                sources.append(resolve_item_path(descriptor, item))
        return sources, projects

    def stage_family(self, source_path: Path, library_dir: Path) -> StagedFileFamily:
        """Copy the four members of one family and patch its source map."""
        source_dir = source_path.parent
        name = source_path.stem
        if not str(source_dir) or not name:
            raise ContractViolation(f"cannot derive a file family from {source_path}")

        family = StagedFileFamily(name=name, source_dir=source_dir)
        family.declaration = copy_family(source_dir, name, library_dir, *DECLARATION)
        family.output = copy_family(source_dir, name, library_dir, *OUTPUT)
        family.source = copy_family(source_dir, name, library_dir, *SOURCE)
        family.source_map = copy_family(source_dir, name, library_dir, *SOURCE_MAP)
        family.map_patched = patch_source_map(
            name, family.source_map, family.source, strict=self.strict_source_maps
        )
        return family

    def run(
        self,
        project_path: str | os.PathLike[str],
        library_dir: str | os.PathLike[str],
    ) -> StageResult:
        """Full, unconditional re-stage of every referenced project.

        The first error aborts the run. Files staged before it are left in
        place and reported in ``StageResult.families``.
        """
        progress = RunProgress(listener=self.on_phase)
        self.progress = progress  # expose last run's progress for callers
        families: list[StagedFileFamily] = []

        try:
            project = Path(_require(project_path, "project path"))
            library = Path(_require(library_dir, "library directory"))

            progress.begin("load")
            root = self.loader(project)
            library.mkdir(parents=True, exist_ok=True)
            progress.finish("load", detail=str(root.path))

            progress.begin("discover")
            sources, projects = self._collect_sources(root)
            progress.finish(
                "discover", detail=f"{len(sources)} sources in {projects} projects"
            )

            progress.begin("stage")
            for source_path in sources:
                family = self.stage_family(source_path, library)
                families.append(family)
                log.info(
                    "stage.family_staged",
                    family=family.name,
                    source_dir=family.source_dir,
                    map_patched=family.map_patched,
                )
            progress.finish("stage", detail=f"{len(families)} families")

        except Exception as e:
            progress.fail(str(e))
            return StageResult(
                success=False,
                families=families,
                error=str(e),
                error_type=type(e).__name__,
            )

        return StageResult(success=True, families=families)


def execute(
    project_full_path: str | None,
    library_directory_full_path: str | None,
    strict_source_maps: bool = False,
    orchestrator: StagingOrchestrator | None = None,
) -> bool:
    """Host entry point: run the orchestrator and log any failure.

    Never raises for staging failures; returns False instead.
    """
    if orchestrator is None:
        orchestrator = StagingOrchestrator(strict_source_maps=strict_source_maps)

    result = orchestrator.run(project_full_path or "", library_directory_full_path or "")
    if not result.success:
        log.error(
            "stage.failed",
            project=project_full_path,
            library_dir=library_directory_full_path,
            error_type=result.error_type,
            error=result.error,
            staged=len(result.families),
        )
        return False

    log.info(
        "stage.completed",
        project=project_full_path,
        library_dir=library_directory_full_path,
        staged=len(result.families),
    )
    return True
