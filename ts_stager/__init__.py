"""ts-stager: stage TypeScript outputs of referenced MSBuild projects."""

__version__ = "0.1.0"

from ts_stager.descriptor import load_descriptor, resolve_item_path, select_source_items, walk
from ts_stager.exceptions import (
    ContractViolation,
    DescriptorLoadError,
    IncompleteFamilyError,
    SourceMapError,
    StagerError,
    StagingError,
)
from ts_stager.models import DeclaredItem, ProjectDescriptor, StagedFileFamily, StageResult
from ts_stager.orchestrator import StagingOrchestrator, execute
from ts_stager.staging import copy_family, patch_source_map

__all__ = [
    "ContractViolation",
    "DeclaredItem",
    "DescriptorLoadError",
    "IncompleteFamilyError",
    "ProjectDescriptor",
    "SourceMapError",
    "StageResult",
    "StagedFileFamily",
    "StagerError",
    "StagingError",
    "StagingOrchestrator",
    "copy_family",
    "execute",
    "load_descriptor",
    "patch_source_map",
    "resolve_item_path",
    "select_source_items",
    "walk",
]
