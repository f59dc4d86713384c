"""Data models for project descriptors and staged file families."""

from ts_stager.models.descriptor import DeclaredItem, ProjectDescriptor
from ts_stager.models.staging import StagedFileFamily, StageResult

__all__ = ["DeclaredItem", "ProjectDescriptor", "StageResult", "StagedFileFamily"]
