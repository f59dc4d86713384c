"""Select TypeScript compile items and resolve them to absolute paths."""

from __future__ import annotations

import os
from pathlib import Path

from ts_stager.exceptions import ContractViolation
from ts_stager.models.descriptor import TYPESCRIPT_COMPILE, DeclaredItem, ProjectDescriptor

SOURCE_EXTENSION = ".ts"
DECLARATION_EXTENSION = ".d.ts"


def select_source_items(descriptor: ProjectDescriptor) -> list[DeclaredItem]:
    """Return the compilable .ts items of a project, in declaration order.

    Declaration files also end with ".ts", so they are excluded by a
    separate check after the extension match.
    """
    return [
        item
        for item in descriptor.items
        if item.item_type == TYPESCRIPT_COMPILE
        and item.include.endswith(SOURCE_EXTENSION)
        and not item.include.endswith(DECLARATION_EXTENSION)
    ]


def resolve_item_path(descriptor: ProjectDescriptor, item: DeclaredItem) -> Path:
    """Join the project directory with an item's Include path."""
    if not descriptor.directory or not str(descriptor.directory).strip():
        raise ContractViolation(f"project {descriptor.path} has no base directory")
    if not item.include or not item.include.strip():
        raise ContractViolation(f"{item.item_type} item in {descriptor.path} has an empty Include")

    # MSBuild files are authored with Windows separators
    include = item.include.replace("\\", os.sep) if os.sep != "\\" else item.include
    return Path(os.path.normpath(os.path.join(descriptor.directory, include)))
