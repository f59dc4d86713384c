"""Loader for MSBuild project files (.csproj, .njsproj, ...)."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from pathlib import Path

import structlog

from ts_stager.exceptions import ContractViolation, DescriptorLoadError
from ts_stager.models.descriptor import DeclaredItem, ProjectDescriptor

log = structlog.get_logger(__name__)

# <Choose> holds <When>/<Otherwise>, which may hold ItemGroups or nested <Choose>
_CONDITIONAL_CONTAINERS = {"Choose", "When", "Otherwise"}


def _local_name(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _item_groups(parent: ET.Element) -> Iterator[ET.Element]:
    """Project-level <ItemGroup> elements under ``parent``, in document order."""
    for child in parent:
        if not isinstance(child.tag, str):
            continue
        name = _local_name(child.tag)
        if name == "ItemGroup":
            yield child
        elif name in _CONDITIONAL_CONTAINERS:
            yield from _item_groups(child)


def parse_items(content: str, source: str = "<string>") -> tuple[DeclaredItem, ...]:
    """Extract declared items from project XML, in document order.

    Only project-level items count: <ItemGroup> children of <Project>, and
    of <When>/<Otherwise> branches of a <Choose> at any depth. Item groups
    inside a <Target> body are build-time task items and are skipped. The
    element name is the item type and the Include attribute is the path.
    Both the MSBuild 2003 namespace and the namespace-less SDK style are
    accepted.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise DescriptorLoadError(source, f"invalid XML ({e})") from e

    items: list[DeclaredItem] = []
    for group in _item_groups(root):
        for child in group:
            if not isinstance(child.tag, str):
                continue  # comments / processing instructions
            include = child.get("Include")
            if not include:
                continue
            items.append(DeclaredItem(item_type=_local_name(child.tag), include=include))
    return tuple(items)


def load_descriptor(project_path: str | os.PathLike[str]) -> ProjectDescriptor:
    """Open a project file and return its descriptor.

    Raises:
        ContractViolation: if the path is empty.
        DescriptorLoadError: if the file is missing, unreadable or not XML.
    """
    if not project_path or not str(project_path).strip():
        raise ContractViolation("project path must not be empty")

    path = Path(os.path.abspath(project_path))
    try:
        content = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as e:
        raise DescriptorLoadError(str(path), "file not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise DescriptorLoadError(str(path), str(e)) from e

    items = parse_items(content, source=str(path))
    log.debug("descriptor.loaded", path=path, items=len(items))
    return ProjectDescriptor(path=path, directory=path.parent, items=items)
