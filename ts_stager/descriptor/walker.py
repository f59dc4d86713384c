"""Transitive walk over ProjectReference links."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from pathlib import Path

import structlog

from ts_stager.descriptor.loader import load_descriptor
from ts_stager.descriptor.selector import resolve_item_path
from ts_stager.models.descriptor import ProjectDescriptor

log = structlog.get_logger(__name__)

Loader = Callable[[Path], ProjectDescriptor]


def _key(path: Path) -> str:
    return os.path.normcase(os.path.normpath(str(path)))


def walk(
    root: ProjectDescriptor,
    loader: Loader = load_descriptor,
) -> Iterator[ProjectDescriptor]:
    """Yield ``root`` and every project it references, depth-first pre-order.

    References are followed in declaration order and each one is fully
    descended before its next sibling. A project already yielded is neither
    reloaded nor descended again, so reference cycles terminate.

    The sequence is lazy: projects are loaded as the caller iterates.
    """
    visited: set[str] = set()
    yield from _walk(root, loader, visited)


def _walk(
    descriptor: ProjectDescriptor,
    loader: Loader,
    visited: set[str],
) -> Iterator[ProjectDescriptor]:
    visited.add(_key(descriptor.path))
    yield descriptor

    for reference in descriptor.references:
        target = resolve_item_path(descriptor, reference)
        if _key(target) in visited:
            log.debug("walker.already_visited", project=target, referrer=descriptor.path)
            continue
        log.debug("walker.descend", project=target, referrer=descriptor.path)
        yield from _walk(loader(target), loader, visited)
