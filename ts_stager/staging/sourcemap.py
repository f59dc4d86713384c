"""Rewrite a staged source map so it points at the renamed .ts.source file."""

from __future__ import annotations

import json
import os
import re
from pathlib import Path

import structlog

from ts_stager.exceptions import SourceMapError

log = structlog.get_logger(__name__)

# Single-entry sources array only; the name never spans a quote, so a
# multi-entry array does not match.
_SOURCES_RE = re.compile(r'"sources":\["([^"]*?)\.ts"\]')
_SOURCES_REPLACEMENT = r'"sources":["\1.ts.source"]'


def _validate_sources(map_path: Path, content: str) -> None:
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise SourceMapError(f"{map_path} is not valid JSON: {e}") from e

    sources = data.get("sources") if isinstance(data, dict) else None
    if not isinstance(sources, list) or len(sources) != 1:
        raise SourceMapError(
            f"{map_path}: expected exactly one entry in 'sources', got {sources!r}"
        )
    entry = sources[0]
    if not isinstance(entry, str) or not entry.endswith(".ts"):
        raise SourceMapError(f"{map_path}: 'sources' entry {entry!r} is not a .ts file")


def patch_source_map(
    name: str,
    map_path: str | os.PathLike[str],
    source_path: str | os.PathLike[str],
    strict: bool = False,
) -> bool:
    """Point the map's ``sources`` entry at ``<name>.ts.source``.

    The substitution is textual, so every byte outside the matched fragment
    is preserved. The file is always written back.

    Args:
        name: Base name of the staged family.
        map_path: The copied ``.js.map`` to patch in place.
        source_path: The renamed source the map should now reference.
        strict: Parse the map first and raise SourceMapError unless
            ``sources`` holds exactly one ``.ts`` entry.

    Returns:
        True if the sources fragment was rewritten.
    """
    path = Path(map_path)
    # surrogateescape keeps bytes that are not valid UTF-8 intact on write-back
    content = path.read_bytes().decode("utf-8", errors="surrogateescape")

    if strict:
        _validate_sources(path, content)

    patched, count = _SOURCES_RE.subn(_SOURCES_REPLACEMENT, content)
    path.write_bytes(patched.encode("utf-8", errors="surrogateescape"))

    if count:
        log.debug("sourcemap.patched", family=name, map=path, source=source_path)
        return True

    if strict:
        # Valid shape but not in the compact form the compiler emits
        raise SourceMapError(f"{path}: 'sources' field is not in compact single-entry form")
    log.warning("sourcemap.unpatched", family=name, map=path)
    return False
