"""Copy one member of a file family, optionally renaming its extension."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

import structlog

from ts_stager.exceptions import ContractViolation, IncompleteFamilyError

log = structlog.get_logger(__name__)


def copy_family(
    source_dir: str | os.PathLike[str],
    name: str,
    dest_dir: str | os.PathLike[str],
    old_ext: str,
    new_ext: str,
) -> Path:
    """Copy ``source_dir/name+old_ext`` to ``dest_dir/name+new_ext``.

    The copy is byte-for-byte and always overwrites an existing destination.

    Returns:
        The destination path.

    Raises:
        ContractViolation: if ``name`` is empty.
        IncompleteFamilyError: if the source member does not exist.
    """
    if not name:
        raise ContractViolation("file family name must not be empty")

    source = Path(source_dir) / f"{name}{old_ext}"
    destination = Path(dest_dir) / f"{name}{new_ext}"

    if not source.is_file():
        raise IncompleteFamilyError(name, str(source))

    shutil.copyfile(source, destination)
    log.debug("copier.copied", source=source, destination=destination)
    return destination
