"""Copying file families into the library directory."""

from ts_stager.staging.copier import copy_family
from ts_stager.staging.sourcemap import patch_source_map

__all__ = ["copy_family", "patch_source_map"]
