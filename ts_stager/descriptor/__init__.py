"""Project descriptor loading and traversal."""

from ts_stager.descriptor.loader import load_descriptor
from ts_stager.descriptor.selector import resolve_item_path, select_source_items
from ts_stager.descriptor.walker import walk

__all__ = ["load_descriptor", "resolve_item_path", "select_source_items", "walk"]
