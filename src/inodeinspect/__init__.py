"""inodeinspect: report inode-level metadata for files and directory trees.

This package reads stat information without following symlinks and renders
it as labelled text or as standalone JSON objects, one per entry.
"""

from inodeinspect.cli import main
from inodeinspect.constants import VERSION
from inodeinspect.models import MetadataRecord, RenderOptions

__version__ = VERSION
__all__ = ["main", "MetadataRecord", "RenderOptions"]
