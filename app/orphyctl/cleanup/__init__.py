"""Interactive cleanup of orphaned folders.

This module provides the deletion operator and the disposition loop.
"""

from orphyctl.cleanup.disposition import DispositionLoop, prompt_text
from orphyctl.cleanup.operator import DeletionResult, FolderOperator

__all__ = [
    "DeletionResult",
    "DispositionLoop",
    "FolderOperator",
    "prompt_text",
]
