"""HTML post-processing passes."""

from .repair import merge_adjacent_code_blocks, merge_fragmented_code_blocks, repair_fragments
from .styling import TAG_CLASSES, apply_styling

__all__ = [
    "TAG_CLASSES",
    "apply_styling",
    "merge_adjacent_code_blocks",
    "merge_fragmented_code_blocks",
    "repair_fragments",
]
