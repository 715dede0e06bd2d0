"""In-place, order-preserving reordering of selected elements."""

from .locate import first_index, index_after_last, index_before_first
from .partition import (
    PartitionStep,
    half_stable_partition,
    remove_all,
    stable_partition,
    stable_partition_iterative,
)
from .positional import bring_forward, bring_to_front, gather, send_backward, send_to_back
from .rotate import rotate, swap_nonempty_subrange_prefixes
from .sequences import ArrayCollection, Collection, LinkedCollection, Slice, as_collection

__all__ = [
    "ArrayCollection",
    "Collection",
    "LinkedCollection",
    "PartitionStep",
    "Slice",
    "as_collection",
    "bring_forward",
    "bring_to_front",
    "first_index",
    "gather",
    "half_stable_partition",
    "index_after_last",
    "index_before_first",
    "remove_all",
    "rotate",
    "send_backward",
    "send_to_back",
    "stable_partition",
    "stable_partition_iterative",
    "swap_nonempty_subrange_prefixes",
]
