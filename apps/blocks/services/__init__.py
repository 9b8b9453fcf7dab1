"""Service layer for block related operations."""

from .block_instances import ListingBlockInstance

__all__ = [
    "ListingBlockInstance",
]
