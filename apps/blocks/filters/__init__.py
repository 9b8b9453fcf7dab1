"""Reusable filter helpers bundled with the Blocks app."""

from .schemas import fixed_filter, select_filter, text_filter

__all__ = [
    "text_filter",
    "select_filter",
    "fixed_filter",
]
