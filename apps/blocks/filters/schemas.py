"""Schema helpers for building filter definitions used by listing specs."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple


def text_filter(
    key: str,
    *,
    field: Optional[str] = None,
    label: Optional[str] = None,
    lookup: str = "icontains",
    exposed: bool = True,
) -> Dict[str, Any]:
    """Return a text filter definition, exposed to end users by default."""

    cfg: Dict[str, Any] = {
        "key": key,
        "type": "text",
        "field": field or key,
        "exposed": exposed,
    }
    if label:
        cfg["label"] = label
    if lookup:
        cfg["lookup"] = lookup
    return cfg


def select_filter(
    key: str,
    *,
    choices: Sequence[Tuple[str, str]],
    field: Optional[str] = None,
    label: Optional[str] = None,
    exposed: bool = True,
) -> Dict[str, Any]:
    """Return a single-choice filter definition matched with ``exact``."""

    cfg: Dict[str, Any] = {
        "key": key,
        "type": "select",
        "field": field or key,
        "lookup": "exact",
        "choices": list(choices),
        "exposed": exposed,
    }
    if label:
        cfg["label"] = label
    return cfg


def fixed_filter(
    key: str,
    value: Any,
    *,
    field: Optional[str] = None,
    lookup: str = "exact",
    negate: bool = False,
) -> Dict[str, Any]:
    """Return a non-exposed filter that always applies ``value``.

    Fixed filters are part of the listing definition and can never be
    overridden per block instance. With ``negate`` matching rows are
    excluded instead.
    """

    return {
        "key": key,
        "type": "fixed",
        "field": field or key,
        "lookup": lookup,
        "value": value,
        "exposed": False,
        "negate": negate,
    }


__all__: List[str] = ["text_filter", "select_filter", "fixed_filter"]
