"""Declarative display option trees.

Displays describe their options as a nested mapping where every leaf is
``{"default": value}`` and groups are ``{"contains": {...}}``. The values an
administrator saved on a :class:`~apps.blocks.models.block.Block` row are
resolved against that tree so displays always see a complete option set.
"""
from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any, Dict


def option_defaults(definition: Mapping[str, Any]) -> Dict[str, Any]:
    """Return the default value of every option in ``definition``."""

    return resolve_options(definition, {})


def resolve_options(definition: Mapping[str, Any], stored: Mapping[str, Any] | None) -> Dict[str, Any]:
    """Overlay ``stored`` values on the defaults declared in ``definition``.

    Stored keys that the definition does not declare are dropped. Groups merge
    key by key so a stored ``{"allow": {"items_per_page": False}}`` keeps the
    defaults of the other ``allow`` entries.
    """

    stored = stored if isinstance(stored, Mapping) else {}
    out: Dict[str, Any] = {}
    for name, spec in definition.items():
        if not isinstance(spec, Mapping):
            continue
        if "contains" in spec:
            out[name] = resolve_options(spec["contains"], stored.get(name))
        elif name in stored:
            out[name] = copy.deepcopy(stored[name])
        else:
            out[name] = copy.deepcopy(spec.get("default"))
    return out


def coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


def coerce_items_per_page(value: Any) -> int | None:
    """Return a positive page size, or ``None`` for "no override"."""

    if value in (None, "", "none"):
        return None
    try:
        size = int(value)
    except (TypeError, ValueError):
        return None
    return size if size > 0 else None


__all__ = ["option_defaults", "resolve_options", "coerce_bool", "coerce_items_per_page"]
