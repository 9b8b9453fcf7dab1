"""Display plugins for listing blocks.

Each plugin class is registered under an id with :func:`register_display`;
a :class:`~apps.blocks.specs.BlockSpec` names the id it renders with.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict


@dataclass(frozen=True)
class DisplayDefinition:
    id: str
    title: str
    plugin_class: type
    admin: str = ""
    help: str = ""


_DISPLAYS: Dict[str, DisplayDefinition] = {}


def register_display(id: str, *, title: str, admin: str = "", help: str = "") -> Callable[[type], type]:
    """Class decorator registering a display plugin under ``id``."""

    def decorator(cls: type) -> type:
        if id in _DISPLAYS:
            raise ValueError(f"Duplicate display plugin id: {id}")
        _DISPLAYS[id] = DisplayDefinition(
            id=id,
            title=title,
            plugin_class=cls,
            admin=admin or title,
            help=help,
        )
        cls.plugin_id = id
        return cls

    return decorator


def get_display(id: str) -> DisplayDefinition:
    _load_builtin_displays()
    try:
        return _DISPLAYS[id]
    except KeyError:
        raise ValueError(f"Unknown display plugin '{id}'") from None


def get_displays() -> Dict[str, DisplayDefinition]:
    _load_builtin_displays()
    return dict(_DISPLAYS)


def _load_builtin_displays() -> None:
    # Importing the modules runs their @register_display decorators.
    from . import block, exposed_filter_block  # noqa: F401


__all__ = ["DisplayDefinition", "register_display", "get_display", "get_displays"]
