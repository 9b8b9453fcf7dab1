from __future__ import annotations

from importlib import import_module

from .conf import settings
from .filters import fixed_filter, select_filter, text_filter
from .registry import get_registry, register
from .specs import BlockSpec

_LOADED = False

ITEM_CATALOG_SPEC_ID = "items.catalog"


def load_specs() -> None:
    """Register the bundled listing specs (idempotent)."""
    global _LOADED
    if _LOADED:
        return
    from apps.blocks.models.item import Item

    reg = get_registry()
    if ITEM_CATALOG_SPEC_ID not in reg:
        register(
            BlockSpec(
                id=ITEM_CATALOG_SPEC_ID,
                name="Item catalog",
                model=Item,
                display="exposed_filter_block",
                filter_schema=(
                    text_filter("code", label="Item code", lookup="istartswith"),
                    text_filter("description"),
                    select_filter("status", choices=Item.Status.choices, label="Status"),
                    fixed_filter("not_obsolete", Item.Status.OBSOLETE, field="status", negate=True),
                ),
                columns=("code", "description", "status"),
                ordering=("code",),
                category="Demo",
                description="Items with per-block exposed filter overrides.",
            )
        )

    _LOADED = True


def load_configured_registrars() -> None:
    """Run the registrars listed in ``settings.BLOCKS``."""

    for entry in settings.BLOCKS:
        try:
            module_path, callable_name = entry.split(":", 1)
        except ValueError:
            import_module(entry)
        else:
            module = import_module(module_path)
            registrar = getattr(module, callable_name)
            registrar()
