"""Host for listing blocks placed on a layout.

:class:`ListingBlockInstance` owns one :class:`LayoutBlock` row for the
duration of a request. It resolves the listing spec and display plugin the
row points at and drives the plugin's lifecycle hooks.
"""
from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Mapping, Optional

from apps.blocks.displays import get_display
from apps.blocks.forms.block_config import BlockConfigurationForm
from apps.blocks.listing import Listing
from apps.blocks.models.layout_block import LayoutBlock
from apps.blocks.register import load_specs
from apps.blocks.registry import get_spec

log = logging.getLogger(__name__)


class ListingBlockInstance:
    """A placed listing block and its per-instance configuration."""

    def __init__(self, layout_block: LayoutBlock, request=None):
        load_specs()
        self.layout_block = layout_block
        self.request = request
        self.spec = get_spec(layout_block.block.code)
        self.listing = Listing(self.spec, request=request)
        definition = get_display(self.spec.display)
        self.display = definition.plugin_class(self.spec, self.listing, block=layout_block.block)

    def __str__(self) -> str:
        return str(self.layout_block.slug)

    @classmethod
    def place(cls, layout, block, *, slug: str, title: str = "", order: int = 0, request=None) -> "ListingBlockInstance":
        """Create a :class:`LayoutBlock` seeded with the display's default settings."""

        layout_block = LayoutBlock(layout=layout, block=block, slug=slug, title=title, order=order)
        instance = cls(layout_block, request=request)
        layout_block.configuration = instance.default_configuration()
        layout_block.save()
        log.debug("Placed block %s on layout %s", slug, layout.pk)
        return instance

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def default_configuration(self) -> Dict[str, Any]:
        return self.display.block_settings({})

    def get_configuration(self) -> Dict[str, Any]:
        """Return a copy of the stored configuration.

        Instances created through :meth:`place` start from
        :meth:`default_configuration`; rows created elsewhere may lack keys,
        which every display treats as "not overridden".
        """

        stored = self.layout_block.configuration
        if not isinstance(stored, Mapping):
            return {}
        return copy.deepcopy(dict(stored))

    def set_configuration(self, config: Mapping[str, Any]) -> None:
        self.layout_block.configuration = dict(config)
        if self.layout_block.pk:
            self.layout_block.save(update_fields=["configuration", "updated_at"])

    # ------------------------------------------------------------------
    # Configuration form
    # ------------------------------------------------------------------
    def configuration_form(self, data: Optional[Mapping[str, Any]] = None) -> BlockConfigurationForm:
        form = BlockConfigurationForm(data, initial={"title": self.layout_block.title})
        self.display.block_form(self, form)
        return form

    def submit(self, form: BlockConfigurationForm) -> None:
        """Store a validated configuration form on the block instance."""

        if not form.is_valid():
            raise ValueError("Cannot submit an invalid block configuration form")
        self.display.block_submit(self, form)
        title = form.get_value("title")
        if title is not None and title != self.layout_block.title:
            self.layout_block.title = title
            if self.layout_block.pk:
                self.layout_block.save(update_fields=["title", "updated_at"])
        form.unset_value("title")
        log.debug("Saved configuration for block %s", self)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def build(self) -> Dict[str, Any]:
        self.display.pre_block_build(self)
        result = self.listing.execute()
        uses_exposed = self.display.uses_exposed()
        exposed_filters = []
        if uses_exposed:
            for filter_id, handler in self.listing.get_exposed_filters().items():
                exposed_filters.append({
                    "key": filter_id,
                    "type": handler.type,
                    "label": handler.label or filter_id,
                    "choices": [list(c) for c in handler.options.get("choices") or []],
                    "value": result.exposed_input.get(filter_id, ""),
                })
        return {
            "slug": self.layout_block.slug,
            "title": self.layout_block.title or self.layout_block.block.name,
            "spec_id": self.spec.id,
            "display": self.display.plugin_id,
            "rows": result.rows,
            "total": result.total,
            "items_per_page": result.items_per_page,
            "exposed_input": result.exposed_input,
            "uses_exposed": uses_exposed,
            "use_ajax": self.display.ajax_enabled(),
            "exposed_filters": exposed_filters,
        }


__all__ = ["ListingBlockInstance"]
