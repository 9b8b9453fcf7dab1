"""Base display plugin rendering a listing as a placeable block."""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, MutableMapping, Optional

from django import forms
from django.utils.translation import gettext as _

from apps.blocks.conf import settings
from apps.blocks.displays import register_display
from apps.blocks.listing import Listing
from apps.blocks.options import coerce_bool, coerce_items_per_page, resolve_options
from apps.blocks.specs import BlockSpec

log = logging.getLogger(__name__)


def summarize_allowed(allow: Mapping[str, Any] | None, labels: Mapping[str, str]) -> str:
    """Comma-join the labels of the enabled ``allow`` categories.

    Categories are listed in the order of ``labels``; unknown categories are
    ignored. Returns ``"None"`` when nothing is enabled.
    """

    enabled = {key for key, value in (allow or {}).items() if value}
    allowed = [_(label) for key, label in labels.items() if key in enabled]
    return ", ".join(allowed) if allowed else _("None")


@register_display(
    "block",
    title="Block",
    help="Display the listing as a block.",
)
class BlockDisplay:
    """Lifecycle hooks for a listing placed as a block instance.

    The host (:class:`~apps.blocks.services.block_instances.ListingBlockInstance`)
    calls, in order: :meth:`block_settings` to seed new instances,
    :meth:`block_form` and :meth:`block_submit` while the instance is
    configured, then :meth:`pre_block_build` right before the listing runs.
    """

    plugin_id = "block"
    allow_labels: Dict[str, str] = {"items_per_page": "Items per page"}

    def __init__(self, spec: BlockSpec, listing: Listing, block=None):
        self.spec = spec
        self.listing = listing
        # Block row carrying the options an administrator saved for this display
        self.block = block
        self._options: Optional[Dict[str, Any]] = None

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------
    def define_options(self) -> Dict[str, Any]:
        return {
            "block_description": {"default": ""},
            "block_category": {"default": "Lists"},
            "use_ajax": {"default": False},
            "items_per_page": {"default": settings.BLOCKS_DEFAULT_ITEMS_PER_PAGE},
            "allow": {
                "contains": {
                    "items_per_page": {"default": "items_per_page"},
                },
            },
        }

    @property
    def options(self) -> Dict[str, Any]:
        if self._options is None:
            stored = getattr(self.block, "options", None) or {}
            self._options = resolve_options(self.define_options(), stored)
        return self._options

    def get_option(self, name: str) -> Any:
        return self.options.get(name)

    def get_allowed(self) -> Dict[str, Any]:
        """Allowed override categories, filtered to the enabled ones."""

        return {key: value for key, value in (self.get_option("allow") or {}).items() if value}

    def ajax_enabled(self) -> bool:
        return coerce_bool(self.get_option("use_ajax"))

    def uses_exposed(self) -> bool:
        return any(h.is_exposed for h in self.listing.get_filter_handlers().values())

    # ------------------------------------------------------------------
    # Admin summary
    # ------------------------------------------------------------------
    def options_summary(self, categories: MutableMapping[str, Any], options: MutableMapping[str, Any]) -> None:
        categories["block"] = {
            "title": _("Block settings"),
            "column": "second",
        }
        description = self.get_option("block_description") or ""
        options["block_description"] = {
            "category": "block",
            "title": _("Block name"),
            "value": description or _("None"),
        }
        options["block_category"] = {
            "category": "block",
            "title": _("Block category"),
            "value": self.get_option("block_category") or "",
        }
        options["allow"] = {
            "category": "block",
            "title": _("Allow settings"),
            "value": summarize_allowed(self.get_option("allow"), self.allow_labels),
        }

    # ------------------------------------------------------------------
    # Block instance lifecycle
    # ------------------------------------------------------------------
    def block_settings(self, values: Dict[str, Any]) -> Dict[str, Any]:
        values["items_per_page"] = "none"
        return values

    def block_form(self, instance, form) -> None:
        if "items_per_page" not in self.get_allowed():
            return
        config = instance.get_configuration()
        default = self.get_option("items_per_page")
        choices = [("none", _("%(count)s (default setting)") % {"count": default})]
        choices += [(str(n), str(n)) for n in settings.BLOCKS_ITEMS_PER_PAGE_CHOICES]
        form.add_field(
            "override.items_per_page",
            forms.ChoiceField(
                label=_("Items per block"),
                choices=choices,
                required=False,
                initial=str(config.get("items_per_page") or "none"),
            ),
        )

    def block_submit(self, instance, form) -> None:
        config = instance.get_configuration()
        self.submit_configuration(config, form)
        instance.set_configuration(config)

    def submit_configuration(self, config: Dict[str, Any], form) -> None:
        """Move submitted override values from ``form`` into ``config``."""

        items_per_page = form.get_value(("override", "items_per_page"))
        if items_per_page:
            config["items_per_page"] = items_per_page
        form.unset_value(("override", "items_per_page"))

    def pre_block_build(self, instance) -> None:
        config = instance.get_configuration()
        size = coerce_items_per_page(config.get("items_per_page"))
        if size is None:
            size = coerce_items_per_page(self.get_option("items_per_page"))
        self.listing.items_per_page = size


__all__ = ["BlockDisplay", "summarize_allowed"]
