"""Block display whose instances may override exposed filter values."""
from __future__ import annotations

import logging
from typing import Any, Dict

from django import forms
from django.utils.translation import gettext as _

from apps.blocks.displays import register_display
from apps.blocks.displays.block import BlockDisplay
from apps.blocks.forms.states import VisibilityRule

log = logging.getLogger(__name__)


@register_display(
    "exposed_filter_block",
    title="Exposed filter block",
    help="Display the listing as a block whose exposed filters can be set per instance.",
)
class ExposedFilterBlockDisplay(BlockDisplay):
    """A block display that allows exposed filters to be configured.

    Each placed instance may force a value for any exposed filter of the
    listing. Forced values are stored in the instance configuration under
    ``exposed_filters`` and replace the request's exposed input at render
    time.
    """

    allow_labels = {
        **BlockDisplay.allow_labels,
        "exposed_filters": "Exposed filters",
    }

    def define_options(self) -> Dict[str, Any]:
        options = super().define_options()
        options["allow"]["contains"]["exposed_filters"] = {"default": "exposed_filters"}
        return options

    def block_settings(self, values: Dict[str, Any]) -> Dict[str, Any]:
        values = super().block_settings(values)
        values["exposed_filters"] = {}
        for filter_id, handler in self.listing.get_filter_handlers().items():
            if not handler.is_exposed:
                continue
            values["exposed_filters"][filter_id] = {"enabled": False, "value": ""}
        return values

    def block_form(self, instance, form) -> None:
        super().block_form(instance, form)
        stored = instance.get_configuration().get("exposed_filters") or {}

        for category in self.get_allowed():
            if category != "exposed_filters":
                continue
            for filter_id, handler in self.listing.get_filter_handlers().items():
                if not handler.is_exposed:
                    continue

                if handler.label:
                    title = _("Exposed filter: %(id)s (%(label)s)") % {"id": filter_id, "label": handler.label}
                else:
                    title = _("Exposed filter: %(id)s") % {"id": filter_id}

                current = stored.get(filter_id) or {}
                enabled_name = f"override.exposed_filters.{filter_id}.enabled"
                form.add_field(
                    enabled_name,
                    forms.BooleanField(
                        label=title,
                        required=False,
                        initial=bool(current.get("enabled", False)),
                    ),
                )
                form.add_field(
                    f"override.exposed_filters.{filter_id}.value",
                    forms.CharField(
                        label=_("Value for %(id)s") % {"id": filter_id},
                        required=False,
                        initial=current.get("value", ""),
                    ),
                    visible_when=VisibilityRule(depends_on=enabled_name, when_equals=True),
                )

    def submit_configuration(self, config: Dict[str, Any], form) -> None:
        super().submit_configuration(config, form)

        submitted = form.get_value(("override", "exposed_filters")) or {}
        if not submitted and "exposed_filters" not in config:
            return
        overrides = dict(config.get("exposed_filters") or {})

        for filter_id, values in submitted.items():
            if values.get("enabled"):
                overrides[filter_id] = {
                    "enabled": True,
                    "value": values.get("value") or "",
                }
            else:
                overrides.pop(filter_id, None)
            form.unset_value(("override", "exposed_filters", filter_id))

        config["exposed_filters"] = overrides
        log.debug("Storing %d exposed filter override(s) for %s", len(overrides), self.spec.id)

    def pre_block_build(self, instance) -> None:
        super().pre_block_build(instance)
        config = instance.get_configuration()
        overrides = config.get("exposed_filters") or {}
        if not overrides:
            return
        exposed_input = {
            filter_id: values.get("value", "")
            for filter_id, values in overrides.items()
            if values.get("enabled")
        }
        log.debug("Overriding exposed input of %s with %s", self.spec.id, exposed_input)
        self.listing.set_exposed_input(exposed_input)

    def uses_exposed(self) -> bool:
        """Block listings use exposed widgets only if AJAX is set."""

        if self.ajax_enabled():
            return super().uses_exposed()
        return False


__all__ = ["ExposedFilterBlockDisplay"]
