"""Configuration form for a placed listing block."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Sequence

from crispy_forms.helper import FormHelper
from crispy_forms.layout import Fieldset, Layout as CrispyLayout, Submit
from django import forms

from apps.blocks.forms.states import VisibilityRule

PATH_SEPARATOR = "."


def _join(path: Sequence[str] | str) -> str:
    if isinstance(path, str):
        return path
    return PATH_SEPARATOR.join(str(part) for part in path)


class BlockConfigurationForm(forms.Form):
    """Form a display plugin extends with its per-instance override fields.

    Display plugins add fields with :meth:`add_field` using dotted names such
    as ``override.exposed_filters.status.enabled``. After validation,
    :meth:`get_value` reads the cleaned values under a path as a nested
    mapping and :meth:`unset_value` drops them once they have been stored.
    """

    title = forms.CharField(
        max_length=255,
        required=False,
        help_text="Optional custom title displayed for this block instance.",
    )

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.visibility_rules: Dict[str, VisibilityRule] = {}

    @property
    def helper(self) -> FormHelper:
        helper = FormHelper()
        helper.form_tag = True
        helper.form_method = "post"
        helper.layout = CrispyLayout(
            Fieldset("Block", "title"),
            Fieldset("Override", *self.override_field_names()),
        )
        helper.add_input(Submit("submit", "Save block"))
        return helper

    def add_field(self, name: str, field: forms.Field, *, visible_when: VisibilityRule | None = None) -> None:
        if visible_when is not None:
            field.widget.attrs.update(visible_when.as_attrs())
            self.visibility_rules[name] = visible_when
        self.fields[name] = field

    def clean(self) -> Dict[str, Any]:
        cleaned_data = super().clean()
        # Values of fields hidden by their visibility rule are discarded.
        for name, rule in self.visibility_rules.items():
            if name in cleaned_data and not rule.is_visible(cleaned_data):
                cleaned_data[name] = self.fields[name].to_python(None)
        return cleaned_data

    def override_field_names(self) -> Iterable[str]:
        return [name for name in self.fields if name.startswith("override" + PATH_SEPARATOR)]

    # ------------------------------------------------------------------
    # Cleaned value access by path
    # ------------------------------------------------------------------
    def get_value(self, path: Sequence[str] | str, default: Any = None) -> Any:
        """Return the cleaned value at ``path``, nesting dotted sub-keys."""

        prefix = _join(path)
        data = getattr(self, "cleaned_data", None) or {}
        if prefix in data:
            return data[prefix]
        nested: Dict[str, Any] = {}
        found = False
        for name, value in data.items():
            if not name.startswith(prefix + PATH_SEPARATOR):
                continue
            found = True
            node = nested
            parts = name[len(prefix) + 1 :].split(PATH_SEPARATOR)
            for part in parts[:-1]:
                node = node.setdefault(part, {})
            node[parts[-1]] = value
        return nested if found else default

    def unset_value(self, path: Sequence[str] | str) -> None:
        prefix = _join(path)
        data = getattr(self, "cleaned_data", None)
        if not data:
            return
        for name in list(data.keys()):
            if name == prefix or name.startswith(prefix + PATH_SEPARATOR):
                del data[name]


__all__ = ["BlockConfigurationForm"]
