"""Declarative visibility rules attached to form fields."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class VisibilityRule:
    """Show a field only while ``depends_on`` holds ``when_equals``.

    For checkboxes ``when_equals=True`` means "checked". The rule is rendered
    as ``data-*`` attributes on the dependent widget; the configure template
    ships the script that interprets them.
    """

    depends_on: str
    when_equals: Any = True

    def as_attrs(self) -> Dict[str, str]:
        return {
            "data-depends-on": self.depends_on,
            "data-when-equals": json.dumps(self.when_equals),
        }

    def is_visible(self, values: Dict[str, Any]) -> bool:
        """Evaluate the rule against already-cleaned form values."""

        return values.get(self.depends_on) == self.when_equals


__all__ = ["VisibilityRule"]
