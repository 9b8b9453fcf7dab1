"""Listing engine behind listing blocks.

A :class:`Listing` wraps a registered :class:`~apps.blocks.specs.BlockSpec`
for a single render. Display plugins inspect its filter handlers and may
replace the exposed input before :meth:`Listing.execute` runs the query.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from django.db import models
from django.core.exceptions import FieldError, ValidationError

from apps.blocks.conf import settings
from apps.blocks.specs import BlockSpec

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterHandler:
    """One filter of a listing, as declared in the listing's filter schema."""

    id: str
    options: Mapping[str, Any]

    @property
    def is_exposed(self) -> bool:
        return bool(self.options.get("exposed"))

    @property
    def label(self) -> Optional[str]:
        return self.options.get("label") or None

    @property
    def type(self) -> str:
        return self.options.get("type") or "text"

    @property
    def field_path(self) -> str:
        return self.options.get("field") or self.id

    def lookup(self) -> str:
        lookup = self.options.get("lookup")
        if lookup:
            return f"{self.field_path}__{lookup}"
        if self.type == "text":
            return f"{self.field_path}__icontains"
        return f"{self.field_path}__exact"


@dataclass
class ListingResult:
    rows: List[Dict[str, Any]]
    total: int
    exposed_input: Dict[str, Any]
    items_per_page: Optional[int] = None


@dataclass
class Listing:
    """Query-side state of a listing for the current request."""

    spec: BlockSpec
    request: Any = None
    items_per_page: Optional[int] = None
    _exposed_input: Optional[Dict[str, Any]] = field(default=None, init=False, repr=False)
    _handlers: Optional[Dict[str, FilterHandler]] = field(default=None, init=False, repr=False)

    def get_filter_handlers(self) -> Dict[str, FilterHandler]:
        if self._handlers is None:
            handlers: Dict[str, FilterHandler] = {}
            for entry in self.spec.filter_schema or ():
                if not isinstance(entry, Mapping) or not entry.get("key"):
                    continue
                key = str(entry["key"])
                handlers[key] = FilterHandler(id=key, options=dict(entry))
            self._handlers = handlers
        return self._handlers

    def get_exposed_filters(self) -> Dict[str, FilterHandler]:
        return {key: h for key, h in self.get_filter_handlers().items() if h.is_exposed}

    # ------------------------------------------------------------------
    # Exposed input
    # ------------------------------------------------------------------
    def set_exposed_input(self, values: Mapping[str, Any]) -> None:
        """Replace whatever the request would supply as exposed input."""

        self._exposed_input = {str(k): v for k, v in values.items()}

    def get_exposed_input(self) -> Dict[str, Any]:
        if self._exposed_input is not None:
            return dict(self._exposed_input)
        return self._collect_request_input()

    def _collect_request_input(self) -> Dict[str, Any]:
        query = getattr(self.request, "GET", None)
        if not query:
            return {}
        prefix = settings.BLOCKS_EXPOSED_INPUT_PREFIX
        values: Dict[str, Any] = {}
        for key in self.get_exposed_filters():
            for name in (f"{prefix}{key}", key):
                raw = query.get(name)
                if raw not in (None, ""):
                    values[key] = raw
                    break
        return values

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------
    def get_queryset(self):
        model: type[models.Model] | None = self.spec.model
        if model is None:
            raise ValueError(f"Listing '{self.spec.id}' has no model")
        qs = model.objects.all()
        exposed_input = self.get_exposed_input()
        for key, handler in self.get_filter_handlers().items():
            if handler.is_exposed:
                value = exposed_input.get(key)
            else:
                value = handler.options.get("value")
            if value in (None, ""):
                continue
            try:
                if handler.options.get("negate"):
                    qs = qs.exclude(**{handler.lookup(): value})
                else:
                    qs = qs.filter(**{handler.lookup(): value})
            except (FieldError, ValidationError, ValueError):
                # Skip invalid filters instead of blowing up
                log.warning("Skipping invalid filter %s on listing %s", key, self.spec.id)
                continue
        if self.spec.ordering:
            qs = qs.order_by(*self.spec.ordering)
        return qs

    def _columns(self) -> List[str]:
        if self.spec.columns:
            return list(self.spec.columns)
        return [f.attname for f in self.spec.model._meta.concrete_fields]

    def execute(self) -> ListingResult:
        qs = self.get_queryset()
        total = qs.count()
        if self.items_per_page:
            qs = qs[: self.items_per_page]
        rows = list(qs.values(*self._columns()))
        return ListingResult(
            rows=rows,
            total=total,
            exposed_input=self.get_exposed_input(),
            items_per_page=self.items_per_page,
        )


__all__ = ["FilterHandler", "Listing", "ListingResult"]
