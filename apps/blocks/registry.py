from __future__ import annotations

from typing import Dict, Sequence
import logging

from .displays import get_display
from .forms.block_config import PATH_SEPARATOR
from .specs import BlockSpec

log = logging.getLogger(__name__)


_REGISTRY: Dict[str, BlockSpec] = {}


ALLOWED_FILTER_TYPES = {"text", "select", "fixed"}


def _validate_spec(spec: BlockSpec) -> None:
    if not spec.id:
        raise ValueError("BlockSpec.id is required")
    # Display plugin must be registered
    get_display(spec.display)
    if spec.model is None:
        raise ValueError(f"Listing spec {spec.id} must declare a model")
    # Filter schema sanity
    seen: set[str] = set()
    entries: Sequence[dict] = list(spec.filter_schema or ())
    for entry in entries:
        key = entry.get("key") if isinstance(entry, dict) else None
        if not key:
            raise ValueError(f"Filter without key in {spec.id}")
        if PATH_SEPARATOR in key:
            raise ValueError(f"Filter key '{key}' in {spec.id} cannot contain '{PATH_SEPARATOR}'")
        if key in seen:
            raise ValueError(f"Duplicate filter key '{key}' in {spec.id}")
        seen.add(key)
        typ = entry.get("type", "text")
        if typ not in ALLOWED_FILTER_TYPES:
            raise ValueError(f"Unsupported filter type '{typ}' for {key} in {spec.id}")
        if entry.get("exposed") and "value" in entry:
            raise ValueError(f"Exposed filter '{key}' in {spec.id} cannot declare a fixed value")


def register(spec: BlockSpec) -> None:
    if spec.id in _REGISTRY:
        raise ValueError(f"Duplicate BlockSpec id: {spec.id}")
    _validate_spec(spec)
    _REGISTRY[spec.id] = spec
    log.debug("Registered listing spec %s (display=%s)", spec.id, spec.display)


def unregister(spec_id: str) -> None:
    _REGISTRY.pop(spec_id, None)


def get_registry() -> Dict[str, BlockSpec]:
    return dict(_REGISTRY)


def get_spec(spec_id: str) -> BlockSpec:
    try:
        return _REGISTRY[spec_id]
    except KeyError:
        raise ValueError(f"No listing spec registered for '{spec_id}'") from None
