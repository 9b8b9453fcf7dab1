from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence


@dataclass(frozen=True)
class BlockSpec:
    id: str
    name: str
    # Django model class the listing queries
    model: Optional[type] = None
    # Each item: {key, type, field?, lookup?, label?, exposed, value?}
    filter_schema: Sequence[dict[str, Any]] = field(default_factory=tuple)
    # Display plugin id, see apps.blocks.displays
    display: str = "block"
    # Model field paths serialized into each row; empty means all concrete fields
    columns: Sequence[str] = field(default_factory=tuple)
    ordering: Sequence[str] = field(default_factory=tuple)
    category: Optional[str] = None
    description: str = ""
