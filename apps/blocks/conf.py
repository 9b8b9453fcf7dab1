"""Runtime access to Blocks configuration defaults."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from django.conf import settings as django_settings

__all__ = ["settings", "BlocksSettings"]


@dataclass
class BlocksSettings:
    """Proxy object exposing Django settings with sensible fallbacks."""

    defaults: dict[str, Any]

    def __getattr__(self, attr: str) -> Any:
        if attr in self.defaults:
            return getattr(django_settings, attr, self.defaults[attr])
        return getattr(django_settings, attr)


settings = BlocksSettings(
    defaults={
        # Extra registrars run on app ready: "module:callable" or "module".
        "BLOCKS": [],
        "BLOCKS_DEFAULT_ITEMS_PER_PAGE": 10,
        "BLOCKS_ITEMS_PER_PAGE_CHOICES": [5, 10, 20, 40, 60],
        "BLOCKS_EXPOSED_INPUT_PREFIX": "filters.",
    }
)
