"""Views configuring and rendering listing blocks placed on a layout."""

from __future__ import annotations

import logging
from typing import Any, Dict

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.contrib.auth.mixins import LoginRequiredMixin
from django.core.exceptions import PermissionDenied
from django.http import HttpResponse, JsonResponse
from django.shortcuts import get_object_or_404
from django.urls import reverse
from django.views import generic
from django.views.decorators.http import require_GET

from apps.blocks.forms.block_config import BlockConfigurationForm
from apps.blocks.models.layout_block import LayoutBlock
from apps.blocks.services.block_instances import ListingBlockInstance

log = logging.getLogger(__name__)
error_logger = logging.getLogger(name="app_errors")


def get_layout_block(user, username: str, slug: str, block_slug: str) -> LayoutBlock:
    layout_block = get_object_or_404(
        LayoutBlock.objects.select_related("layout", "layout__owner", "block"),
        layout__owner__username=username,
        layout__slug=slug,
        slug=block_slug,
    )
    if not (user.is_staff or layout_block.layout.owner_id == user.id):
        raise PermissionDenied("You do not have permission to access this block.")
    return layout_block


class BlockConfigureView(LoginRequiredMixin, generic.FormView):
    """Edit the per-instance configuration of a placed listing block."""

    template_name = "blocks/layouts/block_configure.html"

    def dispatch(self, request, *args: Any, **kwargs: Any) -> HttpResponse:
        if not request.user.is_authenticated:
            return self.handle_no_permission()
        self.layout_block = get_layout_block(
            request.user,
            kwargs["username"],
            kwargs["slug"],
            kwargs["block_slug"],
        )
        self.instance = ListingBlockInstance(self.layout_block, request=request)
        return super().dispatch(request, *args, **kwargs)

    def get_form(self, form_class=None) -> BlockConfigurationForm:
        data = self.request.POST if self.request.method == "POST" else None
        return self.instance.configuration_form(data)

    def get_context_data(self, **kwargs: Any) -> Dict[str, Any]:
        context = super().get_context_data(**kwargs)
        categories: Dict[str, Any] = {}
        options: Dict[str, Any] = {}
        self.instance.display.options_summary(categories, options)
        context.update({
            "layout_block": self.layout_block,
            "layout": self.layout_block.layout,
            "display_summary": [
                entry for entry in options.values() if entry.get("category") == "block"
            ],
        })
        return context

    def form_valid(self, form: BlockConfigurationForm) -> HttpResponse:
        self.instance.submit(form)
        messages.success(self.request, "Block configuration saved.")
        return super().form_valid(form)

    def get_success_url(self) -> str:
        layout = self.layout_block.layout
        return reverse(
            "blocks:layout_block_configure",
            kwargs={
                "username": layout.owner.username,
                "slug": layout.slug,
                "block_slug": self.layout_block.slug,
            },
        )


@login_required
@require_GET
def render_layout_block(request, username: str, slug: str, block_slug: str) -> JsonResponse:
    """Return the rendered listing block (rows + exposed filter state) as JSON."""

    layout_block = get_layout_block(request.user, username, slug, block_slug)
    try:
        instance = ListingBlockInstance(layout_block, request=request)
        payload = instance.build()
    except ValueError as exc:
        error_logger.exception("Failed to render block %s", layout_block.block.code)
        return JsonResponse({"error": str(exc)}, status=400)
    return JsonResponse(payload)
