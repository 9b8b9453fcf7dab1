from django.contrib import admin

from .displays import get_display
from .listing import Listing
from .models import Block, Item, Layout, LayoutBlock
from .register import load_specs
from .registry import get_registry


@admin.register(Block)
class BlockAdmin(admin.ModelAdmin):
    list_display = ("code", "name", "display", "allow_settings")
    search_fields = ("code", "name", "description")

    def _display_for(self, obj):
        load_specs()
        spec = get_registry().get(obj.code)
        if spec is None:
            return None
        plugin_class = get_display(spec.display).plugin_class
        return plugin_class(spec, Listing(spec), block=obj)

    @admin.display(description="Display")
    def display(self, obj):
        load_specs()
        spec = get_registry().get(obj.code)
        return get_display(spec.display).title if spec else "-"

    @admin.display(description="Allow settings")
    def allow_settings(self, obj):
        plugin = self._display_for(obj)
        if plugin is None:
            return "-"
        categories, options = {}, {}
        plugin.options_summary(categories, options)
        return options["allow"]["value"]


class LayoutBlockInline(admin.TabularInline):
    model = LayoutBlock
    extra = 0
    fields = ("block", "slug", "title", "order", "configuration")


@admin.register(Layout)
class LayoutAdmin(admin.ModelAdmin):
    list_display = ("name", "owner", "slug", "created_at")
    search_fields = ("name", "slug", "owner__username")
    inlines = (LayoutBlockInline,)


@admin.register(LayoutBlock)
class LayoutBlockAdmin(admin.ModelAdmin):
    list_display = ("layout", "slug", "block", "order")
    search_fields = ("slug", "layout__name", "block__name", "block__code")
    list_filter = ("layout",)
    autocomplete_fields = ("layout", "block")


@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    list_display = ("code", "description", "status")
    search_fields = ("code", "description")
    list_filter = ("status",)
