from django.urls import path

from apps.blocks.views import layout_blocks as layout_block_views

app_name = "blocks"

urlpatterns = [
    path(
        "layouts/<str:username>/<slug:slug>/blocks/<slug:block_slug>/configure/",
        layout_block_views.BlockConfigureView.as_view(),
        name="layout_block_configure",
    ),
    path(
        "layouts/<str:username>/<slug:slug>/blocks/<slug:block_slug>/render/",
        layout_block_views.render_layout_block,
        name="layout_block_render",
    ),
]
