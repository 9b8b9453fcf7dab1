"""Page layout model holding placed block instances."""

from django.conf import settings
from django.db import models


class Layout(models.Model):
    """A page composed of listing block instances."""

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="layouts",
    )
    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=("owner", "slug"),
                name="unique_layout_owner_slug",
            ),
        ]
        ordering = ("owner", "name")

    def __str__(self) -> str:
        return f"{self.name} ({self.owner})"
