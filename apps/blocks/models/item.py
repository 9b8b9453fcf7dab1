from django.db import models


class Item(models.Model):
    class Status(models.TextChoices):
        ACTIVE = "active", "Active"
        BLOCKED = "blocked", "Blocked"
        OBSOLETE = "obsolete", "Obsolete"

    code = models.CharField(max_length=100, unique=True)
    description = models.CharField(max_length=255, blank=True, default="")
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.ACTIVE)

    class Meta:
        ordering = ["code"]
        verbose_name = "Item"
        verbose_name_plural = "Items"

    def __str__(self) -> str:  # pragma: no cover - simple display helper
        return self.code
