from django.db import models


class Block(models.Model):
    code = models.CharField(max_length=255, unique=True)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    # Display options saved by an administrator; resolved against the
    # display plugin's option tree (see apps.blocks.options).
    options = models.JSONField(default=dict, blank=True)

    def __str__(self):
        # Prefer human-readable name; fall back to code if missing
        return self.name or self.code
