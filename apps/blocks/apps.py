import logging

from django.apps import AppConfig

log = logging.getLogger(__name__)


class BlocksConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.blocks"
    verbose_name = "Listing blocks"

    def ready(self):
        from .register import load_configured_registrars, load_specs

        # Bundled specs first; configured registrars may extend them.
        try:
            load_specs()
        except ValueError:
            # Do not block app startup on an invalid bundled spec
            log.exception("Failed to register bundled listing specs")
        load_configured_registrars()
