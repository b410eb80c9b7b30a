"""Core Django app configuration."""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Core app configuration."""

    name = "core"

    def ready(self):
        """Prepare page storage and templates on startup."""
        import sys

        # Tests point storage at temporary directories themselves
        if "pytest" in sys.modules:
            return

        from wiki.services.page_storage import get_storage_service
        from wiki.services.renderer import get_renderer

        get_storage_service()
        get_renderer()
