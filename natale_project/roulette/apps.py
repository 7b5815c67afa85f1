from django.apps import AppConfig


class RouletteConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'roulette'
    verbose_name = "Roulette di Natale"

    def ready(self):
        from . import signals  # noqa: F401
