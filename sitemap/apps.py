from django.apps import AppConfig


class SitemapConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'sitemap'
    subscription = None

    def ready(self):
        from . import conf
        from .regeneration import CatalogSubscription, get_regenerator
        if conf.listen_for_changes():
            self.subscription = CatalogSubscription(get_regenerator())
            self.subscription.start()
