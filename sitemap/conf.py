from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from utils.config import PROTOCOL_MAX_URLS


def site_url():
    return settings.SITE_URL.rstrip('/')


def capacity():
    value = int(getattr(settings, 'SITEMAP_CAPACITY', 10000))
    if not 1 <= value <= PROTOCOL_MAX_URLS:
        raise ImproperlyConfigured(
            f'SITEMAP_CAPACITY must be between 1 and {PROTOCOL_MAX_URLS}, got {value}')
    return value


def debounce_seconds():
    return float(getattr(settings, 'SITEMAP_DEBOUNCE_SECONDS', 30))


def listen_for_changes():
    return bool(getattr(settings, 'SITEMAP_LISTEN_FOR_CHANGES', True))
