"""
Keeps the generated sitemap in step with the catalog.

SitemapRegenerator holds the latest Generation for the process. Catalog
changes mark it stale and schedule one debounced rebuild on a timer thread;
operators rebuild synchronously with generate_now(). Every rebuild runs the
whole pipeline from a fresh snapshot.

CatalogSubscription wires Category/Service save and delete signals to the
regenerator. SitemapConfig.ready() starts one for the process.
"""
import logging
import threading
from dataclasses import dataclass

from django.db import DatabaseError, close_old_connections, transaction
from django.db.models.signals import post_delete, post_save

from . import conf
from .generation import build_generation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogChange:
    model: str
    pk: object
    action: str


class SitemapRegenerator:
    def __init__(self, build=build_generation, debounce=None, timer_factory=threading.Timer, record=True):
        self._build = build
        self._debounce = debounce
        self._timer_factory = timer_factory
        self._record_runs = record
        self._lock = threading.Lock()
        self._run_lock = threading.Lock()
        self._generation = None
        self._version = 0
        self._built_version = -1
        self._completed_runs = 0
        self._timer = None

    @property
    def debounce(self):
        return conf.debounce_seconds() if self._debounce is None else self._debounce

    @property
    def is_stale(self):
        with self._lock:
            return self._generation is None or self._built_version != self._version

    @property
    def rebuild_pending(self):
        with self._lock:
            return self._timer is not None

    @property
    def latest(self):
        """The last finished generation, stale or not. None before the first run."""
        with self._lock:
            return self._generation

    def current(self):
        """The latest generation, building one if nothing has been built yet.

        A stale generation keeps being served until the scheduled rebuild
        replaces it, so page numbers stay consistent in between.
        """
        with self._lock:
            generation = self._generation
        if generation is None:
            generation = self.generate_now(trigger='request')
        return generation

    def invalidate(self):
        with self._lock:
            self._version += 1
            self._generation = None

    def on_catalog_change(self, event=None):
        """Mark the sitemap stale and schedule a rebuild.

        Events arriving while a rebuild is pending join it. Repeated delivery
        of the same event is harmless.
        """
        with self._lock:
            self._version += 1
            if self._timer is not None:
                logger.debug("Catalog change %s joins pending sitemap rebuild", event)
                return
            timer = self._timer_factory(self.debounce, self._rebuild_after_change)
            timer.daemon = True
            self._timer = timer
        logger.info("Catalog change %s, sitemap rebuild in %ss", event, self.debounce,
                    extra={'trigger': 'change'})
        timer.start()

    def _rebuild_after_change(self):
        with self._lock:
            self._timer = None
        try:
            self.generate_now(trigger='change')
        except Exception:
            # Runs on the timer thread: nobody else will see this error.
            logger.exception("Sitemap rebuild after catalog change failed", extra={'trigger': 'change'})
        finally:
            close_old_connections()

    def generate_now(self, trigger='manual', cancel=None):
        """Rebuild synchronously and return the new Generation.

        Callers that queue up behind a running rebuild get its result when no
        catalog change happened in the meantime. Raises GenerationCancelled
        when cancel is set mid-run; the previous generation stays in place.
        """
        with self._lock:
            ticket = self._completed_runs
        with self._run_lock:
            with self._lock:
                if (self._completed_runs > ticket and self._generation is not None
                        and self._built_version == self._version):
                    return self._generation
                version = self._version
            generation = self._build(trigger=trigger, cancel=cancel)
            with self._lock:
                self._generation = generation
                self._built_version = version
                self._completed_runs += 1
        self._record(generation)
        return generation

    def cancel_pending(self):
        with self._lock:
            timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()

    def _record(self, generation):
        if not self._record_runs:
            return
        from .models import SitemapGeneration
        try:
            SitemapGeneration.objects.create(
                generated_at=generation.generated_at,
                trigger=generation.trigger,
                url_count=generation.url_count,
                page_count=generation.page_count,
                capacity=generation.capacity,
                warnings='\n'.join(generation.warnings),
            )
        except DatabaseError:
            logger.exception("Could not record sitemap generation", extra={'trigger': generation.trigger})


class CatalogSubscription:
    """Connects catalog model signals to a regenerator between start() and stop()."""

    def __init__(self, regenerator):
        self.regenerator = regenerator
        self.active = False

    def _uid(self, signal_name, model):
        return f'sitemap-{signal_name}-{model.__name__}-{id(self)}'

    def _connections(self):
        from catalog.models import Category, Service
        for model in (Category, Service):
            yield post_save, 'post_save', model
            yield post_delete, 'post_delete', model

    def start(self):
        if self.active:
            return
        for signal, name, model in self._connections():
            signal.connect(self._handle, sender=model, weak=False, dispatch_uid=self._uid(name, model))
        self.active = True
        logger.info("Listening for catalog changes")

    def stop(self):
        if not self.active:
            return
        for signal, name, model in self._connections():
            signal.disconnect(sender=model, dispatch_uid=self._uid(name, model))
        self.regenerator.cancel_pending()
        self.active = False

    def _handle(self, sender, instance, **kwargs):
        if kwargs.get('signal') is post_delete:
            action = 'deleted'
        elif kwargs.get('created'):
            action = 'created'
        else:
            action = 'updated'
        event = CatalogChange(model=sender._meta.model_name, pk=instance.pk, action=action)
        # Rebuild from committed data only
        transaction.on_commit(lambda: self.regenerator.on_catalog_change(event))


_regenerator = None
_regenerator_lock = threading.Lock()


def get_regenerator():
    global _regenerator
    with _regenerator_lock:
        if _regenerator is None:
            _regenerator = SitemapRegenerator()
        return _regenerator
