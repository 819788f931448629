import logging
from dataclasses import dataclass, field
from datetime import datetime
from functools import partial
from typing import List

from django.urls import reverse
from django.utils import timezone

from . import conf
from .custom_sitemaps import render_index, render_page, render_root
from .entries import SitemapEntry, SitemapIndexEntry, SitemapPage
from .exceptions import GenerationCancelled
from .partition import build_index, needs_index, partition
from .providers import fetch_snapshot
from .urlspace import assert_unique_locations, drop_duplicate_locations, enumerate_entries

logger = logging.getLogger(__name__)


@dataclass
class Generation:
    """One complete run of the pipeline. Replaced wholesale, never patched."""
    entries: List[SitemapEntry]
    pages: List[SitemapPage]
    index: List[SitemapIndexEntry]
    capacity: int
    generated_at: datetime
    trigger: str = 'manual'
    warnings: List[str] = field(default_factory=list)

    @property
    def url_count(self):
        return len(self.entries)

    @property
    def page_count(self):
        return len(self.pages)

    @property
    def has_index(self):
        return needs_index(self.pages)

    def page(self, ordinal):
        if 1 <= ordinal <= len(self.pages):
            return self.pages[ordinal - 1]
        return None

    def root_document(self):
        return render_root(self)

    def page_document(self, ordinal):
        page = self.page(ordinal)
        if page is None:
            return None
        return render_page(page, self.capacity)

    def index_document(self):
        return render_index(self.index)


def page_location(ordinal, base_url=None):
    if base_url is None:
        base_url = conf.site_url()
    return base_url.rstrip('/') + reverse('sitemap_section', args=[ordinal])


def build_generation(catalog=None, geography=None, base_url=None, capacity=None,
                     today=None, cancel=None, trigger='manual', locate_page=None):
    """Snapshot -> entries -> pages -> index.

    Data source failures end up in warnings. Raises GenerationCancelled if
    cancel is set before the run finishes, SitemapInvariantError if the
    result breaks uniqueness or capacity.
    """
    generated_at = timezone.now()
    if today is None:
        today = generated_at.date()
    if base_url is None:
        base_url = conf.site_url()
    if capacity is None:
        capacity = conf.capacity()
    extra = {'trigger': trigger}

    snapshot = fetch_snapshot(catalog, geography)
    warnings = list(snapshot.warnings)
    entries = enumerate_entries(snapshot, base_url, today, cancel=cancel, warnings=warnings)
    if cancel is not None and cancel.is_set():
        raise GenerationCancelled('Sitemap generation cancelled')

    entries = drop_duplicate_locations(entries, warnings)
    assert_unique_locations(entries)
    pages = partition(entries, capacity)
    index = build_index(pages, locate_page or partial(page_location, base_url=base_url), today)

    logger.info("Generated %d sitemap urls in %d pages (%d warnings)",
                len(entries), len(pages), len(warnings), extra=extra)
    return Generation(entries=entries, pages=pages, index=index, capacity=capacity,
                      generated_at=generated_at, trigger=trigger, warnings=warnings)
