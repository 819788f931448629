import math

from .entries import SitemapIndexEntry, SitemapPage
from .exceptions import SitemapInvariantError


def page_count(num_entries, capacity):
    return math.ceil(num_entries / capacity)


def partition(entries, capacity):
    """Cut entries into consecutive pages of at most capacity, numbered from 1.

    Page numbers only hold for this entry list; any regeneration supersedes
    the whole set.
    """
    if capacity < 1:
        raise ValueError(f'Sitemap capacity must be at least 1, got {capacity}')
    pages = [
        SitemapPage(ordinal=i + 1, entries=list(entries[start:start + capacity]))
        for i, start in enumerate(range(0, len(entries), capacity))
    ]
    check_capacity(pages, capacity)
    return pages


def check_capacity(pages, capacity):
    for page in pages:
        if len(page.entries) > capacity:
            raise SitemapInvariantError(
                f'Sitemap page {page.ordinal} holds {len(page.entries)} urls, capacity is {capacity}')


def needs_index(pages):
    """A single page is served as the root document itself, without an index."""
    return len(pages) > 1


def build_index(pages, page_location, today):
    # page_location: ordinal -> absolute url of that page's document
    return [
        SitemapIndexEntry(ordinal=page.ordinal, location=page_location(page.ordinal),
                          lastmod=page.lastmod() or today)
        for page in pages
    ]
