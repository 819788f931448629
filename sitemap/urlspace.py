"""
Enumerates every public url of the site, in a fixed order.

Order matters: pages are cut from this sequence by position, so the same
snapshot must always produce the same sequence.

    static routes
    /services/<category>
    /service/<service>
    /<country>
    /<country>/<state>
    /<country>/<state>/<city>
    /<country>/<state>/<city>/services/<category>   } per city, categories
    /<country>/<state>/<city>/service/<service>     } first, then services
"""
import logging
from datetime import date, datetime

from utils.config import STATIC_ROUTES, TIERS
from .entries import SitemapEntry
from .exceptions import GenerationCancelled, SitemapInvariantError
from .slugs import unique_slugs

logger = logging.getLogger(__name__)


def _day(value, default):
    if value is None:
        return default
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return default


def _entry(tier, location, lastmod):
    conf = TIERS[tier]
    return SitemapEntry(location=location, changefreq=conf['changefreq'],
                        priority=conf['priority'], lastmod=lastmod, tier=tier)


def _check(cancel):
    if cancel is not None and cancel.is_set():
        raise GenerationCancelled('Sitemap generation cancelled')


def _slugged(records, kind, warnings, label):
    slugs, problems = unique_slugs([(r.id, label(r)) for r in records],
                                   fallback=lambda key: f'{kind}-{key}')
    for p in problems:
        logger.warning("%s slug: %s", kind, p)
        warnings.append(f'{kind}: {p}')
    return [(r, slugs[r.id]) for r in records]


def _title(record):
    return record.title


def _place(node):
    # stored slugs win over names
    return node.slug or node.name


def static_entries(base_url, today):
    return [
        SitemapEntry(location=f'{base_url}{path}', changefreq=changefreq,
                     priority=priority, lastmod=today, tier='static')
        for path, priority, changefreq in STATIC_ROUTES
    ]


def enumerate_entries(snapshot, base_url, today, cancel=None, warnings=None):
    """Build the ordered url list for a snapshot.

    today stands in for lastmod wherever a record has no update time, and
    for the static and location tiers. Slug problems are logged and added to
    warnings. Raises GenerationCancelled once cancel is set.
    """
    if warnings is None:
        warnings = []
    base_url = base_url.rstrip('/')
    entries = static_entries(base_url, today)

    categories = _slugged(snapshot.categories, 'category', warnings, _title)
    services = _slugged(snapshot.services, 'service', warnings, _title)

    for category, slug in categories:
        entries.append(_entry('category', f'{base_url}/services/{slug}', _day(category.updated_at, today)))
    for service, slug in services:
        entries.append(_entry('service', f'{base_url}/service/{slug}', _day(service.updated_at, today)))

    # Resolve the geography once; the three location tiers and the cross
    # product all walk the same tree.
    tree = []
    for country, country_slug in _slugged(snapshot.countries, 'country', warnings, _place):
        states = []
        for state, state_slug in _slugged(country.states, 'state', warnings, _place):
            cities = [city_slug for city, city_slug in _slugged(state.cities, 'city', warnings, _place)]
            states.append((state_slug, cities))
        tree.append((country_slug, states))
    _check(cancel)

    for country_slug, states in tree:
        entries.append(_entry('country', f'{base_url}/{country_slug}', today))
    for country_slug, states in tree:
        for state_slug, cities in states:
            entries.append(_entry('state', f'{base_url}/{country_slug}/{state_slug}', today))
    for country_slug, states in tree:
        for state_slug, cities in states:
            for city_slug in cities:
                entries.append(_entry('city', f'{base_url}/{country_slug}/{state_slug}/{city_slug}', today))

    for country_slug, states in tree:
        for state_slug, cities in states:
            for city_slug in cities:
                _check(cancel)
                city_url = f'{base_url}/{country_slug}/{state_slug}/{city_slug}'
                for category, slug in categories:
                    entries.append(_entry('city_category', f'{city_url}/services/{slug}',
                                          _day(category.updated_at, today)))
                for service, slug in services:
                    entries.append(_entry('city_service', f'{city_url}/service/{slug}',
                                          _day(service.updated_at, today)))
    return entries


def drop_duplicate_locations(entries, warnings=None):
    """Keep the first entry for each location, dropping and reporting the rest.

    Happens when a location slug matches a static route, e.g. a country
    named 'About'.
    """
    seen = set()
    kept = []
    for entry in entries:
        if entry.location in seen:
            logger.warning("Dropping duplicate sitemap location %s (%s)", entry.location, entry.tier)
            if warnings is not None:
                warnings.append(f'duplicate location dropped: {entry.location}')
            continue
        seen.add(entry.location)
        kept.append(entry)
    return kept


def assert_unique_locations(entries):
    seen = set()
    for entry in entries:
        if entry.location in seen:
            raise SitemapInvariantError(f'Duplicate sitemap location {entry.location}')
        seen.add(entry.location)
