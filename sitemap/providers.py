"""
Read-only views of the catalog and geography used to build the sitemap.

The generator never touches the ORM directly: it asks a CatalogProvider and a
GeographyProvider for plain records and works on that snapshot. Tests and
other data sources can pass their own providers with the same methods.
"""
import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryRecord:
    id: int
    title: str
    description: str = ''
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class ServiceRecord:
    id: int
    title: str
    category_id: int
    price: object = None
    duration: str = ''
    active: bool = True
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class CityNode:
    id: int
    name: str
    slug: str = ''
    position: int = 0


@dataclass(frozen=True)
class StateNode:
    id: int
    name: str
    slug: str = ''
    position: int = 0
    cities: Tuple[CityNode, ...] = ()


@dataclass(frozen=True)
class CountryNode:
    id: int
    name: str
    slug: str = ''
    position: int = 0
    states: Tuple[StateNode, ...] = ()


@dataclass
class Snapshot:
    categories: List[CategoryRecord] = field(default_factory=list)
    services: List[ServiceRecord] = field(default_factory=list)
    countries: List[CountryNode] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


class CatalogProvider:
    def list_active_categories(self):
        from catalog.models import Category
        return [
            CategoryRecord(id=c.id, title=c.title, description=c.description or '',
                           updated_at=c.modified_date)
            for c in Category.objects.filter(active=True)
        ]

    def list_active_services(self):
        from catalog.models import Service
        return [
            ServiceRecord(id=s.id, title=s.title, category_id=s.category_id, price=s.price,
                          duration=s.duration, active=s.active, updated_at=s.modified_date)
            for s in Service.objects.filter(active=True)
        ]


class GeographyProvider:
    def list_countries(self):
        from locations.models import Country
        countries = []
        for country in Country.objects.prefetch_related('states__cities'):
            states = []
            for state in country.states.all():
                cities = tuple(CityNode(id=c.id, name=c.name, slug=c.slug, position=c.position)
                               for c in state.cities.all())
                states.append(StateNode(id=state.id, name=state.name, slug=state.slug,
                                        position=state.position, cities=cities))
            countries.append(CountryNode(id=country.id, name=country.name, slug=country.slug,
                                         position=country.position, states=tuple(states)))
        return countries


def _fetch(label, fn, warnings):
    # A failing source contributes nothing; the rest of the sitemap still builds.
    try:
        return list(fn())
    except Exception as e:
        logger.warning("Could not fetch %s for sitemap: %s", label, e, exc_info=True)
        warnings.append(f'{label} unavailable: {e}')
        return []


def _by_position(nodes):
    return sorted(nodes, key=lambda n: (n.position, n.id))


def _sort_geography(countries):
    return [
        replace(country, states=tuple(
            replace(state, cities=tuple(_by_position(state.cities)))
            for state in _by_position(country.states)))
        for country in _by_position(countries)
    ]


def fetch_snapshot(catalog=None, geography=None):
    """Fetch every source independently and put each in its canonical order.

    Categories and services are ordered by id so an existing record keeps its
    slug when a later one collides with it. Geography is ordered by position
    then id at every level.
    """
    catalog = catalog or CatalogProvider()
    geography = geography or GeographyProvider()
    snapshot = Snapshot()
    snapshot.categories = sorted(
        _fetch('categories', catalog.list_active_categories, snapshot.warnings), key=lambda c: c.id)
    snapshot.services = sorted(
        [s for s in _fetch('services', catalog.list_active_services, snapshot.warnings) if s.active],
        key=lambda s: s.id)
    snapshot.countries = _sort_geography(_fetch('geography', geography.list_countries, snapshot.warnings))
    return snapshot
