from datetime import date, datetime, timezone

from sitemap.providers import CategoryRecord, CityNode, CountryNode, ServiceRecord, StateNode

TODAY = date(2026, 1, 15)
BASE_URL = 'https://example.com'
UPDATED = datetime(2025, 12, 1, 9, 30, tzinfo=timezone.utc)


class FakeCatalog:
    def __init__(self, categories=(), services=()):
        self.categories = list(categories)
        self.services = list(services)

    def list_active_categories(self):
        return list(self.categories)

    def list_active_services(self):
        return list(self.services)


class FailingCatalog:
    def list_active_categories(self):
        raise ConnectionError('catalog backend down')

    def list_active_services(self):
        raise ConnectionError('catalog backend down')


class FakeGeography:
    def __init__(self, countries=()):
        self.countries = list(countries)

    def list_countries(self):
        return list(self.countries)


class FailingGeography:
    def list_countries(self):
        raise TimeoutError('geography timed out')


def scenario_a_catalog():
    """2 categories holding 3 and 2 services."""
    categories = [
        CategoryRecord(id=1, title='Computer Repair', updated_at=UPDATED),
        CategoryRecord(id=2, title='Home Networking'),
    ]
    services = [
        ServiceRecord(id=1, title='Virus Removal', category_id=1, updated_at=UPDATED),
        ServiceRecord(id=2, title='Data Recovery', category_id=1),
        ServiceRecord(id=3, title='PC Tune-Up', category_id=1),
        ServiceRecord(id=4, title='Router Setup', category_id=2),
        ServiceRecord(id=5, title='Mesh Wi-Fi Install', category_id=2),
    ]
    return FakeCatalog(categories, services)


def scenario_a_geography():
    """1 country, 1 state, 2 cities."""
    state = StateNode(id=1, name='Alabama', slug='al', cities=(
        CityNode(id=1, name='Birmingham', slug='birmingham'),
        CityNode(id=2, name='Mobile'),
    ))
    return FakeGeography([CountryNode(id=1, name='United States', slug='us', states=(state,))])
