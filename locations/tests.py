import json
import os
import tempfile
from io import StringIO
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase
from locations.models import Country, State, City

FIXTURE = os.path.join(os.path.dirname(__file__), 'fixtures', 'us_locations.json')


class LoadLocationsTest(TestCase):
    def test_load_bundled_fixture(self):
        out = StringIO()
        call_command('load_locations', FIXTURE, stdout=out)

        self.assertEqual(Country.objects.count(), 1)
        self.assertEqual(State.objects.count(), 6)
        self.assertEqual(City.objects.count(), 30)
        self.assertIn('Loaded 1 countries, 6 states, 30 cities', out.getvalue())
        states = list(State.objects.values_list('slug', flat=True))
        self.assertEqual(states, ['al', 'ak', 'az', 'ar', 'ca', 'co'])

    def test_load_twice_does_not_duplicate(self):
        call_command('load_locations', FIXTURE, stdout=StringIO())
        call_command('load_locations', FIXTURE, stdout=StringIO())

        self.assertEqual(City.objects.count(), 30)

    def test_missing_slug_is_left_blank(self):
        call_command('load_locations', FIXTURE, stdout=StringIO())

        self.assertEqual(City.objects.get(name='Lakewood').slug, '')

    def test_replace(self):
        Country.objects.create(name='Canada', slug='ca')
        call_command('load_locations', FIXTURE, '--replace', stdout=StringIO())

        self.assertFalse(Country.objects.filter(name='Canada').exists())

    def test_bad_file(self):
        with tempfile.NamedTemporaryFile('w', suffix='.json', delete=False) as f:
            json.dump({'states': []}, f)
        try:
            with self.assertRaises(CommandError):
                call_command('load_locations', f.name, stdout=StringIO())
        finally:
            os.unlink(f.name)
