# locations/management/commands/load_locations.py
# python manage.py load_locations locations/fixtures/us_locations.json [--replace]
#
# File layout: {"countries": [{"name", "slug", "states": [{"name", "abbreviation", "slug",
#               "cities": [{"name", "slug"}]}]}]}
# slug is optional at every level.

import json
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from locations.models import Country, State, City


class Command(BaseCommand):
    help = 'Load countries, states and cities from a json file'

    def add_arguments(self, parser):
        parser.add_argument('path', type=str, help='Path to the locations json file')
        parser.add_argument('--replace', action='store_true',
                            help='Delete all existing locations before loading')

    def handle(self, *args, **options):
        try:
            with open(options['path'], encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise CommandError(f"Cannot read {options['path']}: {e}")

        countries = data.get('countries')
        if not isinstance(countries, list):
            raise CommandError('Expected a top level "countries" list')

        with transaction.atomic():
            if options['replace']:
                Country.objects.all().delete()
            num_states = num_cities = 0
            for i, item in enumerate(countries):
                country, created = Country.objects.update_or_create(
                    name=item['name'],
                    defaults={'slug': item.get('slug', ''), 'position': i},
                )
                for j, st in enumerate(item.get('states', [])):
                    state, created = State.objects.update_or_create(
                        country=country, name=st['name'],
                        defaults={
                            'abbreviation': st.get('abbreviation', ''),
                            'slug': st.get('slug', ''),
                            'position': j,
                        },
                    )
                    num_states += 1
                    for k, ct in enumerate(st.get('cities', [])):
                        City.objects.update_or_create(
                            state=state, name=ct['name'],
                            defaults={'slug': ct.get('slug', ''), 'position': k},
                        )
                        num_cities += 1

        self.stdout.write(self.style.SUCCESS(
            f'Loaded {len(countries)} countries, {num_states} states, {num_cities} cities'))
