# sitemap/management/commands/update_sitemap.py
# Rebuild the sitemap from the current catalog and optionally write the xml files.
#   python manage.py update_sitemap
#   python manage.py update_sitemap --output public/
# Nightly cron:
#   0 3 * * * cd /srv/onassist && python manage.py update_sitemap --output public/

import os
import re
import shutil
import tempfile
from django.core.management.base import BaseCommand, CommandError
from sitemap.exceptions import SitemapInvariantError
from sitemap.generation import build_generation
from sitemap.regeneration import get_regenerator
from utils.config import PROTOCOL_MAX_URLS

CHUNK_FILE = re.compile(r'^sitemap-\d+\.xml$')


class Command(BaseCommand):
    help = 'Regenerate the sitemap and optionally write sitemap.xml and sitemap-<n>.xml files'

    def add_arguments(self, parser):
        parser.add_argument('--output', type=str, default=None,
                            help='Directory to write sitemap.xml (and sitemap-<n>.xml when an index is needed)')
        parser.add_argument('--capacity', type=int, default=None,
                            help='Urls per sitemap file, overrides SITEMAP_CAPACITY for this run')

    def handle(self, *args, **options):
        capacity = options['capacity']
        if capacity is not None and not 1 <= capacity <= PROTOCOL_MAX_URLS:
            raise CommandError(f'--capacity must be between 1 and {PROTOCOL_MAX_URLS}')

        try:
            if capacity is None:
                generation = get_regenerator().generate_now(trigger='cron')
            else:
                # A one-off capacity must not replace what the site is serving
                generation = build_generation(capacity=capacity, trigger='cron')
        except SitemapInvariantError as e:
            raise CommandError(f'Sitemap generation failed: {e}')

        for warning in generation.warnings:
            self.stdout.write(self.style.WARNING(f'Warning: {warning}'))

        output = options['output']
        if output:
            self._export(output, generation)

        self.stdout.write(self.style.SUCCESS(
            f'Successfully generated {generation.url_count} sitemap urls in {generation.page_count} pages'))

    def _export(self, output, generation):
        """Replace the sitemap files in output with this generation's set.

        Files are written to a staging directory first, so a failed run
        leaves the previous set untouched. Chunk files from an earlier,
        larger run are removed.
        """
        documents = {'sitemap.xml': generation.root_document()}
        if generation.has_index:
            for page in generation.pages:
                documents[f'sitemap-{page.ordinal}.xml'] = generation.page_document(page.ordinal)

        os.makedirs(output, exist_ok=True)
        staging = tempfile.mkdtemp(prefix='.sitemap-', dir=output)
        try:
            for name, content in documents.items():
                with open(os.path.join(staging, name), 'w', encoding='utf-8') as f:
                    f.write(content)
            # chunks first so the new index never points at a missing file
            for name in sorted(documents, key=lambda n: n == 'sitemap.xml'):
                path = os.path.join(output, name)
                os.replace(os.path.join(staging, name), path)
                self.stdout.write(f'Wrote {path}')
        finally:
            shutil.rmtree(staging, ignore_errors=True)

        for name in os.listdir(output):
            if CHUNK_FILE.match(name) and name not in documents:
                os.remove(os.path.join(output, name))
                self.stdout.write(f'Removed {os.path.join(output, name)}')
