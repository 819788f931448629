import os
import shutil
import tempfile
from io import StringIO
from unittest import mock
from xml.etree import ElementTree

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from catalog.models import Category, Service
from locations.models import City, Country, State
from sitemap.models import SitemapGeneration
from sitemap.regeneration import SitemapRegenerator


class UpdateSitemapCommandTest(TestCase):
    def setUp(self):
        self.regenerator = SitemapRegenerator(debounce=0)
        patcher = mock.patch('sitemap.management.commands.update_sitemap.get_regenerator',
                             return_value=self.regenerator)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.output = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.output)

        repair = Category.objects.create(title='Computer Repair')
        Service.objects.create(category=repair, title='Virus Removal', price='49.00')
        us = Country.objects.create(name='United States', slug='us')
        al = State.objects.create(country=us, name='Alabama', slug='al')
        City.objects.create(state=al, name='Birmingham')

    def test_summary(self):
        out = StringIO()
        call_command('update_sitemap', stdout=out)
        # 10 static + category + service + country + state + city + 2 cross product
        self.assertIn('Successfully generated 17 sitemap urls in 1 pages', out.getvalue())
        self.assertEqual(SitemapGeneration.objects.get().trigger, 'cron')
        self.assertEqual(self.regenerator.latest.trigger, 'cron')

    def test_single_file_output(self):
        call_command('update_sitemap', '--output', self.output, stdout=StringIO())
        self.assertEqual(os.listdir(self.output), ['sitemap.xml'])
        root = ElementTree.parse(os.path.join(self.output, 'sitemap.xml')).getroot()
        self.assertEqual(root.tag, '{http://www.sitemaps.org/schemas/sitemap/0.9}urlset')

    def test_chunked_output(self):
        call_command('update_sitemap', '--output', self.output, '--capacity', '5', stdout=StringIO())
        self.assertEqual(sorted(os.listdir(self.output)),
                         ['sitemap-1.xml', 'sitemap-2.xml', 'sitemap-3.xml', 'sitemap-4.xml', 'sitemap.xml'])
        root = ElementTree.parse(os.path.join(self.output, 'sitemap.xml')).getroot()
        self.assertEqual(root.tag, '{http://www.sitemaps.org/schemas/sitemap/0.9}sitemapindex')
        last = ElementTree.parse(os.path.join(self.output, 'sitemap-4.xml')).getroot()
        self.assertEqual(len(last), 2)
        # a one-off capacity leaves the served sitemap alone
        self.assertIsNone(self.regenerator.latest)

    def test_shrinking_removes_old_chunks(self):
        with open(os.path.join(self.output, 'robots.txt'), 'w') as f:
            f.write('User-agent: *\n')
        call_command('update_sitemap', '--output', self.output, '--capacity', '5', stdout=StringIO())
        out = StringIO()
        call_command('update_sitemap', '--output', self.output, stdout=out)
        self.assertEqual(sorted(os.listdir(self.output)), ['robots.txt', 'sitemap.xml'])
        self.assertIn('Removed', out.getvalue())
        root = ElementTree.parse(os.path.join(self.output, 'sitemap.xml')).getroot()
        self.assertEqual(root.tag, '{http://www.sitemaps.org/schemas/sitemap/0.9}urlset')
        self.assertEqual(len(root), 17)

    def test_fewer_chunks_replace_more(self):
        call_command('update_sitemap', '--output', self.output, '--capacity', '5', stdout=StringIO())
        call_command('update_sitemap', '--output', self.output, '--capacity', '10', stdout=StringIO())
        self.assertEqual(sorted(os.listdir(self.output)), ['sitemap-1.xml', 'sitemap-2.xml', 'sitemap.xml'])

    def test_bad_capacity(self):
        with self.assertRaises(CommandError):
            call_command('update_sitemap', '--capacity', '0', stdout=StringIO())
        with self.assertRaises(CommandError):
            call_command('update_sitemap', '--capacity', '50001', stdout=StringIO())

    def test_warnings_printed(self):
        Service.objects.create(category=Category.objects.get(), title='VIRUS removal', price='1.00')
        out = StringIO()
        call_command('update_sitemap', stdout=out)
        self.assertIn("Warning: service: 'VIRUS removal' collides on 'virus-removal'", out.getvalue())
