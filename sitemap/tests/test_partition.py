import math
from datetime import date, timedelta
from decimal import Decimal

from django.test import SimpleTestCase

from sitemap.entries import SitemapEntry, SitemapPage
from sitemap.exceptions import SitemapInvariantError
from sitemap.partition import build_index, check_capacity, needs_index, partition

from .fakes import TODAY


def make_entries(n):
    return [
        SitemapEntry(location=f'https://example.com/p/{i}', changefreq='weekly',
                     priority=Decimal('0.5'), lastmod=date(2025, 1, 1) + timedelta(days=i))
        for i in range(n)
    ]


def locate(ordinal):
    return f'https://example.com/sitemap-{ordinal}.xml'


class PartitionTest(SimpleTestCase):
    def test_scenario_a_sizes(self):
        pages = partition(make_entries(35), 10)
        self.assertEqual([len(p.entries) for p in pages], [10, 10, 10, 5])
        self.assertEqual([p.ordinal for p in pages], [1, 2, 3, 4])
        self.assertTrue(needs_index(pages))

    def test_page_count_and_reassembly(self):
        for n in (0, 1, 9, 10, 11, 35, 100):
            entries = make_entries(n)
            for capacity in (1, 2, 3, 10, 50, 1000):
                pages = partition(entries, capacity)
                self.assertEqual(len(pages), math.ceil(n / capacity))
                rebuilt = [e for page in pages for e in page.entries]
                self.assertEqual(rebuilt, entries)
                self.assertTrue(all(len(p.entries) <= capacity for p in pages))

    def test_single_page_needs_no_index(self):
        pages = partition(make_entries(10), 10)
        self.assertEqual(len(pages), 1)
        self.assertFalse(needs_index(pages))
        self.assertFalse(needs_index([]))

    def test_invalid_capacity(self):
        with self.assertRaises(ValueError):
            partition(make_entries(3), 0)

    def test_check_capacity(self):
        page = SitemapPage(ordinal=1, entries=make_entries(3))
        check_capacity([page], 3)
        with self.assertRaises(SitemapInvariantError):
            check_capacity([page], 2)


class BuildIndexTest(SimpleTestCase):
    def test_index(self):
        pages = partition(make_entries(25), 10)
        index = build_index(pages, locate, TODAY)
        self.assertEqual([i.ordinal for i in index], [1, 2, 3])
        self.assertEqual(index[1].location, 'https://example.com/sitemap-2.xml')
        # newest member of each page
        self.assertEqual(index[0].lastmod, date(2025, 1, 10))
        self.assertEqual(index[2].lastmod, date(2025, 1, 25))

    def test_empty_page_uses_today(self):
        index = build_index([SitemapPage(ordinal=1, entries=[])], locate, TODAY)
        self.assertEqual(index[0].lastmod, TODAY)
