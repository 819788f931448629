from django.test import SimpleTestCase

from sitemap.slugs import normalize, unique_slugs


class NormalizeTest(SimpleTestCase):
    def test_basic(self):
        self.assertEqual(normalize('Virus Removal'), 'virus-removal')
        self.assertEqual(normalize('  PC   Tune-Up  '), 'pc-tune-up')

    def test_strips_symbols(self):
        self.assertEqual(normalize('A & B'), 'a-b')
        self.assertEqual(normalize('A B'), 'a-b')
        self.assertEqual(normalize('<Printer> "Setup"'), 'printer-setup')

    def test_collapses_and_trims_hyphens(self):
        self.assertEqual(normalize('--Smart -- Home--'), 'smart-home')
        self.assertEqual(normalize('Wi-Fi Setup'), 'wi-fi-setup')
        self.assertEqual(normalize('WiFi Setup'), 'wifi-setup')

    def test_tabs_and_newlines(self):
        self.assertEqual(normalize('TV\tMounting\nService'), 'tv-mounting-service')

    def test_non_ascii_dropped(self):
        self.assertEqual(normalize('Café Wi‑Fi'), 'caf-wifi')

    def test_empty(self):
        self.assertEqual(normalize(''), '')
        self.assertEqual(normalize('   '), '')
        self.assertEqual(normalize('&&&'), '')
        self.assertEqual(normalize(None), '')

    def test_idempotent(self):
        samples = ['Virus Removal', ' A & B ', '--x--', 'Wi-Fi Setup', '', 'Ünïcode Tëst', '1 2  3', 'a_b.c']
        for s in samples:
            once = normalize(s)
            self.assertEqual(normalize(once), once, s)


class UniqueSlugsTest(SimpleTestCase):
    def fallback(self, key):
        return f'service-{key}'

    def test_no_collisions(self):
        slugs, warnings = unique_slugs([(1, 'Router Setup'), (2, 'Virus Removal')], self.fallback)
        self.assertEqual(slugs, {1: 'router-setup', 2: 'virus-removal'})
        self.assertEqual(warnings, [])

    def test_collision_gets_suffix(self):
        slugs, warnings = unique_slugs([(1, 'Wi-Fi Setup'), (2, 'WiFi Setup'), (3, 'wifi setup')],
                                       self.fallback)
        self.assertEqual(slugs[1], 'wi-fi-setup')
        self.assertEqual(slugs[2], 'wifi-setup')
        self.assertEqual(slugs[3], 'wifi-setup-2')
        self.assertEqual(len(warnings), 1)
        self.assertIn("'wifi setup' collides on 'wifi-setup'", warnings[0])

    def test_first_holder_keeps_bare_slug(self):
        slugs, warnings = unique_slugs([(7, 'A B'), (3, 'A & B')], self.fallback)
        self.assertEqual(slugs, {7: 'a-b', 3: 'a-b-2'})

    def test_literal_suffix_is_not_stolen(self):
        slugs, warnings = unique_slugs([(1, 'Setup'), (2, 'Setup'), (3, 'Setup 2')], self.fallback)
        self.assertEqual(slugs, {1: 'setup', 2: 'setup-3', 3: 'setup-2'})

    def test_empty_slug_uses_fallback(self):
        slugs, warnings = unique_slugs([(9, '!!!')], self.fallback)
        self.assertEqual(slugs, {9: 'service-9'})
        self.assertEqual(len(warnings), 1)

    def test_result_slugs_are_unique(self):
        titles = ['x', 'X', 'x!', 'x 2', 'x-2', '', '?', 'x']
        slugs, warnings = unique_slugs(list(enumerate(titles)), self.fallback)
        self.assertEqual(len(set(slugs.values())), len(titles))
