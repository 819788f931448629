from decimal import Decimal

CHANGEFREQ_CHOICES = ['always', 'hourly', 'daily', 'weekly', 'monthly', 'yearly', 'never']

# Hand-ranked public pages, emitted first and in this order.
# (path, priority, changefreq)
STATIC_ROUTES = [
    ('/', Decimal('1.0'), 'daily'),
    ('/about', Decimal('0.8'), 'monthly'),
    ('/contact', Decimal('0.8'), 'monthly'),
    ('/services', Decimal('0.9'), 'weekly'),
    ('/membership', Decimal('0.7'), 'monthly'),
    ('/partner', Decimal('0.7'), 'monthly'),
    ('/faq', Decimal('0.6'), 'monthly'),
    ('/privacy', Decimal('0.3'), 'yearly'),
    ('/terms', Decimal('0.3'), 'yearly'),
    ('/returns', Decimal('0.5'), 'monthly'),
]

# Enumeration tiers after the static routes, shallow to deep.
# Priority never increases as the url gets more specific.
TIERS = {
    'category': {'priority': Decimal('0.8'), 'changefreq': 'weekly'},
    'service': {'priority': Decimal('0.7'), 'changefreq': 'weekly'},
    'country': {'priority': Decimal('0.6'), 'changefreq': 'weekly'},
    'state': {'priority': Decimal('0.5'), 'changefreq': 'monthly'},
    'city': {'priority': Decimal('0.4'), 'changefreq': 'monthly'},
    'city_category': {'priority': Decimal('0.4'), 'changefreq': 'monthly'},
    'city_service': {'priority': Decimal('0.3'), 'changefreq': 'monthly'},
}
TIER_ORDER = ['static', 'category', 'service', 'country', 'state', 'city', 'city_category', 'city_service']

# Upper bound from the sitemap protocol
PROTOCOL_MAX_URLS = 50000
SITEMAP_NAMESPACE = 'http://www.sitemaps.org/schemas/sitemap/0.9'
