from django.utils.html import escape

from utils.config import SITEMAP_NAMESPACE
from .exceptions import SitemapInvariantError
from .partition import needs_index

# Output depends only on the entries passed in; no clock reads here, so the
# same page always renders to the same bytes.

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


def render_page(page, capacity=None):
    if capacity is not None and len(page.entries) > capacity:
        raise SitemapInvariantError(
            f'Refusing to render sitemap page {page.ordinal}: {len(page.entries)} urls, capacity {capacity}')

    xml_content = XML_DECLARATION
    xml_content += f'<urlset xmlns="{SITEMAP_NAMESPACE}">\n'

    for entry in page.entries:
        xml_content += f'  <url>\n'
        xml_content += f'    <loc>{escape(entry.location)}</loc>\n'
        xml_content += f'    <changefreq>{escape(entry.changefreq)}</changefreq>\n'
        xml_content += f'    <priority>{entry.priority:.2f}</priority>\n'
        xml_content += f'    <lastmod>{entry.lastmod.isoformat()}</lastmod>\n'
        xml_content += f'  </url>\n'

    xml_content += '</urlset>\n'

    return xml_content


def render_index(index_entries):
    xml_content = XML_DECLARATION
    xml_content += f'<sitemapindex xmlns="{SITEMAP_NAMESPACE}">\n'

    for item in index_entries:
        xml_content += f'  <sitemap>\n'
        xml_content += f'    <loc>{escape(item.location)}</loc>\n'
        xml_content += f'    <lastmod>{item.lastmod.isoformat()}</lastmod>\n'
        xml_content += f'  </sitemap>\n'

    xml_content += '</sitemapindex>\n'

    return xml_content


def render_root(generation):
    """The document served at /sitemap.xml: the index, or the only page when one is enough."""
    if needs_index(generation.pages):
        return render_index(generation.index)
    if generation.pages:
        return render_page(generation.pages[0], generation.capacity)
    return XML_DECLARATION + f'<urlset xmlns="{SITEMAP_NAMESPACE}">\n</urlset>\n'
