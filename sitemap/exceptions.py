class SitemapError(Exception):
    pass


class SitemapInvariantError(SitemapError):
    """A generated url set broke one of its own guarantees.

    Raised for duplicate locations surviving the uniqueness pass and for pages
    over capacity. Never caught inside the sitemap app.
    """


class GenerationCancelled(SitemapError):
    pass
