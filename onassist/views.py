from django.conf import settings
from django.http import HttpResponse
from django.urls import reverse
from django.views.decorators.http import require_GET


@require_GET
def robots_txt(request):
    # keep crawlers out of account and checkout flows
    lines = [
        "User-agent: *",
        "Disallow: /admin/",
        "Disallow: /auth/",
        "Disallow: /cart",
        "Disallow: /checkout",
        "Disallow: /profile",
        "Disallow: /my-orders",
        "Disallow: /sitemap/",
        "",
        "Sitemap: " + settings.SITE_URL + reverse('sitemap_index'),
    ]
    return HttpResponse("\n".join(lines), content_type="text/plain")
