import logging
from django.contrib.admin.views.decorators import staff_member_required
from django.http import Http404, HttpResponse, JsonResponse
from django.views.decorators.http import require_GET
from .models import SitemapGeneration
from .regeneration import get_regenerator

logger = logging.getLogger(__name__)


@require_GET
def sitemap_index(request):
    xml_content = get_regenerator().current().root_document()
    return HttpResponse(xml_content, content_type='application/xml')


@require_GET
def sitemap_section(request, section):
    xml_content = get_regenerator().current().page_document(section)
    if xml_content is None:
        raise Http404(f'No sitemap section {section}')
    return HttpResponse(xml_content, content_type='application/xml')


@staff_member_required
@require_GET
def sitemap_download(request):
    # Operator "generate and download": always a fresh run.
    generation = get_regenerator().generate_now(trigger='manual')
    page = request.GET.get('page')
    if page:
        try:
            xml_content = generation.page_document(int(page))
        except ValueError:
            xml_content = None
        if xml_content is None:
            raise Http404(f'No sitemap section {page}')
        filename = f'sitemap-{int(page)}.xml'
    else:
        xml_content = generation.root_document()
        filename = 'sitemap.xml'

    response = HttpResponse(xml_content, content_type='application/xml')
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    response['X-Sitemap-Url-Count'] = str(generation.url_count)
    response['X-Sitemap-Page-Count'] = str(generation.page_count)
    if generation.warnings:
        logger.warning("Sitemap downloaded with %d warnings", len(generation.warnings),
                       extra={'trigger': 'manual'})
        response['X-Sitemap-Warnings'] = ' | '.join(generation.warnings).replace('\n', ' ').replace('\r', ' ')
    return response


@staff_member_required
@require_GET
def sitemap_status(request):
    regenerator = get_regenerator()
    latest = SitemapGeneration.objects.first()
    status = {
        'url_count': None,
        'page_count': None,
        'generated_at': None,
        'trigger': None,
        'warnings': [],
        'stale': regenerator.is_stale,
        'rebuild_pending': regenerator.rebuild_pending,
    }
    if latest is not None:
        status.update({
            'url_count': latest.url_count,
            'page_count': latest.page_count,
            'generated_at': latest.generated_at.isoformat(),
            'trigger': latest.trigger,
            'warnings': latest.warning_list(),
        })
    return JsonResponse(status)
