from django.contrib import admin
from .models import SitemapGeneration


class SitemapGenerationAdmin(admin.ModelAdmin):
    list_display = ('generated_at', 'trigger', 'url_count', 'page_count', 'capacity',)
    list_filter = ('trigger',)
    readonly_fields = ('generated_at', 'trigger', 'url_count', 'page_count', 'capacity', 'warnings',)

    def has_add_permission(self, request):
        return False


admin.site.register(SitemapGeneration, SitemapGenerationAdmin)
