# sitemap/models.py
from django.db import models

# Urls themselves are never stored; they are rebuilt from the catalog on
# every run. This keeps one summary row per run for the status view.


class SitemapGeneration(models.Model):
    generated_at = models.DateTimeField()
    trigger = models.CharField(max_length=20, choices=[
        ('manual', 'Manual'),
        ('change', 'Catalog change'),
        ('cron', 'Scheduled'),
        ('request', 'First request'),
    ])
    url_count = models.IntegerField(default=0)
    page_count = models.IntegerField(default=0)
    capacity = models.IntegerField(default=0)
    warnings = models.TextField(blank=True, default='')

    def __str__(self):
        return '%s (%s urls)' % (self.generated_at, self.url_count)

    def warning_list(self):
        return [w for w in self.warnings.split('\n') if w]

    class Meta:
        ordering = ['-generated_at', '-id']
        get_latest_by = 'generated_at'
