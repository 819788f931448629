from django.contrib import admin
from django.urls import path, include
from onassist.views import robots_txt

urlpatterns = [
    # admin & sitemaps
    path('admin/', admin.site.urls),
    path('robots.txt', robots_txt, name='robots_txt'),
    path('', include('sitemap.urls')),
]
