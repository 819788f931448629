from django.urls import path
from . import views

urlpatterns = [
    path('sitemap.xml', views.sitemap_index, name='sitemap_index'),
    path('sitemap-<int:section>.xml', views.sitemap_section, name='sitemap_section'),
    path('sitemap/download/', views.sitemap_download, name='sitemap_download'),
    path('sitemap/status/', views.sitemap_status, name='sitemap_status'),
]
