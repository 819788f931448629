from django.contrib import admin
from .models import Category, Service


class ServiceInline(admin.TabularInline):
    model = Service
    extra = 0
    fields = [('title', 'price', 'duration', 'popular', 'active')]


class CategoryAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'active', 'modified_date',)
    fields = [('title', 'active'), 'description', 'image_url']
    ordering = ['title']
    list_filter = ('active',)
    search_fields = ['title']
    inlines = [ServiceInline]


class ServiceAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'category', 'price', 'duration', 'active', 'modified_date',)
    fields = [('title', 'category'), ('price', 'duration'), ('popular', 'active'), 'description', 'image_url']
    ordering = ['title']
    list_filter = ('active', 'category',)
    search_fields = ['title', 'category__title']


admin.site.register(Category, CategoryAdmin)
admin.site.register(Service, ServiceAdmin)
