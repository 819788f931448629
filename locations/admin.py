from django.contrib import admin
from .models import Country, State, City


class StateInline(admin.TabularInline):
    model = State
    extra = 0
    fields = [('name', 'abbreviation', 'slug', 'position')]


class CityInline(admin.TabularInline):
    model = City
    extra = 0
    fields = [('name', 'slug', 'position')]


class CountryAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'slug', 'position',)
    ordering = ['position', 'id']
    search_fields = ['name']
    inlines = [StateInline]


class StateAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'abbreviation', 'slug', 'country', 'position',)
    ordering = ['country', 'position', 'id']
    list_filter = ('country',)
    search_fields = ['name', 'abbreviation']
    inlines = [CityInline]


admin.site.register(Country, CountryAdmin)
admin.site.register(State, StateAdmin)
admin.site.register(City)
