from django.db import models

# Landing pages exist for every country -> state -> city.
# slug may be left blank; the sitemap derives it from the name.


class Country(models.Model):
    name = models.CharField(max_length=100)
    slug = models.SlugField(max_length=100, blank=True, default='')
    position = models.IntegerField(default=0)
    created_date = models.DateTimeField(auto_now_add=True)
    modified_date = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.name

    class Meta:
        ordering = ['position', 'id']
        verbose_name_plural = 'countries'


class State(models.Model):
    country = models.ForeignKey(Country, related_name='states', on_delete=models.CASCADE)
    name = models.CharField(max_length=100)
    abbreviation = models.CharField(max_length=10, blank=True, default='')
    slug = models.SlugField(max_length=100, blank=True, default='')
    position = models.IntegerField(default=0)
    created_date = models.DateTimeField(auto_now_add=True)
    modified_date = models.DateTimeField(auto_now=True)

    def __str__(self):
        return '%s, %s' % (self.name, self.country)

    class Meta:
        ordering = ['position', 'id']


class City(models.Model):
    state = models.ForeignKey(State, related_name='cities', on_delete=models.CASCADE)
    name = models.CharField(max_length=100)
    slug = models.SlugField(max_length=100, blank=True, default='')
    position = models.IntegerField(default=0)
    created_date = models.DateTimeField(auto_now_add=True)
    modified_date = models.DateTimeField(auto_now=True)

    def __str__(self):
        return '%s, %s' % (self.name, self.state.abbreviation or self.state.name)

    class Meta:
        ordering = ['position', 'id']
        verbose_name_plural = 'cities'
