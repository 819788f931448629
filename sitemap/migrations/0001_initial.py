from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='SitemapGeneration',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('generated_at', models.DateTimeField()),
                ('trigger', models.CharField(choices=[('manual', 'Manual'), ('change', 'Catalog change'), ('cron', 'Scheduled'), ('request', 'First request')], max_length=20)),
                ('url_count', models.IntegerField(default=0)),
                ('page_count', models.IntegerField(default=0)),
                ('capacity', models.IntegerField(default=0)),
                ('warnings', models.TextField(blank=True, default='')),
            ],
            options={
                'ordering': ['-generated_at', '-id'],
                'get_latest_by': 'generated_at',
            },
        ),
    ]
