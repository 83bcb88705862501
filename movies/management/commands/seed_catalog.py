from django.core.management.base import BaseCommand
from django.db import transaction
from movies.models import Genre, Quality

GENRES = [
    'Action', 'Adventure', 'Animation', 'Comedy', 'Crime', 'Documentary', 'Drama',
    'Family', 'Fantasy', 'Horror', 'Mystery', 'Romance', 'Sci-Fi', 'Thriller', 'War', 'Western',
]

QUALITIES = ['SD', 'HD', 'Full HD', '4K']


class Command(BaseCommand):
    help = 'Populate the genre and quality reference tables'

    def handle(self, *args, **kwargs):
        created = 0
        with transaction.atomic():
            for name in GENRES:
                _, was_created = Genre.objects.get_or_create(name=name)
                created += was_created
            for name in QUALITIES:
                _, was_created = Quality.objects.get_or_create(name=name)
                created += was_created

        self.stdout.write(self.style.SUCCESS(f'Seeded catalog reference data ({created} new rows)'))
