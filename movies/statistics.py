from django.contrib.auth.models import User
from django.db import DEFAULT_DB_ALIAS

from .models import Movie


class StatisticsService:
    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using

    def total(self):
        return {
            'total_movies': Movie.objects.using(self.using).filter(is_deleted=False).count(),
            'total_users': User.objects.using(self.using).count(),
        }
