from django.db import models
from django.contrib.auth.models import User
from django.db.models.functions import Lower
from .names import FIRST_NAME_MAX_LENGTH, FULL_NAME_MAX_LENGTH, LAST_NAME_MAX_LENGTH


class Genre(models.Model):
    name = models.CharField(max_length=50, unique=True)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return self.name


class Quality(models.Model):
    name = models.CharField(max_length=30, unique=True)

    class Meta:
        ordering = ['id']
        verbose_name_plural = 'qualities'

    def __str__(self):
        return self.name


class Person(models.Model):
    first_name = models.CharField(max_length=FIRST_NAME_MAX_LENGTH)
    last_name = models.CharField(max_length=LAST_NAME_MAX_LENGTH)
    # Natural key for lookup-or-create, unique regardless of case
    full_name = models.CharField(max_length=FULL_NAME_MAX_LENGTH)

    class Meta:
        abstract = True
        ordering = ['full_name']
        constraints = [
            models.UniqueConstraint(Lower('full_name'), name='unique_%(class)s_full_name_ci'),
        ]

    def __str__(self):
        return self.full_name


class Director(Person):
    pass


class Actor(Person):
    pass


class Movie(models.Model):
    creator = models.ForeignKey(User, on_delete=models.CASCADE, related_name='movies')
    title = models.CharField(max_length=100)
    year = models.PositiveSmallIntegerField()
    image_url = models.URLField()
    watch_url = models.URLField()
    country = models.CharField(max_length=50)
    duration = models.PositiveSmallIntegerField()  # minutes
    age_limit = models.PositiveSmallIntegerField(default=0)
    description = models.TextField()
    rating = models.FloatField(default=0.0)
    genre = models.ForeignKey(Genre, on_delete=models.PROTECT, related_name='movies')
    quality = models.ForeignKey(Quality, on_delete=models.PROTECT, related_name='movies')
    directors = models.ManyToManyField(Director, through='MovieDirector', related_name='movies')
    actors = models.ManyToManyField(Actor, through='MovieActor', related_name='movies')
    is_deleted = models.BooleanField(default=False)

    class Meta:
        ordering = ['-id']

    def __str__(self):
        return f"{self.title} ({self.year})"


class MovieDirector(models.Model):
    movie = models.ForeignKey(Movie, on_delete=models.CASCADE, related_name='movie_directors')
    director = models.ForeignKey(Director, on_delete=models.CASCADE, related_name='movie_directors')

    class Meta:
        # Keep submission order when joining names
        ordering = ['id']
        constraints = [
            models.UniqueConstraint(fields=['movie', 'director'], name='unique_movie_director'),
        ]


class MovieActor(models.Model):
    movie = models.ForeignKey(Movie, on_delete=models.CASCADE, related_name='movie_actors')
    actor = models.ForeignKey(Actor, on_delete=models.CASCADE, related_name='movie_actors')

    class Meta:
        ordering = ['id']
        constraints = [
            models.UniqueConstraint(fields=['movie', 'actor'], name='unique_movie_actor'),
        ]
