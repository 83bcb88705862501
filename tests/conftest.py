import pytest
from django.contrib.auth.models import User
from rest_framework.test import APIClient

from movies.models import Genre, Quality
from movies.services import MovieCatalogService


@pytest.fixture
def user(db):
    return User.objects.create_user(username='alice', password='alice-password-123')


@pytest.fixture
def other_user(db):
    return User.objects.create_user(username='bob', password='bob-password-123')


@pytest.fixture
def genres(db):
    return [Genre.objects.create(name=name) for name in ('Drama', 'Comedy', 'Sci-Fi')]


@pytest.fixture
def qualities(db):
    return [Quality.objects.create(name=name) for name in ('HD', '4K')]


@pytest.fixture
def service(db):
    return MovieCatalogService()


@pytest.fixture
def movie_form(genres, qualities):
    def make(**overrides):
        form = {
            'title': 'Movie',
            'year': 1999,
            'image_url': 'https://img.example.com/poster.jpg',
            'watch_url': 'https://watch.example.com/movie',
            'country': 'USA',
            'duration': 120,
            'age_limit': 12,
            'description': 'A movie.',
            'genre_id': genres[0].pk,
            'quality_id': qualities[0].pk,
            'directors': 'Jane Doe',
            'actors': 'Tom Hanks',
        }
        form.update(overrides)
        return form
    return make


@pytest.fixture
def create_movie(service, user, movie_form):
    def make(title='Movie', directors=('Jane Doe',), actors=('Tom Hanks',), creator=None, **overrides):
        creator = creator or user
        return service.create(list(directors), creator.pk, movie_form(title=title, **overrides), list(actors))
    return make


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def auth_client(api_client, user):
    api_client.force_authenticate(user=user)
    return api_client
