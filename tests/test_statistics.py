import pytest

from movies.models import Movie
from movies.statistics import StatisticsService

pytestmark = pytest.mark.django_db


def test_total_counts_visible_movies_and_users(create_movie, other_user):
    create_movie(title='Kept')
    deleted_id = create_movie(title='Gone')
    Movie.objects.filter(pk=deleted_id).update(is_deleted=True)

    assert StatisticsService().total() == {'total_movies': 1, 'total_users': 2}
