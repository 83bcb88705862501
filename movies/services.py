"""
Movie catalog service.

Every read and write of movies and the people attached to them goes through
MovieCatalogService. The service never renders anything: it returns plain
dicts and lists produced by the serializers in ``movies.serializers``.
"""

from django.conf import settings
from django.db import DEFAULT_DB_ALIAS, transaction
from django.db.models import Q
from loguru import logger

from .exceptions import MovieOwnershipError
from .models import Actor, Director, Genre, Movie, MovieActor, MovieDirector, Quality
from .names import split_full_name, split_name_list
from .serializers import GenreSerializer, MovieDetailsSerializer, MovieSerializer, QualitySerializer
from .statistics import StatisticsService

# Fields overwritten by edit(); rating, quality and age_limit are set on create only
EDITABLE_FIELDS = (
    'title', 'year', 'image_url', 'watch_url', 'country', 'duration', 'description', 'genre_id',
)


class MovieCatalogService:
    def __init__(self, statistics=None, using=DEFAULT_DB_ALIAS, movies_per_page=None):
        self.using = using
        self.statistics = statistics or StatisticsService(using=using)
        self.movies_per_page = movies_per_page or settings.MOVIES_PER_PAGE

    # -------------------------------
    # QUERIES
    # -------------------------------

    def _movies(self):
        return (
            Movie.objects.using(self.using)
            .filter(is_deleted=False)
            .select_related('genre', 'quality')
            .prefetch_related('movie_directors__director', 'movie_actors__actor')
        )

    def index(self):
        movies = self._movies().order_by('-id')
        return {
            'total_movies': self.statistics.total()['total_movies'],
            'movies': MovieSerializer(movies, many=True).data,
        }

    def list_all(self, current_page=1, movies_per_page=None, search_term=None):
        """
        One page of visible movies, newest first.

        Deleted movies are filtered out and the search applied before the page
        is cut, so every page holds ``movies_per_page`` visible movies except
        possibly the last one.
        """
        per_page = max(movies_per_page or self.movies_per_page, 1)
        current_page = max(current_page or 1, 1)
        search_term = (search_term or '').strip()

        queryset = self._movies()
        if search_term:
            queryset = queryset.filter(
                Q(title__icontains=search_term)
                | Q(genre__name__icontains=search_term)
                | Q(actors__full_name__icontains=search_term)
            ).distinct()

        skip = (current_page - 1) * per_page
        movies = queryset.order_by('-id')[skip:skip + per_page]

        return {
            'movies': MovieSerializer(movies, many=True).data,
            'total_movies': self.statistics.total()['total_movies'],
            'matching_movies': queryset.count(),
            'current_page': current_page,
            'movies_per_page': per_page,
            'search_term': search_term,
            'genres': self.genre_categories(),
            'qualities': self.qualities(),
        }

    def list_mine(self, creator_id):
        movies = MovieSerializer(
            self._movies().filter(creator_id=creator_id).order_by('-id'), many=True
        ).data
        return {
            'movies': movies,
            'total_movies': len(movies),
        }

    def list_all_api(self):
        return MovieSerializer(self._movies().order_by('id'), many=True).data

    def details(self, movie_id):
        movie = self._movies().filter(pk=movie_id).first()
        if movie is None:
            return None
        return MovieDetailsSerializer(movie).data

    # -------------------------------
    # COMMANDS
    # -------------------------------

    def create(self, directors, creator_id, movie, actors):
        director_names = self._parse_names(directors)
        actor_names = self._parse_names(actors)

        with transaction.atomic(using=self.using):
            movie_data = Movie(
                creator_id=creator_id,
                title=movie['title'],
                year=movie['year'],
                image_url=movie['image_url'],
                watch_url=movie['watch_url'],
                country=movie['country'],
                duration=movie['duration'],
                age_limit=movie.get('age_limit', 0),
                description=movie['description'],
                genre_id=movie['genre_id'],
                quality_id=movie['quality_id'],
                rating=0.0,
            )
            movie_data.save(using=self.using)
            self._link_people(movie_data, director_names, actor_names)

        logger.info(f"[MovieCatalog] User {creator_id} created movie {movie_data.pk} '{movie_data.title}'")
        return movie_data.pk

    def edit(self, movie_id, directors, creator_id, movie, actors):
        director_names = self._parse_names(directors)
        actor_names = self._parse_names(actors)

        with transaction.atomic(using=self.using):
            movie_data = (
                Movie.objects.using(self.using)
                .select_for_update()
                .filter(pk=movie_id, is_deleted=False)
                .first()
            )
            if movie_data is None:
                logger.warning(f"[MovieCatalog] Edit of missing movie {movie_id}")
                return False
            self._check_owner(movie_data, creator_id)

            for field in EDITABLE_FIELDS:
                setattr(movie_data, field, movie[field])
            movie_data.save(using=self.using)

            # Relink instead of renaming people shared with other movies
            MovieDirector.objects.using(self.using).filter(movie=movie_data).delete()
            MovieActor.objects.using(self.using).filter(movie=movie_data).delete()
            self._link_people(movie_data, director_names, actor_names)

        logger.info(f"[MovieCatalog] User {creator_id} edited movie {movie_id}")
        return True

    def delete(self, movie_id, creator_id):
        with transaction.atomic(using=self.using):
            movie = (
                Movie.objects.using(self.using)
                .select_for_update()
                .filter(pk=movie_id, is_deleted=False)
                .first()
            )
            if movie is None:
                return False
            self._check_owner(movie, creator_id)
            movie.is_deleted = True
            movie.save(using=self.using, update_fields=['is_deleted'])

        logger.info(f"[MovieCatalog] User {creator_id} deleted movie {movie_id}")
        return True

    # -------------------------------
    # REFERENCE DATA & FORM HELPERS
    # -------------------------------

    def genre_categories(self):
        return GenreSerializer(Genre.objects.using(self.using).all(), many=True).data

    def qualities(self):
        return QualitySerializer(Quality.objects.using(self.using).all(), many=True).data

    def genre_exists(self, genre_id):
        return Genre.objects.using(self.using).filter(pk=genre_id).exists()

    def quality_exists(self, quality_id):
        return Quality.objects.using(self.using).filter(pk=quality_id).exists()

    def directors_list(self, movie):
        return split_name_list(movie['directors'])

    def actors_list(self, movie):
        return split_name_list(movie['actors'])

    # -------------------------------
    # HELPERS
    # -------------------------------

    @staticmethod
    def _parse_names(names):
        # Duplicates within one submission collapse onto a single person and link
        parsed = {}
        for name in names:
            first_name, last_name, full_name = split_full_name(name)
            parsed.setdefault(full_name.lower(), (full_name, first_name, last_name))
        return list(parsed.values())

    @staticmethod
    def _check_owner(movie, creator_id):
        if str(movie.creator_id) != str(creator_id):
            logger.warning(f"[MovieCatalog] User {creator_id} denied access to movie {movie.pk}")
            raise MovieOwnershipError(movie.pk, creator_id)

    def _get_or_create_person(self, model, full_name, first_name, last_name):
        person, created = model.objects.using(self.using).get_or_create(
            full_name__iexact=full_name,
            defaults={'first_name': first_name, 'last_name': last_name, 'full_name': full_name},
        )
        if created:
            logger.debug(f"[MovieCatalog] New {model.__name__.lower()} '{full_name}'")
        return person

    def _link_people(self, movie, director_names, actor_names):
        MovieDirector.objects.using(self.using).bulk_create([
            MovieDirector(movie=movie, director=self._get_or_create_person(Director, full_name, first, last))
            for full_name, first, last in director_names
        ])
        MovieActor.objects.using(self.using).bulk_create([
            MovieActor(movie=movie, actor=self._get_or_create_person(Actor, full_name, first, last))
            for full_name, first, last in actor_names
        ])
