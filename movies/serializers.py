from rest_framework import serializers
from django.contrib.auth.models import User
from django.contrib.auth.password_validation import validate_password
from django.utils import timezone
from .exceptions import MalformedNameError
from .models import Genre, Movie, Quality
from .names import join_names, split_full_name, split_name_list


class RegisterSerializer(serializers.ModelSerializer):
    password = serializers.CharField(write_only=True, required=True, validators=[validate_password])
    password2 = serializers.CharField(write_only=True, required=True)

    class Meta:
        model = User
        fields = ('username', 'email', 'password', 'password2')

    def validate(self, attrs):
        if attrs['password'] != attrs['password2']:
            raise serializers.ValidationError({"password": "Password fields didn't match."})
        return attrs

    def create(self, validated_data):
        validated_data.pop('password2')
        return User.objects.create_user(**validated_data)


class GenreSerializer(serializers.ModelSerializer):
    class Meta:
        model = Genre
        fields = ('id', 'name')


class QualitySerializer(serializers.ModelSerializer):
    class Meta:
        model = Quality
        fields = ('id', 'name')


# -------------------------------
# MOVIE PROJECTIONS
# -------------------------------

class MovieSerializer(serializers.ModelSerializer):
    genre = serializers.ReadOnlyField(source='genre.name')
    quality = serializers.ReadOnlyField(source='quality.name')
    directors = serializers.SerializerMethodField()
    actors = serializers.SerializerMethodField()

    class Meta:
        model = Movie
        fields = ('id', 'title', 'year', 'image_url', 'genre', 'quality', 'rating', 'directors', 'actors')
        read_only_fields = fields

    def get_directors(self, obj):
        return join_names(md.director.full_name for md in obj.movie_directors.all())

    def get_actors(self, obj):
        return join_names(ma.actor.full_name for ma in obj.movie_actors.all())


class MovieDetailsSerializer(MovieSerializer):
    genre_id = serializers.ReadOnlyField()
    quality_id = serializers.ReadOnlyField()
    creator_id = serializers.ReadOnlyField()

    class Meta(MovieSerializer.Meta):
        fields = (
            'id', 'title', 'year', 'image_url', 'watch_url', 'age_limit', 'country',
            'directors', 'actors', 'duration', 'description', 'genre', 'genre_id',
            'quality', 'quality_id', 'rating', 'creator_id',
        )
        read_only_fields = fields


# -------------------------------
# MOVIE FORM (caller-side validation)
# -------------------------------

class MovieFormSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=100)
    year = serializers.IntegerField()
    image_url = serializers.URLField()
    watch_url = serializers.URLField()
    country = serializers.CharField(max_length=50)
    duration = serializers.IntegerField(min_value=1)
    age_limit = serializers.IntegerField(min_value=0, required=False, default=0)
    description = serializers.CharField()
    genre_id = serializers.IntegerField()
    quality_id = serializers.IntegerField()
    directors = serializers.CharField()
    actors = serializers.CharField()

    def __init__(self, *args, service=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.service = service

    def validate_year(self, value):
        current_year = timezone.now().year
        if value < 1888 or value > current_year + 5:
            raise serializers.ValidationError(
                f"Year must be between 1888 and {current_year + 5}"
            )
        return value

    def validate_genre_id(self, value):
        if self.service is not None and not self.service.genre_exists(value):
            raise serializers.ValidationError("Genre does not exist.")
        return value

    def validate_quality_id(self, value):
        if self.service is not None and not self.service.quality_exists(value):
            raise serializers.ValidationError("Quality does not exist.")
        return value

    def validate_directors(self, value):
        return self._validate_names(value)

    def validate_actors(self, value):
        return self._validate_names(value)

    def _validate_names(self, value):
        names = split_name_list(value)
        if not names:
            raise serializers.ValidationError("At least one name is required.")
        try:
            for name in names:
                split_full_name(name)
        except MalformedNameError as e:
            raise serializers.ValidationError(str(e))
        return join_names(names)
