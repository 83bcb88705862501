from django.contrib import admin
from .models import Actor, Director, Genre, Movie, MovieActor, MovieDirector, Quality


class MovieDirectorInline(admin.TabularInline):
    model = MovieDirector
    extra = 0
    autocomplete_fields = ('director',)


class MovieActorInline(admin.TabularInline):
    model = MovieActor
    extra = 0
    autocomplete_fields = ('actor',)


@admin.register(Movie)
class MovieAdmin(admin.ModelAdmin):
    list_display = ('title', 'creator', 'genre', 'quality', 'year', 'rating', 'is_deleted')
    list_filter = ('is_deleted', 'genre', 'quality', 'year')
    search_fields = ('title', 'creator__username', 'actors__full_name', 'directors__full_name')
    list_select_related = ('creator', 'genre', 'quality')
    inlines = (MovieDirectorInline, MovieActorInline)

    fieldsets = (
        ('Basic Information', {
            'fields': ('creator', 'title', 'year', 'genre', 'quality')
        }),
        ('Details', {
            'fields': ('description', 'country', 'duration', 'age_limit', 'rating')
        }),
        ('Links', {
            'fields': ('image_url', 'watch_url')
        }),
        ('Status', {
            'fields': ('is_deleted',)
        }),
    )


@admin.register(Director, Actor)
class PersonAdmin(admin.ModelAdmin):
    list_display = ('full_name', 'first_name', 'last_name')
    search_fields = ('full_name',)


@admin.register(Genre, Quality)
class ReferenceAdmin(admin.ModelAdmin):
    list_display = ('id', 'name')
    search_fields = ('name',)
