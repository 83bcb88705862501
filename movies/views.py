from rest_framework import generics, status, viewsets
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.exceptions import NotFound, PermissionDenied
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated, AllowAny
from django.contrib.auth.models import User
from .exceptions import MovieOwnershipError
from .serializers import MovieFormSerializer, RegisterSerializer
from .services import MovieCatalogService
from .statistics import StatisticsService

# -------------------------------
# AUTH VIEWS
# -------------------------------

class RegisterView(generics.CreateAPIView):
    queryset = User.objects.all()
    permission_classes = (AllowAny,)
    serializer_class = RegisterSerializer


# -------------------------------
# MOVIE VIEWSET
# -------------------------------

def _page_number(value):
    try:
        return max(int(value), 1)
    except (TypeError, ValueError):
        return 1


class MovieViewSet(viewsets.ViewSet):
    lookup_value_regex = r'\d+'
    public_actions = ('list', 'retrieve', 'all')

    def get_permissions(self):
        if self.action in self.public_actions:
            return [AllowAny()]
        return [IsAuthenticated()]

    @property
    def service(self):
        return MovieCatalogService()

    def _form(self, request):
        form = MovieFormSerializer(data=request.data, service=self.service)
        form.is_valid(raise_exception=True)
        return form.validated_data

    def list(self, request):
        result = self.service.list_all(
            current_page=_page_number(request.query_params.get('page')),
            search_term=request.query_params.get('search', ''),
        )
        return Response(result)

    def retrieve(self, request, pk=None):
        movie = self.service.details(pk)
        if movie is None:
            raise NotFound("Movie not found")
        return Response(movie)

    @action(detail=False, methods=['get'])
    def all(self, request):
        return Response(self.service.list_all_api())

    @action(detail=False, methods=['get'])
    def mine(self, request):
        return Response(self.service.list_mine(request.user.pk))

    def create(self, request):
        service = self.service
        movie = self._form(request)
        movie_id = service.create(
            service.directors_list(movie), request.user.pk, movie, service.actors_list(movie)
        )
        return Response({'id': movie_id}, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        service = self.service
        movie = self._form(request)
        try:
            edited = service.edit(
                pk, service.directors_list(movie), request.user.pk, movie, service.actors_list(movie)
            )
        except MovieOwnershipError as e:
            raise PermissionDenied(str(e))
        if not edited:
            raise NotFound("Movie not found")
        return Response(service.details(pk))

    def destroy(self, request, pk=None):
        try:
            deleted = self.service.delete(pk, request.user.pk)
        except MovieOwnershipError as e:
            raise PermissionDenied(str(e))
        if not deleted:
            raise NotFound("Movie not found")
        return Response(status=status.HTTP_204_NO_CONTENT)


# -------------------------------
# REFERENCE DATA & STATISTICS
# -------------------------------

@api_view(['GET'])
@permission_classes([AllowAny])
def genre_list(request):
    """Genres available for the movie form."""
    return Response(MovieCatalogService().genre_categories())


@api_view(['GET'])
@permission_classes([AllowAny])
def quality_list(request):
    """Qualities available for the movie form."""
    return Response(MovieCatalogService().qualities())


@api_view(['GET'])
@permission_classes([AllowAny])
def statistics(request):
    return Response(StatisticsService().total())
