from django.contrib import admin
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView
from drf_yasg.views import get_schema_view
from drf_yasg import openapi
from rest_framework import permissions
from movies.views import (
    MovieViewSet, RegisterView,
    genre_list, quality_list, statistics
)

# Swagger configuration
schema_view = get_schema_view(
    openapi.Info(
        title="Movie Catalog API",
        default_version='v1',
        description="API for browsing and managing the movie catalog",
        license=openapi.License(name="MIT License"),
    ),
    public=True,
    permission_classes=(permissions.AllowAny,),
)

# Router for ViewSets
router = DefaultRouter()
router.register(r'movies', MovieViewSet, basename='movie')

urlpatterns = [
    path('admin/', admin.site.urls),

    # API Documentation
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
    path('redoc/', schema_view.with_ui('redoc', cache_timeout=0), name='schema-redoc'),

    # Authentication
    path('api/auth/register/', RegisterView.as_view(), name='register'),
    path('api/auth/login/', TokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('api/auth/refresh/', TokenRefreshView.as_view(), name='token_refresh'),

    # Movies API
    path('api/', include(router.urls)),

    # Reference data
    path('api/genres/', genre_list, name='genre-list'),
    path('api/qualities/', quality_list, name='quality-list'),
    path('api/statistics/', statistics, name='statistics'),
]
