"""Root URL configuration for the Article Admin project."""
from django.contrib.auth import views as auth_views
from django.urls import include, path
from django.views.generic import RedirectView
from drf_spectacular.views import SpectacularAPIView

from authentication.views import AdminLoginView
from .views import HealthView

urlpatterns = [
    path("", RedirectView.as_view(pattern_name="articles:index", permanent=False)),
    path("login", AdminLoginView.as_view(), name="login"),
    path("logout", auth_views.LogoutView.as_view(), name="logout"),
    path("", include("articles.urls")),
    path("api/health", HealthView.as_view(), name="api-health"),
    path("api/schema", SpectacularAPIView.as_view(), name="api-schema"),
    path("api/auth/", include("authentication.urls")),
    path("", include("articles.api_urls")),
]
