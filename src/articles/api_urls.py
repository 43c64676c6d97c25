"""Routing for the read-only article API."""

from django.urls import path

from .api import ArticleDetailApiView, ArticleListApiView

urlpatterns = [
    path("api/articles", ArticleListApiView.as_view(), name="api-article-list"),
    path("api/articles/<int:pk>", ArticleDetailApiView.as_view(), name="api-article-detail"),
]
