"""Routing for the back-office article pages."""

from django.urls import path

from .views import (
    ArticleCreateView,
    ArticleDeleteView,
    ArticleEditView,
    ArticleIndexView,
    ArticleShowView,
)

app_name = "articles"

urlpatterns = [
    path("admin/articles", ArticleIndexView.as_view(), name="index"),
    path("admin/articles/new", ArticleCreateView.as_view(), name="new"),
    path("admin/articles/<int:pk>", ArticleShowView.as_view(), name="show"),
    path("admin/articles/<int:pk>/edit", ArticleEditView.as_view(), name="edit"),
    path("admin/articles/<int:pk>/delete", ArticleDeleteView.as_view(), name="delete"),
]
