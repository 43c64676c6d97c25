"""Serializers for the read-only article API."""

from rest_framework import serializers

from .models import Article


class ArticleSerializer(serializers.ModelSerializer):
    class Meta:
        """Expose article fields; everything is read-only over the API."""
        model = Article
        fields = ["id", "title", "description", "created_at", "updated_at"]
        read_only_fields = fields


__all__ = ["ArticleSerializer"]
