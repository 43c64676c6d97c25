"""Read queries over the Article table."""

from typing import Optional

from django.db.models import Q, QuerySet

from .models import Article

NEWEST_FIRST = ("-created_at", "-id")


class ArticleRepository:
    """Lookups and list queries; writes belong to ArticleService."""

    model = Article

    def find(self, article_id) -> Optional[Article]:
        return self.model.objects.filter(pk=article_id).first()

    def list_newest_first(self) -> QuerySet[Article]:
        """All articles, newest first; equal timestamps fall back to id order."""
        return self.model.objects.order_by(*NEWEST_FIRST)

    def search(self, text: str) -> QuerySet[Article]:
        """Case-insensitive substring match on title or description, newest first."""
        return self.model.objects.filter(
            Q(title__icontains=text) | Q(description__icontains=text)
        ).order_by(*NEWEST_FIRST)


__all__ = ["ArticleRepository"]
