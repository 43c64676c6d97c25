"""Article application service.

Views talk to this service only. It looks articles up through
``ArticleRepository``, stamps lifecycle timestamps, and writes through the
ORM. Persistence errors propagate unchanged; callers decide how to surface
them.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from django.utils import timezone

from .exceptions import ArticleNotFound
from .models import Article
from .repositories import ArticleRepository

logger = logging.getLogger(__name__)


class ArticleService:
    """Find, create, update and delete articles."""

    def __init__(
        self,
        repository: Optional[ArticleRepository] = None,
        clock: Callable[[], datetime] = timezone.now,
    ):
        self.repository = repository or ArticleRepository()
        self.clock = clock

    def find_by_id(self, article_id: int) -> Article:
        """Return the article or raise ``ArticleNotFound``."""
        article = self.repository.find(article_id)
        if article is None:
            logger.warning("Article not found id=%s", article_id)
            raise ArticleNotFound(article_id)
        return article

    def find_all(self) -> list[Article]:
        return list(self.repository.list_newest_first())

    def search(self, text: str) -> list[Article]:
        return list(self.repository.search(text))

    def create(self, article: Article) -> None:
        logger.info("Creating new article title=%r", article.title)

        article.mark_created(self.clock())
        article.save(force_insert=True)

        logger.info("Article created successfully id=%s title=%r", article.pk, article.title)

    def update(self, article: Article) -> None:
        if article.pk is None:
            raise ValueError("Cannot update an article that has not been created")

        logger.info("Updating article id=%s title=%r", article.pk, article.title)

        article.mark_updated(self.clock())
        article.save(force_update=True)

        logger.info("Article updated successfully id=%s", article.pk)

    def delete(self, article: Article) -> None:
        logger.info("Deleting article id=%s title=%r", article.pk, article.title)

        article.delete()

        logger.info("Article deleted successfully")


__all__ = ["ArticleService"]
