"""Article model with validation rules and explicit lifecycle timestamps."""

from datetime import datetime

from django.core.validators import MinLengthValidator
from django.db import models


class Article(models.Model):
    """A titled article managed from the back office.

    ``created_at`` and ``updated_at`` stay empty until the article is first
    persisted; ``ArticleService`` stamps them right before each write.
    """

    title = models.CharField(
        max_length=255,
        validators=[MinLengthValidator(3, message="Title must be at least %(limit_value)d characters")],
        error_messages={
            "blank": "Title is required",
            "required": "Title is required",
            "max_length": "Title cannot be longer than %(limit_value)d characters",
        },
    )
    description = models.TextField(
        validators=[MinLengthValidator(10, message="Description must be at least %(limit_value)d characters")],
        error_messages={
            "blank": "Description is required",
            "required": "Description is required",
        },
    )
    created_at = models.DateTimeField(null=True, editable=False)
    updated_at = models.DateTimeField(null=True, editable=False)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.title

    def mark_created(self, now: datetime) -> None:
        self.created_at = now
        self.updated_at = now

    def mark_updated(self, now: datetime) -> None:
        # updated_at never precedes created_at
        self.updated_at = max(now, self.created_at) if self.created_at else now


__all__ = ["Article"]
