"""Article service errors."""


class ArticleNotFound(LookupError):
    """No article exists for the requested id."""

    def __init__(self, article_id):
        self.article_id = article_id
        super().__init__(f"Article with ID {article_id} not found")


__all__ = ["ArticleNotFound"]
