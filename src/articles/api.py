"""Read-only JSON API over ArticleService, gated by the VIEW permission."""

from rest_framework.views import APIView

from access_control.permissions import ArticlePolicyPermission
from access_control.policy import ArticlePermission
from core.response import api_response
from .serializers import ArticleSerializer
from .services import ArticleService


class ArticleApiView(APIView):
    permission_classes = [ArticlePolicyPermission]
    required_permission = ArticlePermission.VIEW
    service_class = ArticleService

    def get_service(self) -> ArticleService:
        return self.service_class()


class ArticleListApiView(ArticleApiView):
    # noinspection PyMethodMayBeStatic
    def get(self, request):
        """List articles newest first; ``?q=`` filters by title or description."""
        query = request.query_params.get("q", "").strip()
        service = self.get_service()
        articles = service.search(query) if query else service.find_all()
        return api_response(ArticleSerializer(articles, many=True).data)


class ArticleDetailApiView(ArticleApiView):
    def get(self, request, pk: int):
        """Return one article; a missing id yields a 404 envelope."""
        article = self.get_service().find_by_id(pk)
        self.check_object_permissions(request, article)
        return api_response(ArticleSerializer(article).data)


__all__ = ["ArticleDetailApiView", "ArticleListApiView"]
