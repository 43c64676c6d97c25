"""Back-office HTML views for article CRUD.

Views stay thin: they bind forms, call ``ArticleService`` and turn outcomes
into flash messages and redirects. The whole surface requires ROLE_ADMIN;
deleting additionally requires the DELETE permission and an intent token.
"""

import logging

from django.contrib import messages
from django.core.exceptions import PermissionDenied
from django.shortcuts import redirect, render
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from access_control.models import RoleName
from access_control.permissions import RoleRequiredMixin
from access_control.policy import ArticlePermission
from core.csrf import is_intent_token_valid
from .exceptions import ArticleNotFound
from .forms import ArticleForm
from .models import Article
from .services import ArticleService

logger = logging.getLogger(__name__)

INDEX_ROUTE = "articles:index"


class ArticleAdminView(RoleRequiredMixin, View):
    """Base view: ROLE_ADMIN gate and access to the article service."""

    required_role = RoleName.ADMIN
    service_class = ArticleService

    def get_service(self) -> ArticleService:
        return self.service_class()

    def require(self, permission: ArticlePermission, article: Article | None = None) -> None:
        if not self.is_granted(permission, article):
            raise PermissionDenied("Access Denied.")


class ArticleIndexView(ArticleAdminView):
    http_method_names = ["get"]

    def get(self, request):
        """List articles newest first, or the matches for ``?q=``."""
        query = request.GET.get("q", "").strip()
        service = self.get_service()
        articles = service.search(query) if query else service.find_all()

        return render(request, "admin/article/index.html", {
            "articles": articles,
            "query": query,
            "can_delete": self.is_granted(ArticlePermission.DELETE),
        })


class ArticleShowView(ArticleAdminView):
    http_method_names = ["get"]

    def get(self, request, pk: int):
        try:
            article = self.get_service().find_by_id(pk)
        except ArticleNotFound as exc:
            messages.error(request, str(exc))
            return redirect(INDEX_ROUTE)

        self.require(ArticlePermission.VIEW, article)
        return render(request, "admin/article/show.html", {
            "article": article,
            "can_delete": self.is_granted(ArticlePermission.DELETE, article),
        })


class ArticleCreateView(ArticleAdminView):
    http_method_names = ["get", "post"]
    template_name = "admin/article/new.html"

    def get(self, request):
        article = Article()
        return render(request, self.template_name, {"form": ArticleForm(instance=article), "article": article})

    def post(self, request):
        article = Article()
        form = ArticleForm(request.POST, instance=article)

        if form.is_valid():
            try:
                self.get_service().create(article)
            except Exception as exc:
                logger.exception("Article creation failed")
                messages.error(request, f"Error creating article: {exc}")
            else:
                messages.success(request, "Article created successfully!")
                return redirect(INDEX_ROUTE)

        return render(request, self.template_name, {"form": form, "article": article})


class ArticleEditView(ArticleAdminView):
    http_method_names = ["get", "post"]
    template_name = "admin/article/edit.html"

    def _load(self, request, pk: int) -> Article | None:
        try:
            article = self.get_service().find_by_id(pk)
        except ArticleNotFound as exc:
            messages.error(request, str(exc))
            return None
        self.require(ArticlePermission.EDIT, article)
        return article

    def get(self, request, pk: int):
        article = self._load(request, pk)
        if article is None:
            return redirect(INDEX_ROUTE)
        return render(request, self.template_name, {"form": ArticleForm(instance=article), "article": article})

    def post(self, request, pk: int):
        article = self._load(request, pk)
        if article is None:
            return redirect(INDEX_ROUTE)

        form = ArticleForm(request.POST, instance=article)
        if form.is_valid():
            try:
                self.get_service().update(article)
            except Exception as exc:
                logger.exception("Article update failed id=%s", pk)
                messages.error(request, f"Error updating article: {exc}")
            else:
                messages.success(request, "Article updated successfully!")
                return redirect(INDEX_ROUTE)
        else:
            # is_valid() already copied the rejected input onto the instance.
            article.refresh_from_db(fields=["title", "description"])

        return render(request, self.template_name, {"form": form, "article": article})


@method_decorator(csrf_exempt, name="dispatch")
class ArticleDeleteView(ArticleAdminView):
    """Delete an article.

    Django's site-wide CSRF check is replaced here by the ``delete<id>`` intent
    token so that a bad token becomes a flash message instead of a 403 page.
    """

    http_method_names = ["post"]

    def post(self, request, pk: int):
        if not is_intent_token_valid(request, f"delete{pk}", request.POST.get("_token")):
            messages.error(request, "Invalid CSRF token")
            return redirect(INDEX_ROUTE)

        service = self.get_service()
        try:
            article = service.find_by_id(pk)
            self.require(ArticlePermission.DELETE, article)
            service.delete(article)
        except ArticleNotFound as exc:
            messages.error(request, str(exc))
        except Exception as exc:
            logger.warning("Article deletion failed id=%s: %s", pk, exc)
            messages.error(request, f"Error deleting article: {exc}")
        else:
            messages.success(request, "Article deleted successfully!")

        return redirect(INDEX_ROUTE)


__all__ = [
    "ArticleCreateView",
    "ArticleDeleteView",
    "ArticleEditView",
    "ArticleIndexView",
    "ArticleShowView",
]
