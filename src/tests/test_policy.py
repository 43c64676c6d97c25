"""Authorization policy tests: role table, anonymous users, system check."""

from __future__ import annotations

from unittest import mock

from django.contrib.auth.models import AnonymousUser
from django.test import SimpleTestCase, TestCase

from access_control.checks import article_policy_is_complete
from access_control.models import RoleName
from access_control.policy import ARTICLE_POLICY, ArticlePermission, decide, is_granted
from tests.utils import create_user


class DecideTests(SimpleTestCase):
    """The pure (permission, roles) decision table."""

    def test_admin_can_view_and_edit_but_not_delete(self):
        roles = {RoleName.ADMIN}
        self.assertTrue(decide(ArticlePermission.VIEW, roles))
        self.assertTrue(decide(ArticlePermission.EDIT, roles))
        self.assertFalse(decide(ArticlePermission.DELETE, roles))

    def test_super_admin_can_delete(self):
        self.assertTrue(decide(ArticlePermission.DELETE, {RoleName.SUPER_ADMIN}))

    def test_no_roles_denies_everything(self):
        for permission in ArticlePermission:
            self.assertFalse(decide(permission, set()))

    def test_plain_user_role_grants_nothing(self):
        for permission in ArticlePermission:
            self.assertFalse(decide(permission, {RoleName.USER}))

    def test_accepts_permission_strings(self):
        self.assertTrue(decide("ARTICLE_VIEW", ["ROLE_ADMIN"]))

    def test_unknown_permission_is_denied(self):
        self.assertFalse(decide("ARTICLE_PUBLISH", {RoleName.ADMIN, RoleName.SUPER_ADMIN}))


class IsGrantedTests(TestCase):
    """Policy checks against real users."""

    def test_anonymous_user_is_denied(self):
        for permission in ArticlePermission:
            self.assertFalse(is_granted(permission, AnonymousUser()))
            self.assertFalse(is_granted(permission, None))

    def test_roles_come_from_user(self):
        admin = create_user("admin@test.com", "Secret123", RoleName.ADMIN)
        super_admin = create_user("super@test.com", "Secret123", RoleName.SUPER_ADMIN)
        nobody = create_user("nobody@test.com", "Secret123")

        self.assertTrue(is_granted(ArticlePermission.EDIT, admin))
        self.assertFalse(is_granted(ArticlePermission.DELETE, admin))
        self.assertTrue(is_granted(ArticlePermission.DELETE, super_admin))
        for permission in ArticlePermission:
            self.assertFalse(is_granted(permission, nobody))

    def test_article_subject_is_not_consulted(self):
        admin = create_user("admin@test.com", "Secret123", RoleName.ADMIN)
        subject = mock.Mock()

        self.assertTrue(is_granted(ArticlePermission.VIEW, admin, subject))
        self.assertEqual(subject.mock_calls, [])


class PolicyCheckTests(SimpleTestCase):
    def test_complete_policy_passes(self):
        self.assertEqual(article_policy_is_complete(None), [])

    def test_missing_entry_is_reported(self):
        patched = {k: v for k, v in ARTICLE_POLICY.items() if k is not ArticlePermission.DELETE}
        with mock.patch.dict("access_control.checks.ARTICLE_POLICY", patched, clear=True):
            errors = article_policy_is_complete(None)

        self.assertEqual([error.id for error in errors], ["access_control.E001"])
