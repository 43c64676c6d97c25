"""Create the role rows and a back-office admin account."""

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from access_control.models import Role, RoleName

DEFAULT_EMAIL = "admin@admin.com"
DEFAULT_PASSWORD = "admin"


class Command(BaseCommand):
    """Management command to seed roles and an admin user."""

    help = (
        "Create the ROLE_* rows and an admin user (ROLE_ADMIN, ROLE_USER). "
        "Use --super-admin to also grant ROLE_SUPER_ADMIN, which is required to delete articles."
    )

    def add_arguments(self, parser):
        parser.add_argument("--email", default=DEFAULT_EMAIL, help="Admin email (default: %(default)s).")
        parser.add_argument("--password", default=DEFAULT_PASSWORD, help="Admin password (default: %(default)s).")
        parser.add_argument(
            "--super-admin",
            action="store_true",
            help="Also grant ROLE_SUPER_ADMIN.",
        )

    def handle(self, *args, **options):
        """Entrypoint for the management command."""
        self._create_roles()

        User = get_user_model()
        email = options["email"]
        roles = [RoleName.ADMIN, RoleName.USER]
        if options["super_admin"]:
            roles.append(RoleName.SUPER_ADMIN)

        existing = User.objects.filter(email__iexact=email).first()
        if existing is not None:
            self.stdout.write(self.style.WARNING("Admin user already exists!"))
            self.stdout.write(f"Email: {existing.email}")
            return

        user = User.objects.create_user(email, options["password"], roles=roles)

        self.stdout.write(self.style.SUCCESS("Admin user created successfully!"))
        self.stdout.write(f"Email: {user.email}")
        self.stdout.write(f"Roles: {', '.join(sorted(user.get_roles()))}")
        self.stdout.write("You can now log in at: /login")

    @staticmethod
    def _create_roles() -> None:
        """Create one Role row per known role tag."""
        for value, label in RoleName.choices:
            Role.objects.get_or_create(name=value, defaults={"description": label})
