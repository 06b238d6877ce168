from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from apps.corecode.roles import grant_role


class Command(BaseCommand):
    help = "Set the dashboard role claim on an existing user"

    def add_arguments(self, parser):
        parser.add_argument("username")
        parser.add_argument(
            "--role",
            default=None,
            help=f"Role to grant (default: {settings.DASHBOARD_ADMIN_ROLE})"
        )

    def handle(self, *args, **options):
        User = get_user_model()
        try:
            user = User.objects.get(**{User.USERNAME_FIELD: options["username"]})
        except User.DoesNotExist:
            raise CommandError("User '%s' does not exist" % options["username"])

        metadata = grant_role(user, options["role"])
        self.stdout.write(
            self.style.SUCCESS(f"Granted role '{metadata.role}' to {user}")
        )
