from django.core.management.base import BaseCommand

from tasks.storage_tasks import purge_orphaned_uploads_task, schedule_purge


class Command(BaseCommand):
    help = "Delete uploaded files that no record references"

    def add_arguments(self, parser):
        parser.add_argument(
            "--older-than",
            type=int,
            dest="older_than_hours",
            default=None,
            help="Grace period in hours (default: STORAGE_ORPHAN_GRACE_HOURS)"
        )
        parser.add_argument(
            "--sync",
            action="store_true",
            help="Run in this process instead of queueing on a worker"
        )

    def handle(self, *args, **options):
        hours = options["older_than_hours"]

        if options["sync"]:
            result = purge_orphaned_uploads_task.apply(args=(hours,)).get()
        else:
            result = schedule_purge(hours)

        if isinstance(result, dict):
            self.stdout.write(self.style.SUCCESS("Removed %s orphaned upload(s)" % result["purged"]))
        else:
            self.stdout.write(f"Queued purge task {result.id}")
