from datetime import timedelta

from django.core.management.base import BaseCommand
from django.utils import timezone

from apps.core.store import get_store
from apps.tasks.schemas import TaskIn
from apps.tasks.services import create_task, delete_task, iso_timestamp, list_tasks

SAMPLE_TASKS = [
    ("Write project brief", "Done"),
    ("Review pull requests", "In Progress"),
    ("Prepare sprint demo", "Pending"),
    ("Update deployment docs", "Pending"),
    ("Rotate database credentials", "Pending"),
]


class Command(BaseCommand):
    help = 'Seeds the document store with sample tasks.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clean',
            action='store_true',
            help='Delete existing tasks before seeding',
        )
        parser.add_argument(
            '--count',
            type=int,
            default=len(SAMPLE_TASKS),
            help='Number of tasks to create',
        )

    def handle(self, *args, **options):
        store = get_store()

        if options['clean']:
            existing = list_tasks(store)
            for task in existing:
                delete_task(store, task['id'])
            self.stdout.write(self.style.WARNING(f"Deleted {len(existing)} tasks"))

        start = timezone.now()
        for i in range(options['count']):
            description, status = SAMPLE_TASKS[i % len(SAMPLE_TASKS)]
            task = create_task(store, TaskIn(
                description=description,
                start_date=iso_timestamp(start + timedelta(days=i)),
                end_date=iso_timestamp(start + timedelta(days=i + 1)),
                status=status,
            ))
            self.stdout.write(f"  Created {task['id']}: {description} [{status}]")

        self.stdout.write(self.style.SUCCESS(f"Seeded {options['count']} tasks"))
