"""
Management command to flag unpaid fees whose due date has passed.
"""

from datetime import date

from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from apps.finance.services import FeeService


class Command(BaseCommand):
    help = 'Mark pending and partially paid fees past their due date as overdue'

    def add_arguments(self, parser):
        parser.add_argument(
            '--date',
            type=str,
            help='Treat this day (YYYY-MM-DD) as today. Defaults to the current date.',
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show how many fees would be marked without changing anything',
        )

    def handle(self, *args, **options):
        today = timezone.localdate()
        if options.get('date'):
            try:
                today = date.fromisoformat(options['date'])
            except ValueError:
                raise CommandError(f"Invalid date '{options['date']}', expected YYYY-MM-DD")

        count = FeeService.mark_overdue(today=today, dry_run=options['dry_run'])

        if options['dry_run']:
            self.stdout.write(
                self.style.WARNING(f'DRY RUN: {count} fees would be marked overdue (due before {today})')
            )
        else:
            self.stdout.write(
                self.style.SUCCESS(f'Marked {count} fees overdue (due before {today})')
            )
