from django.core.management.base import BaseCommand
from django.utils import timezone

from app_storefront.models import Order


class Command(BaseCommand):
    help = 'Deletes cancelled orders older than the given number of days'

    def add_arguments(self, parser):
        parser.add_argument('--days', type=int, default=30)

    def handle(self, *args, **options):
        cutoff = timezone.now() - timezone.timedelta(days=options['days'])

        deleted, _ = Order.objects.filter(
            status=Order.STATUS_CANCELLED,
            created_at__lt=cutoff,
        ).delete()

        self.stdout.write(self.style.SUCCESS(f'Deleted {deleted} cancelled orders'))
