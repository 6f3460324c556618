"""Management command to seed a sample week of Green Box menus."""

from decimal import Decimal

from django.core.management.base import BaseCommand

from app_admin_dashboard.models import CarouselImage, MenuItem, WeeklyMenu


MENU_ITEMS = [
    {
        "name": "Lentil Curry Bowl",
        "description": "Red lentils, coconut milk and turmeric over brown rice.",
        "price": Decimal("55.00"),
        "large_price": None,
        "day": "Tuesday",
    },
    {
        "name": "Chickpea Roti",
        "description": "Curried chickpeas and potato wrapped in dhalpuri.",
        "price": Decimal("45.00"),
        "large_price": None,
        "day": "Tuesday",
    },
    {
        "name": "Callaloo Pasta",
        "description": "Whole wheat penne in a creamy callaloo sauce.",
        "price": Decimal("60.00"),
        "large_price": Decimal("75.00"),
        "day": "Wednesday",
    },
    {
        "name": "Jackfruit Pelau",
        "description": "One-pot pigeon peas, rice and stewed jackfruit.",
        "price": Decimal("60.00"),
        "large_price": Decimal("78.00"),
        "day": "Thursday",
    },
    {
        "name": "Sorrel Chia Pudding",
        "description": "Chia seeds set in sorrel and coconut cream.",
        "price": Decimal("25.00"),
        "large_price": None,
        "day": "Thursday",
    },
]

CAROUSEL_IMAGES = [
    {
        "title": "Fresh every week",
        "description": "Plant-based meals delivered Tuesday to Thursday.",
        "image_url": "https://example.com/images/carousel-fresh.jpg",
        "order_num": 1,
    },
    {
        "title": "Order by Sunday",
        "description": "Place your order for the coming week.",
        "image_url": "https://example.com/images/carousel-order.jpg",
        "order_num": 2,
    },
]


class Command(BaseCommand):
    help = "Seed sample menu items, a weekly menu and carousel images"

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Delete existing menu items and carousel images first",
        )

    def handle(self, *args, **options):
        if options["clear"]:
            MenuItem.objects.all().delete()
            CarouselImage.objects.all().delete()
            self.stdout.write("Cleared existing menu items and carousel images")

        created_count = 0
        for data in MENU_ITEMS:
            _, created = MenuItem.objects.get_or_create(
                name=data["name"],
                day=data["day"],
                defaults={
                    "description": data["description"],
                    "price": data["price"],
                    "large_price": data["large_price"],
                },
            )
            if created:
                created_count += 1

        for data in CAROUSEL_IMAGES:
            CarouselImage.objects.get_or_create(title=data["title"], defaults=data)

        if not WeeklyMenu.objects.exists():
            WeeklyMenu.objects.create(
                title="This Week's Menu",
                notes="Orders close Sunday at 6pm.",
            )

        self.stdout.write(self.style.SUCCESS(f"Created {created_count} menu items"))
