# In app_admin_dashboard/models.py

from django.db import models
from django.conf import settings

from app_storefront.conf import get_delivery_days


DAY_CHOICES = [(day, day) for day in get_delivery_days()]


class MenuItem(models.Model):
    menu_item_id = models.AutoField(primary_key=True)
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True, default='')
    price = models.DecimalField(max_digits=8, decimal_places=2)
    large_price = models.DecimalField(
        max_digits=8, decimal_places=2, null=True, blank=True,
        help_text="Unit price for a large meal on meal-size days"
    )
    day = models.CharField(max_length=10, choices=DAY_CHOICES)
    image_url = models.URLField(max_length=500, blank=True, default='')
    is_available = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['day', 'name']

    def __str__(self):
        return f"{self.name} ({self.day})"

    def is_orderable_on(self, day):
        return self.is_available and self.day == day

    def to_dict(self):
        return {
            'id': self.menu_item_id,
            'name': self.name,
            'description': self.description,
            'price': str(self.price),
            'large_price': str(self.large_price) if self.large_price is not None else None,
            'day': self.day,
            'image_url': self.image_url,
            'is_available': self.is_available,
        }


class WeeklyMenu(models.Model):
    title = models.CharField(max_length=200)
    image_url = models.URLField(max_length=500, blank=True, default='')
    notes = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        get_latest_by = 'created_at'

    def __str__(self):
        return self.title

    def to_dict(self):
        return {
            'id': self.pk,
            'title': self.title,
            'image_url': self.image_url,
            'notes': self.notes,
            'created_at': self.created_at.isoformat(),
        }


class CarouselImage(models.Model):
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True, default='')
    image_url = models.URLField(max_length=500)
    order_num = models.PositiveIntegerField(default=0)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['order_num']

    def __str__(self):
        return self.title

    def to_dict(self):
        return {
            'id': self.pk,
            'title': self.title,
            'description': self.description,
            'image_url': self.image_url,
            'order_num': self.order_num,
        }


class AdminUser(models.Model):
    ROLE_CHOICES = [
        ('admin', 'Admin'),
        ('manager', 'Manager'),
    ]

    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default='admin')
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.user.get_username()} ({self.role})"
