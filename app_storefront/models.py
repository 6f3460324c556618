# In app_storefront/models.py
from django.conf import settings
from django.db import models
from django.utils import timezone

from .exceptions import InvalidStatusTransition


class UserProfile(models.Model):
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='profile')
    full_name = models.CharField(max_length=150, blank=True, default='')
    phone = models.CharField(max_length=30, blank=True, default='')
    address = models.TextField(blank=True, default='')
    latitude = models.FloatField(null=True, blank=True)
    longitude = models.FloatField(null=True, blank=True)
    dietary_restrictions = models.TextField(blank=True, default='')
    preferences = models.TextField(blank=True, default='')
    include_cutlery = models.BooleanField(default=False)
    delivery_fee = models.DecimalField(
        max_digits=8, decimal_places=2, null=True, blank=True,
        help_text="Flat fee added once to every order; set by admins"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.full_name or self.user.get_username()

    def to_dict(self):
        return {
            'user_id': self.user_id,
            'email': self.user.email,
            'full_name': self.full_name,
            'phone': self.phone,
            'address': self.address,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'dietary_restrictions': self.dietary_restrictions,
            'preferences': self.preferences,
            'include_cutlery': self.include_cutlery,
            'delivery_fee': str(self.delivery_fee) if self.delivery_fee is not None else None,
        }


class Order(models.Model):
    STATUS_PENDING = 'pending'
    STATUS_CONFIRMED = 'confirmed'
    STATUS_DELIVERED = 'delivered'
    STATUS_CANCELLED = 'cancelled'

    STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_CONFIRMED, 'Confirmed'),
        (STATUS_DELIVERED, 'Delivered'),
        (STATUS_CANCELLED, 'Cancelled'),
    ]

    # Allowed moves from each status; delivered and cancelled are final
    STATUS_TRANSITIONS = {
        STATUS_PENDING: {STATUS_CONFIRMED, STATUS_CANCELLED},
        STATUS_CONFIRMED: {STATUS_DELIVERED, STATUS_CANCELLED},
        STATUS_DELIVERED: set(),
        STATUS_CANCELLED: set(),
    }

    PAYMENT_METHOD_CHOICES = [
        ('cash', 'Cash on delivery/pick up'),
        ('cheque', 'Cheque (written to Green Box)'),
        ('bank_transfer_fcib', 'Bank Transfer (FCIB 1st Pay)'),
        ('bank_transfer_rbc', 'Bank Transfer RBC'),
        ('usd_transfer', 'Venmo/Cash App/Zelle (USD transfer)'),
        ('online_link', 'Online Payment link (VISA/MasterCard)'),
    ]

    order_id = models.AutoField(primary_key=True)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='orders')
    customer_name = models.CharField(max_length=150, blank=True, default='')
    customer_phone = models.CharField(max_length=30, blank=True, default='')
    customer_address = models.TextField(blank=True, default='')
    cart_items = models.JSONField(default=list)
    delivery_days = models.JSONField(default=list)
    special_requests = models.TextField(blank=True, default='')
    payment_method = models.CharField(max_length=30, choices=PAYMENT_METHOD_CHOICES)
    subtotal = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    delivery_fee = models.DecimalField(max_digits=8, decimal_places=2, default=0)
    total_amount = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at', '-order_id']

    def __str__(self):
        return f"Order #{self.order_id} - {self.customer_name or self.user} ({self.status})"

    def can_transition_to(self, status):
        return status in self.STATUS_TRANSITIONS.get(self.status, set())

    def transition_to(self, status):
        if not self.can_transition_to(status):
            raise InvalidStatusTransition(self.status, status)
        self.status = status
        self.save(update_fields=['status'])

    def item_count(self):
        return sum(int(item.get('quantity', 0)) for item in self.cart_items)

    def to_dict(self):
        return {
            'order_id': self.order_id,
            'user_id': self.user_id,
            'customer_name': self.customer_name,
            'customer_phone': self.customer_phone,
            'customer_address': self.customer_address,
            'cart_items': self.cart_items,
            'delivery_days': self.delivery_days,
            'special_requests': self.special_requests,
            'payment_method': self.payment_method,
            'payment_method_display': self.get_payment_method_display(),
            'subtotal': str(self.subtotal),
            'delivery_fee': str(self.delivery_fee),
            'total_amount': str(self.total_amount),
            'status': self.status,
            'created_at': timezone.localtime(self.created_at).strftime('%Y-%m-%d %H:%M'),
        }
