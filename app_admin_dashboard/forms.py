# app_admin_dashboard/forms.py
from django import forms

from app_storefront.cart import parse_price, round_money
from app_storefront.models import Order


class OrderStatusForm(forms.Form):
    status = forms.ChoiceField(choices=Order.STATUS_CHOICES)


class DeliveryFeeForm(forms.Form):
    """Delivery fee as typed by an admin: ``"5"``, ``"$5.00"`` or blank to clear it."""

    delivery_fee = forms.CharField(max_length=20, required=False)

    def clean_delivery_fee(self):
        value = self.cleaned_data.get('delivery_fee', '').strip()
        if not value:
            return None
        if not any(c.isdigit() for c in value):
            raise forms.ValidationError("Enter a valid amount.")
        if value.startswith('-'):
            raise forms.ValidationError("Delivery fee cannot be negative.")
        fee = parse_price(value)
        if fee >= 10 ** 6:
            raise forms.ValidationError("Delivery fee is too large.")
        return round_money(fee)
