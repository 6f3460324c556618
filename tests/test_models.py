"""Tests for order status rules and record serialisation."""

import pytest

from app_storefront.exceptions import InvalidStatusTransition
from app_storefront.models import Order, UserProfile


@pytest.mark.django_db
class TestOrderStatus:
    """Tests for Order status transitions."""

    @pytest.mark.parametrize("current,requested", [
        (Order.STATUS_PENDING, Order.STATUS_CONFIRMED),
        (Order.STATUS_PENDING, Order.STATUS_CANCELLED),
        (Order.STATUS_CONFIRMED, Order.STATUS_DELIVERED),
        (Order.STATUS_CONFIRMED, Order.STATUS_CANCELLED),
    ])
    def test_allowed_transitions(self, order, current, requested):
        Order.objects.filter(pk=order.pk).update(status=current)
        order.refresh_from_db()

        order.transition_to(requested)

        order.refresh_from_db()
        assert order.status == requested

    @pytest.mark.parametrize("current,requested", [
        (Order.STATUS_PENDING, Order.STATUS_DELIVERED),
        (Order.STATUS_CONFIRMED, Order.STATUS_PENDING),
        (Order.STATUS_DELIVERED, Order.STATUS_CANCELLED),
        (Order.STATUS_CANCELLED, Order.STATUS_PENDING),
        (Order.STATUS_PENDING, Order.STATUS_PENDING),
    ])
    def test_rejected_transitions(self, order, current, requested):
        Order.objects.filter(pk=order.pk).update(status=current)
        order.refresh_from_db()

        with pytest.raises(InvalidStatusTransition) as excinfo:
            order.transition_to(requested)

        assert excinfo.value.current == current
        order.refresh_from_db()
        assert order.status == current


@pytest.mark.django_db
class TestSerialisation:
    """Tests for the JSON shapes returned by the API."""

    def test_order_to_dict(self, order):
        data = order.to_dict()

        assert data["status"] == "pending"
        assert data["payment_method_display"] == "Cash on delivery/pick up"
        assert data["subtotal"] == "100.00"
        assert data["delivery_days"] == ["Tuesday"]

    def test_order_item_count(self, order):
        assert order.item_count() == 2

    def test_profile_to_dict_without_fee(self, customer_profile):
        data = customer_profile.to_dict()

        assert data["delivery_fee"] is None
        assert data["email"] == "customer@example.com"
        assert str(customer_profile) == "Maya Ramdial"

    def test_profile_str_falls_back_to_username(self, customer):
        profile = UserProfile.objects.create(user=customer)

        assert str(profile) == "customer"
