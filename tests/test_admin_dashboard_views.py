"""Tests for the admin dashboard endpoints.

Covers:
- Access control for anonymous, customer and dashboard users
- Order listing and status changes
- Per-customer delivery fees
- Menu item and carousel toggles
- Today's sales summary
"""

from datetime import timedelta
from decimal import Decimal
from unittest import mock

import pytest
from django.urls import reverse
from django.utils import timezone

from app_admin_dashboard.models import CarouselImage
from app_storefront.models import Order, UserProfile


@pytest.mark.django_db
class TestAccessControl:
    """Dashboard endpoints are limited to dashboard users."""

    def test_anonymous_user_gets_401(self, client):
        response = client.get(reverse("dashboard_orders"))

        assert response.status_code == 401

    def test_customer_gets_403(self, customer_client):
        response = customer_client.get(reverse("dashboard_orders"))

        assert response.status_code == 403
        assert response.json()["message"] == "Access denied."

    def test_superuser_without_admin_row_is_allowed(self, client, django_user_model):
        superuser = django_user_model.objects.create_superuser(
            username="owner", email="owner@example.com", password="testpass123",
        )
        client.force_login(superuser)

        response = client.get(reverse("dashboard_orders"))

        assert response.status_code == 200


@pytest.mark.django_db
class TestOrders:
    """Tests for listing orders and changing their status."""

    def test_lists_orders_newest_first(self, dashboard_client, order, customer):
        newer = Order.objects.create(user=customer, payment_method="cheque")

        response = dashboard_client.get(reverse("dashboard_orders"))

        ids = [o["order_id"] for o in response.json()["orders"]]
        assert ids == [newer.order_id, order.order_id]

    def test_filters_by_status(self, dashboard_client, order, customer):
        Order.objects.create(user=customer, payment_method="cash", status=Order.STATUS_CANCELLED)

        response = dashboard_client.get(reverse("dashboard_orders"), {"status": "pending"})

        assert [o["order_id"] for o in response.json()["orders"]] == [order.order_id]

    def test_unknown_status_filter_is_rejected(self, dashboard_client):
        response = dashboard_client.get(reverse("dashboard_orders"), {"status": "lost"})

        assert response.status_code == 400

    def test_confirm_pending_order(self, dashboard_client, order):
        url = reverse("update_order_status", args=[order.order_id])

        with mock.patch("app_admin_dashboard.views.send_status_notification") as notify:
            response = dashboard_client.post(url, {"status": "confirmed"})

        assert response.status_code == 200
        assert response.json()["order"]["status"] == "confirmed"
        order.refresh_from_db()
        assert order.status == Order.STATUS_CONFIRMED
        notify.assert_called_once()
        assert notify.call_args.args[1] == Order.STATUS_PENDING

    def test_delivered_order_cannot_reopen(self, dashboard_client, order):
        Order.objects.filter(pk=order.pk).update(status=Order.STATUS_DELIVERED)
        url = reverse("update_order_status", args=[order.order_id])

        response = dashboard_client.post(url, {"status": "pending"})

        assert response.status_code == 400
        assert response.json()["message"] == "Cannot move order from 'delivered' to 'pending'"
        order.refresh_from_db()
        assert order.status == Order.STATUS_DELIVERED

    def test_unknown_status_value(self, dashboard_client, order):
        url = reverse("update_order_status", args=[order.order_id])

        response = dashboard_client.post(url, {"status": "shipped"})

        assert response.status_code == 400
        assert "status" in response.json()["errors"]

    def test_missing_order(self, dashboard_client):
        response = dashboard_client.post(reverse("update_order_status", args=[999]), {"status": "confirmed"})

        assert response.status_code == 404


@pytest.mark.django_db
class TestDeliveryFee:
    """Tests for setting a customer's delivery fee."""

    def url(self, user):
        return reverse("update_delivery_fee", args=[user.pk])

    @pytest.mark.parametrize("value,expected", [
        ("7.5", "7.50"),
        ("$12.00", "12.00"),
        ("TT$ 1,000", "1000.00"),
    ])
    def test_sets_fee_from_typed_amount(self, dashboard_client, customer_profile, customer, value, expected):
        response = dashboard_client.post(self.url(customer), {"delivery_fee": value})

        assert response.status_code == 200
        assert response.json()["profile"]["delivery_fee"] == expected
        customer_profile.refresh_from_db()
        assert customer_profile.delivery_fee == Decimal(expected)

    def test_blank_clears_fee(self, dashboard_client, customer_profile, customer):
        customer_profile.delivery_fee = Decimal("15.00")
        customer_profile.save()

        response = dashboard_client.post(self.url(customer), {"delivery_fee": ""})

        assert response.json()["profile"]["delivery_fee"] is None

    @pytest.mark.parametrize("value", ["-5", "free", "1000000"])
    def test_rejects_bad_amounts(self, dashboard_client, customer_profile, customer, value):
        response = dashboard_client.post(self.url(customer), {"delivery_fee": value})

        assert response.status_code == 400
        assert "delivery_fee" in response.json()["errors"]

    def test_creates_profile_when_missing(self, dashboard_client, customer):
        response = dashboard_client.post(self.url(customer), {"delivery_fee": "5"})

        assert response.status_code == 200
        assert UserProfile.objects.get(user=customer).delivery_fee == Decimal("5.00")

    def test_missing_user(self, dashboard_client):
        response = dashboard_client.post(reverse("update_delivery_fee", args=[999]), {"delivery_fee": "5"})

        assert response.status_code == 404


@pytest.mark.django_db
class TestToggles:
    """Tests for availability and carousel toggles."""

    def test_toggle_menu_item_availability(self, dashboard_client, tuesday_item):
        url = reverse("toggle_menu_item_availability", args=[tuesday_item.pk])

        first = dashboard_client.post(url)
        second = dashboard_client.post(url)

        assert first.json()["menu_item"]["is_available"] is False
        assert second.json()["menu_item"]["is_available"] is True

    def test_toggle_missing_menu_item(self, dashboard_client):
        response = dashboard_client.post(reverse("toggle_menu_item_availability", args=[999]))

        assert response.status_code == 404

    def test_toggle_carousel_image(self, dashboard_client):
        image = CarouselImage.objects.create(title="Fresh", image_url="https://example.com/fresh.jpg")

        response = dashboard_client.post(reverse("toggle_carousel_active", args=[image.pk]))

        assert response.json()["carousel_image"]["is_active"] is False
        image.refresh_from_db()
        assert image.is_active is False


@pytest.mark.django_db
class TestSalesSummary:
    """Tests for today's sales summary."""

    def test_summarises_todays_billable_orders(self, dashboard_client, order, customer):
        Order.objects.create(user=customer, payment_method="cash", total_amount=Decimal("40.00"))
        Order.objects.create(
            user=customer, payment_method="cash", total_amount=Decimal("99.00"),
            status=Order.STATUS_CANCELLED,
        )
        old = Order.objects.create(user=customer, payment_method="cash", total_amount=Decimal("500.00"))
        Order.objects.filter(pk=old.pk).update(created_at=timezone.now() - timedelta(days=3))

        response = dashboard_client.get(reverse("sales_summary"))

        data = response.json()
        assert data["order_count"] == 2
        assert Decimal(data["total_amount"]) == Decimal("150.00")
        assert data["orders_by_status"] == {"pending": 2, "cancelled": 1}

    def test_no_orders_today(self, dashboard_client):
        response = dashboard_client.get(reverse("sales_summary"))

        data = response.json()
        assert data["order_count"] == 0
        assert data["total_amount"] == "0.00"
        assert data["orders_by_status"] == {}
