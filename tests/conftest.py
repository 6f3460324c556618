"""Shared pytest fixtures for storefront and dashboard tests."""

from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from django.test import Client


User = get_user_model()


@pytest.fixture
def client():
    """Return a Django test client."""
    return Client()


@pytest.fixture
def customer(db):
    """Create a customer account."""
    return User.objects.create_user(
        username="customer",
        email="customer@example.com",
        password="testpass123",
        first_name="Maya",
        last_name="Ramdial",
    )


@pytest.fixture
def customer_profile(db, customer):
    """Create a delivery profile for the customer."""
    from app_storefront.models import UserProfile

    return UserProfile.objects.create(
        user=customer,
        full_name="Maya Ramdial",
        phone="868-555-0101",
        address="12 Saddle Road, Maraval",
    )


@pytest.fixture
def customer_client(client, customer):
    """A client logged in as the customer."""
    client.force_login(customer)
    return client


@pytest.fixture
def dashboard_user(db):
    """Create a staff member with dashboard access."""
    from app_admin_dashboard.models import AdminUser

    user = User.objects.create_user(
        username="manager",
        email="manager@example.com",
        password="testpass123",
    )
    AdminUser.objects.create(user=user, role="manager")
    return user


@pytest.fixture
def dashboard_client(client, dashboard_user):
    """A client logged in as a dashboard user."""
    client.force_login(dashboard_user)
    return client


@pytest.fixture
def tuesday_item(db):
    """A Tuesday menu item without a large size."""
    from app_admin_dashboard.models import MenuItem

    return MenuItem.objects.create(
        name="Lentil Curry Bowl",
        price=Decimal("50.00"),
        day="Tuesday",
    )


@pytest.fixture
def wednesday_item(db):
    """A Wednesday menu item with a large size."""
    from app_admin_dashboard.models import MenuItem

    return MenuItem.objects.create(
        name="Callaloo Pasta",
        price=Decimal("60.00"),
        large_price=Decimal("75.00"),
        day="Wednesday",
    )


@pytest.fixture
def order(db, customer):
    """A pending order for the customer."""
    from app_storefront.models import Order

    return Order.objects.create(
        user=customer,
        customer_name="Maya Ramdial",
        cart_items=[
            {"day": "Tuesday", "menu_item_id": "1", "name": "Lentil Curry Bowl",
             "price": "50.00", "quantity": 2, "line_total": "100.00"},
        ],
        delivery_days=["Tuesday"],
        payment_method="cash",
        subtotal=Decimal("100.00"),
        delivery_fee=Decimal("10.00"),
        total_amount=Decimal("110.00"),
    )
