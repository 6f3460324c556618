"""Storefront configuration."""

from django.conf import settings


def get_config():
    """Get storefront configuration from settings."""
    defaults = {
        'STORE_NAME': 'Green Box',

        # Weekdays a menu is offered and delivered, in display order
        'DELIVERY_DAYS': ['Tuesday', 'Wednesday', 'Thursday'],

        # Days on which a large meal size overrides the unit price
        'MEAL_SIZE_DAYS': ['Wednesday', 'Thursday'],

        'CART_SESSION_KEY': 'greenbox-cart',
        'MAX_ITEM_QUANTITY': 15,
        'DEFAULT_DELIVERY_FEE': '0.00',
    }

    user_config = getattr(settings, 'GREENBOX', {})
    return {**defaults, **user_config}


def get_setting(name, default=None):
    """Get a specific storefront setting."""
    config = get_config()
    return config.get(name, default)


def get_delivery_days():
    return list(get_setting('DELIVERY_DAYS', []))


def get_meal_size_days():
    return list(get_setting('MEAL_SIZE_DAYS', []))
