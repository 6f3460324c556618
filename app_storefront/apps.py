from django.apps import AppConfig


class AppStorefrontConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'app_storefront'
    verbose_name = 'Storefront'
