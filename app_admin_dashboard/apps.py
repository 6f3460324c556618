from django.apps import AppConfig


class AppAdminDashboardConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'app_admin_dashboard'
    verbose_name = 'Admin Dashboard'
