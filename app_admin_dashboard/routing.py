# app_admin_dashboard/routing.py
from django.urls import re_path
from . import consumers

websocket_urlpatterns = [
    re_path(r'ws/dashboard/orders/$', consumers.OrderNotificationConsumer.as_asgi()),
]
