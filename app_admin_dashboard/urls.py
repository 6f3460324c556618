# app_admin_dashboard/urls.py

from django.urls import path
from . import views

urlpatterns = [
    path('orders/', views.orders_view, name='dashboard_orders'),
    path('orders/<int:order_id>/status/', views.update_order_status_view, name='update_order_status'),
    path('users/<int:user_id>/delivery_fee/', views.update_delivery_fee_view, name='update_delivery_fee'),
    path('menu_items/<int:menu_item_id>/toggle_availability/', views.toggle_menu_item_availability_view, name='toggle_menu_item_availability'),
    path('carousel/<int:image_id>/toggle_active/', views.toggle_carousel_active_view, name='toggle_carousel_active'),
    path('sales_summary/', views.sales_summary_view, name='sales_summary'),
]
