# app_storefront/urls.py

from django.urls import path
from . import views

urlpatterns = [
    path('', views.home_view, name='home'),
    path('menu/', views.menu_view, name='menu'),
    path('cart/', views.cart_page_view, name='cart_page'),
    path('cart/add/', views.add_to_cart_view, name='add_to_cart'),
    path('cart/update/', views.update_cart_view, name='update_cart'),
    path('cart/remove/', views.remove_item_from_cart_view, name='remove_item_from_cart'),
    path('cart/clear/', views.clear_cart_view, name='clear_cart'),
    path('cart/check_availability/', views.check_cart_availability_view, name='check_cart_availability'),
    path('checkout/', views.place_order_view, name='checkout'),
    path('account/', views.account_view, name='account'),
    path('account/orders/', views.order_history_view, name='order_history'),
]
