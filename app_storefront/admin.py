# app_storefront/admin.py
from django.contrib import admin
from .models import Order, UserProfile


class UserProfileAdmin(admin.ModelAdmin):
    list_display = ('user', 'full_name', 'phone', 'delivery_fee', 'include_cutlery')
    search_fields = ('user__username', 'user__email', 'full_name', 'phone', 'address')


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ('order_id', 'customer_name', 'get_payment_method_display', 'status', 'created_at', 'total_amount')
    list_filter = ('status', 'payment_method', 'created_at')
    search_fields = ('order_id', 'customer_name', 'customer_phone', 'customer_address')

    fieldsets = (
        ('Order Information', {
            'fields': (
                'order_id',
                'user',
                'status',
                'created_at',
                'delivery_days',
            ),
        }),
        ('Totals', {
            'fields': (
                'subtotal',
                'delivery_fee',
                'total_amount',
                'payment_method',
            ),
        }),
        ('Customer', {
            'fields': (
                'customer_name',
                'customer_phone',
                'customer_address',
            ),
        }),
        ('Items', {
            'fields': ('cart_items', 'special_requests'),
            'classes': ('collapse',),
        }),
    )
    readonly_fields = ('order_id', 'created_at', 'subtotal', 'delivery_fee', 'total_amount', 'cart_items', 'delivery_days')


admin.site.register(UserProfile, UserProfileAdmin)
