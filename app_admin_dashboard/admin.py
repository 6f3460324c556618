# app_admin_dashboard/admin.py
from django.contrib import admin

from .models import AdminUser, CarouselImage, MenuItem, WeeklyMenu


class MenuItemAdmin(admin.ModelAdmin):
    list_display = ('name', 'day', 'price', 'large_price', 'is_available')
    list_filter = ('day', 'is_available')
    list_editable = ('is_available',)
    search_fields = ('name', 'description')


class WeeklyMenuAdmin(admin.ModelAdmin):
    list_display = ('title', 'created_at')
    search_fields = ('title', 'notes')


class CarouselImageAdmin(admin.ModelAdmin):
    list_display = ('title', 'order_num', 'is_active')
    list_editable = ('order_num', 'is_active')


class AdminUserAdmin(admin.ModelAdmin):
    list_display = ('user', 'role', 'created_at')
    list_filter = ('role',)
    search_fields = ('user__username', 'user__email')


admin.site.register(MenuItem, MenuItemAdmin)
admin.site.register(WeeklyMenu, WeeklyMenuAdmin)
admin.site.register(CarouselImage, CarouselImageAdmin)
admin.site.register(AdminUser, AdminUserAdmin)
