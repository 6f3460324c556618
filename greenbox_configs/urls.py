from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('dashboard/', include('app_admin_dashboard.urls')),
    path('', include('app_storefront.urls')),
]
