from functools import wraps

from django.http import JsonResponse

from .models import AdminUser


def is_dashboard_user(user):
    if not user.is_authenticated:
        return False
    if user.is_superuser:
        return True
    return AdminUser.objects.filter(user=user).exists()


def admin_required(view_func):
    @wraps(view_func)
    def wrapper_func(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return JsonResponse({'status': 'error', 'message': 'Please log in to continue.'}, status=401)
        if not is_dashboard_user(request.user):
            return JsonResponse({'status': 'error', 'message': 'Access denied.'}, status=403)
        return view_func(request, *args, **kwargs)
    return wrapper_func
