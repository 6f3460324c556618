from functools import wraps

from django.http import JsonResponse


def login_required_json(view_func):
    """Like ``login_required``, but answers anonymous requests with a 401 JSON body."""
    @wraps(view_func)
    def _wrapped_view(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return JsonResponse({'status': 'error', 'message': 'Please log in to continue.'}, status=401)
        return view_func(request, *args, **kwargs)
    return _wrapped_view
