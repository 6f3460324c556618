# app_admin_dashboard/views.py
import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import Count, Sum
from django.http import JsonResponse
from django.utils import timezone

from app_storefront.exceptions import InvalidStatusTransition
from app_storefront.models import Order, UserProfile
from .decorators import admin_required
from .forms import DeliveryFeeForm, OrderStatusForm
from .models import CarouselImage, MenuItem
from .notifications import send_status_notification

logger = logging.getLogger(__name__)

User = get_user_model()


def today_range():
    start_of_today = timezone.localtime().replace(hour=0, minute=0, second=0, microsecond=0)
    end_of_today = start_of_today + timezone.timedelta(days=1)
    return start_of_today, end_of_today


@admin_required
def orders_view(request):
    orders = Order.objects.select_related('user').order_by('-created_at', '-order_id')

    status = request.GET.get('status')
    if status:
        if status not in dict(Order.STATUS_CHOICES):
            return JsonResponse({'status': 'error', 'message': f"Unknown status '{status}'."}, status=400)
        orders = orders.filter(status=status)

    return JsonResponse({'orders': [order.to_dict() for order in orders]})


@admin_required
def update_order_status_view(request, order_id):
    if request.method != 'POST':
        return JsonResponse({'status': 'error', 'message': 'Invalid request.'}, status=400)

    form = OrderStatusForm(request.POST)
    if not form.is_valid():
        return JsonResponse({'status': 'error', 'errors': form.errors.get_json_data()}, status=400)

    try:
        with transaction.atomic():
            order = Order.objects.select_for_update().get(pk=order_id)
            previous_status = order.status
            order.transition_to(form.cleaned_data['status'])
    except Order.DoesNotExist:
        return JsonResponse({'status': 'error', 'message': 'Order not found.'}, status=404)
    except InvalidStatusTransition as e:
        return JsonResponse({'status': 'error', 'message': str(e)}, status=400)

    send_status_notification(order, previous_status)
    logger.info("Order %s moved from %s to %s by %s",
                order.order_id, previous_status, order.status, request.user.pk)

    return JsonResponse({'status': 'success', 'order': order.to_dict()})


@admin_required
def update_delivery_fee_view(request, user_id):
    if request.method != 'POST':
        return JsonResponse({'status': 'error', 'message': 'Invalid request.'}, status=400)

    try:
        user = User.objects.get(pk=user_id)
    except User.DoesNotExist:
        return JsonResponse({'status': 'error', 'message': 'User not found.'}, status=404)

    form = DeliveryFeeForm(request.POST)
    if not form.is_valid():
        return JsonResponse({'status': 'error', 'errors': form.errors.get_json_data()}, status=400)

    profile, created = UserProfile.objects.get_or_create(user=user)
    profile.delivery_fee = form.cleaned_data['delivery_fee']
    profile.save(update_fields=['delivery_fee', 'updated_at'])

    logger.info("Delivery fee for user %s set to %s", user.pk, profile.delivery_fee)

    return JsonResponse({'status': 'success', 'profile': profile.to_dict()})


@admin_required
def toggle_menu_item_availability_view(request, menu_item_id):
    if request.method != 'POST':
        return JsonResponse({'status': 'error', 'message': 'Invalid request.'}, status=400)

    try:
        menu_item = MenuItem.objects.get(pk=menu_item_id)
    except MenuItem.DoesNotExist:
        return JsonResponse({'status': 'error', 'message': 'Menu item not found.'}, status=404)

    menu_item.is_available = not menu_item.is_available
    menu_item.save(update_fields=['is_available'])

    return JsonResponse({'status': 'success', 'menu_item': menu_item.to_dict()})


@admin_required
def toggle_carousel_active_view(request, image_id):
    if request.method != 'POST':
        return JsonResponse({'status': 'error', 'message': 'Invalid request.'}, status=400)

    try:
        image = CarouselImage.objects.get(pk=image_id)
    except CarouselImage.DoesNotExist:
        return JsonResponse({'status': 'error', 'message': 'Carousel image not found.'}, status=404)

    image.is_active = not image.is_active
    image.save(update_fields=['is_active'])

    return JsonResponse({'status': 'success', 'carousel_image': {**image.to_dict(), 'is_active': image.is_active}})


@admin_required
def sales_summary_view(request):
    start_of_today, end_of_today = today_range()
    todays_orders = Order.objects.filter(created_at__gte=start_of_today, created_at__lt=end_of_today)

    billable = todays_orders.exclude(status=Order.STATUS_CANCELLED)
    totals = billable.aggregate(order_count=Count('order_id'), total_amount=Sum('total_amount'))
    by_status = {
        row['status']: row['count']
        for row in todays_orders.order_by().values('status').annotate(count=Count('order_id'))
    }

    return JsonResponse({
        'date': start_of_today.date().isoformat(),
        'order_count': totals['order_count'],
        'total_amount': str(totals['total_amount'] or '0.00'),
        'orders_by_status': by_status,
    })
