# app_storefront/views.py
import logging

from django.db import transaction
from django.forms.models import model_to_dict
from django.http import JsonResponse

from app_admin_dashboard.models import CarouselImage, MenuItem, WeeklyMenu
from app_admin_dashboard.notifications import send_order_notification
from app_storefront.cart import Cart, parse_price, round_money
from app_storefront.conf import get_delivery_days, get_setting
from app_storefront.decorators import login_required_json
from app_storefront.exceptions import CartError
from app_storefront.forms import (
    AddToCartForm,
    CheckoutForm,
    ProfileForm,
    RemoveFromCartForm,
    UpdateCartForm,
)
from app_storefront.models import Order, UserProfile

logger = logging.getLogger(__name__)


def invalid_request(message='Invalid request.', status=400):
    return JsonResponse({'status': 'error', 'message': message}, status=status)


def form_errors(form):
    return JsonResponse({'status': 'error', 'errors': form.errors.get_json_data()}, status=400)


def get_delivery_fee(user):
    """The flat delivery fee for ``user``'s orders.

    Admins set the fee per customer; customers without one pay the store
    default.
    """
    if user.is_authenticated:
        profile = UserProfile.objects.filter(user=user).first()
        if profile is not None and profile.delivery_fee is not None:
            return profile.delivery_fee
    return parse_price(get_setting('DEFAULT_DELIVERY_FEE'))


def get_menu_items_for(cart):
    item_ids = [item_id for item_id in cart.item_ids() if item_id.isdigit()]
    return {str(item.pk): item for item in MenuItem.objects.filter(pk__in=item_ids)}


def find_unavailable_lines(cart, menu_items):
    unavailable = []
    for line in cart:
        menu_item = menu_items.get(line['id'])
        if menu_item is None or not menu_item.is_orderable_on(line['day']):
            unavailable.append({'day': line['day'], 'item_id': line['id'], 'name': line['name']})
    return unavailable


def cart_response(request, cart, **extra):
    return JsonResponse({
        'status': 'success',
        'cart': cart.summary(get_delivery_fee(request.user)),
        **extra,
    })


def home_view(request):
    carousel_images = CarouselImage.objects.filter(is_active=True).order_by('order_num')
    weekly_menu = WeeklyMenu.objects.order_by('-created_at').first()

    return JsonResponse({
        'store_name': get_setting('STORE_NAME'),
        'delivery_days': get_delivery_days(),
        'carousel_images': [image.to_dict() for image in carousel_images],
        'weekly_menu': weekly_menu.to_dict() if weekly_menu else None,
    })


def menu_view(request):
    delivery_days = get_delivery_days()
    day = request.GET.get('day') or delivery_days[0]

    if day not in delivery_days:
        return invalid_request(f"Menus are only offered on {', '.join(delivery_days)}.")

    menu_items = MenuItem.objects.filter(day=day, is_available=True).order_by('name')

    return JsonResponse({
        'day': day,
        'menu_items': [item.to_dict() for item in menu_items],
    })


def cart_page_view(request):
    cart = Cart(request)
    return cart_response(request, cart)


def add_to_cart_view(request):
    if request.method != 'POST':
        return invalid_request()

    form = AddToCartForm(request.POST)
    if not form.is_valid():
        return form_errors(form)

    day = form.cleaned_data['day']
    menu_item = MenuItem.objects.filter(pk=form.cleaned_data['menu_item_id']).first()
    if menu_item is None:
        return invalid_request('Menu item not found.', status=404)
    if not menu_item.is_orderable_on(day):
        return invalid_request(f"{menu_item.name} is not available on {day}.")

    cart = Cart(request)
    try:
        line = cart.add(menu_item, day, form.cleaned_data['quantity'], **form.modifiers())
    except CartError as e:
        return invalid_request(str(e))

    return cart_response(request, cart, line=line)


def update_cart_view(request):
    if request.method != 'POST':
        return invalid_request()

    form = UpdateCartForm(request.POST)
    if not form.is_valid():
        return form_errors(form)

    day = form.cleaned_data['day']
    item_id = form.cleaned_data['item_id']
    new_quantity = form.cleaned_data['quantity']

    cart = Cart(request)
    menu_item = None
    if new_quantity > 0 and cart.get_line(day, item_id) is None:
        # Quantity set straight from the menu page, before the line exists
        menu_item = MenuItem.objects.filter(pk=item_id).first()
        if menu_item is None or not menu_item.is_orderable_on(day):
            return invalid_request('Menu item not available.')

    line = cart.set_quantity(day, item_id, new_quantity, menu_item=menu_item)

    return cart_response(request, cart, line=line)


def remove_item_from_cart_view(request):
    if request.method != 'POST':
        return invalid_request()

    form = RemoveFromCartForm(request.POST)
    if not form.is_valid():
        return form_errors(form)

    cart = Cart(request)
    cart.remove(form.cleaned_data['day'], form.cleaned_data['item_id'])
    return cart_response(request, cart)


def clear_cart_view(request):
    if request.method != 'POST':
        return invalid_request()

    cart = Cart(request)
    cart.clear()
    return cart_response(request, cart)


def check_cart_availability_view(request):
    if request.method != 'POST':
        return invalid_request()

    cart = Cart(request)
    unavailable = find_unavailable_lines(cart, get_menu_items_for(cart))

    return JsonResponse({
        'has_unavailable_items': bool(unavailable),
        'unavailable_items': unavailable,
    })


@login_required_json
@transaction.atomic
def place_order_view(request):
    if request.method != 'POST':
        return invalid_request()

    form = CheckoutForm(request.POST)
    if not form.is_valid():
        return form_errors(form)

    cart = Cart(request)
    if cart.is_empty():
        return invalid_request('Your cart is empty.')

    menu_items = get_menu_items_for(cart)
    unavailable = find_unavailable_lines(cart, menu_items)
    if unavailable:
        return JsonResponse({
            'status': 'error',
            'message': 'Some items in your cart are no longer available.',
            'unavailable_items': unavailable,
        }, status=400)

    # Charge current menu prices, not whatever was in the session
    cart.reprice(menu_items)

    user = request.user
    profile = UserProfile.objects.filter(user=user).first()
    delivery_fee = round_money(parse_price(get_delivery_fee(user)))
    subtotal = round_money(cart.subtotal())

    order = Order.objects.create(
        user=user,
        customer_name=profile.full_name if profile and profile.full_name else user.get_full_name(),
        customer_phone=profile.phone if profile else '',
        customer_address=profile.address if profile else '',
        cart_items=cart.order_lines(),
        delivery_days=cart.delivery_days(),
        special_requests=form.cleaned_data['special_requests'],
        payment_method=form.cleaned_data['payment_method'],
        subtotal=subtotal,
        delivery_fee=delivery_fee,
        total_amount=subtotal + delivery_fee,
    )

    cart.clear()
    transaction.on_commit(lambda: send_order_notification(order))

    logger.info("Order %s placed by user %s for %s (total %s)",
                order.order_id, user.pk, ', '.join(order.delivery_days), order.total_amount)

    return JsonResponse({
        'status': 'success',
        'message': 'Order submitted successfully!',
        'order': order.to_dict(),
    }, status=201)


@login_required_json
def account_view(request):
    profile, created = UserProfile.objects.get_or_create(
        user=request.user,
        defaults={'full_name': request.user.get_full_name()},
    )

    if request.method == 'POST':
        # Fields left out of the request keep their stored values
        data = model_to_dict(profile, fields=ProfileForm.Meta.fields)
        data.update(request.POST.dict())
        form = ProfileForm(data, instance=profile)
        if not form.is_valid():
            return form_errors(form)
        profile = form.save()
        logger.info("Profile updated for user %s", request.user.pk)
        return JsonResponse({'status': 'success', 'message': 'Profile updated successfully!', 'profile': profile.to_dict()})

    return JsonResponse({'status': 'success', 'profile': profile.to_dict()})


@login_required_json
def order_history_view(request):
    orders = Order.objects.filter(user=request.user).order_by('-created_at', '-order_id')
    return JsonResponse({'orders': [order.to_dict() for order in orders]})
