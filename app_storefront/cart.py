"""Cart aggregation and pricing.

The cart is a nested mapping of delivery day -> menu item id -> line item::

    {
        "Tuesday": {
            "12": {"id": "12", "name": "Lentil Curry", "price": "12.50",
                   "quantity": 2, "day": "Tuesday", "meal_size": "regular", ...},
        },
    }

Everything derived from it (day subtotals, cart subtotal, item count and the
grand total with the customer's flat delivery fee) is computed by the pure
functions below. ``Cart`` binds the structure to the Django session so it
survives page loads.

Line prices may arrive as numbers or as currency-formatted strings such as
``"$12.50"``; every computation goes through ``parse_price``.
"""

import logging
import math
import re
from decimal import Decimal, ROUND_HALF_UP

from .conf import get_delivery_days, get_meal_size_days, get_setting
from .exceptions import CartError

logger = logging.getLogger(__name__)

ZERO = Decimal('0.00')

MEAL_SIZE_REGULAR = 'regular'
MEAL_SIZE_LARGE = 'large'
MEAL_SIZE_CHOICES = [
    (MEAL_SIZE_REGULAR, 'Regular'),
    (MEAL_SIZE_LARGE, 'Large'),
]

_NON_NUMERIC = re.compile(r'[^0-9.]')
_LEADING_NUMBER = re.compile(r'\d+(?:\.\d*)?|\.\d+')


def parse_price(value):
    """Convert a numeric or currency-formatted price to a Decimal.

    Strings are stripped of everything except digits and dots and the
    leading number is used, so ``"$1,250.00"`` is 1250.00 and ``"1.2.3"``
    is 1.2. Values that hold no number are treated as 0.00.
    """
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value if value.is_finite() else ZERO
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            logger.warning("Non-finite price %r treated as 0.00", value)
            return ZERO
        return Decimal(str(value))

    cleaned = _NON_NUMERIC.sub('', str(value))
    match = _LEADING_NUMBER.match(cleaned)
    if match is None:
        logger.warning("Unparseable price %r treated as 0.00", value)
        return ZERO
    return Decimal(match.group())


def parse_quantity(value):
    """Return ``value`` as an int, or None when it is not a whole number."""
    if isinstance(value, bool):
        return None
    try:
        quantity = int(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if isinstance(value, float) and value != quantity:
        return None
    return quantity


def clean_string_list(value, field, item_id, day):
    """Return ``value`` as a list of strings, or ``[]`` when it is not one."""
    if not value:
        return []
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return list(value)
    logger.warning("Resetting corrupted %s %r on cart line %r for %s", field, value, item_id, day)
    return []


def round_money(amount):
    """Round to cents, half up."""
    return amount.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)


def format_money(amount):
    return str(round_money(amount))


def resolve_unit_price(menu_item, day, meal_size=MEAL_SIZE_REGULAR):
    """Unit price of ``menu_item`` when ordered for ``day``.

    A large meal size replaces the base price, but only on the configured
    meal-size days and only for items that carry a large price.
    """
    large_price = getattr(menu_item, 'large_price', None)
    if (
        meal_size == MEAL_SIZE_LARGE
        and large_price is not None
        and day in get_meal_size_days()
    ):
        return parse_price(large_price)
    return parse_price(menu_item.price)


def make_line(menu_item, day, quantity, meal_size=MEAL_SIZE_REGULAR, add_ons=None,
              preferences=None, dietary_restrictions=None, special_instructions='',
              include_cutlery=False):
    return {
        'id': str(menu_item.pk),
        'name': menu_item.name,
        'price': str(resolve_unit_price(menu_item, day, meal_size)),
        'quantity': quantity,
        'day': day,
        'meal_size': meal_size or MEAL_SIZE_REGULAR,
        'add_ons': list(add_ons or []),
        'preferences': list(preferences or []),
        'dietary_restrictions': list(dietary_restrictions or []),
        'special_instructions': special_instructions or '',
        'include_cutlery': bool(include_cutlery),
    }


def line_total(line):
    return parse_price(line.get('price')) * line.get('quantity', 0)


def day_subtotal(cart, day):
    return sum((line_total(line) for line in cart.get(day, {}).values()), ZERO)


def cart_subtotal(cart):
    return sum((day_subtotal(cart, day) for day in cart), ZERO)


def item_count(cart):
    return sum(line.get('quantity', 0) for lines in cart.values() for line in lines.values())


def grand_total(cart, delivery_fee=None):
    """Cart subtotal plus the flat delivery fee, charged once per order."""
    return cart_subtotal(cart) + parse_price(delivery_fee)


def delivery_days(cart):
    """Days holding at least one line, in configured weekday order.

    Days missing from the configuration keep their insertion order after the
    known ones.
    """
    order = get_delivery_days()

    def rank(day):
        return order.index(day) if day in order else len(order)

    return sorted((day for day, lines in cart.items() if lines), key=rank)


def flatten(cart):
    """Order-record lines, one per (day, item)."""
    rows = []
    for day in delivery_days(cart):
        for line in cart[day].values():
            rows.append({
                'day': day,
                'menu_item_id': line['id'],
                'quantity': line['quantity'],
                'name': line.get('name', ''),
                'price': format_money(parse_price(line.get('price'))),
                'meal_size': line.get('meal_size', MEAL_SIZE_REGULAR),
                'add_ons': line.get('add_ons', []),
                'preferences': line.get('preferences', []),
                'dietary_restrictions': line.get('dietary_restrictions', []),
                'special_instructions': line.get('special_instructions', ''),
                'include_cutlery': line.get('include_cutlery') is True,
                'line_total': format_money(line_total(line)),
            })
    return rows


def normalize_cart(raw):
    """Return a well-formed copy of ``raw``, dropping anything malformed.

    Session data can be stale or tampered with; malformed days and lines
    are logged and discarded instead of raised.
    """
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        logger.warning("Discarding corrupted cart of type %s", type(raw).__name__)
        return {}

    cart = {}
    for day, lines in raw.items():
        if not isinstance(lines, dict):
            logger.warning("Discarding corrupted cart day %r", day)
            continue
        clean_lines = {}
        for item_id, line in lines.items():
            if not isinstance(line, dict):
                logger.warning("Discarding corrupted cart line %r on %s", item_id, day)
                continue
            quantity = parse_quantity(line.get('quantity'))
            if quantity is None or quantity <= 0:
                logger.warning("Discarding cart line %r on %s with quantity %r",
                               item_id, day, line.get('quantity'))
                continue
            meal_size = line.get('meal_size')
            if meal_size not in (MEAL_SIZE_REGULAR, MEAL_SIZE_LARGE):
                meal_size = MEAL_SIZE_REGULAR
            special_instructions = line.get('special_instructions')
            clean_lines[str(item_id)] = {
                'id': str(item_id),
                'name': str(line.get('name', '')),
                'price': line.get('price', '0'),
                'quantity': quantity,
                'day': day,
                'meal_size': meal_size,
                'add_ons': clean_string_list(line.get('add_ons'), 'add_ons', item_id, day),
                'preferences': clean_string_list(line.get('preferences'), 'preferences', item_id, day),
                'dietary_restrictions': clean_string_list(
                    line.get('dietary_restrictions'), 'dietary_restrictions', item_id, day),
                'special_instructions': special_instructions if isinstance(special_instructions, str) else '',
                'include_cutlery': line.get('include_cutlery') is True,
            }
        if clean_lines:
            cart[day] = clean_lines
    return cart


class Cart:
    """The visitor's cart, persisted in the session."""

    def __init__(self, request):
        self.session = request.session
        self.session_key = get_setting('CART_SESSION_KEY')
        raw = self.session.get(self.session_key)
        self.data = normalize_cart(raw)
        if raw is not None and raw != self.data:
            self.save()

    def __iter__(self):
        for day in delivery_days(self.data):
            for line in self.data[day].values():
                yield line

    def __len__(self):
        return item_count(self.data)

    def is_empty(self):
        return not self.data

    def save(self):
        self.session[self.session_key] = self.data
        self.session.modified = True

    def get_line(self, day, item_id):
        return self.data.get(day, {}).get(str(item_id))

    def add(self, menu_item, day, quantity=1, **modifiers):
        """Add ``quantity`` of ``menu_item`` for ``day``.

        If the item is already in the cart for that day only the quantity
        grows, up to ``MAX_ITEM_QUANTITY``; the modifiers chosen first are
        kept.
        """
        if quantity <= 0:
            raise CartError("Quantity must be a positive integer.")
        max_quantity = get_setting('MAX_ITEM_QUANTITY')

        item_id = str(menu_item.pk)
        day_lines = self.data.setdefault(day, {})
        line = day_lines.get(item_id)
        if line is not None:
            line['quantity'] = min(line['quantity'] + quantity, max_quantity)
        else:
            line = make_line(menu_item, day, min(quantity, max_quantity), **modifiers)
            day_lines[item_id] = line

        self.save()
        logger.debug("Cart add %s x%s for %s", item_id, quantity, day)
        return line

    def set_quantity(self, day, item_id, quantity, menu_item=None):
        """Set a line's quantity; zero or less removes it.

        A positive quantity for a line not yet in the cart needs
        ``menu_item`` to build the line from; without it nothing changes.
        """
        item_id = str(item_id)
        if quantity <= 0:
            self.remove(day, item_id)
            return None

        line = self.get_line(day, item_id)
        if line is not None:
            line['quantity'] = quantity
        elif menu_item is not None:
            line = make_line(menu_item, day, quantity)
            self.data.setdefault(day, {})[item_id] = line
        else:
            return None

        self.save()
        return line

    def remove(self, day, item_id):
        lines = self.data.get(day)
        if not lines or str(item_id) not in lines:
            return
        del lines[str(item_id)]
        if not lines:
            del self.data[day]
        self.save()

    def clear(self):
        self.data = {}
        self.save()

    def item_ids(self):
        return {line['id'] for line in self}

    def reprice(self, menu_items):
        """Refresh names and unit prices from ``menu_items`` (id -> MenuItem)."""
        for line in self:
            menu_item = menu_items.get(line['id'])
            if menu_item is None:
                continue
            line['name'] = menu_item.name
            line['price'] = str(resolve_unit_price(menu_item, line['day'], line['meal_size']))
        self.save()

    def day_subtotal(self, day):
        return day_subtotal(self.data, day)

    def subtotal(self):
        return cart_subtotal(self.data)

    def total(self, delivery_fee=None):
        return grand_total(self.data, delivery_fee)

    def delivery_days(self):
        return delivery_days(self.data)

    def order_lines(self):
        return flatten(self.data)

    def summary(self, delivery_fee=None):
        fee = parse_price(delivery_fee)
        days = []
        for day in self.delivery_days():
            lines = []
            for line in self.data[day].values():
                lines.append({
                    **line,
                    'price': format_money(parse_price(line['price'])),
                    'line_total': format_money(line_total(line)),
                })
            days.append({
                'day': day,
                'lines': lines,
                'subtotal': format_money(self.day_subtotal(day)),
            })

        return {
            'days': days,
            'item_count': len(self),
            'subtotal': format_money(self.subtotal()),
            'delivery_fee': format_money(fee),
            'total': format_money(self.total(fee)),
        }
