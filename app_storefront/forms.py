# app_storefront/forms.py
from django import forms

from app_storefront.cart import MEAL_SIZE_CHOICES, MEAL_SIZE_REGULAR
from app_storefront.conf import get_delivery_days, get_setting
from app_storefront.models import Order, UserProfile

MAX_ITEM_QUANTITY = get_setting('MAX_ITEM_QUANTITY', 15)

ADD_ON_CHOICES = [
    (add_on, add_on) for add_on in [
        'Extra sauce',
        'No garlic',
        'No onions',
        'Extra spicy',
        'Mild spice',
        'No nuts',
        'Gluten-free option',
    ]
]


def delivery_day_choices():
    return [(day, day) for day in get_delivery_days()]


class StringListField(forms.Field):
    """A repeated form key (``?tag=a&tag=b``) cleaned to a list of strings."""

    widget = forms.MultipleHiddenInput

    def to_python(self, value):
        if not value:
            return []
        if isinstance(value, str):
            value = [value]
        return [str(v).strip() for v in value if str(v).strip()]


class AddToCartForm(forms.Form):
    menu_item_id = forms.IntegerField(min_value=1)
    day = forms.ChoiceField(choices=delivery_day_choices)
    quantity = forms.IntegerField(min_value=1, max_value=MAX_ITEM_QUANTITY, initial=1)
    meal_size = forms.ChoiceField(choices=MEAL_SIZE_CHOICES, required=False)
    add_ons = forms.MultipleChoiceField(choices=ADD_ON_CHOICES, required=False)
    preferences = StringListField(required=False)
    dietary_restrictions = StringListField(required=False)
    special_instructions = forms.CharField(max_length=500, required=False)
    include_cutlery = forms.BooleanField(required=False)

    def clean_meal_size(self):
        return self.cleaned_data.get('meal_size') or MEAL_SIZE_REGULAR

    def modifiers(self):
        return {
            'meal_size': self.cleaned_data['meal_size'],
            'add_ons': self.cleaned_data['add_ons'],
            'preferences': self.cleaned_data['preferences'],
            'dietary_restrictions': self.cleaned_data['dietary_restrictions'],
            'special_instructions': self.cleaned_data['special_instructions'],
            'include_cutlery': self.cleaned_data['include_cutlery'],
        }


class UpdateCartForm(forms.Form):
    day = forms.ChoiceField(choices=delivery_day_choices)
    item_id = forms.IntegerField(min_value=1)
    quantity = forms.IntegerField(min_value=0, max_value=MAX_ITEM_QUANTITY)


class RemoveFromCartForm(forms.Form):
    day = forms.ChoiceField(choices=delivery_day_choices)
    item_id = forms.IntegerField(min_value=1)


class CheckoutForm(forms.Form):
    payment_method = forms.ChoiceField(choices=Order.PAYMENT_METHOD_CHOICES)
    special_requests = forms.CharField(max_length=2000, required=False)


class ProfileForm(forms.ModelForm):
    class Meta:
        model = UserProfile
        fields = [
            'full_name',
            'phone',
            'address',
            'latitude',
            'longitude',
            'dietary_restrictions',
            'preferences',
            'include_cutlery',
        ]

    def clean_phone(self):
        phone = self.cleaned_data.get('phone', '').strip()
        digits = [c for c in phone if c.isdigit()]
        if phone and len(digits) < 3:
            raise forms.ValidationError("Enter a valid phone number.")
        return phone
