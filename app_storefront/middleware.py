# app_storefront/middleware.py
import logging

import pytz
from django.conf import settings
from django.utils import timezone

logger = logging.getLogger(__name__)


class TimezoneMiddleware:
    """Activate the client's timezone from ``X-Timezone-Offset`` (hours from UTC).

    Requests without the header, or with a bad one, use the store's zone so
    "today" on the dashboard means the store's day.
    """

    def __init__(self, get_response):
        self.get_response = get_response
        self.store_timezone = pytz.timezone(settings.TIME_ZONE)

    def __call__(self, request):
        tz_offset = request.headers.get('X-Timezone-Offset')
        if tz_offset:
            try:
                offset_minutes = int(float(tz_offset) * 60)
                timezone.activate(pytz.FixedOffset(offset_minutes))
            except (ValueError, TypeError, OverflowError):
                logger.debug("Ignoring bad X-Timezone-Offset %r", tz_offset)
                timezone.activate(self.store_timezone)
        else:
            timezone.activate(self.store_timezone)
        response = self.get_response(request)
        timezone.deactivate()
        return response
