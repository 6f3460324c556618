# app_admin_dashboard/notifications.py
import logging

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer

logger = logging.getLogger(__name__)

ORDERS_GROUP = 'admin_orders'


def _group_send(message):
    channel_layer = get_channel_layer()
    if channel_layer is None:
        logger.warning("No channel layer configured; dropping %s", message['type'])
        return
    async_to_sync(channel_layer.group_send)(ORDERS_GROUP, {'type': 'ping'})
    async_to_sync(channel_layer.group_send)(ORDERS_GROUP, message)


def send_order_notification(order):
    """Tell connected dashboards a new order was placed."""
    _group_send({
        'type': 'order.notification',
        'order': order.to_dict(),
    })
    logger.info("Notified dashboards of order %s", order.order_id)


def send_status_notification(order, previous_status):
    _group_send({
        'type': 'order.status',
        'order_id': order.order_id,
        'previous_status': previous_status,
        'order_status': order.status,
    })
