import json
import logging

from channels.db import database_sync_to_async
from channels.generic.websocket import AsyncWebsocketConsumer

from . import decorators
from .notifications import ORDERS_GROUP

logger = logging.getLogger(__name__)


class OrderNotificationConsumer(AsyncWebsocketConsumer):
    async def connect(self):
        user = self.scope.get('user')
        if user is None or not await database_sync_to_async(decorators.is_dashboard_user)(user):
            await self.close()
            return

        # Add the connected admin to the order notification group
        await self.channel_layer.group_add(ORDERS_GROUP, self.channel_name)
        await self.accept()

    async def disconnect(self, close_code):
        await self.channel_layer.group_discard(ORDERS_GROUP, self.channel_name)

    async def receive(self, text_data=None, bytes_data=None):
        try:
            message = json.loads(text_data or '{}')
        except json.JSONDecodeError:
            logger.debug("Ignoring non-JSON websocket frame")
            return
        if message.get('type') == 'ping':
            await self.send(text_data=json.dumps({'type': 'pong'}))

    async def order_notification(self, event):
        await self.send(text_data=json.dumps({
            'type': 'order.notification',
            'order': event['order'],
        }))

    async def order_status(self, event):
        await self.send(text_data=json.dumps({
            'type': 'order.status',
            'order_id': event['order_id'],
            'previous_status': event['previous_status'],
            'order_status': event['order_status'],
        }))

    async def ping(self, event):
        await self.send(text_data=json.dumps({
            'type': 'pong',
        }))
