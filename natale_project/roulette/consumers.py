# roulette/consumers.py
from channels.db import database_sync_to_async
from channels.generic.websocket import AsyncJsonWebsocketConsumer

from .models import snapshot_persone

GRUPPO_PERSONE = 'persone'


class PersoneConsumer(AsyncJsonWebsocketConsumer):
    """Manda la collezione intera alla connessione e a ogni modifica."""

    async def connect(self):
        await self.channel_layer.group_add(GRUPPO_PERSONE, self.channel_name)
        await self.accept()
        persone = await database_sync_to_async(snapshot_persone)()
        await self.send_json({'tipo': 'snapshot', 'persone': persone})

    async def disconnect(self, close_code):
        await self.channel_layer.group_discard(GRUPPO_PERSONE, self.channel_name)

    # Il client e' in sola lettura
    async def receive_json(self, content, **kwargs):
        pass

    async def persone_snapshot(self, event):
        await self.send_json({'tipo': 'snapshot', 'persone': event['persone']})
