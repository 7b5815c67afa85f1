from channels.db import database_sync_to_async
from channels.testing import WebsocketCommunicator
from django.test import TransactionTestCase

from roulette.consumers import PersoneConsumer
from roulette.models import Partecipante


class PersoneConsumerTests(TransactionTestCase):

    async def test_snapshot_alla_connessione_e_a_ogni_modifica(self):
        await database_sync_to_async(Partecipante.objects.create)(nome='Anna')

        communicator = WebsocketCommunicator(PersoneConsumer.as_asgi(), '/ws/persone/')
        connesso, _ = await communicator.connect()
        self.assertTrue(connesso)

        messaggio = await communicator.receive_json_from()
        self.assertEqual(messaggio, {
            'tipo': 'snapshot',
            'persone': {'Anna': {'disponibile': True, 'assegnato_a': None}},
        })

        await database_sync_to_async(Partecipante.objects.create)(nome='Bruno', password='x')
        messaggio = await communicator.receive_json_from()
        # Sempre la collezione intera, mai solo la differenza
        self.assertEqual(messaggio['persone'], {
            'Anna': {'disponibile': True, 'assegnato_a': None},
            'Bruno': {'disponibile': True, 'assegnato_a': None},
        })

        await communicator.disconnect()
