import sys

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from django.db import transaction
from django.db.models.signals import post_save, post_delete
from django.dispatch import receiver

from .consumers import GRUPPO_PERSONE
from .models import Partecipante, snapshot_persone


def invia_snapshot():
    layer = get_channel_layer()
    if layer is None:
        return
    persone = snapshot_persone()
    async_to_sync(layer.group_send)(GRUPPO_PERSONE, {'type': 'persone.snapshot', 'persone': persone})
    print(f"DEBUG: Snapshot inviato ({len(persone)} partecipanti)", file=sys.stderr)


@receiver(post_save, sender=Partecipante)
@receiver(post_delete, sender=Partecipante)
def partecipante_modificato(sender, **kwargs):
    # Solo dopo il commit: i browser devono vedere lo stato definitivo
    transaction.on_commit(invia_snapshot)
