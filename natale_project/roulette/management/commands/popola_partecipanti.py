import sys

from django.core.management.base import BaseCommand
from django.db import transaction

from roulette import signals
from roulette.models import Partecipante


class Command(BaseCommand):
    help = "Crea i partecipanti (senza password) e, con --azzera, cancella tutte le estrazioni."

    def add_arguments(self, parser):
        parser.add_argument('nomi', nargs='*', help="Nomi da mettere sulla ruota")
        parser.add_argument('--azzera', action='store_true', help="Rimette tutti disponibili e senza assegnazione")

    def handle(self, *args, **options):
        with transaction.atomic():
            creati = 0
            for nome in options['nomi']:
                nome = nome.strip()
                if not nome:
                    continue
                _, creato = Partecipante.objects.get_or_create(
                    nome=nome, defaults={'password': None}
                )
                creati += int(creato)

            if options['azzera']:
                # update() non manda segnali: un solo snapshot per tutto l'azzeramento
                Partecipante.objects.update(disponibile=True, assegnato_a=None)
                transaction.on_commit(signals.invia_snapshot)
                print("DEBUG: Estrazioni azzerate", file=sys.stderr)

        self.stdout.write(self.style.SUCCESS(
            f"{creati} partecipanti creati, {Partecipante.objects.count()} in totale."
        ))
