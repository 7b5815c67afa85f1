import math
import random
import sys
import time

from django.core.cache import cache
from django.db import transaction, DatabaseError

from .models import Partecipante
from .ruota import Gira


class ErroreSorteggio(Exception):
    messaggio = "Errore durante l'estrazione"

    def __init__(self, messaggio=None):
        if messaggio:
            self.messaggio = messaggio
        super().__init__(self.messaggio)


class NonAutenticato(ErroreSorteggio):
    messaggio = "Accedi prima!"


class GiaEstratto(ErroreSorteggio):
    messaggio = "Hai già fatto la tua estrazione!"


class NessunoDisponibile(ErroreSorteggio):
    messaggio = "Nessuno è disponibile!"


class ErroreSalvataggio(ErroreSorteggio):
    messaggio = "Errore durante l'estrazione"


# Secondi in piu' oltre la durata del giro prima che il blocco scada da solo
MARGINE_BLOCCO_S = 30


def _chiave_giro(utente):
    return f"giro:{utente}"


def prenota_giro(utente, durata_ms):
    """
    Un solo giro per utente alla volta, anche con due richieste contemporanee.
    Restituisce False se un altro giro e' gia' partito.
    """
    fine = time.time() + durata_ms / 1000
    return cache.add(_chiave_giro(utente), fine, timeout=durata_ms / 1000 + MARGINE_BLOCCO_S)


def mancano_ms_prenotazione(utente):
    fine = cache.get(_chiave_giro(utente))
    if fine is None:
        return 0
    return max(0, math.ceil((fine - time.time()) * 1000))


def libera_giro(utente):
    cache.delete(_chiave_giro(utente))


def candidati(persone, utente):
    # Tutti tranne me, anche chi e' gia' stato preso: sono gli spicchi della ruota
    return [nome for nome in sorted(persone) if nome != utente]


def pool_idonei(persone, utente):
    return [nome for nome in candidati(persone, utente) if persone[nome]['disponibile']]


def scegli_vincitore(pool, rng=random):
    return rng.choice(pool)


def avvia_sorteggio(utente, persone, ruota, rng=random):
    """
    Sceglie a caso tra i disponibili e fa partire la ruota.
    Restituisce l'Estrazione, oppure None se la ruota sta gia' girando.
    """
    if not utente or utente not in persone:
        raise NonAutenticato()
    if persone[utente].get('assegnato_a'):
        raise GiaEstratto()
    if ruota.in_giro:
        return None

    pool = pool_idonei(persone, utente)
    if not pool:
        raise NessunoDisponibile()

    vincitore = scegli_vincitore(pool, rng)
    spicchi = candidati(persone, utente)
    print(f"DEBUG: {utente} gira la ruota. Pool: {len(pool)} su {len(spicchi)} spicchi", file=sys.stderr)
    return ruota.gira(Gira(vincitore=vincitore, indice=spicchi.index(vincitore), num_spicchi=len(spicchi)))


def registra_risultato(utente, vincitore):
    """Le due scritture vanno insieme: o entrambe o nessuna."""
    try:
        with transaction.atomic():
            righe = {
                p.nome: p for p in
                Partecipante.objects.select_for_update().filter(nome__in=[utente, vincitore])
            }
            io, preso = righe.get(utente), righe.get(vincitore)
            if io is None or preso is None or not preso.disponibile or io.ha_estratto:
                print(f"DEBUG: Estrazione di {utente} -> {vincitore} rifiutata, dati cambiati", file=sys.stderr)
                raise ErroreSalvataggio()

            preso.disponibile = False
            preso.assegnato_a = utente
            preso.save(update_fields=['disponibile', 'assegnato_a'])

            io.assegnato_a = vincitore
            io.save(update_fields=['assegnato_a'])
    except DatabaseError as e:
        print(f"DEBUG: Errore database durante l'estrazione: {e}", file=sys.stderr)
        raise ErroreSalvataggio() from e


def concludi_sorteggio(utente, ruota):
    """
    Da chiamare quando la ruota ha finito il giro.
    Restituisce il nome estratto, oppure None se il giro non e' finito (o non c'e').
    """
    evento = ruota.aggiorna()
    if evento is None:
        return None
    try:
        registra_risultato(utente, evento.vincitore)
    finally:
        ruota.azzera()
    print(f"DEBUG: {utente} ha estratto {evento.vincitore}", file=sys.stderr)
    return evento.vincitore
