import math
import time
from dataclasses import dataclass, asdict

from .utils import calcola_angolo_target, GIRI_EXTRA

DURATA_GIRO_MS = 4200

# Stati della ruota
FERMA = 'idle'
IN_GIRO = 'spinning'
FERMATA = 'settled'

TRANSIZIONI = {
    (FERMA, 'gira'): IN_GIRO,
    (IN_GIRO, 'completa'): FERMATA,
    (FERMATA, 'azzera'): FERMA,
}


class TransizioneNonValida(Exception):
    pass


# --- Messaggi tra sorteggio e ruota ---
@dataclass
class Gira:
    vincitore: str
    indice: int
    num_spicchi: int


@dataclass
class Completato:
    vincitore: str


@dataclass
class Estrazione:
    """Un singolo giro: vive solo finche' la ruota non si ferma."""
    vincitore: str
    angolo: float
    inizio: float
    durata_ms: int

    def mancano_ms(self, ora):
        trascorsi = (ora - self.inizio) * 1000
        return max(0, math.ceil(self.durata_ms - trascorsi))

    def scaduta(self, ora):
        return self.mancano_ms(ora) == 0


class Ruota:
    """
    Macchina a stati della ruota: idle -> spinning -> settled -> idle.

    Il tempo del giro e' misurato con l'orologio reale (durata fissa),
    non con la fine dell'animazione nel browser.
    """

    def __init__(self, stato=FERMA, rotazione=0.0, estrazione=None, transizione=True,
                 durata_ms=DURATA_GIRO_MS, giri_extra=GIRI_EXTRA,
                 orologio=None, al_completamento=None):
        self.stato = stato
        self.rotazione = rotazione
        self.estrazione = estrazione
        self.transizione = transizione
        self.durata_ms = durata_ms
        self.giri_extra = giri_extra
        self.orologio = orologio or time.time
        self.al_completamento = al_completamento

    def _passa(self, evento):
        nuovo = TRANSIZIONI.get((self.stato, evento))
        if nuovo is None:
            raise TransizioneNonValida(f"'{evento}' non ammesso nello stato '{self.stato}'")
        self.stato = nuovo

    @property
    def in_giro(self):
        return self.stato == IN_GIRO

    def gira(self, comando):
        # Doppio click durante il giro: ignorato
        if self.in_giro:
            return None
        if self.stato == FERMATA:
            self.azzera()

        self.rotazione = calcola_angolo_target(
            comando.indice, comando.num_spicchi,
            rotazione_precedente=self.rotazione, giri_extra=self.giri_extra,
        )
        self.transizione = True
        self.estrazione = Estrazione(
            vincitore=comando.vincitore,
            angolo=self.rotazione,
            inizio=self.orologio(),
            durata_ms=self.durata_ms,
        )
        self._passa('gira')
        return self.estrazione

    def mancano_ms(self):
        if not self.in_giro:
            return 0
        return self.estrazione.mancano_ms(self.orologio())

    def aggiorna(self):
        if not self.in_giro or not self.estrazione.scaduta(self.orologio()):
            return None
        self._passa('completa')
        evento = Completato(vincitore=self.estrazione.vincitore)
        if self.al_completamento:
            self.al_completamento(evento.vincitore)
        return evento

    def azzera(self):
        self._passa('azzera')
        self.estrazione = None
        self.rotazione = 0.0
        # Il ritorno a 0 non deve vedersi: niente transizione per un fotogramma
        self.transizione = False

    def fotogramma(self):
        stile = {'rotazione': self.rotazione, 'transizione': self.transizione, 'durata_ms': self.durata_ms}
        if not self.transizione and not self.in_giro:
            self.transizione = True
        return stile

    # --- Salvataggio in sessione ---
    def to_dict(self):
        return {
            'stato': self.stato,
            'rotazione': self.rotazione,
            'transizione': self.transizione,
            'estrazione': asdict(self.estrazione) if self.estrazione else None,
        }

    @classmethod
    def from_dict(cls, dati, **opzioni):
        if not dati:
            return cls(**opzioni)
        estrazione = dati.get('estrazione')
        return cls(
            stato=dati.get('stato', FERMA),
            rotazione=dati.get('rotazione', 0.0),
            transizione=dati.get('transizione', True),
            estrazione=Estrazione(**estrazione) if estrazione else None,
            **opzioni,
        )
