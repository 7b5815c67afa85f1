import sys

from django.contrib.auth.hashers import make_password, check_password

from .models import Partecipante


class ErroreAccesso(Exception):
    messaggio = "Errore di connessione"

    def __init__(self, messaggio=None):
        if messaggio:
            self.messaggio = messaggio
        super().__init__(self.messaggio)


class DatiMancanti(ErroreAccesso):
    pass


class PasswordErrata(ErroreAccesso):
    messaggio = "❌ Password errata!"


def accedi(nome, password):
    nome = (nome or '').strip()
    if not nome:
        raise DatiMancanti("Scegli un nome")
    if not password:
        raise DatiMancanti("Inserisci la password")

    partecipante, creato = Partecipante.objects.get_or_create(
        nome=nome,
        defaults={'disponibile': True, 'assegnato_a': None, 'password': make_password(password)},
    )
    if creato:
        print(f"DEBUG: Nuovo partecipante {nome}", file=sys.stderr)
        return partecipante, "🎄 Account creato con successo!"

    # Creato dall'admin senza password: il primo login la registra
    if partecipante.password is None:
        partecipante.password = make_password(password)
        partecipante.save(update_fields=['password'])
        return partecipante, "🎁 Password registrata!"

    if not check_password(password, partecipante.password):
        print(f"DEBUG: Password errata per {nome}", file=sys.stderr)
        raise PasswordErrata()

    return partecipante, f"✨ Benvenuto {nome}!"
