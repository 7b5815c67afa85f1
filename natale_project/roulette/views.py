from django.contrib import messages
from django.http import JsonResponse
from django.shortcuts import render, redirect
from django.views.decorators.http import require_POST

from .accesso import accedi, ErroreAccesso
from .models import ConfigurazioneRoulette, snapshot_persone
from .ruota import Ruota
from .sorteggio import (
    avvia_sorteggio, concludi_sorteggio, candidati, ErroreSorteggio,
    prenota_giro, libera_giro, mancano_ms_prenotazione,
)
from .utils import geometria_spicchi


# -------------------------------------------------------------------------
# HELPER: la ruota vive nella sessione di chi gioca
# -------------------------------------------------------------------------
def _carica_ruota(request):
    config = ConfigurazioneRoulette.corrente()
    return Ruota.from_dict(
        request.session.get('ruota'),
        durata_ms=config.durata_giro_ms,
        giri_extra=config.giri_extra,
    )


def _salva_ruota(request, ruota):
    request.session['ruota'] = ruota.to_dict()


def _contesto_ruota(persone, utente, ruota):
    spicchi = [(nome, persone[nome]['disponibile']) for nome in candidati(persone, utente)]
    return {
        'spicchi': geometria_spicchi(spicchi),
        'stile': ruota.fotogramma(),
    }


# -------------------------------------------------------------------------
# 1. PAGINE
# -------------------------------------------------------------------------
def home(request):
    persone = snapshot_persone()
    utente = request.session.get('utente')
    if utente and utente not in persone:
        request.session.pop('utente', None)
        utente = None

    context = {
        'persone': persone,
        'nomi': list(persone),
        'utente': utente,
        'io': persone.get(utente),
    }
    if utente:
        ruota = _carica_ruota(request)
        context.update(_contesto_ruota(persone, utente, ruota))
        context['in_giro'] = ruota.in_giro
        _salva_ruota(request, ruota)
    return render(request, 'roulette/home.html', context)


@require_POST
def accesso(request):
    try:
        partecipante, messaggio = accedi(request.POST.get('nome'), request.POST.get('password'))
    except ErroreAccesso as e:
        messages.error(request, e.messaggio)
        return redirect('home')

    request.session['utente'] = partecipante.nome
    request.session.pop('ruota', None)
    messages.success(request, messaggio)
    return redirect('home')


def esci(request):
    request.session.flush()
    return redirect('home')


# -------------------------------------------------------------------------
# 2. API
# -------------------------------------------------------------------------
def api_persone(request):
    return JsonResponse({'persone': snapshot_persone()})


def api_ruota(request):
    utente = request.session.get('utente')
    persone = snapshot_persone()
    if not utente or utente not in persone:
        return JsonResponse({'esito': 'errore', 'messaggio': "Accedi prima!"}, status=403)
    ruota = _carica_ruota(request)
    context = _contesto_ruota(persone, utente, ruota)
    _salva_ruota(request, ruota)
    return render(request, 'roulette/_ruota.html', context)


@require_POST
def api_gira_ruota(request):
    utente = request.session.get('utente')
    ruota = _carica_ruota(request)

    # La sessione si salva a fine richiesta: due click ravvicinati la leggono
    # entrambi ferma. Il blocco in cache lascia passare solo il primo.
    prenotato = False
    if utente and not ruota.in_giro:
        if not prenota_giro(utente, ruota.durata_ms):
            return JsonResponse({'esito': 'in_giro', 'mancano_ms': mancano_ms_prenotazione(utente)})
        prenotato = True

    try:
        estrazione = avvia_sorteggio(utente, snapshot_persone(), ruota)
    except ErroreSorteggio as e:
        if prenotato:
            libera_giro(utente)
        return JsonResponse({'esito': 'errore', 'messaggio': e.messaggio}, status=400)

    if estrazione is None:
        # Gia' in giro: nessun secondo giro
        return JsonResponse({'esito': 'in_giro', 'mancano_ms': ruota.mancano_ms()})

    _salva_ruota(request, ruota)
    # Il nome lo riveliamo solo a ruota ferma
    return JsonResponse({
        'esito': 'partita',
        'angolo': estrazione.angolo,
        'durata_ms': estrazione.durata_ms,
    })


@require_POST
def api_completa_giro(request):
    utente = request.session.get('utente')
    ruota = _carica_ruota(request)
    if not ruota.in_giro:
        return JsonResponse({'esito': 'fermo'})

    try:
        vincitore = concludi_sorteggio(utente, ruota)
    except ErroreSorteggio as e:
        libera_giro(utente)
        _salva_ruota(request, ruota)
        return JsonResponse({'esito': 'errore', 'messaggio': e.messaggio}, status=409)

    _salva_ruota(request, ruota)
    if vincitore is None:
        return JsonResponse({'esito': 'in_giro', 'mancano_ms': ruota.mancano_ms()})

    libera_giro(utente)
    return JsonResponse({
        'esito': 'completato',
        'vincitore': vincitore,
        'messaggio': f"🎁 Hai estratto: {vincitore}!",
    })
