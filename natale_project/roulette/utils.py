import math

# La ruota parte con lo spicchio 0 sotto la freccia (ore 12)
# e gli spicchi proseguono in senso ORARIO.
# La rotazione restituita e' ANTIORARIA: nel template la ruota
# viene disegnata con rotate(-angolo).
GIRI_EXTRA = 5

RAGGIO = 200
RAGGIO_TESTO = 130


def calcola_angolo_target(indice, num_spicchi, rotazione_precedente=0, giri_extra=GIRI_EXTRA):
    if num_spicchi < 1:
        raise ValueError("La ruota deve avere almeno uno spicchio")
    if not 0 <= indice < num_spicchi:
        raise ValueError(f"Indice {indice} fuori dalla ruota ({num_spicchi} spicchi)")

    gradi_per_spicchio = 360 / num_spicchi

    # 1. Centro dello spicchio, misurato in senso orario dalla freccia
    centro = indice * gradi_per_spicchio + gradi_per_spicchio / 2

    # 2. Ripartiamo dal giro completo precedente, cosi' la ruota gira sempre in avanti
    base = rotazione_precedente - (rotazione_precedente % 360)

    # 3. Giri extra + centro: angolo % 360 == centro
    return base + giri_extra * 360 + centro


def spicchio_sotto_puntatore(angolo, num_spicchi):
    if num_spicchi < 1:
        raise ValueError("La ruota deve avere almeno uno spicchio")
    gradi_per_spicchio = 360 / num_spicchi
    return int((angolo % 360) // gradi_per_spicchio) % num_spicchi


def _punto(angolo, raggio):
    # 0 gradi = ore 12, quindi togliamo 90 per passare al sistema SVG
    rad = math.radians(angolo - 90)
    return (
        round(RAGGIO + raggio * math.cos(rad), 3),
        round(RAGGIO + raggio * math.sin(rad), 3),
    )


def geometria_spicchi(candidati):
    """
    Calcola il disegno SVG di ogni spicchio.
    `candidati` e' una lista di (nome, disponibile) nell'ordine della ruota.
    Chi e' gia' stato estratto resta sulla ruota ma in grigio.
    """
    num = len(candidati)
    spicchi = []
    for i, (nome, disponibile) in enumerate(candidati):
        inizio = i * 360 / num
        fine = (i + 1) * 360 / num
        x1, y1 = _punto(inizio, RAGGIO)
        x2, y2 = _punto(fine, RAGGIO)
        arco_grande = 1 if fine - inizio > 180 else 0

        angolo_testo = (inizio + fine) / 2
        tx, ty = _punto(angolo_testo, RAGGIO_TESTO)

        if disponibile:
            tinta, saturazione, luminosita = inizio, 70, 50
        else:
            tinta, saturazione, luminosita = 0, 10, 30

        spicchi.append({
            'indice': i,
            'nome': nome,
            'disponibile': disponibile,
            # Con un solo spicchio l'arco degenera: disegniamo il disco intero
            'intero': num == 1,
            'path': f"M {RAGGIO} {RAGGIO} L {x1} {y1} A {RAGGIO} {RAGGIO} 0 {arco_grande} 1 {x2} {y2} Z",
            'testo_x': tx,
            'testo_y': ty,
            'testo_angolo': angolo_testo,
            'colore': f"hsl({tinta:g}, {saturazione}%, {luminosita}%)",
            'colore_chiaro': f"hsl({tinta:g}, {saturazione}%, {luminosita + 10}%)",
        })
    return spicchi
