from django.test import SimpleTestCase

from roulette.utils import (
    calcola_angolo_target, spicchio_sotto_puntatore, geometria_spicchi, GIRI_EXTRA,
)


class AngoloTargetTests(SimpleTestCase):

    def test_ogni_spicchio_finisce_sotto_la_freccia(self):
        for n in range(1, 25):
            for i in range(n):
                angolo = calcola_angolo_target(i, n)
                self.assertEqual(spicchio_sotto_puntatore(angolo, n), i, f"{i}/{n}")

    def test_centro_dello_spicchio(self):
        # 4 spicchi da 90 gradi: il centro dello spicchio 1 e' a 135
        self.assertEqual(calcola_angolo_target(1, 4) % 360, 135)
        self.assertEqual(calcola_angolo_target(0, 1) % 360, 180)

    def test_almeno_cinque_giri(self):
        for n in (1, 2, 3, 7, 24):
            for i in range(n):
                self.assertGreaterEqual(calcola_angolo_target(i, n), GIRI_EXTRA * 360)

    def test_gira_sempre_in_avanti(self):
        precedente = 1912.5
        angolo = calcola_angolo_target(2, 8, rotazione_precedente=precedente)
        self.assertGreater(angolo, precedente + (GIRI_EXTRA - 1) * 360)
        self.assertEqual(spicchio_sotto_puntatore(angolo, 8), 2)

    def test_giri_extra_configurabili(self):
        self.assertEqual(calcola_angolo_target(0, 2, giri_extra=2), 2 * 360 + 90)

    def test_input_non_validi(self):
        with self.assertRaises(ValueError):
            calcola_angolo_target(0, 0)
        with self.assertRaises(ValueError):
            calcola_angolo_target(3, 3)
        with self.assertRaises(ValueError):
            calcola_angolo_target(-1, 3)
        with self.assertRaises(ValueError):
            spicchio_sotto_puntatore(10, 0)


class GeometriaSpicchiTests(SimpleTestCase):

    def test_spicchi_in_ordine(self):
        spicchi = geometria_spicchi([('Anna', True), ('Bruno', False), ('Carla', True)])
        self.assertEqual([s['nome'] for s in spicchi], ['Anna', 'Bruno', 'Carla'])
        self.assertEqual(spicchi[2]['testo_angolo'], 300)
        self.assertTrue(spicchi[0]['path'].startswith("M 200 200 L 200.0 0.0"))

    def test_non_disponibili_in_grigio(self):
        spicchi = geometria_spicchi([('Anna', True), ('Bruno', False)])
        self.assertEqual(spicchi[1]['colore'], "hsl(0, 10%, 30%)")
        self.assertEqual(spicchi[0]['colore'], "hsl(0, 70%, 50%)")
        self.assertEqual(spicchi[0]['colore_chiaro'], "hsl(0, 70%, 60%)")

    def test_uno_spicchio_e_il_disco_intero(self):
        spicchi = geometria_spicchi([('Anna', True)])
        self.assertTrue(spicchi[0]['intero'])
        self.assertFalse(geometria_spicchi([('A', True), ('B', True)])[0]['intero'])

    def test_ruota_vuota(self):
        self.assertEqual(geometria_spicchi([]), [])
