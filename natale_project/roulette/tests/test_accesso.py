from django.test import TestCase

from roulette.accesso import accedi, DatiMancanti, PasswordErrata
from roulette.models import Partecipante


class AccessoTests(TestCase):

    def test_primo_accesso_crea_il_partecipante(self):
        partecipante, messaggio = accedi('Anna', 'segreta')
        self.assertEqual(messaggio, "🎄 Account creato con successo!")
        self.assertTrue(partecipante.disponibile)
        self.assertIsNone(partecipante.assegnato_a)
        # Mai in chiaro
        self.assertNotEqual(Partecipante.objects.get(nome='Anna').password, 'segreta')

    def test_accesso_con_password_giusta(self):
        accedi('Anna', 'segreta')
        _, messaggio = accedi('Anna', 'segreta')
        self.assertEqual(messaggio, "✨ Benvenuto Anna!")

    def test_password_errata(self):
        accedi('Anna', 'segreta')
        with self.assertRaises(PasswordErrata):
            accedi('Anna', 'sbagliata')

    def test_reclama_partecipante_senza_password(self):
        Partecipante.objects.create(nome='Bruno', password=None)
        _, messaggio = accedi('Bruno', 'nuova')
        self.assertEqual(messaggio, "🎁 Password registrata!")
        with self.assertRaises(PasswordErrata):
            accedi('Bruno', 'altra')

    def test_dati_mancanti(self):
        with self.assertRaises(DatiMancanti):
            accedi('', 'x')
        with self.assertRaises(DatiMancanti):
            accedi('Anna', '')
        self.assertFalse(Partecipante.objects.exists())
