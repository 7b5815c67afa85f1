from io import StringIO
from unittest import mock

from django.contrib import admin
from django.contrib.messages.storage.fallback import FallbackStorage
from django.core.management import call_command
from django.test import TestCase, RequestFactory

from roulette.admin import ConfigurazioneAdmin
from roulette.models import Partecipante, ConfigurazioneRoulette


class PopolaPartecipantiTests(TestCase):

    def test_crea_senza_password(self):
        out = StringIO()
        call_command('popola_partecipanti', 'Anna', 'Bruno', ' ', stdout=out)
        self.assertEqual(list(Partecipante.objects.values_list('nome', flat=True)), ['Anna', 'Bruno'])
        self.assertIsNone(Partecipante.objects.get(nome='Anna').password)
        self.assertIn("2 partecipanti creati", out.getvalue())

    def test_azzera(self):
        Partecipante.objects.create(nome='Anna', disponibile=False, assegnato_a='Bruno')
        Partecipante.objects.create(nome='Bruno', assegnato_a='Anna')
        call_command('popola_partecipanti', azzera=True, stdout=StringIO())
        for p in Partecipante.objects.all():
            self.assertTrue(p.disponibile)
            self.assertIsNone(p.assegnato_a)

    def test_azzera_manda_un_solo_snapshot(self):
        for nome in ('Anna', 'Bruno', 'Carla'):
            Partecipante.objects.create(nome=nome, disponibile=False, assegnato_a='Xavi')

        with mock.patch('roulette.signals.invia_snapshot') as invia:
            with self.captureOnCommitCallbacks(execute=True):
                call_command('popola_partecipanti', azzera=True, stdout=StringIO())

        invia.assert_called_once_with()
        self.assertEqual(Partecipante.objects.filter(disponibile=True).count(), 3)


class ConfigurazioneTests(TestCase):

    def test_singleton(self):
        ConfigurazioneRoulette.objects.create(giri_extra=3)
        ConfigurazioneRoulette(giri_extra=7).save()
        self.assertEqual(ConfigurazioneRoulette.objects.count(), 1)
        self.assertEqual(ConfigurazioneRoulette.corrente().giri_extra, 7)

    def test_valori_predefiniti(self):
        config = ConfigurazioneRoulette.corrente()
        self.assertEqual((config.giri_extra, config.durata_giro_ms), (5, 4200))

    def test_admin_azzera_estrazione(self):
        Partecipante.objects.create(nome='Anna', disponibile=False, assegnato_a='Bruno')
        request = RequestFactory().post('/admin/')
        request.session = self.client.session
        request._messages = FallbackStorage(request)

        obj = ConfigurazioneRoulette(azzera_estrazione=True)
        ConfigurazioneAdmin(ConfigurazioneRoulette, admin.site).save_model(request, obj, None, False)

        self.assertFalse(ConfigurazioneRoulette.objects.get().azzera_estrazione)
        self.assertTrue(Partecipante.objects.get(nome='Anna').disponibile)
        self.assertIn("ESTRAZIONE AZZERATA", str(list(request._messages)[0]))
