from django.contrib import admin
from django.core.management import call_command
from django.contrib import messages
from .models import Partecipante, ConfigurazioneRoulette

@admin.register(ConfigurazioneRoulette)
class ConfigurazioneAdmin(admin.ModelAdmin):
    list_display = ['giri_extra', 'durata_giro_ms', 'ultima_modifica']

    # Chiamato quando premi "Salva"
    def save_model(self, request, obj, form, change):
        if obj.azzera_estrazione:
            try:
                call_command('popola_partecipanti', azzera=True)
                messages.success(request, "✅ ESTRAZIONE AZZERATA! Tutti sono di nuovo disponibili.")
                # Togli la spunta, altrimenti azzera a ogni salvataggio
                obj.azzera_estrazione = False
            except Exception as e:
                messages.error(request, f"❌ Errore durante l'azzeramento: {e}")

        super().save_model(request, obj, form, change)

    def ultima_modifica(self, obj):
        return "Modifica per aggiornare"


@admin.register(Partecipante)
class PartecipanteAdmin(admin.ModelAdmin):
    list_display = ['nome', 'disponibile', 'assegnato_a']
    list_filter = ['disponibile']
    exclude = ['password']
