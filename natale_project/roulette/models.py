from django.db import models


class Partecipante(models.Model):
    # Il nome e' la chiave: e' quello che compare sulla ruota
    nome = models.CharField(max_length=100, primary_key=True)
    disponibile = models.BooleanField(default=True, help_text="Falso quando qualcuno lo ha gia' estratto")
    assegnato_a = models.CharField(max_length=100, null=True, blank=True)
    # NULL = creato dall'admin, il primo che fa login lo "reclama"
    password = models.CharField(max_length=128, null=True, blank=True)

    class Meta:
        ordering = ['nome']
        verbose_name_plural = "Partecipanti"

    def __str__(self): return self.nome

    @property
    def ha_estratto(self):
        return bool(self.assegnato_a)


def snapshot_persone():
    """Tutta la collezione, senza password. E' cio' che ricevono i browser a ogni modifica."""
    return {
        p.nome: {'disponibile': p.disponibile, 'assegnato_a': p.assegnato_a}
        for p in Partecipante.objects.all().order_by('nome')
    }


class ConfigurazioneRoulette(models.Model):
    giri_extra = models.PositiveIntegerField(default=5, help_text="Giri completi prima di fermarsi")
    durata_giro_ms = models.PositiveIntegerField(default=4200, help_text="Durata del giro in millisecondi")

    # Spunta e salva per rimettere tutti in gioco
    azzera_estrazione = models.BooleanField(
        default=False,
        help_text="⚠️ SPUNTA QUESTA CASELLA e clicca SALVA per cancellare tutte le estrazioni."
    )

    class Meta:
        verbose_name = "Impostazioni Roulette"
        verbose_name_plural = "Impostazioni Roulette"

    def __str__(self):
        return f"Configurazione Attuale: {self.giri_extra} giri, {self.durata_giro_ms} ms"

    def save(self, *args, **kwargs):
        if not self.pk and ConfigurazioneRoulette.objects.exists():
            self.pk = ConfigurazioneRoulette.objects.first().pk
        return super().save(*args, **kwargs)

    @classmethod
    def corrente(cls):
        return cls.objects.first() or cls()
