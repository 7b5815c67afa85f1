from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ConfigurazioneRoulette',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('giri_extra', models.PositiveIntegerField(default=5, help_text='Giri completi prima di fermarsi')),
                ('durata_giro_ms', models.PositiveIntegerField(default=4200, help_text='Durata del giro in millisecondi')),
                ('azzera_estrazione', models.BooleanField(default=False, help_text='⚠️ SPUNTA QUESTA CASELLA e clicca SALVA per cancellare tutte le estrazioni.')),
            ],
            options={
                'verbose_name': 'Impostazioni Roulette',
                'verbose_name_plural': 'Impostazioni Roulette',
            },
        ),
        migrations.CreateModel(
            name='Partecipante',
            fields=[
                ('nome', models.CharField(max_length=100, primary_key=True, serialize=False)),
                ('disponibile', models.BooleanField(default=True, help_text="Falso quando qualcuno lo ha gia' estratto")),
                ('assegnato_a', models.CharField(blank=True, max_length=100, null=True)),
                ('password', models.CharField(blank=True, max_length=128, null=True)),
            ],
            options={
                'verbose_name_plural': 'Partecipanti',
                'ordering': ['nome'],
            },
        ),
    ]
