import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('tours', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Scorecard',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('player_id', models.IntegerField(verbose_name='SGT player id')),
                ('player_name', models.CharField(blank=True, max_length=100, null=True, verbose_name='Player')),
                ('hcp_index', models.FloatField(blank=True, null=True, verbose_name='Handicap index')),
                ('round', models.IntegerField(default=1, verbose_name='Round')),
                ('course_name', models.CharField(blank=True, max_length=200, null=True, verbose_name='Course')),
                ('teetype', models.CharField(blank=True, max_length=40, null=True, verbose_name='Tee')),
                ('rating', models.FloatField(blank=True, null=True, verbose_name='Course rating')),
                ('slope', models.FloatField(blank=True, null=True, verbose_name='Slope')),
                ('total_gross', models.IntegerField(blank=True, null=True, verbose_name='Gross')),
                ('total_net', models.IntegerField(blank=True, null=True, verbose_name='Net')),
                ('to_par_gross', models.IntegerField(blank=True, null=True, verbose_name='Gross to par')),
                ('to_par_net', models.IntegerField(blank=True, null=True, verbose_name='Net to par')),
                ('in_gross', models.IntegerField(blank=True, null=True, verbose_name='In (gross)')),
                ('out_gross', models.IntegerField(blank=True, null=True, verbose_name='Out (gross)')),
                ('in_net', models.IntegerField(blank=True, null=True, verbose_name='In (net)')),
                ('out_net', models.IntegerField(blank=True, null=True, verbose_name='Out (net)')),
                ('hole_data', models.JSONField(blank=True, default=dict, verbose_name='Hole by hole')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Last synced')),
                ('tournament', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='scorecards', to='tours.tournament', verbose_name='Tournament')),
            ],
        ),
        migrations.AddConstraint(
            model_name='scorecard',
            constraint=models.UniqueConstraint(fields=('tournament', 'player_id', 'round'), name='unique_tournament_scorecard'),
        ),
    ]
