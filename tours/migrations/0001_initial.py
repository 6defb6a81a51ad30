import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Tour',
            fields=[
                ('tour_id', models.IntegerField(primary_key=True, serialize=False, verbose_name='SGT tour id')),
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('start_date', models.DateField(blank=True, null=True, verbose_name='Start date')),
                ('end_date', models.DateField(blank=True, null=True, verbose_name='End date')),
                ('team_tour', models.IntegerField(default=0, verbose_name='Team tour')),
                ('active', models.IntegerField(default=1, verbose_name='Active')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Last synced')),
            ],
        ),
        migrations.CreateModel(
            name='Tournament',
            fields=[
                ('tournament_id', models.IntegerField(primary_key=True, serialize=False, verbose_name='SGT tournament id')),
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('course_name', models.CharField(blank=True, max_length=200, null=True, verbose_name='Course')),
                ('status', models.CharField(blank=True, max_length=40, null=True, verbose_name='Status')),
                ('start_date', models.DateField(blank=True, null=True, verbose_name='Start date')),
                ('end_date', models.DateField(blank=True, null=True, verbose_name='End date')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Last synced')),
                ('tour', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='tournaments', to='tours.tour', verbose_name='Tour')),
            ],
        ),
        migrations.CreateModel(
            name='TourMember',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('user_id', models.IntegerField(verbose_name='SGT user id')),
                ('user_name', models.CharField(max_length=100, verbose_name='User name')),
                ('hcp_index', models.FloatField(blank=True, null=True, verbose_name='Handicap index')),
                ('custom_hcp', models.FloatField(blank=True, null=True, verbose_name='Custom handicap')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Last synced')),
                ('tour', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='members', to='tours.tour', verbose_name='Tour')),
            ],
        ),
        migrations.CreateModel(
            name='TourStanding',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('user_name', models.CharField(max_length=100, verbose_name='User name')),
                ('gross_or_net', models.CharField(choices=[('gross', 'Gross'), ('net', 'Net')], default='gross', max_length=5, verbose_name='Gross or net')),
                ('country_code', models.CharField(blank=True, max_length=10, null=True, verbose_name='Country')),
                ('user_has_avatar', models.CharField(blank=True, max_length=10, null=True, verbose_name='Has avatar')),
                ('hcp', models.FloatField(blank=True, null=True, verbose_name='Handicap')),
                ('events', models.IntegerField(default=0, verbose_name='Events')),
                ('first', models.IntegerField(default=0, verbose_name='Wins')),
                ('top5', models.IntegerField(default=0, verbose_name='Top 5')),
                ('top10', models.IntegerField(default=0, verbose_name='Top 10')),
                ('points', models.FloatField(default=0, verbose_name='Points')),
                ('position', models.IntegerField(blank=True, null=True, verbose_name='Position')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Last synced')),
                ('tour', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='standings', to='tours.tour', verbose_name='Tour')),
            ],
        ),
        migrations.AddConstraint(
            model_name='tourmember',
            constraint=models.UniqueConstraint(fields=('tour', 'user_id'), name='unique_tour_member'),
        ),
        migrations.AddConstraint(
            model_name='tourstanding',
            constraint=models.UniqueConstraint(fields=('tour', 'user_name', 'gross_or_net'), name='unique_tour_standing'),
        ),
    ]
