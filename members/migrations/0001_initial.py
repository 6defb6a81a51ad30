from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Member',
            fields=[
                ('user_id', models.IntegerField(primary_key=True, serialize=False, verbose_name='SGT user id')),
                ('user_name', models.CharField(max_length=100, verbose_name='User name')),
                ('user_email', models.CharField(blank=True, max_length=254, null=True, verbose_name='Email')),
                ('user_active', models.IntegerField(default=1, verbose_name='Active')),
                ('user_country_code', models.CharField(blank=True, max_length=10, null=True, verbose_name='Country')),
                ('user_has_avatar', models.CharField(blank=True, max_length=10, null=True, verbose_name='Has avatar')),
                ('user_game_id', models.CharField(blank=True, max_length=100, null=True, verbose_name='Game id')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Last synced')),
            ],
            options={
                'ordering': ['user_name'],
            },
        ),
    ]
