from django.apps import AppConfig


class SgtConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'sgt'
    verbose_name = 'Simulator Golf Tour Integration'
