from django.apps import AppConfig


class ShamsiConfig(AppConfig):
    name = 'shamsi'
    verbose_name = 'Persian calendar'
