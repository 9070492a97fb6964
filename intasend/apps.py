from django.apps import AppConfig


class IntaSendAppConfig(AppConfig):
    name = 'intasend'
    verbose_name = 'IntaSend Payments'
