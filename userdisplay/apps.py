from django.apps import AppConfig as BaseAppConfig


class AppConfig(BaseAppConfig):
    name = 'userdisplay'
    verbose_name = 'userdisplay'
