from django.apps import AppConfig


class TagstooConfig(AppConfig):
    name = 'tagstoo'
    verbose_name = 'Tags Too'
