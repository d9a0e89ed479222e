from django.apps import AppConfig


class SearchSystemConfig(AppConfig):
    name = 'searchsystem'
    verbose_name = 'Formal Language Search System'
