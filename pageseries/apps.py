# pageseries/apps.py
from django.apps import AppConfig


class PageseriesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "pageseries"
    verbose_name = "Постраничная навигация"
