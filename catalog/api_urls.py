# catalog/api_urls.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: catalog/api_urls.py
# Назначение: маршруты DRF (router) приложения catalog
# ─────────────────────────────────────────────────────────────────────────────

from django.urls import path, include                # функции маршрутизации
from rest_framework.routers import DefaultRouter     # роутер DRF
from .api_views import EntryViewSet                  # импорт ViewSet’а

router = DefaultRouter()                                               # создаём роутер
router.register(r"entries", EntryViewSet, basename="api-entries")      # записи (+ /entries/feed/)

urlpatterns = [
    path("", include(router.urls)),  # подключаем все ViewSet’ы
]
