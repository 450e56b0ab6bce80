# PS/urls.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PS/urls.py
# Назначение: корневые URL-маршруты проекта + безопасное подключение debug_toolbar
# ─────────────────────────────────────────────────────────────────────────────

from django.contrib import admin            # админка Django
from django.urls import path, include       # функции для описания маршрутов
from django.conf import settings            # доступ к settings для проверки DEBUG

urlpatterns = [
    path("admin/", admin.site.urls),                                     # маршрут в админку
    path("", include(("catalog.urls", "catalog"), namespace="catalog")),  # маршруты каталога
]

# Подключаем URL-ы тулбара только если включён DEBUG и тулбар активирован
if settings.DEBUG and getattr(settings, "ENABLE_DEBUG_TOOLBAR", False):
    import debug_toolbar  # импортируем пакет только при необходимости
    urlpatterns = [path("__debug__/", include(debug_toolbar.urls))] + urlpatterns
