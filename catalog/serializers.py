# catalog/serializers.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: catalog/serializers.py
# Назначение: DRF-сериализаторы для моделей приложения catalog
# ─────────────────────────────────────────────────────────────────────────────

from rest_framework import serializers  # импорт базового сериализатора
from .models import Entry               # модель записи


class EntrySerializer(serializers.ModelSerializer):
    """Сериализатор записи каталога: ключевые поля без тела."""
    class Meta:
        model = Entry
        fields = ["id", "title", "slug", "is_pinned", "created_at"]
