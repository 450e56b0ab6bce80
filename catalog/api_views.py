# catalog/api_views.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: catalog/api_views.py
# Назначение: DRF-представления (ViewSet’ы) для API приложения catalog
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations  # поддержка современных аннотаций

from rest_framework import viewsets, mixins  # базовые классы DRF
from rest_framework.decorators import action  # экшены у ViewSet

from pageseries.pagination import SeriesPagination        # пагинация с серией и заголовками Link
from pageseries.services.pagination import GearboxItems   # размер страницы по номеру

from .models import Entry                  # модель
from .serializers import EntrySerializer   # сериализатор


# ==============================================================================
#                               ПАГИНАЦИЯ
# ==============================================================================
class EntryPagination(SeriesPagination):
    """Стандартная пагинация записей: 10 на страницу, ?items= до 50, окно 1-2-2-1."""
    page_vars = {"items": 10, "items_extra": True, "max_items": 50, "size": (1, 2, 2, 1)}


class FeedPagination(SeriesPagination):
    """Лента: первая страница короткая (5), дальше крупнее (10, затем по 20)."""
    page_vars = {"items_extra": False, "size": 5}
    strategy = GearboxItems([5, 10, 20])


# ==============================================================================
#                          VIEWSET ДЛЯ ЗАПИСЕЙ
# ==============================================================================
class EntryViewSet(mixins.ListModelMixin, mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    """Список/деталь записей (?pinned=1 — только закреплённые)."""
    serializer_class = EntrySerializer
    pagination_class = EntryPagination

    def get_queryset(self):
        qs = Entry.objects.all()
        pinned = (self.request.GET.get("pinned") or "").strip()
        if pinned in ("1", "true", "yes"):
            qs = qs.filter(is_pinned=True)
        return qs

    @action(detail=False, methods=["get"])
    def feed(self, request):
        """Лента без закреплённых, страницы растущего размера."""
        qs = Entry.objects.filter(is_pinned=False).order_by("-created_at", "id")
        paginator = FeedPagination()
        page = paginator.paginate_queryset(qs, request, view=self)
        serializer = self.get_serializer(page, many=True)
        return paginator.get_paginated_response(serializer.data)
