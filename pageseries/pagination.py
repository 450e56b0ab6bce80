# pageseries/pagination.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: pageseries/pagination.py
# Назначение: класс пагинации DRF на основе Page: метаданные с серией + заголовки Link
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations

from typing import Any, Dict, List, Optional

from rest_framework.exceptions import NotFound
from rest_framework.pagination import BasePagination
from rest_framework.response import Response

from pageseries.exceptions import PageOverflowError, VariableError
from pageseries.services.backend import paginate
from pageseries.services.links import page_url
from pageseries.services.pagination import FixedItems, Page


class SeriesPagination(BasePagination):
    """Пагинация API: ?page=N (и ?items=M, если items_extra включён).

    Ответ: {"results": [...], "pagination": {count, page, items, ..., series, *_url}}
    плюс заголовки Link / Current-Page / Page-Items / Total-Pages / Total-Count.
    """
    page_vars: Dict[str, Any] = {"items_extra": True}  # переопределяется в наследниках
    strategy: Optional[FixedItems] = None

    def paginate_queryset(self, queryset, request, view=None) -> List[Any]:
        self.request = request
        try:
            self.page, items = paginate(request, queryset, strategy=self.strategy, **dict(self.page_vars))
        except PageOverflowError as exc:
            raise NotFound(f"Page {exc.value} is out of range 1..{exc.last}")
        except VariableError as exc:
            raise NotFound(str(exc))
        return list(items)

    def _url(self, target: Optional[int]) -> Optional[str]:
        if target is None:
            return None
        return self.request.build_absolute_uri(page_url(self.request, self.page, target, fragment=False))

    def get_metadata(self) -> Dict[str, Any]:
        page: Page = self.page
        meta = page.as_dict()
        meta.update(
            series=page.series(),
            first_url=self._url(1),
            prev_url=self._url(page.prev),
            next_url=self._url(page.next),
            last_url=self._url(page.last),
        )
        return meta

    def get_headers(self) -> Dict[str, str]:
        page: Page = self.page
        rels = {"first": 1, "prev": page.prev, "next": page.next, "last": page.last}
        links = [f'<{self._url(target)}>; rel="{rel}"' for rel, target in rels.items() if target is not None]
        return {
            "Link": ", ".join(links),
            "Current-Page": str(page.page),
            "Page-Items": str(page.items),
            "Total-Pages": str(page.last),
            "Total-Count": str(page.count),
        }

    def get_paginated_response(self, data) -> Response:
        return Response({"results": data, "pagination": self.get_metadata()}, headers=self.get_headers())

    def get_paginated_response_schema(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "type": "object",
            "required": ["results", "pagination"],
            "properties": {
                "results": schema,
                "pagination": {
                    "type": "object",
                    "properties": {
                        "count": {"type": "integer"},
                        "page": {"type": "integer"},
                        "items": {"type": "integer"},
                        "last": {"type": "integer"},
                        "prev": {"type": "integer", "nullable": True},
                        "next": {"type": "integer", "nullable": True},
                        "series": {"type": "array", "items": {}},
                    },
                },
            },
        }
