# pageseries/services/links.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: pageseries/services/links.py
# Назначение: построение ссылок на страницы и элементов навигации для шаблонов
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations

import hashlib
import uuid
from typing import Any, Dict, List, Optional, Union

from django.http import HttpRequest
from django.utils.http import urlencode

from pageseries.services.pagination import Page
from pageseries.services.series import GAP, WindowSpec

# Подставляется вместо номера страницы; JS на клиенте меняет его на реальный номер
PAGE_MARKER = "__pageseries_page__"


def page_url(request: HttpRequest, page: Page, target: Union[int, str], *, fragment: bool = True) -> str:
    """URL страницы target с сохранением текущих GET-параметров запроса.

    Порядок: GET запроса -> page.params (dict сливается, callable получает и возвращает
    параметры) -> page_param (и items_param, если включён items_extra) -> фрагмент.
    """
    params = request.GET.copy()
    if callable(page.params):
        params = page.params(params)
    else:
        for key, value in page.params.items():
            params[key] = value
    params[page.vars.page_param] = target
    if page.vars.items_extra:
        params[page.vars.items_param] = page.items

    path = page.request_path or request.path
    url = f"{path}?{urlencode(params, doseq=True)}"
    if fragment and page.vars.fragment:
        url += page.vars.fragment
    return url


def marked_url(request: HttpRequest, page: Page) -> str:
    """URL-заготовка с PAGE_MARKER вместо номера (для навигации, собираемой на клиенте)."""
    return page_url(request, page, PAGE_MARKER)


def dom_id(seed: Optional[str] = None) -> str:
    """Уникальный id для DOM-элемента навигации.

    С seed — стабильный (одинаковый seed даёт одинаковый id), без него — новый на каждый вызов.
    """
    raw = seed.encode("utf-8") if seed is not None else uuid.uuid4().bytes
    return "ps-" + hashlib.sha1(raw).hexdigest()


def nav_items(request: HttpRequest, page: Page, size: Optional[WindowSpec] = None) -> List[Dict[str, Any]]:
    """Серия, разложенная в словари для шаблона.

    kind: "page" — обычная ссылка, "current" — активная страница (без ссылки),
    "gap" — многоточие.
    """
    items: List[Dict[str, Any]] = []
    for item in page.series(size):
        if item == GAP:
            items.append({"kind": "gap", "number": None, "label": "…", "url": None})
        elif isinstance(item, str):
            items.append({"kind": "current", "number": int(item), "label": page.label_for(item),
                          "url": page_url(request, page, item)})
        else:
            items.append({"kind": "page", "number": item, "label": page.label_for(item),
                          "url": page_url(request, page, item)})
    return items
