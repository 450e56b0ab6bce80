# pageseries/services/backend.py
from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Tuple

from django.db.models import QuerySet
from django.http import HttpRequest

from pageseries.exceptions import PageOverflowError, VariableError
from pageseries.services.pagination import OVERFLOW_MODES, FixedItems, Page, PageVars, coerce_int

logger = logging.getLogger(__name__)


def _count(collection: Any) -> int:
    if isinstance(collection, QuerySet):
        return collection.count()
    return len(collection)


def _request_overrides(request: HttpRequest, page_vars: PageVars, vars: dict) -> dict:
    overrides = {}

    if "page" not in vars:
        overrides["page"] = request.GET.get(page_vars.page_param)

    if page_vars.items_extra:
        raw_items = request.GET.get(page_vars.items_param)
        if raw_items:
            try:
                items = coerce_int(None, "items", raw_items, 1)
            except VariableError:
                logger.warning("Ignoring invalid %s=%r", page_vars.items_param, raw_items)
            else:
                overrides["items"] = min(items, coerce_int(None, "max_items", page_vars.max_items, 1))

    return overrides


def page_vars_from_request(request: HttpRequest, **vars: Any) -> PageVars:
    """Переменные страницы с учётом GET-параметров.

    page берётся из ?<page_param>=, если не передан явно.
    При items_extra=True размер страницы из ?<items_param>= важнее переданного items и режется до 1..max_items;
    мусорное значение игнорируется (остаётся items по умолчанию) с предупреждением в лог.
    """
    page_vars = PageVars.build(**vars)
    return page_vars.merge(**_request_overrides(request, page_vars, vars))


def paginate(request: HttpRequest, collection: Sequence, *, strategy: Optional[FixedItems] = None,
             **vars: Any) -> Tuple[Page, Sequence]:
    """Страница выборки для текущего запроса.

    Parameters
    ----------
    request : HttpRequest
        Запрос, из которого читаются page (и items при items_extra).
    collection : QuerySet | Sequence
        Выборка; QuerySet считается через .count(), остальное — через len().
    strategy : FixedItems, optional
        Стратегия размера страницы (FixedItems по умолчанию, GearboxItems и т.п.).
        Если items из запроса принят (items_extra), стратегия не применяется;
        пустое или мусорное значение стратегию не отключает.
    **vars
        Любые переменные PageVars; count и page имеют приоритет над запросом.

    Returns
    -------
    (page, items) : Tuple[Page, Sequence]
        Модель страницы и срез выборки [offset:offset + items].

    Raises
    ------
    PageOverflowError
        Если страница за пределами диапазона и overflow="exception".
    VariableError
        Некорректные переменные.
    """
    if "count" not in vars:
        vars["count"] = _count(collection)
    page_vars = PageVars.build(**vars)
    overrides = _request_overrides(request, page_vars, vars)
    page_vars = page_vars.merge(**overrides)
    if page_vars.overflow not in OVERFLOW_MODES:
        raise VariableError(None, "overflow", f"to be one of {', '.join(OVERFLOW_MODES)}", page_vars.overflow)

    # items от клиента принят: шестерёнки больше не решают размер страницы
    if "items" in overrides:
        strategy = None

    try:
        page = Page(page_vars, strategy=strategy)
    except PageOverflowError as exc:
        if page_vars.overflow != "last_page":
            raise
        logger.info("Page %s is out of 1..%s, serving the last page", exc.value, exc.last)
        page = Page(page_vars.merge(page=exc.last), strategy=strategy)

    return page, collection[page.offset:page.offset + page.items]
