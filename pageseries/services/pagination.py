# pageseries/services/pagination.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: pageseries/services/pagination.py
# Назначение: модель страницы (валидация переменных, арифметика страниц/смещений)
# Принципы: без состояния между вызовами; PageVars и Page собираются заново на каждый запрос
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from django.conf import settings

from pageseries.exceptions import PageOverflowError, VariableError
from pageseries.services.series import SeriesItem, WindowSpec, build_series

Params = Union[Dict[str, Any], Callable[[Dict[str, Any]], Dict[str, Any]]]

OVERFLOW_MODES = ("exception", "last_page")


@dataclass(frozen=True)
class PageVars:
    """Переменные пагинации с документированными значениями по умолчанию.

    Ядро читает только count, page, items, outset, cycle и size;
    остальное нужно построителю ссылок, тегам шаблонов и request-хелперу.
    """
    count: Any = 0              # всего элементов
    page: Any = 1               # запрошенная страница (1-based)
    items: Any = 20             # элементов на странице
    outset: Any = 0             # сколько элементов исключено из начала выборки
    size: WindowSpec = 7        # окно серии: int или 4 числа
    cycle: bool = False         # next с последней страницы ведёт на первую
    page_param: str = "page"    # имя GET-параметра страницы
    items_extra: bool = False   # брать items из запроса и дописывать его в ссылки
    items_param: str = "items"  # имя GET-параметра размера страницы
    max_items: int = 100        # верхняя граница items из запроса
    params: Params = field(default_factory=dict)  # доп. параметры ссылок (dict или callable)
    fragment: str = ""          # якорь, добавляемый к ссылкам ("#list")
    link_extra: str = ""        # доп. атрибуты для <a>
    request_path: str = ""      # путь для ссылок вместо request.path
    item_name: Optional[str] = None  # подпись элементов в page_info
    overflow: str = "exception"      # exception | last_page

    @classmethod
    def names(cls) -> List[str]:
        return [f.name for f in dataclasses.fields(cls)]

    @classmethod
    def build(cls, **raw: Any) -> "PageVars":
        """Собирает переменные: дефолты класса <- settings.PAGESERIES <- raw.

        Значения None и "" считаются пустыми и заменяются дефолтом.
        Неизвестное имя переменной — VariableError.
        """
        known = set(cls.names())
        merged: Dict[str, Any] = {}
        for source in (getattr(settings, "PAGESERIES", None) or {}, raw):
            for name, value in source.items():
                if name not in known:
                    raise VariableError(None, name, "to be a known variable", value)
                if value is None or value == "":
                    continue
                merged[name] = value
        return cls(**merged)

    def merge(self, **overrides: Any) -> "PageVars":
        """Новая копия с переопределёнными значениями (пустые игнорируются)."""
        known = set(self.names())
        clean = {}
        for name, value in overrides.items():
            if name not in known:
                raise VariableError(None, name, "to be a known variable", value)
            if value is None or value == "":
                continue
            clean[name] = value
        return dataclasses.replace(self, **clean)


def coerce_int(page: Optional["Page"], name: str, value: Any, minimum: int) -> int:
    """Приводит значение к int и проверяет нижнюю границу.

    int берём как есть, float обрезаем, str парсим после strip().
    bool и всё прочее — VariableError.
    """
    number: Optional[int] = None
    if isinstance(value, bool):
        number = None
    elif isinstance(value, int):
        number = value
    elif isinstance(value, float) and math.isfinite(value):
        number = int(value)
    elif isinstance(value, str):
        try:
            number = int(value.strip())
        except ValueError:
            number = None

    if number is None or number < minimum:
        raise VariableError(page, name, f">= {minimum}", value)
    return number


# ---------- СТРАТЕГИИ РАЗМЕРА СТРАНИЦЫ ----------
class FixedItems:
    """Одинаковое число элементов на каждой странице."""

    def base_items(self, page: "Page", vars: PageVars) -> int:
        return coerce_int(page, "items", vars.items, 1)

    def items_for(self, number: int, items: int) -> int:
        return items

    def last_for(self, count: int, items: int) -> int:
        return max((count + items - 1) // items, 1)

    def offset_for(self, number: int, items: int) -> int:
        return items * (number - 1)


class GearboxItems(FixedItems):
    """Размер страницы зависит от номера: gears=[3, 10, 20, 30] — первая страница
    на 3 элемента, вторая на 10, третья на 20, все последующие по 30."""

    def __init__(self, gears: Sequence[int]) -> None:
        if (not isinstance(gears, (list, tuple)) or not gears
                or not all(isinstance(g, int) and not isinstance(g, bool) and g > 0 for g in gears)):
            raise VariableError(None, "gearbox_items", "to be an Array of positive Integers", gears)
        self.gears = tuple(gears)

    def base_items(self, page: "Page", vars: PageVars) -> int:
        return self.gears[0]

    def items_for(self, number: int, items: int) -> int:
        if number <= len(self.gears):
            return self.gears[number - 1]
        return self.gears[-1]

    def last_for(self, count: int, items: int) -> int:
        total = sum(self.gears)
        if count > total:
            tail = self.gears[-1]
            return max((count - total + tail - 1) // tail, 1) + len(self.gears)
        pages = 0
        remainder = count
        while remainder > 0:
            remainder -= self.gears[pages]
            pages += 1
        return max(pages, 1)

    def offset_for(self, number: int, items: int) -> int:
        if number <= len(self.gears):
            return sum(self.gears[:number - 1])
        return sum(self.gears) + self.gears[-1] * (number - len(self.gears) - 1)


# ---------- МОДЕЛЬ СТРАНИЦЫ ----------
class Page:
    """Неизменяемая модель одной страницы выборки.

    Page(count=100, items=20, page=4) -> last=5, prev=3, next=5, offset=60.
    Порядок проверок: items, outset, count, page, params, request_path, page <= last.
    """

    def __init__(self, vars: Optional[PageVars] = None, *, strategy: Optional[FixedItems] = None,
                 **overrides: Any) -> None:
        if vars is None:
            vars = PageVars.build(**overrides)
        elif overrides:
            vars = vars.merge(**overrides)
        set_ = super().__setattr__
        set_("vars", vars)
        set_("strategy", strategy or FixedItems())

        base_items = self.strategy.base_items(self, vars)
        set_("outset", coerce_int(self, "outset", vars.outset, 0))
        set_("count", coerce_int(self, "count", vars.count, 0))
        set_("page", coerce_int(self, "page", vars.page, 1))
        set_("items", self.strategy.items_for(self.page, base_items))
        set_("last", self.strategy.last_for(self.count, base_items))
        set_("pages", self.last)

        params = vars.params
        if not (isinstance(params, dict) or callable(params)):
            raise VariableError(self, "params", "must be a dict or a callable", params)
        set_("params", params)

        request_path = vars.request_path or ""
        if request_path and (not request_path.startswith("/") or "?" in request_path):
            raise VariableError(self, "request_path", 'must be a bare path like "/foo"', request_path)
        set_("request_path", request_path)

        if self.page > self.last:
            raise PageOverflowError(self, "page", f"in 1..{self.last}", self.page)

        set_("offset", self.strategy.offset_for(self.page, base_items) + self.outset)
        set_("from_", min(self.offset - self.outset + 1, self.count))
        set_("to", min(self.offset - self.outset + self.items, self.count))
        set_("in_", min(self.to - self.from_ + 1, self.count))
        set_("prev", self.page - 1 if self.page > 1 else None)
        if self.page == self.last:
            set_("next", 1 if vars.cycle else None)
        else:
            set_("next", self.page + 1)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Page is immutable: cannot set {name!r}")

    def __repr__(self) -> str:
        return f"<Page {self.page}/{self.last} count={self.count} items={self.items}>"

    def series(self, size: Optional[WindowSpec] = None) -> List[SeriesItem]:
        """Серия для навигации; без size берётся vars.size."""
        return build_series(self.page, self.last, self.vars.size if size is None else size)

    def label_for(self, number: Union[int, str]) -> str:
        return str(number)

    @property
    def label(self) -> str:
        return str(self.page)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "page": self.page,
            "items": self.items,
            "outset": self.outset,
            "pages": self.pages,
            "last": self.last,
            "offset": self.offset,
            "from": self.from_,
            "to": self.to,
            "in": self.in_,
            "prev": self.prev,
            "next": self.next,
        }
