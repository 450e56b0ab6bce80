# pageseries/exceptions.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: pageseries/exceptions.py
# Назначение: исключения ядра пагинации (ошибка переменной и выход за диапазон)
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations

from typing import Any, Optional


class VariableError(ValueError):
    """Некорректная переменная пагинации (items=0, page="abc", size=[1, -2, 3, 4] и т.п.).

    Атрибуты
    --------
    variable : str
        Имя переменной ("items", "page", "size", ...).
    description : str
        Что ожидалось (">= 1", "in 1..5", ...).
    value : Any
        Что пришло на самом деле.
    page : Optional[Page]
        Объект страницы, если он успел частично собраться.
    """

    def __init__(self, page: Optional[Any], variable: str, description: str, value: Any) -> None:
        self.page = page
        self.variable = variable
        self.description = description
        self.value = value
        super().__init__(f"expected :{variable} {description}; got {value!r}")


class PageOverflowError(VariableError):
    """Страница корректна по форме, но за пределами 1..last.

    Единственная ошибка, которую вызывающий код должен ловить отдельно
    (например, чтобы сделать редирект на последнюю страницу).
    """

    @property
    def last(self) -> Optional[int]:
        return getattr(self.page, "last", None)
