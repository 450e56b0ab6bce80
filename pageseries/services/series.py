# pageseries/services/series.py
from __future__ import annotations
from typing import List, Sequence, Union

from pageseries.exceptions import VariableError

# Маркер пропуска в серии (рендерится как «…»)
GAP = "gap"

SeriesItem = Union[int, str]
WindowSpec = Union[int, Sequence[int]]


def _is_int(value) -> bool:
    # bool — подкласс int, но размером окна быть не может
    return isinstance(value, int) and not isinstance(value, bool)


def _gapped_numbers(page: int, last: int, size: Sequence[int]) -> List[SeriesItem]:
    """Серия с краями и не более чем двумя пропусками: [1, 2, GAP, 7, 8, 9, GAP, 36].

    Не зависит от величины last: в список попадают только видимые страницы.
    """
    left_gap_start = 1 + size[0]
    left_gap_end = page - size[1] - 1
    right_gap_start = page + size[2] + 1
    right_gap_end = last - size[3]
    # пропуски не должны пересекаться
    if left_gap_end > right_gap_end:
        left_gap_end = right_gap_end
    if left_gap_start > right_gap_start:
        right_gap_start = left_gap_start

    series: List[SeriesItem] = []
    start = 1
    # «> 0»: одну спрятанную страницу выгоднее показать, чем заменить маркером
    if left_gap_end - left_gap_start > 0:
        series.extend(range(start, left_gap_start))
        series.append(GAP)
        start = left_gap_end + 1
    if right_gap_end - right_gap_start > 0:
        series.extend(range(start, right_gap_start))
        series.append(GAP)
        start = right_gap_end + 1
    series.extend(range(start, last + 1))
    return series


def _central_numbers(page: int, last: int, size: int) -> List[SeriesItem]:
    """Непрерывное окно из min(size, last) страниц вокруг текущей."""
    size = min(size, last)
    left = (size - 1) // 2  # при чётном size левая половина короче на 1
    if page <= left:
        start = 1
    elif page > last - (size - left):
        start = last - size + 1
    else:
        start = page - left
    return list(range(start, start + size))


def build_series(page: int, last: int, size: WindowSpec) -> List[SeriesItem]:
    """Возвращает серию страниц для навигации.

    Parameters
    ----------
    page : int
        Текущая страница (1-based, 1 <= page <= last).
    last : int
        Номер последней страницы.
    size : int | Sequence[int]
        Целое > 0 — центральное окно фиксированной ширины;
        4 неотрицательных целых (начало, до текущей, после текущей, конец) —
        окно с краями и пропусками; пустой список — пустая серия.

    Returns
    -------
    List[int | str]
        Номера страниц (int), маркеры GAP и ровно один str — текущая страница.

    Raises
    ------
    VariableError
        Если size не целое > 0 и не последовательность из 4 целых >= 0.
    """
    if isinstance(size, (list, tuple)):
        if not size:
            return []
        if len(size) != 4 or not all(_is_int(num) and num >= 0 for num in size):
            raise VariableError(None, "size", "to be a single positive Integer or an Array of 4", size)
        series = _gapped_numbers(page, last, size)
    elif _is_int(size) and size > 0:
        series = _central_numbers(page, last, size)
    else:
        raise VariableError(None, "size", "to be a single positive Integer or an Array of 4", size)

    series[series.index(page)] = str(page)
    return series
