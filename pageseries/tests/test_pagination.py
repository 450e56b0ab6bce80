import pytest

from pageseries.exceptions import PageOverflowError, VariableError
from pageseries.services.pagination import GearboxItems, Page, PageVars
from pageseries.services.series import GAP


@pytest.fixture(autouse=True)
def _defaults(settings):
    """Фиксируем проектные дефолты, чтобы окружение не влияло на арифметику."""
    settings.PAGESERIES = {"items": 20, "size": 7}


def test_basic_arithmetic():
    page = Page(count=100, items=20, page=4)
    assert (page.last, page.pages) == (5, 5)
    assert (page.prev, page.next) == (3, 5)
    assert page.offset == 60
    assert (page.from_, page.to, page.in_) == (61, 80, 20)


def test_last_partial_page():
    page = Page(count=95, items=20, page=5)
    assert page.offset == 80
    assert (page.from_, page.to, page.in_) == (81, 95, 15)
    assert page.next is None


def test_empty_collection_has_one_page():
    page = Page(count=0)
    assert page.last == 1
    assert page.page == 1
    assert (page.from_, page.to, page.in_) == (0, 0, 0)
    assert page.prev is None and page.next is None


def test_cycle_wraps_next_to_first_page():
    assert Page(count=100, items=20, page=5, cycle=True).next == 1
    assert Page(count=100, items=20, page=5).next is None
    assert Page(count=100, items=20, page=4, cycle=True).next == 5


def test_outset_shifts_offset_but_not_range():
    page = Page(count=100, items=20, page=2, outset=3)
    assert page.offset == 23
    assert (page.from_, page.to) == (21, 40)


def test_strings_and_blanks_are_coerced():
    page = Page(count="100", items=" 10 ", page="3", outset=None, fragment="")
    assert (page.count, page.items, page.page, page.outset) == (100, 10, 3, 0)
    # пустые значения заменяются дефолтами
    assert Page(items="", page=None).items == 20


def test_project_defaults_come_from_settings(settings):
    settings.PAGESERIES = {"items": 5, "size": [1, 2, 2, 1]}
    page = Page(count=12)
    assert page.items == 5
    assert page.last == 3
    assert page.vars.size == [1, 2, 2, 1]
    # per-call значения важнее
    assert Page(count=12, items=6).last == 2


def test_overflow_error_carries_range_and_value():
    with pytest.raises(PageOverflowError) as exc:
        Page(count=100, items=20, page=100)
    err = exc.value
    assert isinstance(err, VariableError)
    assert err.variable == "page"
    assert err.value == 100
    assert err.description == "in 1..5"
    assert err.last == 5
    assert "in 1..5" in str(err)


@pytest.mark.parametrize(
    "vars, variable",
    [
        ({"items": 0}, "items"),
        ({"items": "abc"}, "items"),
        ({"items": True}, "items"),
        ({"outset": -1}, "outset"),
        ({"count": -1}, "count"),
        ({"page": 0}, "page"),
        ({"page": "x"}, "page"),
        ({"items": 0, "outset": -1, "page": 0}, "items"),   # первая ошибка — items
        ({"params": ["sort"]}, "params"),
        ({"request_path": "/foo?x=1"}, "request_path"),
        ({"request_path": "foo"}, "request_path"),
        ({"colour": "red"}, "colour"),
    ],
)
def test_invalid_vars_raise_variable_error(vars, variable):
    with pytest.raises(VariableError) as exc:
        Page(**{"count": 100, **vars})
    assert not isinstance(exc.value, PageOverflowError)
    assert exc.value.variable == variable


def test_page_is_immutable():
    page = Page(count=10)
    with pytest.raises(AttributeError):
        page.page = 2


def test_vars_can_be_passed_as_object():
    vars = PageVars.build(count=50, items=10)
    assert Page(vars, page=5).next is None
    assert Page(vars).page == 1
    # исходный объект не меняется
    assert vars.page == 1


def test_prev_next_properties():
    for count in range(0, 60, 7):
        for items in range(1, 8):
            last = Page(count=count, items=items).last
            assert last == max(-(-count // items), 1)
            for number in range(1, last + 1):
                page = Page(count=count, items=items, page=number)
                assert (page.prev is None) == (number == 1)
                assert (page.next is None) == (number == last)


def test_series_uses_size_from_vars():
    assert Page(count=360, items=10, page=4, size=[1, 4, 4, 1]).series() == [1, 2, 3, "4", 5, 6, 7, 8, GAP, 36]
    assert Page(count=360, items=10, page=4).series([]) == []
    assert Page().series() == ["1"]


def test_labels_and_dict():
    page = Page(count=100, items=20, page=2)
    assert page.label == "2"
    assert page.label_for(7) == "7"
    data = page.as_dict()
    assert data["from"] == 21 and data["to"] == 40 and data["in"] == 20
    assert data["prev"] == 1 and data["next"] == 3


# ---------- Gearbox ----------
def test_gearbox_items_and_offsets():
    gears = GearboxItems([3, 10, 20])
    first = Page(count=100, page=1, strategy=gears)
    assert first.items == 3
    assert first.last == 7        # 33 в шестерёнках + ceil(67 / 20) = 4
    second = Page(count=100, page=2, strategy=gears)
    assert (second.items, second.offset, second.from_, second.to) == (10, 3, 4, 13)
    fourth = Page(count=100, page=4, strategy=gears)
    assert (fourth.items, fourth.offset, fourth.from_, fourth.to) == (20, 33, 34, 53)
    last = Page(count=100, page=7, strategy=gears)
    assert (last.offset, last.to, last.next) == (93, 100, None)


def test_gearbox_small_collections():
    gears = GearboxItems([3, 10, 20])
    assert Page(count=10, strategy=gears).last == 2
    assert Page(count=3, strategy=gears).last == 1
    assert Page(count=0, strategy=gears).last == 1
    with pytest.raises(PageOverflowError):
        Page(count=10, page=3, strategy=gears)


@pytest.mark.parametrize("gears", [[], [3, 0], "3", [3, -1], [2.5]])
def test_gearbox_rejects_bad_gears(gears):
    with pytest.raises(VariableError):
        GearboxItems(gears)
