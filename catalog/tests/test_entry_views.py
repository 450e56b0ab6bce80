from django.urls import reverse


def test_home_page_accessible(client, entries):
    """Главная доступна всем (200) и показывает число записей."""
    resp = client.get(reverse("catalog:home"))
    assert resp.status_code == 200
    assert "Записей в каталоге: 45" in resp.content.decode("utf-8")


def test_entry_list_first_page(client, entries):
    r = client.get(reverse("catalog:entry_list"))
    assert r.status_code == 200
    html = r.content.decode("utf-8")
    # на странице должно быть 10 записей
    assert html.count('class="entry"') == 10
    assert "Displaying items 1-10 of 45 in total" in html
    assert 'aria-current="page"' in html
    assert 'class="pageseries-json"' in html
    page = r.context["page"]
    assert (page.page, page.last, page.next) == (1, 5, 2)


def test_entry_list_last_page(client, entries):
    r = client.get(reverse("catalog:entry_list") + "?page=5")
    assert r.status_code == 200
    # последняя — 5-я (45 => 5 страниц по 10)
    assert r.content.decode("utf-8").count('class="entry"') == 5


def test_entry_list_items_from_query(client, entries):
    r = client.get(reverse("catalog:entry_list") + "?items=20")
    assert r.status_code == 200
    html = r.content.decode("utf-8")
    assert html.count('class="entry"') == 20
    # размер страницы переносится в ссылки навигации
    assert "items=20" in html
    assert r.context["page"].last == 3


def test_entry_list_overflow_redirects_to_last_page(client, entries):
    url = reverse("catalog:entry_list")
    r = client.get(url + "?page=99&items=20", follow=False)
    assert r.status_code == 302
    assert r["Location"] == url + "?page=3&items=20"


def test_entry_list_garbage_page_is_404(client, entries):
    r = client.get(reverse("catalog:entry_list") + "?page=abc")
    assert r.status_code == 404


def test_pinned_entries_stay_out_of_pagination(client, entries, pinned):
    r = client.get(reverse("catalog:entry_list"))
    html = r.content.decode("utf-8")
    assert html.count("pinned-entry") == 3
    assert html.count('class="entry"') == 10
    page = r.context["page"]
    assert (page.count, page.outset, page.offset, page.last) == (45, 3, 3, 5)
    # закреплённые не попадают в страницу
    assert not any(e.is_pinned for e in r.context["entries"])


def test_empty_catalog_renders_single_page(client):
    r = client.get(reverse("catalog:entry_list"))
    assert r.status_code == 200
    assert "No items found" in r.content.decode("utf-8")
