import json

from django import template
from django.utils.html import format_html
from django.utils.safestring import mark_safe
from django.utils.translation import ngettext, pgettext

from pageseries.exceptions import VariableError
from pageseries.services.links import dom_id, marked_url, nav_items, page_url

register = template.Library()


def _parse_size(size):
    # в шаблоне окно удобнее писать строкой: "7" или "1,4,4,1"
    if not isinstance(size, str):
        return size
    try:
        if "," in size:
            return [int(part) for part in size.split(",") if part.strip()]
        return int(size)
    except ValueError:
        raise VariableError(None, "size", "to be a single positive Integer or an Array of 4", size)


@register.simple_tag
def page_series(page, size=None):
    """
    Сырая серия страниц: {% page_series page as series %}
    или {% page_series page "1,4,4,1" as series %} (размер строкой через запятую).
    """
    return page.series(_parse_size(size))


@register.inclusion_tag("pageseries/nav.html", takes_context=True)
def page_nav(context, page, size=None):
    """
    Навигация: ‹ назад, номера, многоточия, текущая без ссылки, вперёд ›.
    {% page_nav page %} или {% page_nav page "1,4,4,1" %}
    """
    request = context["request"]
    size = _parse_size(size)
    return {
        "page": page,
        "items": nav_items(request, page, size),
        "prev_url": page_url(request, page, page.prev) if page.prev else None,
        "next_url": page_url(request, page, page.next) if page.next else None,
        "link_extra": mark_safe(page.vars.link_extra),
        "aria_label": pgettext("pageseries", "Pages"),
        "prev_label": pgettext("pageseries", "Previous"),
        "next_label": pgettext("pageseries", "Next"),
    }


@register.simple_tag
def page_info(page, item_name=None):
    """
    Строка вида «Displaying items 41-60 of 100 in total».
    """
    name = item_name or page.vars.item_name
    if name is None:
        name = ngettext("item", "items", page.count)
    if page.count == 0:
        text = pgettext("pageseries", "No %(item_name)s found") % {"item_name": name}
    elif page.last == 1:
        text = ngettext(
            "Displaying %(count)s %(item_name)s",
            "Displaying all %(count)s %(item_name)s",
            page.count,
        ) % {"count": page.count, "item_name": name}
    else:
        text = pgettext(
            "pageseries", "Displaying %(item_name)s %(from)s-%(to)s of %(count)s in total"
        ) % {"item_name": name, "from": page.from_, "to": page.to, "count": page.count}
    return format_html('<span class="pageseries-info">{}</span>', text)


@register.simple_tag(takes_context=True)
def page_nav_json(context, page, size=None):
    """
    JSON для навигации, собираемой на клиенте:
    ["nav", id, url-заготовка с маркером, серия, подписи].
    """
    request = context["request"]
    payload = [
        "nav",
        dom_id(),
        marked_url(request, page),
        page.series(_parse_size(size)),
        {
            "prev": pgettext("pageseries", "Previous"),
            "next": pgettext("pageseries", "Next"),
            "gap": "…",
        },
    ]
    data = json.dumps(payload, ensure_ascii=False).replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")
    return format_html(
        '<script type="application/json" class="pageseries-json">{}</script>', mark_safe(data)
    )
