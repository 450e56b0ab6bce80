# catalog/views.py
import logging
from typing import Any, Dict

from django.http import Http404, HttpResponseRedirect
from django.views.generic import TemplateView

from pageseries.exceptions import PageOverflowError, VariableError
from pageseries.services.backend import paginate
from pageseries.services.links import page_url
from pageseries.services.pagination import Page

from .models import Entry

logger = logging.getLogger(__name__)


class HomeView(TemplateView):
    template_name = "catalog/index.html"

    def get_context_data(self, **kwargs):
        return {"title": "Каталог — старт", "total_entries": Entry.objects.count()}


class EntryListView(TemplateView):
    """
    Список записей с постраничной навигацией.
    Закреплённые записи выводятся отдельным блоком над списком и в пагинацию не входят (outset).
    Параметры (GET):
      - page:  номер страницы (по умолчанию 1); за пределами диапазона — редирект на последнюю
      - items: размер страницы (1..100), по умолчанию 10
    """
    template_name = "catalog/entries.html"
    page_vars: Dict[str, Any] = {"items": 10, "items_extra": True, "size": (1, 2, 2, 1), "fragment": "#entries"}

    def get(self, request, *args, **kwargs):
        qs = Entry.objects.all()  # закреплённые идут первыми (Meta.ordering)
        pinned = list(qs.filter(is_pinned=True))
        try:
            page, entries = paginate(
                request, qs,
                count=qs.count() - len(pinned),
                outset=len(pinned),
                **self.page_vars,
            )
        except PageOverflowError as exc:
            # страница не существует — отправляем на последнюю существующую
            last = Page(exc.page.vars.merge(page=exc.last))
            logger.info("Redirecting overflowing page %s to %s", exc.value, exc.last)
            return HttpResponseRedirect(page_url(request, last, exc.last, fragment=False))
        except VariableError as exc:
            raise Http404(str(exc))

        ctx = self.get_context_data(**kwargs)
        ctx.update(
            title="Записи",
            pinned=pinned,
            entries=entries,
            page=page,
        )
        return self.render_to_response(ctx)
