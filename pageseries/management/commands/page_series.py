from django.core.management.base import BaseCommand, CommandError, CommandParser

from pageseries.exceptions import PageOverflowError, VariableError
from pageseries.services.pagination import Page
from pageseries.services.series import GAP


class Command(BaseCommand):
    help = "Печать серии страниц: --page 4 --last 36 --size 1,4,4,1 (или --size 7)"

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("--page", type=int, default=1)
        parser.add_argument("--last", type=int, required=True, help="Номер последней страницы")
        parser.add_argument("--size", default="7", help="Ширина окна или 4 числа через запятую")
        parser.add_argument("--cycle", action="store_true", help="next с последней страницы ведёт на первую")

    def handle(self, *args, **opts):
        size_s = (opts["size"] or "").strip()
        try:
            if "," in size_s:
                size = [int(part) for part in size_s.split(",") if part.strip()]
            else:
                size = int(size_s)
        except ValueError:
            raise CommandError(f"Некорректный --size: {size_s!r}")
        if opts["last"] < 1:
            raise CommandError(f"--last должен быть >= 1, получено {opts['last']}")

        # last страниц по одному элементу — модель даёт ровно last страниц
        try:
            page = Page(count=opts["last"], items=1, page=opts["page"], cycle=opts["cycle"])
            series = page.series(size)
        except PageOverflowError as exc:
            raise CommandError(f"Страница {exc.value} вне диапазона 1..{exc.last}")
        except VariableError as exc:
            raise CommandError(str(exc))

        rendered = []
        for item in series:
            if item == GAP:
                rendered.append("…")
            elif isinstance(item, str):
                rendered.append(f"[{item}]")
            else:
                rendered.append(str(item))
        self.stdout.write(" ".join(rendered))
        self.stdout.write(f"prev={page.prev} next={page.next}")
