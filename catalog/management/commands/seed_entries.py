import logging

from django.core.management.base import BaseCommand, CommandError, CommandParser
from django.db import transaction

from catalog.models import Entry

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Заполнение каталога демонстрационными записями (для проверки навигации)"

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("--count", type=int, default=250, help="Сколько записей создать")
        parser.add_argument("--pinned", type=int, default=0, help="Сколько из них закрепить")
        parser.add_argument("--replace", action="store_true", help="Удалить существующие записи перед загрузкой")

    @transaction.atomic
    def handle(self, *args, **opts):
        count: int = opts["count"]
        pinned: int = opts["pinned"]
        if count < 0 or pinned < 0:
            raise CommandError("--count и --pinned не могут быть отрицательными")
        if pinned > count:
            raise CommandError("Закреплённых не может быть больше, чем записей")

        if opts["replace"]:
            deleted, _ = Entry.objects.all().delete()
            self.stdout.write(f"→ Удалено записей: {deleted}")

        start = self._last_number()
        entries = [
            Entry(
                title=f"Запись {start + i}",
                slug=f"entry-{start + i}",
                is_pinned=i <= pinned,
            )
            for i in range(1, count + 1)
        ]
        Entry.objects.bulk_create(entries, batch_size=500)

        msg = f"Готово: создано {count}, закреплено {pinned}."
        logger.info(msg)
        self.stdout.write(self.style.SUCCESS(msg))

    @staticmethod
    def _last_number() -> int:
        """Наибольший N среди slug вида entry-N (0, если таких нет)."""
        numbers = [0]
        for slug in Entry.objects.filter(slug__startswith="entry-").values_list("slug", flat=True):
            suffix = slug[len("entry-"):]
            if suffix.isdigit():
                numbers.append(int(suffix))
        return max(numbers)
