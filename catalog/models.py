from django.db import models
from django.utils import timezone


# --- БАЗА ДЛЯ ВСЕХ МОДЕЛЕЙ ---
class TimeStampedModel(models.Model):
    """Абстрактная база с датами создания/изменения."""
    created_at = models.DateTimeField(default=timezone.now, editable=False, verbose_name="Создано")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Изменено")

    class Meta:
        abstract = True


class Entry(TimeStampedModel):
    """Запись каталога — то, что листаем постранично."""
    title = models.CharField(max_length=200)
    slug = models.SlugField(max_length=200, unique=True)
    body = models.TextField(blank=True, default="")
    is_pinned = models.BooleanField(default=False, db_index=True)  # закреплённые идут вне пагинации (outset)

    class Meta:
        verbose_name = "Запись"
        verbose_name_plural = "Записи"
        ordering = ["-is_pinned", "-created_at", "id"]

    # нормализация — убираем пробелы и приводим slug к нижнему регистру
    def save(self, *args, **kwargs):
        if self.title:  self.title = self.title.strip()
        if self.slug:   self.slug  = self.slug.strip().lower()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.title
