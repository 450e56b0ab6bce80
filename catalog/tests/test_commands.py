from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from catalog.models import Entry


def test_seed_entries_creates_and_pins():
    out = StringIO()
    call_command("seed_entries", "--count", "12", "--pinned", "2", stdout=out)
    assert Entry.objects.count() == 12
    assert Entry.objects.filter(is_pinned=True).count() == 2
    assert "создано 12" in out.getvalue()


def test_seed_entries_appends_and_replaces():
    call_command("seed_entries", "--count", "5", stdout=StringIO())
    call_command("seed_entries", "--count", "5", stdout=StringIO())
    assert Entry.objects.count() == 10
    call_command("seed_entries", "--count", "3", "--replace", stdout=StringIO())
    assert Entry.objects.count() == 3


def test_seed_entries_rejects_bad_counts():
    with pytest.raises(CommandError):
        call_command("seed_entries", "--count", "2", "--pinned", "5", stdout=StringIO())


def test_model_normalization_and_str():
    """Сохраняем «грязные» значения и проверяем нормализацию + __str__."""
    entry = Entry.objects.create(title="  Hello ", slug=" HeLLo-1 ")
    assert entry.title == "Hello"
    assert entry.slug == "hello-1"
    assert str(entry) == "Hello"


def test_seed_entries_after_partial_delete_keeps_slugs_unique():
    call_command("seed_entries", "--count", "5", stdout=StringIO())
    Entry.objects.filter(slug__in=["entry-1", "entry-2"]).delete()
    call_command("seed_entries", "--count", "3", stdout=StringIO())
    slugs = set(Entry.objects.values_list("slug", flat=True))
    assert slugs == {"entry-3", "entry-4", "entry-5", "entry-6", "entry-7", "entry-8"}
