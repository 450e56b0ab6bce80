# catalog/tests/conftest.py
import pytest
from mixer.backend.django import mixer as _mixer
from rest_framework.test import APIClient

from catalog.models import Entry


@pytest.fixture(autouse=True)
def _db(db, settings):
    """Автоматически включаем БД для всех тестов в этом пакете и фиксируем дефолты навигации."""
    settings.PAGESERIES = {"items": 20, "size": 7}
    settings.LANGUAGE_CODE = "en-us"


@pytest.fixture
def mixer():
    """Удобный алиас, чтобы писать mixer.blend(...) в тестах."""
    return _mixer


@pytest.fixture
def entries(mixer):
    """45 обычных записей — ровно 5 страниц по 10."""
    return mixer.cycle(45).blend(
        Entry,
        title=mixer.sequence("Entry {0}"),
        slug=mixer.sequence("entry-{0}"),
        is_pinned=False,
    )


@pytest.fixture
def pinned(mixer):
    return mixer.cycle(3).blend(
        Entry,
        title=mixer.sequence("Pinned {0}"),
        slug=mixer.sequence("pinned-{0}"),
        is_pinned=True,
    )


@pytest.fixture
def api_client():
    return APIClient()
