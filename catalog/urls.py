from django.urls import path, include
from . import views

app_name = "catalog"

urlpatterns = [
    path("", views.HomeView.as_view(), name="home"),

    # API
    path("api/", include(("catalog.api_urls", "catalog_api"), namespace="catalog_api")),

    # Записи
    path("entries/", views.EntryListView.as_view(), name="entry_list"),
]
