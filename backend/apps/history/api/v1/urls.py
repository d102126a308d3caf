from django.urls import path

from apps.history.api.v1.views import HistoryEntryViewSet


urlpatterns = [
    path("history/", HistoryEntryViewSet.as_view({"get": "list"}), name="history-list"),
]
