from django.urls import path

from apps.core.api.v1.views import DashboardStatsView, HealthView, WarehouseDetailView, WarehouseListView


urlpatterns = [
    path("health", HealthView.as_view(), name="health"),
    path("dashboard/stats", DashboardStatsView.as_view(), name="dashboard-stats"),
    path("warehouses/", WarehouseListView.as_view(), name="warehouse-list"),
    path("warehouses/<uuid:warehouse_id>/", WarehouseDetailView.as_view(), name="warehouse-detail"),
]
