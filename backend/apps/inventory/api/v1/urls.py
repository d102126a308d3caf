from rest_framework.routers import SimpleRouter

from apps.inventory.api.v1.views import AdjustmentViewSet, WarehouseStockViewSet


router = SimpleRouter()
router.register("stock", WarehouseStockViewSet, basename="stock")
router.register("adjustments", AdjustmentViewSet, basename="adjustment")

urlpatterns = router.urls
