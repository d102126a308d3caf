from rest_framework.routers import SimpleRouter

from apps.operations.api.v1.views import DeliveryViewSet, ReceiptViewSet, TransferViewSet


router = SimpleRouter()
router.register("receipts", ReceiptViewSet, basename="receipt")
router.register("deliveries", DeliveryViewSet, basename="delivery")
router.register("transfers", TransferViewSet, basename="transfer")

urlpatterns = router.urls
