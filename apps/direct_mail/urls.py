from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import UspsClientViewSet, UspsCampaignViewSet

router = DefaultRouter()
router.register(r'usps-clients', UspsClientViewSet)
router.register(r'usps-campaigns', UspsCampaignViewSet)

urlpatterns = [
    path('', include(router.urls)),
]
