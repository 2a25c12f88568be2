from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import EmailClientViewSet, EmailCampaignViewSet

router = DefaultRouter()
router.register(r'email-clients', EmailClientViewSet)
router.register(r'email-campaigns', EmailCampaignViewSet)

urlpatterns = [
    path('', include(router.urls)),
]
