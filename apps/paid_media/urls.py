from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import PaidSocialAccountViewSet, PaidSearchAccountViewSet

router = DefaultRouter()
router.register(r'paid-social-accounts', PaidSocialAccountViewSet)
router.register(r'paid-search-accounts', PaidSearchAccountViewSet)

urlpatterns = [
    path('', include(router.urls)),
]
