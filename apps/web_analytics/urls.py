from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import GaPropertyViewSet

router = DefaultRouter()
router.register(r'ga-properties', GaPropertyViewSet)

urlpatterns = [
    path('', include(router.urls)),
]
